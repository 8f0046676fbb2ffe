"""Append leads to a Google Sheet through an Apps Script web app."""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

import requests

from . import config
from .types import Lead, LeadCategory, SheetExportResult

logger = logging.getLogger(__name__)

NEW_STATUS = "New"

CONNECTION_NOTE_TEMPLATES = {
    LeadCategory.KITCHEN_TENANT: (
        "Hi {first_name}, I noticed your work in {headline}. The LaChow offers shared commercial kitchen "
        "space in Baltimore - would love to connect and share how we support food entrepreneurs like yourself."
    ),
    LeadCategory.OFFICE_TENANT: (
        "Hi {first_name}, I came across your profile and was impressed by your background in {headline}. "
        "The LaChow provides flexible office space for food industry professionals in Baltimore - let's connect!"
    ),
    LeadCategory.EVENT_CLIENT: (
        "Hi {first_name}, I saw your experience in {headline}. The LaChow has beautiful event venues in "
        "Baltimore perfect for your clients - would love to discuss potential collaboration."
    ),
    LeadCategory.UNCATEGORIZED: (
        "Hi {first_name}, I came across your profile and thought we might have synergies. The LaChow is "
        "Baltimore's premier shared kitchen and event space - let's connect!"
    ),
}


def generate_connection_note(lead: Lead) -> str:
    first_name = (lead.name or "").split(" ")[0]
    headline = lead.headline or "the food industry"
    template = CONNECTION_NOTE_TEMPLATES.get(lead.category, CONNECTION_NOTE_TEMPLATES[LeadCategory.UNCATEGORIZED])
    return template.format(first_name=first_name, headline=headline)


def format_sheet_date(ts: datetime) -> str:
    return ts.strftime("%m/%d/%Y")


def leads_to_sheet_rows(leads: Sequence[Lead]) -> List[List[str]]:
    # Date, Name, Job Title, Profile Link, Connection Note, Status
    return [
        [
            format_sheet_date(lead.scraped_at),
            lead.name,
            lead.headline or lead.category.label,
            lead.profile_url,
            generate_connection_note(lead),
            NEW_STATUS,
        ]
        for lead in leads
    ]


def export_to_google_sheets(
    leads: Sequence[Lead],
    script_url: Optional[str] = None,
    timeout_s: int = config.REQUEST_TIMEOUT_S,
) -> SheetExportResult:
    if not leads:
        return SheetExportResult(success=False, message="No leads to export")

    url = script_url or config.APPS_SCRIPT_URL
    if not url:
        return SheetExportResult(success=False, message="Google Sheets web app URL is not configured")

    try:
        # Apps Script answers with a redirect to the script output
        r = requests.post(url, json={"rows": leads_to_sheet_rows(leads)}, timeout=timeout_s, allow_redirects=True)
    except requests.RequestException as e:
        logger.warning(f"Sheets export failed: {e}")
        return SheetExportResult(success=False, message=f"Network error: {e}")

    if not r.ok and r.status_code != 302:
        return SheetExportResult(success=False, message=f"Export failed: {r.reason}")

    ok_message = f"Successfully exported {len(leads)} leads to Google Sheets"
    try:
        body = r.json()
    except ValueError:
        if r.ok:
            return SheetExportResult(success=True, message=ok_message, rows_added=len(leads))
        return SheetExportResult(success=False, message="Unexpected response from Google Sheets")

    if isinstance(body, dict) and body.get("success"):
        logger.info(ok_message)
        return SheetExportResult(success=True, message=ok_message, rows_added=len(leads))

    error = body.get("error") if isinstance(body, dict) else None
    return SheetExportResult(success=False, message=error or "Export failed")
