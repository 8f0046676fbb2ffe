import uuid
from datetime import datetime, timezone

import pandas as pd

from .dedupe import deduplicate_leads
from .types import Confidence, Lead, LeadCategory


def _parse_timestamp(value: str) -> datetime:
    v = (value or "").strip()
    if not v:
        return datetime.now(timezone.utc)
    try:
        ts = datetime.fromisoformat(v.replace("Z", "+00:00"))
    except ValueError:
        return datetime.now(timezone.utc)
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def _category(value: str) -> LeadCategory:
    try:
        return LeadCategory(value.strip())
    except ValueError:
        return LeadCategory.UNCATEGORIZED


def _confidence(value: str) -> Confidence:
    try:
        return Confidence.from_label(value)
    except KeyError:
        return Confidence.LOW


def load_leads_csv(path: str) -> list[Lead]:
    """Read a lead export (see csv_export.write_leads_csv) back into leads."""
    try:
        df = pd.read_csv(path, dtype=str, encoding="utf-8-sig", keep_default_na=False)
    except pd.errors.EmptyDataError:
        # an empty export has no header row
        return []
    token = uuid.uuid4().hex[:12]
    leads: list[Lead] = []

    for i, row in df.iterrows():
        category = _category(str(row.get("Category", "")))
        confidence = _confidence(str(row.get("Confidence", "")))
        if category is LeadCategory.UNCATEGORIZED:
            confidence = Confidence.LOW

        leads.append(
            Lead(
                id=f"lead-{token}-{i}",
                name=str(row.get("Name", "")).strip(),
                headline=str(row.get("Headline", "")).strip(),
                profile_url=str(row.get("Profile URL", "")).strip(),
                snippet=str(row.get("Snippet", "")),
                category=category,
                confidence=confidence,
                source=str(row.get("Source Query", "")),
                scraped_at=_parse_timestamp(str(row.get("Scraped At", ""))),
            )
        )

    # Deduplicate by profile URL
    return deduplicate_leads(leads)
