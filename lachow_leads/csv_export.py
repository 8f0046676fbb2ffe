"""Lead list to CSV text (RFC 4180 quoting) and export files."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .types import Lead

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Name",
    "Headline",
    "Category",
    "Confidence",
    "Profile URL",
    "Snippet",
    "Source Query",
    "Scraped At",
]

# Excel only detects UTF-8 with a byte order mark
UTF8_BOM = "\ufeff"


def format_timestamp(ts: Optional[datetime]) -> str:
    if ts is None:
        return ""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def escape_csv_field(value: Any) -> str:
    if value is None:
        return ""
    s = str(value)
    if any(ch in s for ch in (",", '"', "\n", "\r")):
        return '"' + s.replace('"', '""') + '"'
    return s


def lead_to_row(lead: Lead) -> List[str]:
    return [
        lead.name,
        lead.headline,
        lead.category.label,
        lead.confidence.label,
        lead.profile_url,
        lead.snippet,
        lead.source,
        format_timestamp(lead.scraped_at),
    ]


def leads_to_csv(leads: Sequence[Lead]) -> str:
    """Serialize leads to CSV text. No leads means no header either."""
    if not leads:
        return ""

    rows = [CSV_HEADERS] + [lead_to_row(lead) for lead in leads]
    return "\n".join(",".join(escape_csv_field(v) for v in row) for row in rows)


def generate_csv_filename(prefix: str = "lachow-leads", now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"{prefix}-{now.strftime('%Y-%m-%d')}-{now.strftime('%H-%M-%S')}.csv"


def write_leads_csv(leads: Sequence[Lead], path: str) -> str:
    """
    Write leads to `path` with a BOM so spreadsheets pick up the encoding.

    Returns:
        The path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8", newline="") as f:
        f.write(UTF8_BOM + leads_to_csv(leads))
    logger.info(f"Exported {len(leads)} leads to {p}")
    return str(p)
