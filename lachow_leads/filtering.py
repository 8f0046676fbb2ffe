from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from .types import Confidence, Lead, LeadCategory

LEAD_COLUMNS = [
    "id",
    "name",
    "headline",
    "profile_url",
    "snippet",
    "category",
    "confidence",
    "source",
    "scraped_at",
]

SORT_FIELDS = {
    "name": "name",
    "category": "category",
    "confidence": "confidence_rank",
    "scraped_at": "scraped_at",
}


# ----------------------------
# Utilities
# ----------------------------
def leads_to_dataframe(leads: Sequence[Lead]) -> pd.DataFrame:
    rows = []
    for lead in leads:
        row = lead.to_dict()
        row["scraped_at"] = lead.scraped_at
        row["confidence_rank"] = int(lead.confidence)
        rows.append(row)

    df = pd.DataFrame(rows)
    if df.empty:
        df = pd.DataFrame(columns=LEAD_COLUMNS + ["confidence_rank"])
    return df


def _label(value) -> str:
    return value.label if isinstance(value, (LeadCategory, Confidence)) else str(value)


# ----------------------------
# Screening
# ----------------------------
def screen_leads(
    leads_df: pd.DataFrame,
    category: Optional[LeadCategory | str] = None,
    confidence: Optional[Confidence | str] = None,
    search_term: str = "",
    sort_by: str = "confidence",
    descending: bool = True,
) -> pd.DataFrame:
    """
    Filter the leads table by category, confidence and a free-text term
    (matched against name, headline and snippet), then sort it.
    """
    out = leads_df.copy()
    if out.empty:
        return out.reset_index(drop=True)

    if category not in (None, "", "all"):
        out = out[out["category"] == _label(category)]

    if confidence not in (None, "", "all"):
        out = out[out["confidence"] == _label(confidence)]

    term = (search_term or "").strip().lower()
    if term:
        hay = out["name"].str.lower() + "\n" + out["headline"].str.lower() + "\n" + out["snippet"].str.lower()
        out = out[hay.str.contains(term, regex=False)]

    column = SORT_FIELDS.get(sort_by)
    if column is None:
        raise ValueError(f"Unknown sort field: {sort_by}")
    out = out.sort_values(by=column, ascending=not descending, kind="mergesort")

    return out.reset_index(drop=True)


def filter_leads(leads: Sequence[Lead], **screen_kwargs) -> List[Lead]:
    """Same as screen_leads, but takes and returns Lead objects."""
    screened = screen_leads(leads_to_dataframe(leads), **screen_kwargs)
    by_id = {lead.id: lead for lead in leads}
    return [by_id[i] for i in screened["id"].tolist()]


def category_breakdown(leads: Sequence[Lead]) -> pd.DataFrame:
    """Count and rounded share per category, in category order. Empty categories are left out."""
    total = len(leads)
    rows = []
    for cat in LeadCategory:
        count = sum(1 for lead in leads if lead.category is cat)
        if count == 0:
            continue
        rows.append({"category": cat.label, "count": count, "percentage": int(100 * count / total + 0.5)})

    df = pd.DataFrame(rows)
    if df.empty:
        df = pd.DataFrame(columns=["category", "count", "percentage"])
    return df
