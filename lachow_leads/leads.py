from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .categorization import CategoryScorer, categorize_lead
from .titles import parse_title
from .types import Candidate, Confidence, Lead, LeadCategory


def _lead_id(position: int) -> str:
    return f"lead-{uuid.uuid4().hex[:12]}-{position}"


def candidate_to_lead(
    candidate: Candidate,
    query_category: LeadCategory,
    query_label: str,
    now: Optional[datetime] = None,
    scorer: Optional[CategoryScorer] = None,
) -> Lead:
    """
    Turn a search result into a categorized lead.
    The query's category is only used when the scorer finds nothing.
    """
    name, headline = parse_title(candidate.title)
    result = categorize_lead(candidate.title, candidate.snippet, scorer=scorer)

    if result.category is LeadCategory.UNCATEGORIZED:
        category = LeadCategory(query_category)
        confidence = Confidence.LOW
    else:
        category = result.category
        confidence = result.confidence

    return Lead(
        id=_lead_id(candidate.position),
        name=name,
        headline=headline,
        profile_url=candidate.link,
        snippet=candidate.snippet,
        category=category,
        confidence=confidence,
        source=query_label,
        scraped_at=now or datetime.now(timezone.utc),
    )


def candidates_to_leads(
    candidates: Iterable[Candidate],
    query_category: LeadCategory,
    query_label: str,
    scorer: Optional[CategoryScorer] = None,
) -> List[Lead]:
    now = datetime.now(timezone.utc)
    return [candidate_to_lead(c, query_category, query_label, now=now, scorer=scorer) for c in candidates]
