from __future__ import annotations

from typing import Dict, Iterable, List

from .types import Lead


def normalize_profile_url(url: str) -> str:
    u = (url or "").lower()
    return u[:-1] if u.endswith("/") else u


def deduplicate_leads(*lead_lists: Iterable[Lead]) -> List[Lead]:
    """
    Merge one or more lead lists into one lead per profile URL.

    The first lead seen for a URL fixes its position in the output. A later
    duplicate replaces it only when its confidence is strictly higher.
    """
    best: Dict[str, Lead] = {}

    for leads in lead_lists:
        for lead in leads:
            key = normalize_profile_url(lead.profile_url)
            existing = best.get(key)
            if existing is None or lead.confidence > existing.confidence:
                # assigning to an existing key keeps its insertion slot
                best[key] = lead

    return list(best.values())
