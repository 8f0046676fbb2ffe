from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Optional, Tuple

from .types import CategoryKeywordTable, Confidence, KeywordGroup, LeadCategory, ScoreVector


# ----------------------------
# Keyword weights (higher weight = stronger signal)
# ----------------------------
CATEGORY_KEYWORDS: CategoryKeywordTable = MappingProxyType(
    {
        LeadCategory.KITCHEN_TENANT: (
            KeywordGroup(("catering", "caterer", "catering business", "catering company", "catering owner"), 10),
            KeywordGroup(("food truck", "mobile food", "food trailer"), 10),
            KeywordGroup(("ghost kitchen", "virtual kitchen", "cloud kitchen", "delivery kitchen"), 10),
            KeywordGroup(("private chef", "personal chef", "executive chef"), 8),
            KeywordGroup(("meal prep", "meal delivery", "healthy meals", "prepared meals"), 8),
            KeywordGroup(("chef owner", "culinary entrepreneur", "food entrepreneur"), 7),
            KeywordGroup(("commercial kitchen", "commissary", "shared kitchen"), 9),
            KeywordGroup(("food production", "food manufacturing"), 6),
        ),
        LeadCategory.OFFICE_TENANT: (
            KeywordGroup(("food consultant", "culinary consultant", "restaurant consultant"), 10),
            KeywordGroup(("food brand", "cpg", "consumer packaged goods"), 10),
            KeywordGroup(("food startup", "food tech", "foodtech"), 9),
            KeywordGroup(("restaurant group", "hospitality management"), 7),
            KeywordGroup(("food marketing", "food branding"), 6),
            KeywordGroup(("nutrition consultant", "dietitian", "nutritionist"), 5),
        ),
        LeadCategory.EVENT_CLIENT: (
            KeywordGroup(("event planner", "event planning", "event coordinator"), 10),
            KeywordGroup(("wedding planner", "wedding coordinator", "bridal"), 10),
            KeywordGroup(("corporate events", "event management", "event producer"), 9),
            KeywordGroup(("party planner", "celebration", "special events"), 8),
            KeywordGroup(("venue coordinator", "banquet", "reception"), 7),
        ),
        LeadCategory.UNCATEGORIZED: (),
    }
)

# Baltimore / Maryland / DC area
LOCATION_KEYWORDS: Tuple[str, ...] = (
    "baltimore",
    "maryland",
    "md",
    "dc",
    "washington",
    "dmv",
    "annapolis",
    "columbia",
    "silver spring",
    "bethesda",
    "rockville",
    "towson",
    "glen burnie",
    "dundalk",
    "essex",
    "middle river",
)

LOCATION_BONUS = 3
HIGH_MIN_SCORE = 15
HIGH_DOMINANCE_RATIO = 1.5
MEDIUM_MIN_SCORE = 8


@dataclass(frozen=True)
class CategorizationResult:
    category: LeadCategory
    confidence: Confidence
    scores: ScoreVector


def _has_any(text: str, keywords: Iterable[str]) -> bool:
    return any(k.lower() in text for k in keywords if k)


class CategoryScorer:
    """
    Weighted keyword classifier for profile titles and snippets.

    Every keyword of every group is checked as a lowercase substring of the
    combined text and adds the group's weight when present, so one phrase in
    the text can count for several groups. When the text mentions a local
    area, the leading category gets a small bonus.
    """

    def __init__(
        self,
        keyword_table: Optional[CategoryKeywordTable] = None,
        location_keywords: Optional[Iterable[str]] = None,
        location_bonus: int = LOCATION_BONUS,
    ):
        table = CATEGORY_KEYWORDS if keyword_table is None else keyword_table
        self.keyword_table: CategoryKeywordTable = MappingProxyType(
            {LeadCategory(c): tuple(KeywordGroup(tuple(g[0]), int(g[1])) for g in groups) for c, groups in table.items()}
        )
        self.location_keywords: Tuple[str, ...] = tuple(
            LOCATION_KEYWORDS if location_keywords is None else location_keywords
        )
        self.location_bonus = int(location_bonus)
        # real categories in declaration order
        self.categories: Tuple[LeadCategory, ...] = tuple(
            c for c in LeadCategory if c is not LeadCategory.UNCATEGORIZED
        )

    def score(self, title: str, snippet: str) -> ScoreVector:
        text = f"{title or ''} {snippet or ''}".lower()

        scores: ScoreVector = {c: 0 for c in LeadCategory}
        for category in self.categories:
            for group in self.keyword_table.get(category, ()):
                for keyword in group.keywords:
                    if keyword.lower() in text:
                        scores[category] += group.weight

        if _has_any(text, self.location_keywords):
            leader = self._ranked(scores)[0]
            if scores[leader] > 0:
                scores[leader] += self.location_bonus

        return scores

    def _ranked(self, scores: ScoreVector) -> List[LeadCategory]:
        # sorted() is stable, so equal scores keep declaration order
        return sorted(self.categories, key=lambda c: scores[c], reverse=True)

    def categorize(self, title: str, snippet: str) -> CategorizationResult:
        scores = self.score(title, snippet)
        ranked = self._ranked(scores)

        top_category = ranked[0] if ranked else LeadCategory.UNCATEGORIZED
        top_score = scores[top_category] if ranked else 0
        second_score = scores[ranked[1]] if len(ranked) > 1 else 0

        if top_score == 0:
            return CategorizationResult(LeadCategory.UNCATEGORIZED, Confidence.LOW, scores)
        if top_score >= HIGH_MIN_SCORE and top_score > second_score * HIGH_DOMINANCE_RATIO:
            confidence = Confidence.HIGH
        elif top_score >= MEDIUM_MIN_SCORE:
            confidence = Confidence.MEDIUM
        else:
            confidence = Confidence.LOW
        return CategorizationResult(top_category, confidence, scores)


DEFAULT_SCORER = CategoryScorer()


def categorize_lead(title: str, snippet: str, scorer: Optional[CategoryScorer] = None) -> CategorizationResult:
    """Categorize a profile from its search title and snippet."""
    return (scorer or DEFAULT_SCORER).categorize(title, snippet)
