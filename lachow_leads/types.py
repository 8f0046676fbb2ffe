from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple


class LeadCategory(str, Enum):
    # declaration order breaks scoring ties
    KITCHEN_TENANT = "Kitchen Tenant"
    OFFICE_TENANT = "Office Tenant"
    EVENT_CLIENT = "Event Client"
    UNCATEGORIZED = "Uncategorized"

    @property
    def label(self) -> str:
        return self.value


class Confidence(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> "Confidence":
        return cls[str(label).strip().upper()]


class KeywordGroup(NamedTuple):
    keywords: Tuple[str, ...]
    weight: int


CategoryKeywordTable = Mapping[LeadCategory, Tuple[KeywordGroup, ...]]
ScoreVector = Dict[LeadCategory, int]


@dataclass(frozen=True)
class Candidate:
    """One raw search result pointing at a public profile."""

    title: str
    snippet: str = ""
    link: str = ""
    position: int = 0


@dataclass(frozen=True)
class Lead:
    id: str
    name: str
    headline: str
    profile_url: str
    snippet: str
    category: LeadCategory
    confidence: Confidence
    source: str
    scraped_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "headline": self.headline,
            "profile_url": self.profile_url,
            "snippet": self.snippet,
            "category": self.category.label,
            "confidence": self.confidence.label,
            "source": self.source,
            "scraped_at": self.scraped_at.isoformat(),
        }


@dataclass
class SearchQuery:
    id: str
    label: str
    query: str
    category: LeadCategory
    enabled: bool = True


@dataclass
class ScrapeResult:
    """Outcome of a single search query. Failures carry `error` and no leads."""

    success: bool
    query: str
    leads: List[Lead] = field(default_factory=list)
    error: Optional[str] = None
    total_results: int = 0


@dataclass
class BatchScrapeResult:
    success: bool
    leads: List[Lead] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    total_results: int = 0


@dataclass
class SheetExportResult:
    success: bool
    message: str
    rows_added: Optional[int] = None
