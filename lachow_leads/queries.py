import time
from typing import Iterable, List, Optional

from .types import LeadCategory, SearchQuery

PROFILE_SITE_FILTER = "site:linkedin.com/in/"
AREA = "Baltimore OR Maryland"


def _q(terms: str) -> str:
    return f"{terms} {AREA} {PROFILE_SITE_FILTER}"


DEFAULT_SEARCH_QUERIES: List[SearchQuery] = [
    # Kitchen tenants
    SearchQuery("catering-owner", "Catering Owners", _q('"catering owner" OR "catering business"'), LeadCategory.KITCHEN_TENANT, True),
    SearchQuery("food-truck", "Food Truck Operators", _q('"food truck" owner'), LeadCategory.KITCHEN_TENANT, True),
    SearchQuery(
        "ghost-kitchen",
        "Ghost Kitchen Operators",
        _q('"ghost kitchen" OR "virtual kitchen" OR "cloud kitchen"'),
        LeadCategory.KITCHEN_TENANT,
        False,
    ),
    SearchQuery("private-chef", "Private Chefs", _q('"private chef" OR "personal chef"'), LeadCategory.KITCHEN_TENANT, False),
    SearchQuery("meal-prep", "Meal Prep Business", _q('"meal prep" business owner'), LeadCategory.KITCHEN_TENANT, False),
    # Office tenants
    SearchQuery(
        "food-consultant",
        "Food Consultants",
        _q('"food consultant" OR "culinary consultant" OR "restaurant consultant"'),
        LeadCategory.OFFICE_TENANT,
        False,
    ),
    SearchQuery(
        "cpg-founder",
        "CPG/Food Brand Founders",
        _q('"food brand" founder OR "CPG founder" OR "food startup"'),
        LeadCategory.OFFICE_TENANT,
        False,
    ),
    # Event clients
    SearchQuery("event-planner", "Event Planners", _q('"event planner" OR "event coordinator"'), LeadCategory.EVENT_CLIENT, True),
    SearchQuery(
        "wedding-planner",
        "Wedding Planners",
        _q('"wedding planner" OR "wedding coordinator"'),
        LeadCategory.EVENT_CLIENT,
        False,
    ),
]


def enabled_queries(queries: Iterable[SearchQuery]) -> List[SearchQuery]:
    return [q for q in queries if q.enabled]


def make_custom_query(text: str, category: LeadCategory) -> Optional[SearchQuery]:
    """
    Build a user-defined query. Restricts it to LinkedIn profiles unless the
    text already targets linkedin.com.
    """
    t = (text or "").strip()
    if not t:
        return None

    query = t if "site:linkedin.com" in t else f"{t} {PROFILE_SITE_FILTER}"
    return SearchQuery(
        id=f"custom-{time.time_ns()}",
        label=f"Custom: {t[:30]}...",
        query=query,
        category=LeadCategory(category),
        enabled=True,
    )
