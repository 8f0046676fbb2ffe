"""
Tests for the pandas lead table: filtering, sorting, category breakdown.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lachow_leads.filtering import category_breakdown, filter_leads, leads_to_dataframe, screen_leads
from lachow_leads.types import Confidence, LeadCategory
from tests.fixtures.lead_samples import make_lead


@pytest.fixture
def leads():
    return [
        make_lead("u1", Confidence.LOW, name="Carla", headline="Caterer", category=LeadCategory.KITCHEN_TENANT),
        make_lead("u2", Confidence.HIGH, name="Amy", headline="Wedding planner", category=LeadCategory.EVENT_CLIENT),
        make_lead(
            "u3",
            Confidence.MEDIUM,
            name="Ben",
            headline="Food truck",
            snippet="Tacos in Towson",
            category=LeadCategory.KITCHEN_TENANT,
        ),
    ]


class TestLeadsToDataframe:
    def test_columns(self, leads):
        df = leads_to_dataframe(leads)
        assert list(df["name"]) == ["Carla", "Amy", "Ben"]
        assert list(df["confidence"]) == ["Low", "High", "Medium"]
        assert list(df["confidence_rank"]) == [1, 3, 2]

    def test_empty(self):
        df = leads_to_dataframe([])
        assert df.empty
        assert "profile_url" in df.columns


class TestScreenLeads:
    def test_default_sort_is_confidence_desc(self, leads):
        out = screen_leads(leads_to_dataframe(leads))
        assert list(out["name"]) == ["Amy", "Ben", "Carla"]

    def test_sort_by_name_ascending(self, leads):
        out = screen_leads(leads_to_dataframe(leads), sort_by="name", descending=False)
        assert list(out["name"]) == ["Amy", "Ben", "Carla"]

    def test_category_filter(self, leads):
        out = screen_leads(leads_to_dataframe(leads), category=LeadCategory.KITCHEN_TENANT)
        assert list(out["name"]) == ["Ben", "Carla"]

    def test_category_filter_accepts_label(self, leads):
        out = screen_leads(leads_to_dataframe(leads), category="Event Client")
        assert list(out["name"]) == ["Amy"]

    def test_confidence_filter(self, leads):
        out = screen_leads(leads_to_dataframe(leads), confidence=Confidence.MEDIUM)
        assert list(out["name"]) == ["Ben"]

    def test_all_means_no_filter(self, leads):
        out = screen_leads(leads_to_dataframe(leads), category="all", confidence="all")
        assert len(out) == 3

    def test_search_term_matches_snippet(self, leads):
        out = screen_leads(leads_to_dataframe(leads), search_term="TOWSON")
        assert list(out["name"]) == ["Ben"]

    def test_unknown_sort_field(self, leads):
        with pytest.raises(ValueError):
            screen_leads(leads_to_dataframe(leads), sort_by="profile_url")

    def test_filter_leads_returns_lead_objects(self, leads):
        out = filter_leads(leads, category=LeadCategory.KITCHEN_TENANT)
        assert [l.name for l in out] == ["Ben", "Carla"]
        assert out[0] is leads[2]

    def test_filter_leads_empty(self):
        assert filter_leads([]) == []


class TestCategoryBreakdown:
    def test_counts_and_percentages(self, leads):
        df = category_breakdown(leads)
        assert list(df["category"]) == ["Kitchen Tenant", "Event Client"]
        assert list(df["count"]) == [2, 1]
        assert list(df["percentage"]) == [67, 33]

    def test_empty(self):
        assert category_breakdown([]).empty


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
