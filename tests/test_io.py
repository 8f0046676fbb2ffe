"""
Tests for loading previous lead exports.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lachow_leads.csv_export import write_leads_csv
from lachow_leads.io import load_leads_csv
from lachow_leads.types import Confidence, LeadCategory
from tests.fixtures.lead_samples import FIXED_TS, make_lead


class TestLoadLeadsCsv:
    """Reading exports written by write_leads_csv."""

    def test_reads_back_exported_leads(self, tmp_path):
        leads = [
            make_lead(
                "https://linkedin.com/in/jane",
                Confidence.HIGH,
                name="Jane Doe",
                headline="Owner, Catering Co",
                snippet='Says "hello"\nand more',
            ),
            make_lead("https://linkedin.com/in/amy", Confidence.MEDIUM, name="Amy", category=LeadCategory.EVENT_CLIENT),
        ]
        path = write_leads_csv(leads, str(tmp_path / "leads.csv"))

        loaded = load_leads_csv(path)

        assert [l.name for l in loaded] == ["Jane Doe", "Amy"]
        assert loaded[0].headline == "Owner, Catering Co"
        assert loaded[0].snippet == 'Says "hello"\nand more'
        assert loaded[0].confidence is Confidence.HIGH
        assert loaded[1].category is LeadCategory.EVENT_CLIENT
        assert loaded[0].scraped_at == FIXED_TS

    def test_duplicates_collapsed(self, tmp_path):
        path = tmp_path / "leads.csv"
        path.write_text(
            "Name,Headline,Category,Confidence,Profile URL,Snippet,Source Query,Scraped At\n"
            "A,,Kitchen Tenant,Low,https://linkedin.com/in/a,,q,2026-01-02T03:04:05.000Z\n"
            "A2,,Kitchen Tenant,High,https://linkedin.com/in/A/,,q,2026-01-02T03:04:05.000Z\n",
            encoding="utf-8",
        )

        loaded = load_leads_csv(str(path))

        assert len(loaded) == 1
        assert loaded[0].name == "A2"

    def test_unknown_labels_degrade_to_uncategorized_low(self, tmp_path):
        path = tmp_path / "leads.csv"
        path.write_text(
            "Name,Headline,Category,Confidence,Profile URL,Snippet,Source Query,Scraped At\n"
            "A,,Something Else,High,https://linkedin.com/in/a,,q,\n",
            encoding="utf-8",
        )

        loaded = load_leads_csv(str(path))

        assert loaded[0].category is LeadCategory.UNCATEGORIZED
        assert loaded[0].confidence is Confidence.LOW

    def test_empty_export(self, tmp_path):
        path = write_leads_csv([], str(tmp_path / "empty.csv"))
        assert load_leads_csv(path) == []


if __name__ == '__main__':
    import pytest
    pytest.main([__file__, '-v'])
