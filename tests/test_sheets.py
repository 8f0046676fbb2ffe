"""
Tests for the Google Sheets export bridge (requests mocked).
"""

import os
import sys
from unittest.mock import MagicMock, patch

import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lachow_leads.sheets import (
    export_to_google_sheets,
    format_sheet_date,
    generate_connection_note,
    leads_to_sheet_rows,
)
from lachow_leads.types import LeadCategory
from tests.fixtures.lead_samples import FIXED_TS, make_lead

SCRIPT_URL = "https://script.google.com/macros/s/test/exec"


def _response(ok=True, status_code=200, payload=None, reason="OK"):
    r = MagicMock()
    r.ok = ok
    r.status_code = status_code
    r.reason = reason
    if payload is None:
        r.json.side_effect = ValueError("not json")
    else:
        r.json.return_value = payload
    return r


class TestConnectionNote:
    def test_uses_first_name_and_headline(self):
        lead = make_lead("u", name="Jane Doe", headline="catering", category=LeadCategory.KITCHEN_TENANT)
        note = generate_connection_note(lead)
        assert note.startswith("Hi Jane, I noticed your work in catering.")
        assert "shared commercial kitchen" in note

    def test_missing_headline_falls_back(self):
        lead = make_lead("u", name="Amy Lee", headline="", category=LeadCategory.EVENT_CLIENT)
        assert "I saw your experience in the food industry." in generate_connection_note(lead)

    def test_uncategorized_template(self):
        lead = make_lead("u", name="Sam", category=LeadCategory.UNCATEGORIZED)
        assert "might have synergies" in generate_connection_note(lead)


class TestSheetRows:
    def test_row_layout(self):
        lead = make_lead("https://linkedin.com/in/jane", name="Jane Doe", headline="")
        row = leads_to_sheet_rows([lead])[0]

        assert row[0] == "01/02/2026"
        assert row[1] == "Jane Doe"
        assert row[2] == "Kitchen Tenant"  # headline missing -> category
        assert row[3] == "https://linkedin.com/in/jane"
        assert row[5] == "New"

    def test_date_format(self):
        assert format_sheet_date(FIXED_TS) == "01/02/2026"


class TestExportToGoogleSheets:
    def test_no_leads(self):
        result = export_to_google_sheets([], SCRIPT_URL)
        assert result.success is False
        assert result.message == "No leads to export"

    def test_missing_url(self):
        with patch("lachow_leads.sheets.config.APPS_SCRIPT_URL", ""):
            result = export_to_google_sheets([make_lead("u")])
        assert result.success is False

    @patch("lachow_leads.sheets.requests.post")
    def test_success_json(self, mock_post):
        mock_post.return_value = _response(payload={"success": True})

        result = export_to_google_sheets([make_lead("u1"), make_lead("u2")], SCRIPT_URL)

        assert result.success is True
        assert result.rows_added == 2
        body = mock_post.call_args.kwargs["json"]
        assert len(body["rows"]) == 2

    @patch("lachow_leads.sheets.requests.post")
    def test_non_json_ok_counts_as_success(self, mock_post):
        mock_post.return_value = _response(payload=None)

        result = export_to_google_sheets([make_lead("u1")], SCRIPT_URL)

        assert result.success is True
        assert result.rows_added == 1

    @patch("lachow_leads.sheets.requests.post")
    def test_script_reports_error(self, mock_post):
        mock_post.return_value = _response(payload={"success": False, "error": "Sheet locked"})

        result = export_to_google_sheets([make_lead("u1")], SCRIPT_URL)

        assert result.success is False
        assert result.message == "Sheet locked"

    @patch("lachow_leads.sheets.requests.post")
    def test_http_failure(self, mock_post):
        mock_post.return_value = _response(ok=False, status_code=500, reason="Internal Server Error")

        result = export_to_google_sheets([make_lead("u1")], SCRIPT_URL)

        assert result.success is False
        assert result.message == "Export failed: Internal Server Error"

    @patch("lachow_leads.sheets.requests.post")
    def test_network_error(self, mock_post):
        mock_post.side_effect = requests.Timeout("timed out")

        result = export_to_google_sheets([make_lead("u1")], SCRIPT_URL)

        assert result.success is False
        assert result.message == "Network error: timed out"


if __name__ == '__main__':
    import pytest
    pytest.main([__file__, '-v'])
