"""Tests for document value transforms."""

from datetime import date
from decimal import Decimal

import pytest

from documents.transforms import (
    format_county,
    format_currency,
    format_date,
    format_decision_making,
    format_employment_status,
    format_grounds,
    format_parent,
    format_schedule_type,
    format_yes_no_checkbox,
)


class TestFormatDate:

    @pytest.mark.parametrize("value,expected", [
        ("2012-06-09", "06/09/2012"),
        ("6/9/2012", "06/09/2012"),
        ("2024-01-15T08:00:00Z", "01/15/2024"),
        (date(2020, 12, 1), "12/01/2020"),
    ])
    def test_formats_as_us_date(self, value, expected):
        assert format_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "soon", 20120609])
    def test_unparsable_is_blank(self, value):
        assert format_date(value) == ""


class TestFormatCurrency:

    @pytest.mark.parametrize("value,expected", [
        (1234.5, "$1,234.50"),
        ("1234.5", "$1,234.50"),
        ("$2,000", "$2,000.00"),
        (Decimal("0.005"), "$0.01"),
        (0, "$0.00"),
        (-42, "-$42.00"),
    ])
    def test_formats_dollars(self, value, expected):
        assert format_currency(value) == expected

    @pytest.mark.parametrize("value", [None, "", "lots", float("nan"), True])
    def test_invalid_is_zero(self, value):
        assert format_currency(value) == "$0.00"


class TestLookupTransforms:

    def test_county(self):
        assert format_county("cook") == "Cook County"
        assert format_county("DuPage") == "DuPage County"
        assert format_county("Champaign") == "Champaign"
        assert format_county("") == ""

    def test_grounds(self):
        assert format_grounds("irreconcilable") == "Irreconcilable Differences"
        assert format_grounds("desertion") == "Willful Desertion"
        assert format_grounds("something else") == "something else"

    def test_employment_status(self):
        assert format_employment_status("self_employed") == "Self-Employed"
        assert format_employment_status("gig") == "gig"

    def test_decision_making(self):
        assert format_decision_making("joint") == "Joint (Both Parents)"

    def test_schedule_type(self):
        assert format_schedule_type("2_2_3") == "50/50 - 2-2-3 Rotation"

    def test_parent(self):
        assert format_parent("parent2") == "Respondent (Parent 2)"
        assert format_parent(None) == ""


class TestYesNoCheckbox:

    @pytest.mark.parametrize("value", ["yes", "Yes", "y", "true", True])
    def test_checked(self, value):
        assert format_yes_no_checkbox(value) is True

    @pytest.mark.parametrize("value", ["no", "", "maybe", False, None])
    def test_unchecked(self, value):
        assert format_yes_no_checkbox(value) is False
