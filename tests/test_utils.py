"""
Property Ledger - Formatting and Period Helper Tests
"""

from datetime import date
from decimal import Decimal

import pytest

from utils.formatting import format_currency
from utils.period_utils import generate_month_ranges, month_bounds


class TestFormatCurrency:

    def test_known_symbol_and_separators(self):
        assert format_currency(Decimal("1234567.5"), "USD") == "$1,234,567.50"

    def test_default_currency(self):
        assert format_currency(Decimal("1000")) == "₨1,000.00"

    def test_unknown_currency_uses_code(self):
        assert format_currency(Decimal("12.345"), "CHF") == "CHF12.35"

    def test_negative_amount(self):
        assert format_currency(Decimal("-250"), "EUR") == "-€250.00"

    def test_explicit_none_currency_uses_default(self):
        assert format_currency(Decimal("5"), None) == "₨5.00"

    def test_none_is_zero(self):
        assert format_currency(None, "GBP") == "£0.00"


class TestMonthRanges:

    def test_ranges_end_with_start_month_oldest_first(self):
        ranges = generate_month_ranges("2024-03", 3)

        assert [r.label for r in ranges] == ["Jan 2024", "Feb 2024", "Mar 2024"]
        assert ranges[0].start == date(2024, 1, 1)
        assert ranges[1].end == date(2024, 2, 29)
        assert ranges[2].end == date(2024, 3, 31)

    def test_ranges_cross_year_boundary(self):
        ranges = generate_month_ranges("2024-01", 2)

        assert ranges[0].start == date(2023, 12, 1)
        assert ranges[0].end == date(2023, 12, 31)

    def test_invalid_month_raises(self):
        with pytest.raises(ValueError):
            generate_month_ranges("March 2024", 2)

    def test_range_starting_before_year_one_raises(self):
        with pytest.raises(ValueError, match="before year 1"):
            generate_month_ranges("0001-01", 2)

    def test_range_starting_at_year_one(self):
        ranges = generate_month_ranges("0001-02", 2)

        assert ranges[0].start == date(1, 1, 1)

    def test_month_bounds(self):
        assert month_bounds(date(2023, 2, 14)) == (date(2023, 2, 1), date(2023, 2, 28))

    def test_month_bounds_last_representable_month(self):
        assert month_bounds(date(9999, 12, 5)) == (date(9999, 12, 1), date(9999, 12, 31))
