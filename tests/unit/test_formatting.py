"""Tests for core.formatting."""

from decimal import Decimal

import pytest

from personal_finance.core.exceptions import InvalidInputError
from personal_finance.core.formatting import format_money, format_percent, round_cents, to_decimal


class TestToDecimal:
    def test_float_goes_through_str(self):
        assert to_decimal(0.08) == Decimal("0.08")

    def test_int_str_decimal(self):
        assert to_decimal(5) == Decimal("5")
        assert to_decimal(" 12.5 ") == Decimal("12.5")
        assert to_decimal(Decimal("1.1")) == Decimal("1.1")

    def test_bool_rejected(self):
        with pytest.raises(InvalidInputError):
            to_decimal(True, "flag")

    def test_garbage_rejected_with_field(self):
        with pytest.raises(InvalidInputError) as exc:
            to_decimal("abc", "principal")
        assert exc.value.field == "principal"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "Infinity", Decimal("NaN")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidInputError):
            to_decimal(value)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            to_decimal("abc")


class TestFormatMoney:
    def test_two_places(self):
        assert format_money(Decimal("14693.2808")) == "14693.28"

    def test_pads_integers(self):
        assert format_money(Decimal("30")) == "30.00"

    def test_rounds_half_up(self):
        assert format_money(Decimal("1.005")) == "1.01"
        assert format_money(Decimal("2.675")) == "2.68"

    def test_negative(self):
        assert format_money(Decimal("-8000")) == "-8000.00"

    def test_negative_zero_normalised(self):
        assert format_money(Decimal("-0.001")) == "0.00"

    def test_no_grouping_or_exponent(self):
        assert format_money(Decimal("1E+6")) == "1000000.00"

    def test_beyond_context_precision(self):
        # 31 integer digits + 2 places exceeds the default 28-digit context
        assert format_money(Decimal("1E+30")) == "1" + "0" * 30 + ".00"
        assert format_money(Decimal("-1234567890123456789012345678.905")) == "-1234567890123456789012345678.91"

    def test_percent_uses_same_rendering(self):
        assert format_percent(Decimal("4")) == "4.00"


class TestRoundCents:
    def test_returns_decimal(self):
        assert round_cents(Decimal("833.3333")) == Decimal("833.33")
