"""Tests for core.growth.lump_sum.

Reference values:
  1.08^5 = 1.4693280768  → 10,000 grows to 14,693.28
  1.02^5 = 1.1040808032  → 10,000 grows to 11,040.81 at 8% − 6% inflation
"""

from decimal import Decimal

import pytest

from personal_finance.core.exceptions import InvalidInputError
from personal_finance.core.growth import DEFAULT_INFLATION_RATE
from personal_finance.core.growth.lump_sum import (
    future_value_with_inflation,
    future_value_without_inflation,
    growth_factor,
    lump_sum_returns,
    lump_sum_returns_with_inflation,
    present_value_with_inflation,
    present_value_without_inflation,
)


class TestGrowthFactor:
    def test_integer_years(self):
        assert growth_factor(Decimal("0.08"), Decimal("5")) == Decimal("1.4693280768")

    def test_zero_years(self):
        assert growth_factor(Decimal("0.08"), Decimal("0")) == Decimal("1")

    def test_rate_at_minus_one_raises(self):
        with pytest.raises(InvalidInputError):
            growth_factor(Decimal("-1"), Decimal("2"))

    def test_negative_years_raises(self):
        with pytest.raises(InvalidInputError) as exc:
            growth_factor(Decimal("0.08"), Decimal("-1"))
        assert exc.value.field == "duration_in_years"


class TestLumpSumReturns:
    def test_reference_case(self):
        assert lump_sum_returns(10000, 5, 0.08) == "14693.28"

    def test_future_value_is_same_calculation(self):
        assert future_value_without_inflation(10000, 5, 0.08) == lump_sum_returns(10000, 5, 0.08)

    def test_zero_years_returns_principal(self):
        assert lump_sum_returns(10000, 0, 0.08) == "10000.00"

    def test_fractional_years(self):
        # 1.21^0.5 = 1.1
        assert lump_sum_returns(10000, 0.5, 0.21) == "11000.00"

    def test_negative_rate_above_minus_one(self):
        # 0.5^2 = 0.25
        assert lump_sum_returns(10000, 2, -0.5) == "2500.00"

    def test_total_loss_rate_raises(self):
        with pytest.raises(InvalidInputError):
            lump_sum_returns(10000, 5, -1)

    def test_negative_years_raises(self):
        with pytest.raises(InvalidInputError):
            lump_sum_returns(10000, -5, 0.08)

    def test_very_large_result(self):
        # 2^100 rounded to 28 significant digits, times one million
        assert lump_sum_returns(1000000, 100, 1.0) == "1267650600228229401496703205" + "0" * 9 + ".00"


class TestWithInflation:
    def test_reference_case(self):
        assert lump_sum_returns_with_inflation(10000, 5, 0.08, 0.06) == "11040.81"

    def test_default_inflation_is_six_percent(self):
        assert DEFAULT_INFLATION_RATE == Decimal("0.06")
        assert lump_sum_returns_with_inflation(10000, 5, 0.08) == "11040.81"

    def test_future_value_is_same_calculation(self):
        assert future_value_with_inflation(10000, 5, 0.08) == "11040.81"
        assert future_value_with_inflation(10000, 5, 0.08, 0.03) == lump_sum_returns_with_inflation(
            10000, 5, 0.08, 0.03
        )

    def test_zero_inflation_matches_nominal(self):
        assert lump_sum_returns_with_inflation(10000, 5, 0.08, 0) == lump_sum_returns(10000, 5, 0.08)

    def test_inflation_above_return_shrinks_value(self):
        assert Decimal(lump_sum_returns_with_inflation(10000, 5, 0.04, 0.06)) < Decimal("10000")

    def test_real_rate_at_minus_one_raises(self):
        with pytest.raises(InvalidInputError):
            lump_sum_returns_with_inflation(10000, 5, 0.05, 1.05)


class TestPresentValue:
    def test_inverts_future_value(self):
        assert present_value_without_inflation(14693.28, 5, 0.08) == "10000.00"

    def test_inverts_future_value_with_inflation(self):
        assert present_value_with_inflation(11040.81, 5, 0.08, 0.06) == "10000.00"
        assert present_value_with_inflation(11040.81, 5, 0.08) == "10000.00"

    @pytest.mark.parametrize("principal, years, roi", [
        (10000, 5, 0.08),
        (2500.5, 12, 0.035),
        (100, 0.5, 0.21),
        (75000, 30, 0.02),
    ])
    def test_round_trip_within_a_cent(self, principal, years, roi):
        fv = future_value_without_inflation(principal, years, roi)
        pv = Decimal(present_value_without_inflation(fv, years, roi))
        assert abs(pv - Decimal(str(principal))) <= Decimal("0.01")

    def test_zero_years_returns_amount(self):
        assert present_value_without_inflation(5000, 0, 0.08) == "5000.00"

    def test_total_loss_rate_raises(self):
        with pytest.raises(InvalidInputError):
            present_value_without_inflation(5000, 3, -1.5)
