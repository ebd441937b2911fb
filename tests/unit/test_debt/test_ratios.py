"""Tests for core.debt.ratios."""

from decimal import Decimal

import pytest

from personal_finance.core.debt.ratios import calculate_dti
from personal_finance.core.exceptions import InvalidInputError


class TestCalculateDTI:
    def test_reference_case(self):
        # 1500 / 5000 × 100 = 30
        assert calculate_dti(1500, 5000) == "30.00"

    def test_rounds_to_two_places(self):
        assert calculate_dti(1, 3) == "33.33"
        assert calculate_dti(2, 3) == "66.67"

    def test_no_debt(self):
        assert calculate_dti(0, 5000) == "0.00"

    def test_debt_above_income(self):
        assert calculate_dti(6000, 4000) == "150.00"

    def test_accepts_decimal_and_str(self):
        assert calculate_dti(Decimal("1500"), "5000") == "30.00"

    def test_zero_income_raises(self):
        with pytest.raises(InvalidInputError) as exc:
            calculate_dti(1500, 0)
        assert exc.value.field == "total_monthly_income"

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidInputError):
            calculate_dti("lots", 5000)
