"""Lump-sum compounding and discounting.

One formula, in both directions:
  future  = amount × (1 + rate)^years
  present = amount / (1 + rate)^years

with rate = expected_roi (nominal) or expected_roi − inflation_rate (real).
Rates are annual fractions (0.08 = 8%). Years may be fractional.

Domain: rate > -1 (the base must stay positive for a fractional power to
be real) and years ≥ 0. Anything else raises InvalidInputError.

lump_sum_returns and future_value_without_inflation are the same
calculation under two names, as are their inflation-adjusted twins; both
names are part of the public surface.
"""

import logging
from decimal import Decimal

from ..exceptions import InvalidInputError
from ..formatting import Number, format_money, to_decimal
from ._rates import DEFAULT_INFLATION_RATE, nominal_rate, real_rate

logger = logging.getLogger(__name__)


def growth_factor(rate: Decimal, years: Decimal) -> Decimal:
    """(1 + rate)^years after checking the domain.

    Raises:
        InvalidInputError: rate ≤ -1 or years < 0.
    """
    if rate <= -1:
        raise InvalidInputError(f"effective rate must be greater than -1, got {rate}", field="expected_roi")
    if years < 0:
        raise InvalidInputError(f"duration_in_years must not be negative, got {years}", field="duration_in_years")
    return (1 + rate) ** years


def _compound(amount: Number, years: Number, rate: Decimal) -> str:
    principal = to_decimal(amount, "principal_amount")
    duration = to_decimal(years, "duration_in_years")
    total = principal * growth_factor(rate, duration)
    logger.debug("compound %s @ %s for %sy -> %s", principal, rate, duration, total)
    return format_money(total)


def _discount(amount: Number, years: Number, rate: Decimal) -> str:
    future = to_decimal(amount, "future_amount")
    duration = to_decimal(years, "duration_in_years")
    present = future / growth_factor(rate, duration)
    logger.debug("discount %s @ %s for %sy -> %s", future, rate, duration, present)
    return format_money(present)


def lump_sum_returns(principal_amount: Number, duration_in_years: Number, expected_roi: Number) -> str:
    """Value of a one-off investment after compounding, ignoring inflation.

    Args:
        principal_amount: Amount invested today.
        duration_in_years: Holding period in years.
        expected_roi: Expected annual return as a fraction.

    Returns:
        Final amount as a 2-decimal string, e.g.
        lump_sum_returns(10000, 5, 0.08) == "14693.28".
    """
    return _compound(principal_amount, duration_in_years, nominal_rate(expected_roi))


def lump_sum_returns_with_inflation(
    principal_amount: Number,
    duration_in_years: Number,
    expected_roi: Number,
    inflation_rate: Number = DEFAULT_INFLATION_RATE,
) -> str:
    """Value of a one-off investment in today's money (real return = roi − inflation).

    Args:
        principal_amount: Amount invested today.
        duration_in_years: Holding period in years.
        expected_roi: Expected annual return as a fraction.
        inflation_rate: Annual inflation as a fraction. Defaults to 6%.
    """
    return _compound(principal_amount, duration_in_years, real_rate(expected_roi, inflation_rate))


def future_value_without_inflation(principal_amount: Number, duration_in_years: Number, expected_roi: Number) -> str:
    """Future value of an investment; identical to lump_sum_returns."""
    return _compound(principal_amount, duration_in_years, nominal_rate(expected_roi))


def future_value_with_inflation(
    principal_amount: Number,
    duration_in_years: Number,
    expected_roi: Number,
    inflation_rate: Number = DEFAULT_INFLATION_RATE,
) -> str:
    """Inflation-adjusted future value; identical to lump_sum_returns_with_inflation."""
    return _compound(principal_amount, duration_in_years, real_rate(expected_roi, inflation_rate))


def present_value_without_inflation(future_amount: Number, duration_in_years: Number, expected_roi: Number) -> str:
    """Amount needed today to reach future_amount at the nominal rate.

    Args:
        future_amount: Target amount at the end of the period.
        duration_in_years: Years until the target date.
        expected_roi: Expected annual return as a fraction.

    Returns:
        Present value as a 2-decimal string.
    """
    return _discount(future_amount, duration_in_years, nominal_rate(expected_roi))


def present_value_with_inflation(
    future_amount: Number,
    duration_in_years: Number,
    expected_roi: Number,
    inflation_rate: Number = DEFAULT_INFLATION_RATE,
) -> str:
    """Present value discounted at the real rate (roi − inflation).

    Args:
        future_amount: Target amount at the end of the period.
        duration_in_years: Years until the target date.
        expected_roi: Expected annual return as a fraction.
        inflation_rate: Annual inflation as a fraction. Defaults to 6%.
    """
    return _discount(future_amount, duration_in_years, real_rate(expected_roi, inflation_rate))
