"""Rate helpers shared by the lump-sum and SIP calculators."""

from decimal import Decimal

from ..formatting import Number, to_decimal

#: Inflation assumed by the *_with_inflation calculators when none is given.
DEFAULT_INFLATION_RATE = Decimal("0.06")


def nominal_rate(expected_roi: Number) -> Decimal:
    return to_decimal(expected_roi, "expected_roi")


def real_rate(expected_roi: Number, inflation_rate: Number) -> Decimal:
    """Inflation-adjusted rate, approximated as roi − inflation (not Fisher)."""
    return to_decimal(expected_roi, "expected_roi") - to_decimal(inflation_rate, "inflation_rate")
