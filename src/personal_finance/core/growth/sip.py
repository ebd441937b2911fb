"""SIP (Systematic Investment Plan) — fixed monthly contributions.

Simulated month by month rather than with the annuity closed form:

    total = 0
    repeat months times:
        total += monthly_payment          # deposit first
        total *= 1 + rate / 12            # then one month of growth

Depositing before compounding means every contribution earns the month it
was paid in (annuity-due). Swapping the two steps gives a smaller result.
"""

import logging
from decimal import Decimal

from ..exceptions import InvalidInputError
from ..formatting import Number, format_money, to_decimal
from ._rates import DEFAULT_INFLATION_RATE, nominal_rate, real_rate

logger = logging.getLogger(__name__)


def _months(months: Number) -> int:
    value = to_decimal(months, "months")
    if value < 0:
        raise InvalidInputError(f"months must not be negative, got {months}", field="months")
    if value != value.to_integral_value():
        raise InvalidInputError(f"months must be a whole number, got {months}", field="months")
    return int(value)


def _accumulate(monthly_payment: Number, months: Number, annual_rate: Decimal) -> str:
    payment = to_decimal(monthly_payment, "monthly_payment")
    periods = _months(months)
    monthly_growth = 1 + annual_rate / 12
    total = Decimal("0")
    for _ in range(periods):
        total += payment
        total *= monthly_growth
    logger.debug("SIP %s x %s months @ %s -> %s", payment, periods, annual_rate, total)
    return format_money(total)


def sip_returns(monthly_payment: Number, months: Number, expected_roi: Number) -> str:
    """Accumulated value of a monthly SIP, ignoring inflation.

    Args:
        monthly_payment: Amount invested at the start of every month.
        months: Number of monthly contributions (whole number, ≥ 0).
        expected_roi: Expected annual return as a fraction, compounded monthly.

    Returns:
        Accumulated amount as a 2-decimal string; "0.00" for zero months.
    """
    return _accumulate(monthly_payment, months, nominal_rate(expected_roi))


def sip_returns_with_inflation(
    monthly_payment: Number,
    months: Number,
    expected_roi: Number,
    inflation_rate: Number = DEFAULT_INFLATION_RATE,
) -> str:
    """Accumulated value of a monthly SIP at the real rate (roi − inflation).

    Args:
        monthly_payment: Amount invested at the start of every month.
        months: Number of monthly contributions (whole number, ≥ 0).
        expected_roi: Expected annual return as a fraction.
        inflation_rate: Annual inflation as a fraction. Defaults to 6%.
    """
    return _accumulate(monthly_payment, months, real_rate(expected_roi, inflation_rate))
