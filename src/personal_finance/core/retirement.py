"""Retirement planning — savings goal and safe withdrawal rate."""

import logging

from .exceptions import InvalidInputError
from .formatting import Number, format_money, format_percent, to_decimal

logger = logging.getLogger(__name__)


def retirement_savings_goal(
    monthly_expenses: Number,
    years_until_retirement: Number,
    annual_return_rate: Number,
    current_savings: Number,
) -> str:
    """Calculate the additional savings still needed for retirement.

    Treats monthly_expenses as an annuity-due paid until retirement and
    compares its future value with what has already been saved:

      n  = years × 12
      r  = annual_return_rate / 12 / 100
      FV = pmt × ((1+r)^n − 1) / r × (1+r)      (FV = pmt × n when r = 0)

    Args:
        monthly_expenses: Monthly amount the goal is built from.
        years_until_retirement: Years left to save. Must not be negative.
        annual_return_rate: Expected annual return in percent (8 = 8%).
        current_savings: Savings already set aside.

    Returns:
        FV − current_savings as a signed 2-decimal string. A negative value
        means current savings already exceed the goal.

    Raises:
        InvalidInputError: negative years, or a rate at or below -1200%.
    """
    pmt = to_decimal(monthly_expenses, "monthly_expenses")
    years = to_decimal(years_until_retirement, "years_until_retirement")
    savings = to_decimal(current_savings, "current_savings")
    if years < 0:
        raise InvalidInputError("years_until_retirement must not be negative", field="years_until_retirement")

    months = years * 12
    monthly_rate = to_decimal(annual_return_rate, "annual_return_rate") / 12 / 100
    if monthly_rate <= -1:
        raise InvalidInputError("annual_return_rate must be above -1200%", field="annual_return_rate")

    growth = (1 + monthly_rate) ** months
    if monthly_rate == 0 or growth == 1:
        future_value = pmt * months
    else:
        future_value = pmt * ((growth - 1) / monthly_rate) * (1 + monthly_rate)

    logger.debug("retirement FV=%s savings=%s", future_value, savings)
    return format_money(future_value - savings)


def safe_withdrawal_rate(retirement_savings: Number, retirement_years: Number, annual_expenses: Number) -> str:
    """Annual expenses as a percentage of the retirement pot.

    Formula: annual_expenses / retirement_savings × 100

    retirement_years is accepted for interface compatibility but does not
    enter the formula; the result is the same for any horizon.

    Returns:
        Percentage string, e.g. safe_withdrawal_rate(1000000, 30, 40000) == "4.00".

    Raises:
        InvalidInputError: retirement_savings is zero.
    """
    savings = to_decimal(retirement_savings, "retirement_savings")
    expenses = to_decimal(annual_expenses, "annual_expenses")
    if savings == 0:
        raise InvalidInputError("retirement_savings must not be zero", field="retirement_savings")
    rate = expenses / savings * 100
    return format_percent(rate)
