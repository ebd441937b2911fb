"""Personal finance calculators.

Debt ordering, debt-to-income, loan EMI, lump-sum and SIP growth, and
retirement planning. Every calculator is a pure function; money and
percentage results come back as strings fixed to 2 decimal places.

Usage:
    from personal_finance import calculate_emi, sip_returns
    calculate_emi(100000, 10, 5)       # "2124.70"
"""

from .core.debt import (
    amortization_schedule,
    calculate_dti,
    calculate_emi,
    debt_avalanche,
    debt_snowball,
)
from .core.exceptions import ConfigError, InvalidInputError, PersonalFinanceError
from .core.formatting import format_money, format_percent, to_decimal
from .core.growth import (
    DEFAULT_INFLATION_RATE,
    future_value_with_inflation,
    future_value_without_inflation,
    lump_sum_returns,
    lump_sum_returns_with_inflation,
    present_value_with_inflation,
    present_value_without_inflation,
    sip_returns,
    sip_returns_with_inflation,
)
from .core.models import AmortizationRow, Debt
from .core.retirement import retirement_savings_goal, safe_withdrawal_rate

__version__ = "0.1.0"

__all__ = [
    "calculate_dti",
    "debt_snowball",
    "debt_avalanche",
    "calculate_emi",
    "amortization_schedule",
    "lump_sum_returns",
    "lump_sum_returns_with_inflation",
    "future_value_without_inflation",
    "future_value_with_inflation",
    "present_value_without_inflation",
    "present_value_with_inflation",
    "sip_returns",
    "sip_returns_with_inflation",
    "retirement_savings_goal",
    "safe_withdrawal_rate",
    "format_money",
    "format_percent",
    "to_decimal",
    "DEFAULT_INFLATION_RATE",
    "Debt",
    "AmortizationRow",
    "PersonalFinanceError",
    "InvalidInputError",
    "ConfigError",
]
