"""Debt-to-income ratio."""

import logging

from ..exceptions import InvalidInputError
from ..formatting import Number, format_percent, to_decimal

logger = logging.getLogger(__name__)


def calculate_dti(total_monthly_debt_payments: Number, total_monthly_income: Number) -> str:
    """Calculate the debt-to-income ratio as a percentage.

    Formula: DTI = debt payments / income × 100

    Lenders commonly treat ≤ 36% as healthy and > 43% as the ceiling for a
    qualified mortgage, but no threshold is applied here.

    Args:
        total_monthly_debt_payments: Sum of monthly debt obligations.
        total_monthly_income: Gross monthly income. Must not be zero.

    Returns:
        Percentage string with 2 decimals, e.g. "30.00".

    Raises:
        InvalidInputError: income is zero.
    """
    debt = to_decimal(total_monthly_debt_payments, "total_monthly_debt_payments")
    income = to_decimal(total_monthly_income, "total_monthly_income")
    if income == 0:
        logger.debug("DTI undefined for zero income (debt=%s)", debt)
        raise InvalidInputError("total_monthly_income must not be zero", field="total_monthly_income")
    return format_percent(debt / income * 100)
