"""Debt calculators.

Sub-modules (importable individually for testing or reuse):
    ordering — snowball / avalanche payoff order
    ratios   — debt-to-income ratio
    loans    — EMI and month-by-month amortization schedule

Rate units differ by function: calculate_dti works in percent of income,
calculate_emi takes the annual rate in percent (10 = 10%), while the Debt
record stores interest_rate as a fraction (0.18 = 18%).
"""

from .loans import amortization_schedule, calculate_emi
from .ordering import debt_avalanche, debt_snowball
from .ratios import calculate_dti

__all__ = [
    # ordering
    "debt_snowball",
    "debt_avalanche",
    # ratios
    "calculate_dti",
    # loans
    "calculate_emi",
    "amortization_schedule",
]
