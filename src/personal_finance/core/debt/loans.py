"""Loan amortization — EMI (Equated Monthly Installment) and repayment schedule.

Standard annuity-loan formula:
  r   = annual_rate_percent / 12 / 100     (monthly fractional rate)
  n   = tenure_years × 12                  (number of monthly payments)
  EMI = P × r × (1+r)^n / ((1+r)^n − 1)

For r = 0 the formula is 0/0; its limit is the straight-line payment P / n,
which is what we return.

Note the rate here is a percentage (10 = 10% p.a.), unlike the growth
calculators which take fractions.
"""

import logging
from decimal import Decimal

from ..exceptions import InvalidInputError
from ..formatting import Number, format_money, round_cents, to_decimal
from ..models import AmortizationRow

logger = logging.getLogger(__name__)


def _loan_terms(annual_interest_rate: Number, tenure_in_years: Number) -> tuple[Decimal, Decimal]:
    """Convert (annual % rate, years) to (monthly fractional rate, months)."""
    monthly_rate = to_decimal(annual_interest_rate, "annual_interest_rate") / 12 / 100
    total_months = to_decimal(tenure_in_years, "tenure_in_years") * 12
    if total_months <= 0:
        raise InvalidInputError("tenure_in_years must be positive", field="tenure_in_years")
    if monthly_rate <= -1:
        raise InvalidInputError(
            "annual_interest_rate must be above -1200% (monthly rate > -100%)",
            field="annual_interest_rate",
        )
    return monthly_rate, total_months


def _emi(principal: Decimal, monthly_rate: Decimal, total_months: Decimal) -> Decimal:
    growth = (1 + monthly_rate) ** total_months
    # a rate too small to move 1 + r at context precision is the zero-rate limit
    if monthly_rate == 0 or growth == 1:
        return principal / total_months
    return principal * monthly_rate * growth / (growth - 1)


def calculate_emi(principal: Number, annual_interest_rate: Number, tenure_in_years: Number) -> str:
    """Calculate the monthly installment for a fully amortizing loan.

    Args:
        principal: Loan amount.
        annual_interest_rate: Annual interest rate in percent (10 = 10%).
        tenure_in_years: Loan tenure in years. Must be positive.

    Returns:
        EMI as a 2-decimal string, e.g. calculate_emi(100000, 10, 5) == "2124.70".

    Raises:
        InvalidInputError: non-positive tenure or rate ≤ -1200%.
    """
    p = to_decimal(principal, "principal")
    monthly_rate, total_months = _loan_terms(annual_interest_rate, tenure_in_years)
    emi = _emi(p, monthly_rate, total_months)
    logger.debug("EMI P=%s r=%s n=%s -> %s", p, monthly_rate, total_months, emi)
    return format_money(emi)


def amortization_schedule(
    principal: Number,
    annual_interest_rate: Number,
    tenure_in_years: Number,
) -> list[AmortizationRow]:
    """Month-by-month repayment schedule for the loan priced by calculate_emi.

    Each month:
      interest  = opening balance × r   (rounded to cents)
      principal = EMI − interest
      balance   = opening balance − principal

    The last row pays off whatever balance remains, so rounding drift ends
    up in the final payment and the closing balance is exactly zero.

    Args:
        principal: Loan amount.
        annual_interest_rate: Annual interest rate in percent.
        tenure_in_years: Loan tenure; tenure × 12 must be a whole number of months.

    Returns:
        List of AmortizationRow, one per month, months numbered from 1.
    """
    p = to_decimal(principal, "principal")
    monthly_rate, total_months = _loan_terms(annual_interest_rate, tenure_in_years)
    if total_months != total_months.to_integral_value():
        raise InvalidInputError(
            f"tenure_in_years must cover a whole number of months, got {total_months} months",
            field="tenure_in_years",
        )
    months = int(total_months)
    payment = round_cents(_emi(p, monthly_rate, total_months))

    rows: list[AmortizationRow] = []
    balance = round_cents(p)
    for month in range(1, months + 1):
        interest = round_cents(balance * monthly_rate)
        if month == months:
            principal_paid = balance
            month_payment = interest + balance
        else:
            principal_paid = payment - interest
            month_payment = payment
        balance = round_cents(balance - principal_paid)
        rows.append(AmortizationRow(
            month=month,
            payment=month_payment,
            interest=interest,
            principal=principal_paid,
            balance=balance,
        ))
    return rows
