"""Data models for the personal finance calculators."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .exceptions import InvalidInputError
from .formatting import to_decimal


@dataclass
class Debt:
    """A single liability, used as input and output of the ordering strategies.

    interest_rate is an annual fraction (0.18 = 18%), not a percentage.
    It is optional because the snowball strategy only looks at balance.
    """

    name: str
    balance: Decimal
    interest_rate: Optional[Decimal] = None

    def __post_init__(self):
        self.balance = to_decimal(self.balance, "balance")
        if self.balance < 0:
            raise InvalidInputError(
                f"Debt '{self.name}' has a negative balance ({self.balance})",
                field="balance",
            )
        if self.interest_rate is not None:
            try:
                self.interest_rate = to_decimal(self.interest_rate, "interest_rate")
            except InvalidInputError as e:
                raise InvalidInputError(f"Debt '{self.name}': {e}", field=e.field) from None
            if self.interest_rate < 0:
                raise InvalidInputError(
                    f"Debt '{self.name}' has a negative interest rate ({self.interest_rate})",
                    field="interest_rate",
                )


@dataclass(frozen=True)
class AmortizationRow:
    """One month of a loan repayment schedule. Amounts are rounded to cents."""

    month: int
    payment: Decimal
    interest: Decimal
    principal: Decimal    # payment - interest
    balance: Decimal      # closing balance after this payment
