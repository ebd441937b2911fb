"""Debt payoff ordering strategies.

  Snowball   — smallest balance first (quick wins, psychological momentum)
  Avalanche  — highest interest rate first (minimises total interest paid)

Both return a new list and leave the caller's sequence untouched. Python's
sort is stable, so debts that compare equal keep their input order; this
also holds for the descending avalanche sort (reverse=True preserves the
relative order of equal keys).
"""

import logging
from typing import Iterable

from ..exceptions import InvalidInputError
from ..models import Debt

logger = logging.getLogger(__name__)


def debt_snowball(debts: Iterable[Debt]) -> list[Debt]:
    """Order debts by balance, smallest first.

    Args:
        debts: Debt records; only balance is read.

    Returns:
        New list sorted ascending by balance. Empty input gives [].
    """
    ordered = sorted(debts, key=lambda d: d.balance)
    logger.debug("snowball order: %s", [d.name for d in ordered])
    return ordered


def debt_avalanche(debts: Iterable[Debt]) -> list[Debt]:
    """Order debts by interest rate, highest first.

    Args:
        debts: Debt records; every one must carry an interest_rate.

    Returns:
        New list sorted descending by interest_rate.

    Raises:
        InvalidInputError: a debt has no interest rate (or a NaN one).
            Such debts cannot be placed in the order, so the whole call fails
            rather than guessing a position for them.
    """
    debts = list(debts)
    for d in debts:
        if d.interest_rate is None or d.interest_rate.is_nan():
            logger.debug("avalanche rejected debt without rate: %s", d.name)
            raise InvalidInputError(
                f"Debt '{d.name}' has no interest rate; avalanche ordering needs one",
                field="interest_rate",
            )
    ordered = sorted(debts, key=lambda d: d.interest_rate, reverse=True)
    logger.debug("avalanche order: %s", [d.name for d in ordered])
    return ordered
