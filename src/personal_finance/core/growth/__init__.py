"""Investment growth calculators (time value of money).

Sub-modules:
    lump_sum — one-off amount compounded forward or discounted back
    sip      — fixed monthly contributions, deposit-then-compound

All rates here are annual fractions (0.08 = 8%). The *_with_inflation
variants use the real rate roi − inflation_rate, defaulting inflation to 6%.
"""

from ._rates import DEFAULT_INFLATION_RATE
from .lump_sum import (
    future_value_with_inflation,
    future_value_without_inflation,
    lump_sum_returns,
    lump_sum_returns_with_inflation,
    present_value_with_inflation,
    present_value_without_inflation,
)
from .sip import sip_returns, sip_returns_with_inflation

__all__ = [
    "DEFAULT_INFLATION_RATE",
    # lump_sum
    "lump_sum_returns",
    "lump_sum_returns_with_inflation",
    "future_value_without_inflation",
    "future_value_with_inflation",
    "present_value_without_inflation",
    "present_value_with_inflation",
    # sip
    "sip_returns",
    "sip_returns_with_inflation",
]
