"""Numeric coercion and the 2-decimal string formatting boundary.

Calculators work on Decimal at full context precision and only round
when the result leaves the function, via format_money / format_percent.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from .exceptions import InvalidInputError

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")


def to_decimal(value: Number, field: str = "value") -> Decimal:
    """Coerce a numeric argument to Decimal.

    Floats go through str() so 0.08 becomes Decimal("0.08") rather than
    the binary approximation 0.0800000000000000016653...

    Raises:
        InvalidInputError: bools, non-numeric strings, NaN or Infinity.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number, got bool", field=field)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidInputError(f"{field} must be a number, got {value!r}", field=field) from None
    if not result.is_finite():
        raise InvalidInputError(f"{field} must be finite, got {value!r}", field=field)
    return result


def round_cents(value: Decimal) -> Decimal:
    """Round half-up to cents, normalising -0.00 to 0.00.

    Precision is widened so amounts beyond the context's 28 digits still
    quantize instead of signalling InvalidOperation.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return Decimal("0.00")
    return rounded


def format_money(value: Decimal) -> str:
    """Render an amount as a fixed 2-decimal string (no grouping, no symbol).

    >>> format_money(Decimal("14693.2808"))
    '14693.28'
    """
    return f"{round_cents(value):f}"


def format_percent(value: Decimal) -> str:
    """Render a percentage (already scaled by 100) as a 2-decimal string."""
    return format_money(value)
