"""Decimal helpers for prices and totals.

Prices enter the library as ``float``, ``int``, ``str`` or ``Decimal``.
Floats are converted through ``str()`` so ``24.99`` becomes
``Decimal("24.99")`` rather than its binary approximation.
"""

from __future__ import annotations

import decimal
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

#: ``decimal`` rounding modes accepted by :class:`pycart.config.CartConfig`.
ROUNDING_MODES: frozenset[str] = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


def to_decimal(value: Any) -> Decimal:
    """Coerce *value* to ``Decimal``.

    Raises ``ValueError`` for booleans, non-numeric strings and
    non-finite values.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValueError("price must be numeric, not bool")
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except decimal.InvalidOperation as exc:
            raise ValueError(f"not a decimal amount: {value!r}") from exc
    else:
        raise ValueError(f"not a decimal amount: {value!r}")

    if not result.is_finite():
        raise ValueError(f"amount must be finite: {value!r}")
    return result


def _coefficient_digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def multiply(amount: Decimal, quantity: int) -> Decimal:
    """Exact ``amount * quantity``, whatever the magnitude."""
    factor = Decimal(quantity)
    with decimal.localcontext() as ctx:
        ctx.prec = max(ctx.prec, _coefficient_digits(amount) + _coefficient_digits(factor))
        return amount * factor


def exact_sum(amounts: Iterable[Decimal]) -> Decimal:
    """Exact sum of *amounts*; the default 28-digit context would round."""
    values = list(amounts)
    if not values:
        return Decimal(0)
    highest = max(value.adjusted() for value in values)
    lowest = min(0, *(int(value.as_tuple().exponent) for value in values))
    with decimal.localcontext() as ctx:
        # One carry digit per tenfold growth in the number of terms.
        ctx.prec = max(ctx.prec, highest - lowest + len(str(len(values))) + 2)
        total = Decimal(0)
        for value in values:
            total += value
        return total


def quantize(amount: Decimal, places: int = 2, rounding: str = decimal.ROUND_HALF_UP) -> Decimal:
    """Round *amount* to *places* fractional digits."""
    exponent = Decimal(1).scaleb(-places)
    with decimal.localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        return amount.quantize(exponent, rounding=rounding)


def format_amount(amount: Decimal, *, symbol: str = "$", places: int = 2, rounding: str = decimal.ROUND_HALF_UP) -> str:
    """Render *amount* for display, e.g. ``$49.98``."""
    rounded = quantize(amount, places, rounding)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{rounded.copy_abs():,.{places}f}"
