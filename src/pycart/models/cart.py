"""Cart state models."""

from __future__ import annotations

import decimal
from decimal import Decimal

from pydantic import Field, model_validator

from pycart._money import exact_sum, multiply, quantize
from pycart.models._base import CartBaseModel, Price, ProductId


class CartItem(CartBaseModel):
    """One cart line.

    ``name`` and ``price`` are copied from the catalog when the product is
    first added; later catalog changes do not affect the line.
    """

    id: ProductId
    name: str
    price: Price
    quantity: int = Field(default=1, ge=1)

    @property
    def line_total(self) -> Decimal:
        """Unrounded ``price * quantity``."""
        return multiply(self.price, self.quantity)


class CartState(CartBaseModel):
    """Ordered cart lines, at most one per product id.

    ``CartState()`` is the empty cart.
    """

    items: tuple[CartItem, ...] = ()

    @model_validator(mode="after")
    def _unique_ids(self) -> CartState:
        seen: set[str] = set()
        for item in self.items:
            if item.id in seen:
                raise ValueError(f"duplicate cart item id: {item.id!r}")
            seen.add(item.id)
        return self

    def find(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.id == product_id:
                return item
        return None

    def __contains__(self, product_id: object) -> bool:
        return any(item.id == product_id for item in self.items)

    @property
    def item_count(self) -> int:
        """Number of distinct lines (what a cart badge shows)."""
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        """Unrounded sum of line totals."""
        return exact_sum(item.line_total for item in self.items)

    def total(self, places: int = 2, rounding: str = decimal.ROUND_HALF_UP) -> Decimal:
        """Sum of line totals rounded to *places* with *rounding*.

        The defaults are two places, half-up. A state received from a
        :class:`~pycart.state.store.CartStore` configured otherwise should be
        priced with ``store.total_price(state)`` instead.
        """
        return quantize(self.subtotal, places, rounding)
