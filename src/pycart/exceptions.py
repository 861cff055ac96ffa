"""Custom exception hierarchy for pycart."""

from __future__ import annotations

from typing import Any


class CartError(Exception):
    """Base exception for all pycart errors."""


class CartConfigError(CartError):
    """Invalid configuration or catalog data."""


class UnknownProductError(CartError):
    """``AddItem`` referenced a product id the catalog does not know."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Unknown product: {product_id!r}")


class ItemNotFoundError(CartError):
    """``UpdateQuantity`` referenced a product that is not in the cart."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Item not in cart: {product_id!r}")


class UnsupportedActionError(CartError):
    """The reducer received an action it has no transition for.

    Raised both for foreign objects handed to ``reduce`` and for raw
    action dicts whose ``type`` tag is missing or unknown.
    """

    def __init__(self, action: Any) -> None:
        self.action = action
        super().__init__(f"Unsupported action: {action!r}")


class NoProviderBoundError(CartError):
    """A cart channel was resolved outside any ``provide()`` scope.

    Raised at resolution time so integration mistakes surface where the
    consumer is wired up rather than on first state access.
    """

    def __init__(self, channel: str) -> None:
        self.channel = channel
        super().__init__(f"No cart store provided for channel {channel!r}")
