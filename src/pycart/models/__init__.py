"""Data models for cart state and the product catalog."""

from pycart.models._base import CartBaseModel, Price, ProductId
from pycart.models.cart import CartItem, CartState
from pycart.models.catalog import InMemoryCatalog, Product, ProductCatalog

__all__ = [
    "CartBaseModel",
    "CartItem",
    "CartState",
    "InMemoryCatalog",
    "Price",
    "Product",
    "ProductCatalog",
    "ProductId",
]
