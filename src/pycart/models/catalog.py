"""Product catalog lookup.

The catalog is owned by the host application; the cart only needs a
synchronous ``find_product`` lookup, consulted the first time a product is
added. :class:`InMemoryCatalog` is a read-only implementation suitable for
static product lists and tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from pycart.exceptions import CartConfigError
from pycart.models._base import CartBaseModel, Price, ProductId


class Product(CartBaseModel):
    """A catalog entry."""

    id: ProductId
    title: str
    price: Price


@runtime_checkable
class ProductCatalog(Protocol):
    """Read-only product lookup by id."""

    def find_product(self, product_id: str) -> Product | None: ...


class InMemoryCatalog:
    """Immutable id → :class:`Product` mapping.

    Iteration yields products in the order they were supplied.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        by_id: dict[str, Product] = {}
        for product in products:
            if product.id in by_id:
                raise CartConfigError(f"Duplicate product id in catalog: {product.id!r}")
            by_id[product.id] = product
        self._products = by_id

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> InMemoryCatalog:
        """Build a catalog from plain ``{"id", "title", "price"}`` records."""
        products: list[Product] = []
        for index, record in enumerate(records):
            try:
                products.append(Product.model_validate(dict(record)))
            except ValidationError as exc:
                raise CartConfigError(f"Invalid catalog record at index {index}: {exc}") from exc
        return cls(products)

    def find_product(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return f"InMemoryCatalog({len(self._products)} products)"
