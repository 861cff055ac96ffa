"""Base model and shared field types for cart models.

Every cart model inherits from :class:`CartBaseModel`, which is frozen:
instances are values, and a "changed" cart is always a new instance.

Two annotated field types are shared across models:

* :data:`ProductId` strips surrounding whitespace and rejects empty ids.
* :data:`Price` coerces ``float``/``int``/``str`` input to ``Decimal``
  via ``str()`` so catalog literals such as ``24.99`` stay exact.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints

from pycart._money import to_decimal

ProductId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
"""Non-empty, whitespace-stripped product identifier."""

Price = Annotated[Decimal, BeforeValidator(to_decimal), Field(ge=0)]
"""Non-negative exact decimal amount."""


class CartBaseModel(BaseModel):
    """Base for cart value objects."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )
