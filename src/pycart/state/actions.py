"""Cart actions.

An action is an immutable description of one intended transition. It
carries no derived data: product metadata is looked up by the reducer.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from pycart.exceptions import UnsupportedActionError
from pycart.models._base import CartBaseModel, ProductId


class ActionType(StrEnum):
    ADD_ITEM = "ADD_ITEM"
    UPDATE_ITEM = "UPDATE_ITEM"


class AddItem(CartBaseModel):
    """Add one unit of a product, inserting it if absent."""

    type: Literal[ActionType.ADD_ITEM] = ActionType.ADD_ITEM
    product_id: ProductId


class UpdateQuantity(CartBaseModel):
    """Change a line's quantity by ``delta`` (may be negative)."""

    type: Literal[ActionType.UPDATE_ITEM] = ActionType.UPDATE_ITEM
    product_id: ProductId
    delta: int


Action = Annotated[AddItem | UpdateQuantity, Field(discriminator="type")]

_ACTION_ADAPTER: TypeAdapter[AddItem | UpdateQuantity] = TypeAdapter(Action)


def parse_action(data: Mapping[str, Any]) -> AddItem | UpdateQuantity:
    """Validate a flat action dict, e.g. ``{"type": "ADD_ITEM", "product_id": "p1"}``.

    An unknown or missing ``type`` raises :class:`UnsupportedActionError`;
    a known type with a bad payload raises pydantic's ``ValidationError``.
    """
    tag = data.get("type")
    try:
        action_type = ActionType(tag)
    except ValueError:
        raise UnsupportedActionError(dict(data)) from None
    return _ACTION_ADAPTER.validate_python({**data, "type": action_type})
