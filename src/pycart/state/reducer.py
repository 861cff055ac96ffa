"""Pure cart transition function.

This module contains *no* side effects: no logging, no I/O and no
mutation of its inputs. Every failure is raised and leaves the caller's
state untouched.
"""

from __future__ import annotations

from typing import Any

from pycart.exceptions import ItemNotFoundError, UnknownProductError, UnsupportedActionError
from pycart.models.cart import CartItem, CartState
from pycart.models.catalog import ProductCatalog
from pycart.state.actions import AddItem, UpdateQuantity


def _index_of(state: CartState, product_id: str) -> int | None:
    for index, item in enumerate(state.items):
        if item.id == product_id:
            return index
    return None


def _add_item(state: CartState, action: AddItem, catalog: ProductCatalog) -> CartState:
    index = _index_of(state, action.product_id)
    if index is not None:
        existing = state.items[index]
        updated = existing.model_copy(update={"quantity": existing.quantity + 1})
        return CartState(items=(*state.items[:index], updated, *state.items[index + 1 :]))

    product = catalog.find_product(action.product_id)
    if product is None:
        raise UnknownProductError(action.product_id)

    # Name and price are frozen into the line at insertion time.
    new_item = CartItem(id=product.id, name=product.title, price=product.price, quantity=1)
    return CartState(items=(*state.items, new_item))


def _update_quantity(state: CartState, action: UpdateQuantity) -> CartState:
    index = _index_of(state, action.product_id)
    if index is None:
        raise ItemNotFoundError(action.product_id)

    existing = state.items[index]
    new_quantity = existing.quantity + action.delta
    if new_quantity <= 0:
        return CartState(items=(*state.items[:index], *state.items[index + 1 :]))

    updated = existing.model_copy(update={"quantity": new_quantity})
    return CartState(items=(*state.items[:index], updated, *state.items[index + 1 :]))


def reduce(state: CartState, action: Any, catalog: ProductCatalog) -> CartState:
    """Return the state that results from applying *action* to *state*.

    Rules:
    - ``AddItem``: bump an existing line by one, otherwise append a new line
      at quantity 1 using the catalog's title and price.
    - ``UpdateQuantity``: add ``delta`` to an existing line; a result ``<= 0``
      removes the line without reordering the rest.
    - Anything else raises :class:`UnsupportedActionError`.
    """
    if isinstance(action, AddItem):
        return _add_item(state, action, catalog)
    if isinstance(action, UpdateQuantity):
        return _update_quantity(state, action)
    raise UnsupportedActionError(action)
