"""Scoped distribution of a cart store to nested consumers.

A :class:`CartChannel` binds a :class:`CartStore` for the duration of a
``with channel.provide(store):`` block. Any code running inside that block,
however deeply nested, can call :meth:`CartChannel.resolve` instead of
receiving the store as a parameter. Bindings live in a
:class:`contextvars.ContextVar`, so they nest (innermost wins) and are
inherited by ``asyncio`` tasks created inside the block.

Resolving outside any scope raises :class:`NoProviderBoundError` unless the
channel was constructed with an explicit ``default`` store.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable, Iterator, Mapping
from contextvars import ContextVar
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import TypeVar

from pycart.exceptions import NoProviderBoundError
from pycart.models.cart import CartItem, CartState
from pycart.state.store import CartStore, Subscriber

_logger = logging.getLogger(__name__)

T = TypeVar("T")

# Channel -> store bindings for the current context. Replaced, never mutated.
_bindings: ContextVar[Mapping[CartChannel, CartStore]] = ContextVar(
    "pycart.channel.bindings",
    default=MappingProxyType({}),
)


@dataclass(frozen=True, slots=True)
class CartSnapshot:
    """What a consumer sees: the state, its total, and the two mutators.

    A snapshot never changes; after a dispatch, consumers obtain a new one.
    """

    state: CartState
    total: Decimal
    add_item_to_cart: Callable[[str], CartState]
    update_item_quantity: Callable[[str, int], CartState]

    @classmethod
    def of(cls, store: CartStore) -> CartSnapshot:
        return cls(
            state=store.get_snapshot(),
            total=store.total_price(),
            add_item_to_cart=store.add_item_to_cart,
            update_item_quantity=store.update_item_quantity,
        )

    @property
    def items(self) -> tuple[CartItem, ...]:
        return self.state.items

    @property
    def item_count(self) -> int:
        return self.state.item_count


class CartChannel:
    """A named, scoped binding point for a cart store.

    Channels are meant to be long-lived, module-level objects like
    :data:`cart_channel`. All channels share one module-level context
    variable, so creating a channel costs nothing in the execution context;
    a binding holds a reference to its channel only while its scope is open.
    """

    def __init__(self, name: str = "cart", *, default: CartStore | None = None) -> None:
        self._name = name
        self._default = default

    @property
    def name(self) -> str:
        return self._name

    @contextlib.contextmanager
    def provide(self, store: CartStore) -> Iterator[CartStore]:
        """Bind *store* for lookups made inside the ``with`` block."""
        token = _bindings.set(MappingProxyType({**_bindings.get(), self: store}))
        _logger.debug("Cart store provided on channel %s", self._name)
        try:
            yield store
        finally:
            _bindings.reset(token)
            _logger.debug("Cart store binding released on channel %s", self._name)

    def resolve(self) -> CartStore:
        """Return the nearest provided store.

        Raises
        ------
        NoProviderBoundError
            No enclosing ``provide()`` scope and no explicit default.
        """
        store = _bindings.get().get(self)
        if store is not None:
            return store
        if self._default is not None:
            return self._default
        raise NoProviderBoundError(self._name)

    def snapshot(self) -> CartSnapshot:
        return CartSnapshot.of(self.resolve())

    def consume(self, render: Callable[[CartSnapshot], T]) -> T:
        """Call *render* with the current snapshot and return its result."""
        return render(self.snapshot())

    @contextlib.contextmanager
    def subscription(self, callback: Subscriber) -> Iterator[CartStore]:
        """Subscribe *callback* to the resolved store for the block's lifetime.

        The store is resolved on entry, so a missing provider fails here
        rather than on the first notification.
        """
        store = self.resolve()
        unsubscribe = store.subscribe(callback)
        try:
            yield store
        finally:
            unsubscribe()

    def __repr__(self) -> str:
        return f"CartChannel({self._name!r})"


#: Default application-wide channel.
cart_channel = CartChannel("cart")


def provide_cart(store: CartStore) -> contextlib.AbstractContextManager[CartStore]:
    """Bind *store* on the default channel."""
    return cart_channel.provide(store)


def use_cart_store() -> CartStore:
    return cart_channel.resolve()


def use_cart() -> CartSnapshot:
    """Snapshot of the store bound on the default channel."""
    return cart_channel.snapshot()
