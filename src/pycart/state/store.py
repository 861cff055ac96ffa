"""In-memory cart store.

This is the only component that holds the current cart state. It replaces
that state exclusively with reducer output and publishes each successful
transition to its subscribers.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from pycart.config import CartConfig
from pycart.models.cart import CartState
from pycart.models.catalog import ProductCatalog
from pycart.state.actions import AddItem, UpdateQuantity
from pycart.state.reducer import reduce

_logger = logging.getLogger(__name__)

Subscriber = Callable[[CartState], None]
Unsubscribe = Callable[[], None]


class CartStore:
    """Owner of the current :class:`CartState`.

    Usage::

        store = CartStore(catalog)
        unsubscribe = store.subscribe(render)
        store.add_item_to_cart("p1")
        unsubscribe()

    All work runs synchronously on the caller's thread. Hosts that share a
    store between threads must serialize calls to :meth:`dispatch`.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        *,
        config: CartConfig | None = None,
        initial_state: CartState | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config if config is not None else CartConfig()
        self._state = initial_state if initial_state is not None else CartState()
        self._subscribers: list[_Registration] = []
        self._pending: deque[tuple[CartState, tuple[_Registration, ...]]] = deque()
        self._notifying = False

    @property
    def config(self) -> CartConfig:
        return self._config

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_snapshot(self) -> CartState:
        """Return the current immutable state."""
        return self._state

    def total_price(self, state: CartState | None = None) -> Decimal:
        """Total of *state* (default: the current state), rounded per :attr:`config`.

        Subscribers receive a bare :class:`CartState`; pricing it through
        this method keeps their total consistent with the store's currency.
        """
        target = state if state is not None else self._state
        return self._config.round_price(target.subtotal)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def dispatch(self, action: Any) -> CartState:
        """Apply *action* and notify subscribers.

        Reducer errors propagate unchanged; the stored state is left as it
        was and no subscriber is called. A dispatch issued from inside a
        subscriber is applied immediately, but its notification round runs
        after the current one finishes so every subscriber sees states in
        dispatch order. Each round reaches exactly the callbacks that were
        subscribed when its dispatch happened.
        """
        new_state = reduce(self._state, action, self._catalog)
        self._state = new_state
        _logger.debug(
            "Dispatched %s; cart now has %d line(s)",
            getattr(action, "type", type(action).__name__),
            new_state.item_count,
        )

        # Audience is fixed at dispatch time.
        self._pending.append((new_state, tuple(self._subscribers)))
        if not self._notifying:
            self._drain()
        return new_state

    def add_item_to_cart(self, product_id: str) -> CartState:
        return self.dispatch(AddItem(product_id=product_id))

    def update_item_quantity(self, product_id: str, delta: int) -> CartState:
        return self.dispatch(UpdateQuantity(product_id=product_id, delta=delta))

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Register *callback* for every future successful dispatch.

        The callback is not invoked with the current state; read
        :meth:`get_snapshot` at registration time if needed. Use
        :meth:`total_price` with the received state to get its total in the
        store's currency. The returned function removes the registration
        and is safe to call twice.
        """
        entry = _Registration(callback)
        self._subscribers.append(entry)

        def unsubscribe() -> None:
            if entry.active:
                entry.active = False
                self._subscribers.remove(entry)

        return unsubscribe

    def _drain(self) -> None:
        self._notifying = True
        try:
            while self._pending:
                state, audience = self._pending.popleft()
                # Removals apply at once, even mid-round.
                for entry in audience:
                    if not entry.active:
                        continue
                    try:
                        entry.callback(state)
                    except Exception:
                        _logger.debug("Cart subscriber %r failed", entry.callback, exc_info=True)
        finally:
            self._pending.clear()
            self._notifying = False


class _Registration:
    """A subscriber slot; identity-based so the same callback may register twice."""

    __slots__ = ("callback", "active")

    def __init__(self, callback: Subscriber) -> None:
        self.callback = callback
        self.active = True
