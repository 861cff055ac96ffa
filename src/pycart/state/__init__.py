"""State layer.

The reducer is the single place where cart transitions are defined; the
store is the single owner of the current state.
"""

from pycart.state.actions import Action, ActionType, AddItem, UpdateQuantity, parse_action
from pycart.state.reducer import reduce
from pycart.state.store import CartStore, Subscriber, Unsubscribe

__all__ = [
    "Action",
    "ActionType",
    "AddItem",
    "CartStore",
    "Subscriber",
    "Unsubscribe",
    "UpdateQuantity",
    "parse_action",
    "reduce",
]
