"""pycart - Reducer-driven shopping cart state with scoped distribution."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycart")
except PackageNotFoundError:
    __version__ = "0+local"
from pycart.channel import CartChannel, CartSnapshot, cart_channel, provide_cart, use_cart, use_cart_store
from pycart.config import CartConfig
from pycart.exceptions import (
    CartConfigError,
    CartError,
    ItemNotFoundError,
    NoProviderBoundError,
    UnknownProductError,
    UnsupportedActionError,
)
from pycart.models import CartItem, CartState, InMemoryCatalog, Product, ProductCatalog
from pycart.state import (
    Action,
    ActionType,
    AddItem,
    CartStore,
    UpdateQuantity,
    parse_action,
    reduce,
)

__all__ = [
    "__version__",
    "Action",
    "ActionType",
    "AddItem",
    "CartChannel",
    "CartConfig",
    "CartConfigError",
    "CartError",
    "CartItem",
    "CartSnapshot",
    "CartState",
    "CartStore",
    "InMemoryCatalog",
    "ItemNotFoundError",
    "NoProviderBoundError",
    "Product",
    "ProductCatalog",
    "UnknownProductError",
    "UnsupportedActionError",
    "UpdateQuantity",
    "cart_channel",
    "parse_action",
    "provide_cart",
    "reduce",
    "use_cart",
    "use_cart_store",
]
