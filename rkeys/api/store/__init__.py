"""Store API module."""

from .Store import Store
from .StoreConfig import StoreConfig
from .StoreConnectionError import StoreConnectionError

__all__ = [
    "Store",
    "StoreConfig",
    "StoreConnectionError",
]
