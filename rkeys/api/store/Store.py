"""Store public API."""

from typing import Any

from ...utils.get_logger import get_logger
from ._AbstractBackend import _AbstractBackend
from .StoreConfig import StoreConfig

logger = get_logger("store.Store")


class Store:
    """Public API for store operations.

    Use as a context manager; the backend is opened on enter and closed on
    exit. Backend errors are raised as redis-py exceptions, except failure to
    connect, which is raised as StoreConnectionError.
    """

    def __init__(self, store_config: StoreConfig):
        self.store_config = store_config
        self._impl: _AbstractBackend | None = None

    def __enter__(self):
        backend_type = self.store_config.type

        from .StoreConfig import _BACKEND_REGISTRY

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = __import__(f"rkeys.api.store._{backend_type}._Backend", fromlist=[""])
        impl_class = module._Backend
        impl = impl_class(self.store_config)
        impl.__enter__()
        self._impl = impl
        logger.debug(f"Opened {backend_type} store at {self.store_config.url}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl:
            result = self._impl.__exit__(exc_type, exc_val, exc_tb)
            self._impl = None
            return result
        return False

    def _backend(self) -> _AbstractBackend:
        if self._impl is None:
            raise RuntimeError("Store not opened. Use as context manager first.")
        return self._impl

    def is_clustered(self) -> bool:
        return self._backend().is_clustered()

    def scan(self, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        return self._backend().scan(cursor, match, count)

    def primaries(self) -> list[Any]:
        return self._backend().primaries()

    def scan_node(self, node: Any, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        return self._backend().scan_node(node, cursor, match, count)

    def multi_get(self, keys: list[str]) -> list[str | None]:
        return self._backend().multi_get(keys)

    def delete(self, keys: list[str]) -> int:
        return self._backend().delete(keys)
