"""Abstract base class for store backend implementations."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractBackend(ABC):
    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    @abstractmethod
    def is_clustered(self) -> bool:
        pass

    @abstractmethod
    def multi_get(self, keys: list[str]) -> list[str | None]:
        """Read string values for ``keys`` in one pipelined round trip.

        Returns:
            One entry per key, in key order; None for an absent key or a key
            holding a non-string type
        """
        pass

    @abstractmethod
    def delete(self, keys: list[str]) -> int:
        """Delete ``keys``.

        Returns:
            Number of keys actually removed
        """
        pass

    def scan(self, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        """One SCAN page against a single-node store."""
        raise NotImplementedError(f"{type(self).__name__} does not support single-node scans")

    def primaries(self) -> list[Any]:
        """Primary nodes of a clustered store, one per shard."""
        raise NotImplementedError(f"{type(self).__name__} is not clustered")

    def scan_node(self, node: Any, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        """One SCAN page against one cluster node."""
        raise NotImplementedError(f"{type(self).__name__} is not clustered")
