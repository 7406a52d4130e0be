"""Scan every primary of a cluster, one shard after another."""

from typing import Any

from ..store.Store import Store
from ._ScanStrategy import _ScanStrategy
from .ScanRequest import ScanRequest


class _ClusterStrategy(_ScanStrategy):
    def __init__(self, store: Store):
        self._store = store

    def targets(self) -> list[Any]:
        return self._store.primaries()

    def scan_page(self, target: Any, cursor: int, request: ScanRequest) -> tuple[int, list[str]]:
        return self._store.scan_node(target, cursor, request.pattern, request.page_size_hint)

    def describe(self, target: Any) -> str:
        return getattr(target, "name", str(target))
