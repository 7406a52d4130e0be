"""Scan a single-node store with one cursor chain."""

from typing import Any

from ..store.Store import Store
from ._ScanStrategy import _ScanStrategy
from .ScanRequest import ScanRequest


class _SingleNodeStrategy(_ScanStrategy):
    def __init__(self, store: Store):
        self._store = store

    def targets(self) -> list[Any]:
        return [None]

    def scan_page(self, target: Any, cursor: int, request: ScanRequest) -> tuple[int, list[str]]:
        return self._store.scan(cursor, request.pattern, request.page_size_hint)

    def describe(self, target: Any) -> str:
        return self._store.store_config.url
