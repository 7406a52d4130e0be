"""Collect every key matching a pattern."""

from ..scan.collect_keys import collect_keys
from ..scan.CursorScanner import CursorScanner
from ..scan.ScanRequest import ScanRequest
from ..store.Store import Store


def _scan_keys(store: Store, pattern: str, sort: bool = False, reverse: bool = False) -> list[str]:
    scanner = CursorScanner.for_store(store, ScanRequest(pattern))
    return collect_keys(scanner, sort=sort, reverse=reverse)
