"""Scan API module."""

from .collect_keys import collect_keys
from .CursorScanner import CursorScanner
from .ScanError import ScanError
from .ScanRequest import ScanRequest

__all__ = [
    "CursorScanner",
    "ScanError",
    "ScanRequest",
    "collect_keys",
]
