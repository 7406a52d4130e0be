"""Scan dispatch: what to scan and how to fetch one page of it."""

from abc import ABC, abstractmethod
from typing import Any

from .ScanRequest import ScanRequest


class _ScanStrategy(ABC):
    @abstractmethod
    def targets(self) -> list[Any]:
        """Scan targets in the order they are walked, one cursor chain each."""
        pass

    @abstractmethod
    def scan_page(self, target: Any, cursor: int, request: ScanRequest) -> tuple[int, list[str]]:
        pass

    def describe(self, target: Any) -> str:
        return str(target)
