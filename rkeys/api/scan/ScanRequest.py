"""Immutable input to one scan."""

from dataclasses import dataclass

from ...constants import SCAN_PAGE_SIZE


@dataclass(frozen=True)
class ScanRequest:
    """Glob pattern plus the COUNT hint sent with every SCAN page."""

    pattern: str
    page_size_hint: int = SCAN_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size_hint <= 0:
            raise ValueError(f"page_size_hint must be > 0, got {self.page_size_hint}")
