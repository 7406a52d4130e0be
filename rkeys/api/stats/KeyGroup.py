"""One group of a stats report."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyGroup:
    label: str
    count: int
