"""Frequency-ranked key groups."""

from dataclasses import dataclass, field

from .KeyGroup import KeyGroup


@dataclass(frozen=True)
class StatsReport:
    """Groups by descending count plus the number of keys lacking the prefix.

    Group labels are stored without the prefix; ``display_label`` puts it back.
    """

    prefix: str
    delimiter: str
    groups: list[KeyGroup] = field(default_factory=list)
    unmatched: int = 0

    @property
    def total(self) -> int:
        return sum(group.count for group in self.groups) + self.unmatched

    def display_label(self, group: KeyGroup) -> str:
        return f"{self.prefix}{group.label}"

    def rows(self) -> list[dict[str, int | str]]:
        return [{"label": self.display_label(group), "count": group.count} for group in self.groups]
