"""Count keys per prefix group."""

from collections.abc import Iterable

from ...constants import OTHER_LABEL
from .KeyGroup import KeyGroup
from .StatsReport import StatsReport


def compute_stats(keys: Iterable[str], delimiter: str = ":", prefix: str = "") -> StatsReport:
    """Group ``keys`` by the segment that follows ``prefix``.

    A key not starting with ``prefix`` is unmatched. Otherwise the remainder
    up to the first ``delimiter`` is its label, or OTHER_LABEL when the
    delimiter does not occur. Groups are ranked by descending count; equal
    counts keep the order in which their label was first seen.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    counts: dict[str, int] = {}
    unmatched = 0
    for key in keys:
        if not key.startswith(prefix):
            unmatched += 1
            continue
        remainder = key[len(prefix) :]
        label, found, _ = remainder.partition(delimiter)
        if not found:
            label = OTHER_LABEL
        counts[label] = counts.get(label, 0) + 1

    # dict keeps first-seen order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return StatsReport(
        prefix=prefix,
        delimiter=delimiter,
        groups=[KeyGroup(label=label, count=count) for label, count in ranked],
        unmatched=unmatched,
    )
