"""Progress event emitted by bulk_delete."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeleteProgress:
    """State after one delete chunk (or after the single dry-run report).

    ``processed`` counts keys sent for deletion so far; ``deleted`` counts
    keys the store actually removed, which is lower when other writers got
    there first.
    """

    processed: int
    total: int
    deleted: int
    chunk_index: int
    chunk_count: int
    dry_run: bool

    @property
    def fraction(self) -> float:
        return self.processed / self.total if self.total else 1.0
