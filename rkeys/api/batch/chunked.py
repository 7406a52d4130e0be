"""Split a key list into fixed-size chunks."""

from collections.abc import Iterator, Sequence

from ...constants import CHUNK_SIZE


def chunked(keys: Sequence[str], size: int = CHUNK_SIZE) -> Iterator[list[str]]:
    """Yield consecutive slices of ``keys`` holding ``size`` keys; the last may be shorter."""
    if size <= 0:
        raise ValueError(f"chunk size must be > 0, got {size}")
    for start in range(0, len(keys), size):
        yield list(keys[start : start + size])


def chunk_count(length: int, size: int = CHUNK_SIZE) -> int:
    """Number of chunks ``chunked`` yields for a list of ``length`` keys."""
    return -(-length // size)
