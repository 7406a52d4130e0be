"""Drain a scanner into one key list."""

from collections.abc import Iterable


def _key_bytes(key: str) -> bytes:
    # Undecodable key bytes arrive as lone surrogates
    return key.encode("utf-8", "surrogateescape")


def collect_keys(scanner: Iterable[list[str]], sort: bool = False, reverse: bool = False) -> list[str]:
    """Concatenate every batch of ``scanner`` in scan order.

    Sorting happens once the whole list is known: ``sort`` orders keys by
    the bytes stored in Redis, then ``reverse`` flips the result, so both
    together give descending order. Duplicates emitted by the scan are kept.

    Scan errors propagate and the partial list is dropped.
    """
    keys: list[str] = []
    for batch in scanner:
        keys.extend(batch)
    if sort:
        keys.sort(key=_key_bytes)
    if reverse:
        keys.reverse()
    return keys
