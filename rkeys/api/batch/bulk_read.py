"""Pipelined value reads over a key list."""

from collections.abc import Iterator, Sequence

from redis.exceptions import RedisClusterException, RedisError

from ...utils.get_logger import get_logger
from ..store.Store import Store
from .BatchOperationError import BatchOperationError
from .chunked import chunked

logger = get_logger("batch.bulk_read")


def bulk_read(store: Store, keys: Sequence[str], limit: int | None = None) -> Iterator[tuple[str, str | None]]:
    """Yield ``(key, value)`` for each key, one pipelined round trip per chunk.

    ``limit`` keeps only the first N keys. ``value`` is None when the key is
    gone or holds a non-string type. A failed round trip raises
    BatchOperationError; pairs already yielded stand.
    """
    if limit is not None:
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        keys = keys[:limit]

    for index, chunk in enumerate(chunked(keys)):
        try:
            values = store.multi_get(chunk)
        except (RedisError, RedisClusterException) as e:
            logger.error(f"Read of chunk {index + 1} ({len(chunk)} keys) failed: {e}")
            raise BatchOperationError("read", index, str(e)) from e
        yield from zip(chunk, values)
