"""Throttled chunked deletes over a key list."""

import time
from collections.abc import Iterator, Sequence

from redis.exceptions import RedisClusterException, RedisError

from ...constants import DELETE_COOLDOWN_SECS
from ...utils.get_logger import get_logger
from ..store.Store import Store
from .BatchOperationError import BatchOperationError
from .chunked import chunk_count, chunked
from .DeleteProgress import DeleteProgress

logger = get_logger("batch.bulk_delete")


def bulk_delete(
    store: Store,
    keys: Sequence[str],
    dry_run: bool = True,
    cooldown_secs: float = DELETE_COOLDOWN_SECS,
) -> Iterator[DeleteProgress]:
    """Delete ``keys`` chunk by chunk, yielding a DeleteProgress after each chunk.

    A dry run touches nothing and yields one event covering every key. A live
    run issues one DEL per chunk and sleeps ``cooldown_secs`` between chunks
    (not after the last). The last event carries the final deleted count.

    Raises:
        BatchOperationError: A chunk failed; earlier chunks stay deleted
    """
    total = len(keys)
    chunks = chunk_count(total)

    if dry_run:
        logger.info(f"Dry run: {total} key(s) would be deleted")
        yield DeleteProgress(processed=total, total=total, deleted=0, chunk_index=0, chunk_count=chunks, dry_run=True)
        return

    processed = 0
    deleted = 0
    for index, chunk in enumerate(chunked(keys)):
        if index > 0:
            time.sleep(cooldown_secs)
        try:
            removed = store.delete(chunk)
        except (RedisError, RedisClusterException) as e:
            logger.error(f"Delete of chunk {index + 1}/{chunks} failed after {deleted} deletion(s): {e}")
            raise BatchOperationError("delete", index, str(e)) from e
        processed += len(chunk)
        deleted += removed
        logger.info(f"Deleted chunk {index + 1}/{chunks}: {removed}/{len(chunk)} key(s) removed")
        yield DeleteProgress(
            processed=processed,
            total=total,
            deleted=deleted,
            chunk_index=index,
            chunk_count=chunks,
            dry_run=False,
        )
