"""Delete keys command."""

from collections.abc import Iterator

from ...utils.get_logger import get_logger
from ..StageResult import StageResult
from . import KeysDeleteOutput
from ._FATAL_ERRORS import _FATAL_ERRORS
from ._scan_keys import _scan_keys

logger = get_logger("keys.cmd_delete")


def cmd_delete(
    pattern: str,
    dry_run: bool = True,
    url: str | None = None,
    cluster: bool = False,
) -> StageResult:
    """Delete keys matching a glob pattern, throttled chunk by chunk.

    Nothing is deleted unless ``dry_run`` is False.

    Args:
        pattern: Glob pattern
        dry_run: Only report how many keys would be deleted
        url: Store URL overriding the config file
        cluster: Use the cluster backend

    Returns:
        StageResult with matched and deleted counts
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..batch.bulk_delete import bulk_delete
        from ..config.RKeysConfig import RKeysConfig
        from ..store.Store import Store

        matched = 0
        deleted = 0
        chunks_done = 0
        errors: list[str] = []
        try:
            yield (0.1, "Loading configuration...")
            config = RKeysConfig.load(url=url, cluster=cluster)

            yield (0.2, f"Scanning {config.store.url} for {pattern!r}...")
            with Store(config.store) as store:
                keys = _scan_keys(store, pattern)
                matched = len(keys)

                yield (0.5, "Counting keys..." if dry_run else f"Deleting {matched} key(s)...")
                for event in bulk_delete(store, keys, dry_run=dry_run):
                    deleted = event.deleted
                    if not event.dry_run:
                        chunks_done = event.chunk_index + 1
                        yield (
                            0.5 + 0.5 * event.fraction,
                            f"Chunk {chunks_done}/{event.chunk_count}: {event.processed}/{event.total} key(s) processed",
                        )
        except _FATAL_ERRORS as e:
            logger.error(f"keys delete {pattern!r} failed after {deleted} deletion(s): {e}")
            errors.append(str(e))

        yield (1.0, "Complete")
        result_obj.success = not errors
        if errors:
            result_obj.result = f"Deleted {deleted} key(s) before failing: {errors[0]}"
        elif dry_run:
            result_obj.result = f"Dry run: {matched} key(s) matching {pattern!r} would be deleted"
        else:
            result_obj.result = f"Deleted {deleted} of {matched} key(s) matching {pattern!r}"
        result_obj.output = KeysDeleteOutput(
            errors=errors,
            warnings=["Dry run: nothing was deleted"] if dry_run and not errors else [],
            pattern=pattern,
            dry_run=dry_run,
            matched_count=matched,
            deleted_count=deleted,
            chunk_count=chunks_done,
        ).model_dump(mode="python")

    return StageResult(
        announce=f"{'Checking' if dry_run else 'Deleting'} keys matching {pattern!r}...",
        progress_callback=do_work,
    )
