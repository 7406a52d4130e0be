"""Get values command."""

from collections.abc import Iterator
from typing import Any

from ...constants import CHUNK_SIZE
from ...utils.get_logger import get_logger
from ..StageResult import StageResult
from . import KeysGetOutput
from ._FATAL_ERRORS import _FATAL_ERRORS
from ._scan_keys import _scan_keys

logger = get_logger("keys.cmd_get")


def cmd_get(
    pattern: str,
    limit: int | None = None,
    url: str | None = None,
    cluster: bool = False,
) -> StageResult:
    """Read the string values of keys matching a glob pattern.

    Keys that vanished before the read, or that hold a non-string type, are
    reported with a null value and counted in ``missing``.

    Args:
        pattern: Glob pattern
        limit: Read only the first N matched keys (all if None)
        url: Store URL overriding the config file
        cluster: Use the cluster backend

    Returns:
        StageResult with {key, value} entries in scan order
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..batch.bulk_read import bulk_read
        from ..config.RKeysConfig import RKeysConfig
        from ..store.Store import Store

        values: list[dict[str, Any]] = []
        missing = 0
        errors: list[str] = []
        try:
            yield (0.1, "Loading configuration...")
            config = RKeysConfig.load(url=url, cluster=cluster)

            yield (0.2, f"Scanning {config.store.url} for {pattern!r}...")
            with Store(config.store) as store:
                keys = _scan_keys(store, pattern)
                total = len(keys) if limit is None else min(limit, len(keys))

                yield (0.5, f"Reading {total} value(s)...")
                for key, value in bulk_read(store, keys, limit=limit):
                    values.append({"key": key, "value": value})
                    if value is None:
                        missing += 1
                    if len(values) % CHUNK_SIZE == 0 and len(values) < total:
                        yield (0.5 + 0.5 * len(values) / total, f"Read {len(values)}/{total} value(s)")
        except _FATAL_ERRORS as e:
            logger.error(f"keys get {pattern!r} failed after {len(values)} value(s): {e}")
            errors.append(str(e))

        yield (1.0, "Complete")
        warnings = [f"{missing} key(s) were missing or not strings"] if missing else []
        result_obj.success = not errors
        if errors:
            result_obj.result = errors[0]
        else:
            result_obj.result = f"Read {len(values)} value(s) matching {pattern!r}"
        result_obj.output = KeysGetOutput(
            errors=errors,
            warnings=warnings,
            pattern=pattern,
            limit=limit,
            count=len(values),
            missing=missing,
            values=values,
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Reading values of keys matching {pattern!r}...",
        progress_callback=do_work,
    )
