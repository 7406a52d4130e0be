"""List keys command."""

from collections.abc import Iterator

from ...utils.get_logger import get_logger
from ..StageResult import StageResult
from . import KeysListOutput
from ._FATAL_ERRORS import _FATAL_ERRORS
from ._scan_keys import _scan_keys

logger = get_logger("keys.cmd_list")


def cmd_list(
    pattern: str,
    sort: bool = False,
    reverse: bool = False,
    url: str | None = None,
    cluster: bool = False,
) -> StageResult:
    """List keys matching a glob pattern.

    Args:
        pattern: Glob pattern (e.g., "session:*")
        sort: Sort keys by byte value
        reverse: Reverse the key order (after sorting, if both are set)
        url: Store URL overriding the config file
        cluster: Use the cluster backend

    Returns:
        StageResult with the matched keys
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        from ..config.RKeysConfig import RKeysConfig
        from ..store.Store import Store

        keys: list[str] = []
        try:
            yield (0.2, "Loading configuration...")
            config = RKeysConfig.load(url=url, cluster=cluster)

            yield (0.4, f"Scanning {config.store.url} for {pattern!r}...")
            with Store(config.store) as store:
                keys = _scan_keys(store, pattern, sort=sort, reverse=reverse)
        except _FATAL_ERRORS as e:
            logger.error(f"keys list {pattern!r} failed: {e}")
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = KeysListOutput(
                errors=[str(e)],
                warnings=[],
                pattern=pattern,
                sorted=sort,
                reversed=reverse,
                count=0,
                keys=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(keys)} key(s) matching {pattern!r}"
        result_obj.output = KeysListOutput(
            errors=[],
            warnings=[],
            pattern=pattern,
            sorted=sort,
            reversed=reverse,
            count=len(keys),
            keys=keys,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Listing keys matching {pattern!r}...",
        progress_callback=do_work,
    )
