"""Key group statistics command."""

from collections.abc import Iterator

from ...utils.get_logger import get_logger
from ..StageResult import StageResult
from . import KeysStatsOutput
from ._FATAL_ERRORS import _FATAL_ERRORS
from ._scan_keys import _scan_keys

logger = get_logger("keys.cmd_stats")


def cmd_stats(
    pattern: str = "*",
    delimiter: str = ":",
    prefix: str = "",
    url: str | None = None,
    cluster: bool = False,
) -> StageResult:
    """Count matched keys per group, the segment after ``prefix`` up to ``delimiter``.

    Returns:
        StageResult with groups ranked by descending count
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.RKeysConfig import RKeysConfig
        from ..stats.compute_stats import compute_stats
        from ..store.Store import Store

        try:
            if not delimiter:
                raise ValueError("delimiter must not be empty")

            yield (0.2, "Loading configuration...")
            config = RKeysConfig.load(url=url, cluster=cluster)

            yield (0.4, f"Scanning {config.store.url} for {pattern!r}...")
            with Store(config.store) as store:
                keys = _scan_keys(store, pattern)

            yield (0.8, f"Grouping {len(keys)} key(s)...")
            report = compute_stats(keys, delimiter=delimiter, prefix=prefix)
        except _FATAL_ERRORS as e:
            logger.error(f"keys stats {pattern!r} failed: {e}")
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = KeysStatsOutput(
                errors=[str(e)],
                warnings=[],
                pattern=pattern,
                delimiter=delimiter,
                prefix=prefix,
                total=0,
                unmatched=0,
                groups=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = []
        if report.unmatched:
            warnings.append(f"{report.unmatched} key(s) did not start with {prefix!r}")
        result_obj.result = f"Grouped {report.total} key(s) into {len(report.groups)} group(s)"
        result_obj.output = KeysStatsOutput(
            errors=[],
            warnings=warnings,
            pattern=pattern,
            delimiter=delimiter,
            prefix=prefix,
            total=report.total,
            unmatched=report.unmatched,
            groups=report.rows(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Computing key statistics for {pattern!r}...",
        progress_callback=do_work,
    )
