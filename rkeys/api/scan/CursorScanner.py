"""Cursor-following iterator over the key batches of one scan."""

from dataclasses import dataclass
from typing import Any

from redis.exceptions import RedisClusterException, RedisError

from ...utils.get_logger import get_logger
from ..store.Store import Store
from ._ClusterStrategy import _ClusterStrategy
from ._ScanStrategy import _ScanStrategy
from ._SingleNodeStrategy import _SingleNodeStrategy
from .ScanError import ScanError
from .ScanRequest import ScanRequest

logger = get_logger("scan.CursorScanner")

# SCAN starts from and finishes on cursor 0
_INITIAL_CURSOR = 0


@dataclass(frozen=True)
class _Pending:
    target_index: int
    cursor: int


@dataclass(frozen=True)
class _Done:
    pass


_DONE = _Done()


class CursorScanner:
    """Iterator yielding one KeyBatch (list of keys) per SCAN page.

    Targets are walked in order and each target's cursor chain is followed to
    completion before the next one starts. The scanner is finished once the
    last target returns the initial cursor. Pages may be empty; keys are not
    deduplicated. A failed page raises ScanError and ends the scan for good.

    Not restartable: create a new scanner to scan again.
    """

    def __init__(self, strategy: _ScanStrategy, request: ScanRequest):
        self._strategy = strategy
        self._request = request
        self._targets: list[Any] | None = None
        self._state: _Pending | _Done = _Pending(0, _INITIAL_CURSOR)

    @classmethod
    def for_store(cls, store: Store, request: ScanRequest) -> "CursorScanner":
        """Pick the scan strategy matching the store's topology."""
        strategy: _ScanStrategy = _ClusterStrategy(store) if store.is_clustered() else _SingleNodeStrategy(store)
        return cls(strategy, request)

    @property
    def done(self) -> bool:
        return isinstance(self._state, _Done)

    def __iter__(self) -> "CursorScanner":
        return self

    def __next__(self) -> list[str]:
        state = self._state
        if isinstance(state, _Done):
            raise StopIteration

        targets = self._resolve_targets()
        if state.target_index >= len(targets):
            self._state = _DONE
            raise StopIteration

        target = targets[state.target_index]
        if state.cursor == _INITIAL_CURSOR:
            logger.debug(f"Scanning {self._strategy.describe(target)} for {self._request.pattern!r}")

        try:
            cursor, keys = self._strategy.scan_page(target, state.cursor, self._request)
        except (RedisError, RedisClusterException) as e:
            self._state = _DONE
            node = self._strategy.describe(target)
            logger.error(f"Scan of {self._request.pattern!r} failed on {node}: {e}")
            raise ScanError(self._request.pattern, node, str(e)) from e

        cursor = int(cursor)
        if cursor == _INITIAL_CURSOR:
            logger.debug(f"Finished scanning {self._strategy.describe(target)}")
            next_index = state.target_index + 1
            self._state = _Pending(next_index, _INITIAL_CURSOR) if next_index < len(targets) else _DONE
        else:
            self._state = _Pending(state.target_index, cursor)
        return list(keys)

    def _resolve_targets(self) -> list[Any]:
        if self._targets is None:
            try:
                self._targets = list(self._strategy.targets())
            except (RedisError, RedisClusterException) as e:
                self._state = _DONE
                logger.error(f"Couldn't discover scan targets: {e}")
                raise ScanError(self._request.pattern, "cluster", str(e)) from e
        return self._targets
