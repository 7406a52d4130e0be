"""Unit tests for rkeys.api.scan.CursorScanner module."""

from typing import Any

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from rkeys.api.scan._ClusterStrategy import _ClusterStrategy
from rkeys.api.scan._ScanStrategy import _ScanStrategy
from rkeys.api.scan._SingleNodeStrategy import _SingleNodeStrategy
from rkeys.api.scan.CursorScanner import CursorScanner
from rkeys.api.scan.ScanError import ScanError
from rkeys.api.scan.ScanRequest import ScanRequest
from rkeys.api.store.Store import Store
from rkeys.api.store.StoreConfig import StoreConfig
from tests.unit.conftest import make_store

pytestmark = pytest.mark.scan


class _ScriptedStrategy(_ScanStrategy):
    """Serves pre-recorded pages: ``pages[target]`` maps cursor -> (next_cursor, keys)."""

    def __init__(self, pages: dict[str, dict[int, Any]]):
        self.pages = pages
        self.calls: list[tuple[str, int]] = []

    def targets(self) -> list[Any]:
        return list(self.pages)

    def scan_page(self, target: Any, cursor: int, request: ScanRequest) -> tuple[int, list[str]]:
        self.calls.append((target, cursor))
        page = self.pages[target][cursor]
        if isinstance(page, Exception):
            raise page
        return page


class TestScanRequest:
    def test_default_page_size(self):
        assert ScanRequest("*").page_size_hint == 10_000

    @pytest.mark.parametrize("hint", [0, -1])
    def test_page_size_must_be_positive(self, hint):
        with pytest.raises(ValueError, match="page_size_hint must be > 0"):
            ScanRequest("*", hint)


class TestCursorScanner:
    def test_follows_single_cursor_chain(self):
        strategy = _ScriptedStrategy({"n1": {0: (5, ["a", "b"]), 5: (9, []), 9: (0, ["c"])}})
        scanner = CursorScanner(strategy, ScanRequest("*"))

        assert list(scanner) == [["a", "b"], [], ["c"]]
        assert strategy.calls == [("n1", 0), ("n1", 5), ("n1", 9)]
        assert scanner.done

    def test_walks_targets_sequentially(self):
        strategy = _ScriptedStrategy(
            {
                "n1": {0: (3, ["a"]), 3: (0, ["b"])},
                "n2": {0: (0, [])},
                "n3": {0: (4, ["c"]), 4: (0, ["d"])},
            }
        )
        batches = list(CursorScanner(strategy, ScanRequest("*")))

        assert batches == [["a"], ["b"], [], ["c"], ["d"]]
        assert strategy.calls == [("n1", 0), ("n1", 3), ("n2", 0), ("n3", 0), ("n3", 4)]

    def test_no_targets_is_empty_scan(self):
        scanner = CursorScanner(_ScriptedStrategy({}), ScanRequest("*"))
        assert list(scanner) == []
        assert scanner.done

    def test_keeps_duplicates(self):
        strategy = _ScriptedStrategy({"n1": {0: (1, ["a", "b"]), 1: (0, ["b"])}})
        assert [key for batch in CursorScanner(strategy, ScanRequest("*")) for key in batch] == ["a", "b", "b"]

    def test_not_restartable(self):
        strategy = _ScriptedStrategy({"n1": {0: (0, ["a"])}})
        scanner = CursorScanner(strategy, ScanRequest("*"))
        assert list(scanner) == [["a"]]
        assert list(scanner) == []
        assert len(strategy.calls) == 1

    def test_string_cursor_is_normalized(self):
        strategy = _ScriptedStrategy({"n1": {0: ("7", ["a"]), 7: ("0", ["b"])}})
        assert list(CursorScanner(strategy, ScanRequest("*"))) == [["a"], ["b"]]

    def test_page_failure_raises_scan_error_and_ends_scan(self):
        strategy = _ScriptedStrategy({"n1": {0: (2, ["a"]), 2: RedisTimeoutError("Timeout reading from socket")}})
        scanner = CursorScanner(strategy, ScanRequest("user:*"))

        assert next(scanner) == ["a"]
        with pytest.raises(ScanError, match="Timeout reading from socket") as exc_info:
            next(scanner)

        assert exc_info.value.pattern == "user:*"
        assert exc_info.value.node == "n1"
        assert scanner.done
        with pytest.raises(StopIteration):
            next(scanner)

    def test_target_discovery_failure_raises_scan_error(self):
        class _Broken(_ScriptedStrategy):
            def targets(self):
                raise RedisConnectionError("Cluster is down")

        scanner = CursorScanner(_Broken({}), ScanRequest("*"))
        with pytest.raises(ScanError, match="Cluster is down"):
            next(scanner)
        assert scanner.done


class TestStrategyDispatch:
    def test_single_node_store(self):
        store = make_store(clustered=False)
        store.scan.side_effect = [(4, ["a"]), (0, ["b"])]

        scanner = CursorScanner.for_store(store, ScanRequest("k:*", 100))

        assert isinstance(scanner._strategy, _SingleNodeStrategy)
        assert list(scanner) == [["a"], ["b"]]
        assert [c.args for c in store.scan.call_args_list] == [(0, "k:*", 100), (4, "k:*", 100)]
        store.scan_node.assert_not_called()

    def test_cluster_store_scans_every_primary(self):
        store = make_store(clustered=True)
        store.primaries.return_value = ["p1", "p2"]
        pages = {("p1", 0): (8, ["a"]), ("p1", 8): (0, ["b"]), ("p2", 0): (0, ["c"])}
        store.scan_node.side_effect = lambda node, cursor, match, count: pages[(node, cursor)]

        scanner = CursorScanner.for_store(store, ScanRequest("*", 10))

        assert isinstance(scanner._strategy, _ClusterStrategy)
        assert list(scanner) == [["a"], ["b"], ["c"]]
        store.scan.assert_not_called()

    def test_is_clustered_checked_once(self):
        store = make_store(clustered=False)
        store.scan.side_effect = [(3, []), (0, ["a"])]
        list(CursorScanner.for_store(store, ScanRequest("*")))
        store.is_clustered.assert_called_once()


class TestAgainstFakeredis:
    def test_scans_all_matching_keys(self, fake_redis):
        for i in range(57):
            fake_redis.set(f"session:{i}", "x")
        fake_redis.set("other", "y")

        config = StoreConfig.model_validate({"type": "fakeredis", "data": {}})
        with Store(config) as store:
            batches = list(CursorScanner.for_store(store, ScanRequest("session:*", 10)))

        assert len(batches) > 1
        assert sorted(key for batch in batches for key in batch) == sorted(f"session:{i}" for i in range(57))
