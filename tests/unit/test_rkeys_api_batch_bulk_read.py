"""Unit tests for rkeys.api.batch.bulk_read module."""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from rkeys.api.batch.BatchOperationError import BatchOperationError
from rkeys.api.batch.bulk_read import bulk_read
from rkeys.api.store.Store import Store
from rkeys.api.store.StoreConfig import StoreConfig

pytestmark = pytest.mark.batch


class TestBulkRead:
    def test_one_round_trip_per_chunk(self, mock_store):
        keys = [f"k{i}" for i in range(2001)]

        pairs = list(bulk_read(mock_store, keys))

        assert [len(c.args[0]) for c in mock_store.multi_get.call_args_list] == [1000, 1000, 1]
        assert pairs[0] == ("k0", "value-of-k0")
        assert [key for key, _ in pairs] == keys

    def test_limit_truncates_before_chunking(self, mock_store):
        keys = [f"k{i}" for i in range(1500)]

        pairs = list(bulk_read(mock_store, keys, limit=1200))

        assert len(pairs) == 1200
        assert [len(c.args[0]) for c in mock_store.multi_get.call_args_list] == [1000, 200]

    def test_limit_larger_than_list(self, mock_store):
        assert len(list(bulk_read(mock_store, ["a", "b"], limit=10))) == 2

    def test_limit_zero_reads_nothing(self, mock_store):
        assert list(bulk_read(mock_store, ["a"], limit=0)) == []
        mock_store.multi_get.assert_not_called()

    def test_negative_limit(self, mock_store):
        with pytest.raises(ValueError, match="limit must be >= 0"):
            list(bulk_read(mock_store, ["a"], limit=-1))

    def test_lazy(self, mock_store):
        reader = bulk_read(mock_store, [f"k{i}" for i in range(3000)])
        next(reader)
        assert mock_store.multi_get.call_count == 1

    def test_failure_aborts_remaining_chunks(self, mock_store):
        calls = []

        def multi_get(keys):
            calls.append(keys)
            if len(calls) == 2:
                raise RedisConnectionError("Connection reset by peer")
            return ["v"] * len(keys)

        mock_store.multi_get.side_effect = multi_get
        pairs = []
        with pytest.raises(BatchOperationError, match="chunk 2") as exc_info:
            for pair in bulk_read(mock_store, [f"k{i}" for i in range(3000)]):
                pairs.append(pair)

        assert exc_info.value.chunk_index == 1
        assert exc_info.value.operation == "read"
        assert len(pairs) == 1000
        assert len(calls) == 2

    def test_missing_and_wrong_type_values_are_none(self, fake_redis):
        fake_redis.set("str", "hello")
        fake_redis.hset("hash", "f", "v")
        config = StoreConfig.model_validate({"type": "fakeredis", "data": {}})

        with Store(config) as store:
            pairs = list(bulk_read(store, ["str", "hash", "missing"]))

        assert pairs == [("str", "hello"), ("hash", None), ("missing", None)]
