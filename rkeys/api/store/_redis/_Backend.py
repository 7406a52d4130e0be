"""Single-node store backend using redis-py."""

import redis
from redis.exceptions import RedisError

from .._AbstractBackend import _AbstractBackend
from .._pipelined_get import _pipelined_get
from ..StoreConfig import StoreConfig
from ..StoreConnectionError import StoreConnectionError
from ._Data import _Data


class _Backend(_AbstractBackend):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _Data):
            raise ValueError("Redis config data is required")
        self.url = store_config.data.url
        self.socket_timeout = store_config.data.socket_timeout
        self._client: redis.Redis | None = None

    def _connect(self) -> redis.Redis:
        return redis.Redis.from_url(
            self.url,
            decode_responses=True,
            encoding_errors="surrogateescape",
            socket_timeout=self.socket_timeout,
        )

    def __enter__(self):
        self._client = self._connect()
        try:
            self._client.ping()
        except RedisError as e:
            self._client.close()
            self._client = None
            raise StoreConnectionError(self.url, str(e)) from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client is not None:
            self._client.close()
            self._client = None
        return False

    def is_clustered(self) -> bool:
        return False

    def scan(self, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        return self._client.scan(cursor=cursor, match=match, count=count)  # type: ignore[union-attr]

    def multi_get(self, keys: list[str]) -> list[str | None]:
        pipeline = self._client.pipeline(transaction=False)  # type: ignore[union-attr]
        return _pipelined_get(pipeline, keys)

    def delete(self, keys: list[str]) -> int:
        if not keys:
            return 0
        return self._client.delete(*keys)  # type: ignore[union-attr]
