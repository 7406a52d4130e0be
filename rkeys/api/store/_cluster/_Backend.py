"""Cluster store backend using redis-py's RedisCluster."""

from redis.cluster import ClusterNode, RedisCluster
from redis.exceptions import RedisClusterException, RedisError

from .._AbstractBackend import _AbstractBackend
from .._pipelined_get import _pipelined_get
from ..StoreConfig import StoreConfig
from ..StoreConnectionError import StoreConnectionError
from ._Data import _Data


class _Backend(_AbstractBackend):
    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _Data):
            raise ValueError("Cluster config data is required")
        self.url = store_config.data.url
        self.socket_timeout = store_config.data.socket_timeout
        self._client: RedisCluster | None = None

    def __enter__(self):
        try:
            # Slot table is loaded while constructing the client
            self._client = RedisCluster.from_url(
                self.url,
                decode_responses=True,
                encoding_errors="surrogateescape",
                socket_timeout=self.socket_timeout,
            )
        except (RedisError, RedisClusterException) as e:
            raise StoreConnectionError(self.url, str(e)) from e
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client is not None:
            self._client.close()
            self._client = None
        return False

    def is_clustered(self) -> bool:
        return True

    def primaries(self) -> list[ClusterNode]:
        return sorted(self._client.get_primaries(), key=lambda node: node.name)  # type: ignore[union-attr]

    def scan_node(self, node: ClusterNode, cursor: int, match: str, count: int) -> tuple[int, list[str]]:
        connection = self._client.get_redis_connection(node)  # type: ignore[union-attr]
        return connection.scan(cursor=cursor, match=match, count=count)

    def multi_get(self, keys: list[str]) -> list[str | None]:
        pipeline = self._client.pipeline()  # type: ignore[union-attr]
        return _pipelined_get(pipeline, keys)

    def delete(self, keys: list[str]) -> int:
        if not keys:
            return 0
        # RedisCluster splits a multi-key DEL per slot
        return self._client.delete(*keys)  # type: ignore[union-attr]
