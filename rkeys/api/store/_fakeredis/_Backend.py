"""In-memory store backend using fakeredis."""

import fakeredis

from .._redis._Backend import _Backend as _RedisBackend
from ..StoreConfig import StoreConfig
from ._client import _get_fakeredis_server
from ._Data import _Data


class _Backend(_RedisBackend):
    """Single-node backend whose connections all share one in-memory server."""

    def __init__(self, store_config: StoreConfig):
        if not isinstance(store_config.data, _Data):
            raise ValueError("FakeRedis config data is required")
        self.url = store_config.data.url
        self.socket_timeout = None
        self._client = None

    def _connect(self) -> fakeredis.FakeRedis:
        return fakeredis.FakeRedis(
            server=_get_fakeredis_server(),
            decode_responses=True,
            encoding_errors="surrogateescape",
        )
