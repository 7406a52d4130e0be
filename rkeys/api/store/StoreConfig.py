"""Store configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._cluster._Data import _Data as _ClusterData
from ._fakeredis._Data import _Data as _FakeredisData
from ._redis._Data import _Data as _RedisData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "redis": _RedisData,
    "cluster": _ClusterData,
    "fakeredis": _FakeredisData,
}


class StoreConfig(BaseModel):
    type: str = Field(..., description="Store backend type")
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"store config must be a dict, got {type(values).__name__}")
        store_type = values.get("type")
        if not store_type:
            raise ValueError("store.type is required")
        config_data_class = _BACKEND_REGISTRY.get(store_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {store_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            data = {}
        if isinstance(data, BaseModel):
            data = data.model_dump()
        values = dict(values)
        values["data"] = config_data_class(**data)
        return values

    @property
    def url(self) -> str:
        return self.data.url  # type: ignore[attr-defined]

    def with_overrides(self, url: str | None = None, cluster: bool = False) -> "StoreConfig":
        """Return a copy with command-line overrides applied.

        ``cluster`` switches a single-node config to the cluster backend; it
        never downgrades a config file that already names a cluster.
        """
        if url is None and not cluster:
            return self
        data = self.data.model_dump()
        if url is not None:
            data["url"] = url
        store_type = "cluster" if cluster else self.type
        return StoreConfig.model_validate({"type": store_type, "data": data})
