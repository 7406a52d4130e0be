"""Redis Cluster configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....constants import DEFAULT_URL


class _Data(BaseModel):
    """Cluster configuration data.

    ``url`` names any one node of the cluster; the rest of the topology is
    discovered from it.
    """

    model_config = ConfigDict(extra="forbid")

    url: str = Field(DEFAULT_URL, description="Connection URL of any cluster node")
    socket_timeout: float = Field(30.0, gt=0, description="Socket timeout in seconds")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("redis://", "rediss://")):
            raise ValueError(f"store.data.url must be a redis:// or rediss:// URL for a cluster, got {v!r}")
        return v
