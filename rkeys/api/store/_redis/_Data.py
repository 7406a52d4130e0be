"""Single-node Redis configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....constants import DEFAULT_URL


class _Data(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url: str = Field(DEFAULT_URL, description="Connection URL, e.g. redis://localhost:6379/0")
    socket_timeout: float = Field(30.0, gt=0, description="Socket timeout in seconds")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("redis://", "rediss://", "unix://")):
            raise ValueError(f"store.data.url must be a redis://, rediss:// or unix:// URL, got {v!r}")
        return v
