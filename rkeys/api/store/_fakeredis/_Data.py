"""In-memory store configuration data for testing."""

from pydantic import BaseModel, ConfigDict, Field

from ....constants import DEFAULT_URL


class _Data(BaseModel):
    """FakeRedis configuration data.

    Note: fakeredis needs no server; ``url`` is accepted so ``--url`` can be
    applied uniformly and is otherwise ignored.
    """

    model_config = ConfigDict(extra="forbid")

    url: str = Field(DEFAULT_URL, description="Ignored by the in-memory backend")
