"""Top-level rkeys configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DEFAULT_URL
from ...utils.get_home_dir import get_home_dir
from ..store.StoreConfig import StoreConfig
from .LogConfig import LogConfig


def _default_store() -> StoreConfig:
    return StoreConfig.model_validate({"type": "redis", "data": {"url": DEFAULT_URL}})


class RKeysConfig(BaseModel):
    """Top-level configuration for rkeys."""

    model_config = ConfigDict(extra="forbid")

    store: StoreConfig = Field(default_factory=_default_store)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on RKEYS_HOME or default to ~/.rkeys."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, url: str | None = None, cluster: bool = False) -> "RKeysConfig":
        """Load and validate config, then apply command-line overrides.

        A missing config file is not an error: every section has a default,
        so ``rkeys --url ...`` works without one.

        Args:
            url: Store URL overriding ``store.data.url``
            cluster: Switch to the cluster backend

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            config = cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

        config.store = config.store.with_overrides(url=url, cluster=cluster)
        return config
