"""Configuration API module."""

from .LogConfig import LogConfig
from .RKeysConfig import RKeysConfig

__all__ = [
    "LogConfig",
    "RKeysConfig",
]
