"""Utility helpers shared across rkeys."""

from .configure_logging import configure_logging
from .get_home_dir import get_home_dir
from .get_logger import get_logger
from .get_package_version import get_package_version

__all__ = [
    "configure_logging",
    "get_home_dir",
    "get_logger",
    "get_package_version",
]
