"""Configure the rkeys log file."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified rkeys logging.

    Args:
        home: rkeys home directory. If None, derived from environment.
        level: Logging level name for the ``rkeys`` logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "rkeys.log"

    root_logger = logging.getLogger("rkeys")
    root_logger.setLevel(getattr(logging, level))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # redis-py logs every cluster redirect at DEBUG
    logging.getLogger("redis").setLevel(logging.WARNING)

    _CONFIGURED = True
