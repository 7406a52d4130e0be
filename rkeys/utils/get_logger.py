import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``rkeys`` hierarchy.

    Handlers are installed by ``configure_logging`` at the CLI entry point;
    library use without it falls back to the caller's logging setup.
    """
    return logging.getLogger(f"rkeys.{name}")
