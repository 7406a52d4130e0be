"""Get rkeys home directory path or path under it."""

import os
from pathlib import Path

from ..constants import RKEYS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get rkeys home directory path or path under it.

    Checks the RKEYS_HOME environment variable first, defaults to ~/.rkeys.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.rkeys")
        >>> get_home_dir("config.json")
        Path("/Users/user/.rkeys/config.json")
    """
    home_env = os.environ.get("RKEYS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / RKEYS_HOME_EXT

    return home / Path(*parts) if parts else home
