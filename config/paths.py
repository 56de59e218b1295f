"""Conventional locations of the user configuration file."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from core.exceptions import MissingEnvironmentError

APP_NAME = "tailspin"
CONFIG_FILE_SUFFIX = Path(".config") / APP_NAME / "config.toml"


def home_env_var() -> str:
    """Name of the variable holding the user's home directory on this platform."""
    return "USERPROFILE" if os.name == "nt" else "HOME"


def home_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the user's home directory from the environment.

    Raises:
        MissingEnvironmentError: If the home variable is unset or empty
    """
    environ = os.environ if environ is None else environ
    variable = home_env_var()
    value = environ.get(variable)
    if not value:
        raise MissingEnvironmentError(variable)
    return Path(value)


def conventional_config_path(home: Path) -> Path:
    """``<home>/.config/tailspin/config.toml``"""
    return home / CONFIG_FILE_SUFFIX


def display_path(path: Path, home: Path) -> str:
    """Render ``path`` for messages, abbreviating the home prefix to ``~``."""
    try:
        relative = path.relative_to(home)
    except ValueError:
        return str(path)
    return str(Path("~") / relative)
