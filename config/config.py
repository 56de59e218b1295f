"""Configuration resolution: locate, read and validate ``config.toml``.

Sources are tried in strict precedence order:
1. An explicit path given by the caller
2. ``~/.config/tailspin/config.toml`` if it exists
3. The default template bundled with the package

The first source found is the only one read; sources are never merged. Every
failure raises a ConfigurationError subclass, so a broken file never turns into
a partially-populated Config.
"""
from __future__ import annotations

import functools
import tomllib
from pathlib import Path
from typing import Mapping, Optional, Union

from loguru import logger

from config.model import Config
from config.paths import conventional_config_path, display_path, home_dir
from core.error_handler import as_result
from core.exceptions import ConfigIOError, ConfigSchemaError, ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default_config.toml")
DEFAULT_CONFIG_SOURCE = "<default config>"

PathLike = Union[str, Path]


@functools.lru_cache(maxsize=1)
def default_config_text() -> str:
    """Return the bundled default template exactly as shipped."""
    try:
        with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as e:
        raise ConfigIOError(f"Could not read default config {DEFAULT_CONFIG_PATH}: {e}", DEFAULT_CONFIG_PATH) from e


def parse_config(text: str, source: str) -> Config:
    """Parse TOML text into a Config.

    Args:
        text: Raw TOML document
        source: Label used in error messages (file path or default marker)

    Raises:
        ConfigSchemaError: On TOML syntax errors or schema violations
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigSchemaError(str(e), source=source) from e
    try:
        return Config.from_dict(data)
    except ConfigSchemaError as e:
        raise e.with_source(source) from None


class ConfigLoader:
    """Resolves which configuration source to use and loads it.

    Attributes:
        environ: Environment used to find the home directory (os.environ by default)
        default_template: Text used when no file is found (bundled template by default)
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        default_template: Optional[str] = None,
    ):
        self.environ = environ
        self._default_template = default_template

    @property
    def default_template(self) -> str:
        if self._default_template is None:
            return default_config_text()
        return self._default_template

    def locate(self, explicit_path: Optional[PathLike] = None) -> Optional[Path]:
        """Decide which file to read.

        Returns:
            The file to read, or None when the default template should be used

        Raises:
            MissingEnvironmentError: If HOME is unset, even with an explicit path
            ConfigIOError: If the conventional path cannot be checked
        """
        home = home_dir(self.environ)
        if explicit_path is not None:
            return Path(explicit_path)

        candidate = conventional_config_path(home)
        try:
            candidate.stat()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ConfigIOError(
                f"Failed to check if file {display_path(candidate, home)} exists: {e}", candidate
            ) from e
        return candidate

    def load(self, explicit_path: Optional[PathLike] = None) -> Config:
        """Load the configuration with precedence: explicit → conventional → default.

        Args:
            explicit_path: Optional path given by the user

        Returns:
            Validated Config instance

        Raises:
            ConfigurationError: If any step fails
        """
        path = self.locate(explicit_path)
        if path is None:
            logger.debug("No config file found, using the default config")
            return parse_config(self.default_template, DEFAULT_CONFIG_SOURCE)

        logger.debug("Loading config from {}", path)
        return parse_config(self._read(path), str(path))

    @staticmethod
    def _read(path: Path) -> str:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigIOError(f"Could not read file {path}: {e}", path) from e


@as_result(ConfigurationError)
def load_config(path: Optional[PathLike] = None, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Load configuration, returning failures as values.

    Convenience function for creating a ConfigLoader and loading configuration.

    Args:
        path: Optional explicit config file
        environ: Environment override, mainly for tests

    Returns:
        Success(Config) or Failure(ConfigurationError)
    """
    return ConfigLoader(environ=environ).load(path)


__all__ = [
    "ConfigLoader",
    "load_config",
    "parse_config",
    "default_config_text",
    "DEFAULT_CONFIG_PATH",
]
