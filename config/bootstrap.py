"""Writes the bundled default template to ``~/.config/tailspin/config.toml``.

The sequence is linear and never overwrites: check → create directories →
create file → write. A failure at any step stops the sequence; directories
created before a failed write are left in place.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from loguru import logger

from config.config import default_config_text
from config.paths import conventional_config_path, display_path, home_dir
from core.error_handler import as_result
from core.exceptions import ConfigConflictError, ConfigIOError, ConfigurationError


class DefaultConfigGenerator:
    """Materializes the default template at the conventional path.

    Attributes:
        environ: Environment used to find the home directory (os.environ by default)
        template: Text to write (bundled default template by default)
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, template: Optional[str] = None):
        self.environ = environ
        self.template = template

    def generate(self) -> Path:
        """Write the template and return the path of the created file.

        Raises:
            MissingEnvironmentError: If HOME is unset
            ConfigConflictError: If a file already exists at the target
            ConfigIOError: If checking, creating directories or writing fails
        """
        home = home_dir(self.environ)
        target = conventional_config_path(home)
        shown = display_path(target, home)
        template = self.template if self.template is not None else default_config_text()
        payload = template.encode("utf-8")

        if self._exists(target, shown):
            raise ConfigConflictError(f"Config file already exists at {shown}", target)

        logger.debug("Creating directory {}", target.parent)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigIOError(f"Failed to create the directory for {shown}: {e}", target) from e

        # Exclusive create: a file that appeared after the check is still never overwritten
        try:
            f = open(target, "xb")
        except FileExistsError as e:
            raise ConfigConflictError(f"Config file already exists at {shown}", target) from e
        except OSError as e:
            raise ConfigIOError(f"Failed to create the config file at {shown}: {e}", target) from e

        with f:
            try:
                f.write(payload)
            except OSError as e:
                raise ConfigIOError(f"Failed to write to the config file at {shown}: {e}", target) from e

        logger.debug("Wrote {} bytes to {}", len(payload), target)
        return target

    @staticmethod
    def _exists(target: Path, shown: str) -> bool:
        try:
            target.stat()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise ConfigIOError(f"Failed to check if file {shown} exists: {e}", target) from e
        return True


@as_result(ConfigurationError)
def generate_default_config(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Write the default config, returning failures as values.

    Returns:
        Success(Path of the new file) or Failure(ConfigurationError)
    """
    return DefaultConfigGenerator(environ=environ).generate()


__all__ = ["DefaultConfigGenerator", "generate_default_config"]
