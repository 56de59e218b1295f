"""Custom exception hierarchy for the application."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class TailspinError(Exception):
    """Base exception for all tailspin errors."""

    kind: str = "error"


class ConfigurationError(TailspinError):
    """Raised when configuration cannot be located, loaded or written."""
    pass


class MissingEnvironmentError(ConfigurationError):
    """Raised when a required environment variable is not set."""

    kind = "environment"

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"{variable} environment variable not set")


class ConfigIOError(ConfigurationError):
    """Raised when a configuration file or directory operation fails.

    Attributes:
        path: Path the failed operation was working on
    """

    kind = "io"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)


class ConfigSchemaError(ConfigurationError):
    """Raised when configuration text is not valid TOML or violates the schema.

    Attributes:
        field: Dotted path of the offending field, None for syntax errors
        cause: Deserializer diagnostic (expected vs. found)
        source: Where the text came from (file path or embedded default)
    """

    kind = "schema"

    def __init__(self, cause: str, field: Optional[str] = None, source: Optional[str] = None):
        self.cause = cause
        self.field = field
        self.source = source
        super().__init__(self._format())

    def _format(self) -> str:
        message = f"{self.field}: {self.cause}" if self.field else self.cause
        if self.source:
            message = f"{message} (in {self.source})"
        return message

    def with_source(self, source: str) -> "ConfigSchemaError":
        """Return a copy of this error attributed to ``source``."""
        return ConfigSchemaError(self.cause, field=self.field, source=source)


class ConfigConflictError(ConfigurationError):
    """Raised when the default config would overwrite an existing file."""

    kind = "conflict"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)
