"""Core infrastructure: error taxonomy, Result type and error handling helpers."""
from __future__ import annotations

from .exceptions import (
    TailspinError,
    ConfigurationError,
    MissingEnvironmentError,
    ConfigIOError,
    ConfigSchemaError,
    ConfigConflictError,
)
from .result import Result, Success, Failure

__all__ = [
    "TailspinError",
    "ConfigurationError",
    "MissingEnvironmentError",
    "ConfigIOError",
    "ConfigSchemaError",
    "ConfigConflictError",
    "Result",
    "Success",
    "Failure",
]
