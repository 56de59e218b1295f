"""Helpers that move failures between exceptions, Result values and exit codes."""
from __future__ import annotations

import functools
import sys
from typing import Callable, Optional, TextIO, Tuple, Type, TypeVar

from loguru import logger

from core.exceptions import TailspinError
from core.result import Failure, Result, Success

T = TypeVar('T')


def as_result(*error_types: Type[BaseException]):
    """Decorator to convert function output to a Result.

    Return values are wrapped in Success. Exceptions of ``error_types``
    (default: TailspinError) are wrapped in Failure; anything else propagates.

    Usage:
        @as_result()
        def load(): ...

        @as_result(ConfigurationError)
        def load(): ...
    """
    caught: Tuple[Type[BaseException], ...] = error_types or (TailspinError,)

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T, BaseException]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Result[T, BaseException]:
            try:
                return Success(func(*args, **kwargs))
            except caught as e:
                logger.debug("{} failed with {} error: {}", func.__name__, getattr(e, "kind", "unknown"), e)
                return Failure(e)
        return wrapper
    return decorator


def report_failure(error: BaseException, stream: Optional[TextIO] = None) -> None:
    """Print a human-readable failure message; the log only records its kind at debug level.

    Args:
        error: The error to report
        stream: Output stream (stderr by default)
    """
    stream = sys.stderr if stream is None else stream
    print(str(error), file=stream)
    logger.debug("Reported {} error", getattr(error, "kind", "unexpected"))


def exit_on_failure(result: Result[T, BaseException], exit_code: int = 1) -> T:
    """Unwrap a Result, terminating the process if it is a Failure.

    Args:
        result: Result produced by a library call
        exit_code: Status to exit with on failure

    Returns:
        The success value

    Raises:
        SystemExit: If the result is a Failure
    """
    if isinstance(result, Failure):
        report_failure(result.error)
        sys.exit(exit_code)
    return result.unwrap()
