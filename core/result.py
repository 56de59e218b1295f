"""Result type for returning failures as values instead of raising."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result carrying the error that caused it."""
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(str(self.error))

    @property
    def kind(self) -> str:
        """Error taxonomy kind (environment, io, schema, conflict)."""
        return getattr(self.error, "kind", "error")


Result = Union[Success[T], Failure[E]]
