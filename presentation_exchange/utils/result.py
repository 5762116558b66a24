"""Success or failure outcome of an operation that must not raise."""

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Result(Generic[T]):
    """Holds either a value or the exception that prevented producing one."""

    def __init__(self, value: Optional[T] = None, error: Optional[Exception] = None):
        """Initialize a Result; use `success` or `failure` instead."""
        if error is not None and value is not None:
            raise ValueError("A result cannot hold both a value and an error")
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        """Wrap a value."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Result[T]":
        """Wrap an error."""
        if error is None:
            raise ValueError("A failed result requires an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        """Accessor for whether a value was produced."""
        return self._error is None

    @property
    def is_failure(self) -> bool:
        """Accessor for whether an error was produced."""
        return self._error is not None

    @property
    def value(self) -> Optional[T]:
        """Accessor for the value, `None` on failure."""
        return self._value

    @property
    def error(self) -> Optional[Exception]:
        """Accessor for the error, `None` on success."""
        return self._error

    def get_or_raise(self) -> T:
        """Return the value or raise the held error."""
        if self._error is not None:
            raise self._error
        return self._value

    def get_or_none(self) -> Optional[T]:
        """Return the value, or `None` on failure."""
        return self._value

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform a successful value; failures pass through untouched."""
        if self._error is not None:
            return Result.failure(self._error)
        return Result.success(fn(self._value))

    def __repr__(self) -> str:
        """Return a human readable representation of this result."""
        if self._error is not None:
            return f"<Result(failure={self._error!r})>"
        return f"<Result(success={self._value!r})>"
