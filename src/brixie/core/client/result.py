"""
Result type returned by every client operation.

An ApiResult holds either a decoded value or a RebrickableError, never both.
Client operations return one instead of raising, so callers branch on
``is_success`` or ``error.kind``.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from .errors import RebrickableError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of a single API call."""
    value: Optional[T] = None
    error: Optional[RebrickableError] = None

    # Success is decided by error alone; None is a valid success value
    def __post_init__(self):
        if self.error is None:
            return
        if not isinstance(self.error, RebrickableError):
            raise TypeError(f"ApiResult error must be a RebrickableError, got {type(self.error).__name__}")
        if self.value is not None:
            raise ValueError("A failed ApiResult cannot carry a value")

    @classmethod
    def success(cls, value: T) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RebrickableError) -> "ApiResult[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: U) -> Union[T, U]:
        return default if self.error is not None else self.value

    def map(self, fn: Callable[[T], U]) -> "ApiResult[U]":
        """Transform the value of a success; failures pass through untouched."""
        if self.error is not None:
            return ApiResult(error=self.error)
        return ApiResult(value=fn(self.value))

    def fold(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[RebrickableError], R],
    ) -> R:
        if self.error is not None:
            return on_failure(self.error)
        return on_success(self.value)
