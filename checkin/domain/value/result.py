"""Tagged result type for total parsing functions."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying the error it would raise."""

    error: E

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err[E]]
