"""
Tagged results for the pipeline stage boundaries.
"""
import functools
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from queryfilter.errors import FilterError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A stage finished and produced a value."""
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """A stage rejected its input."""
    error: FilterError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


Result = Union[Ok[T], Err]


def capture(func: Callable[..., T]) -> Callable[..., Result]:
    """Turn FilterError raised by func into Err; wrap any return value in Ok."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Result:
        try:
            return Ok(func(*args, **kwargs))
        except FilterError as e:
            return Err(e)

    return wrapper
