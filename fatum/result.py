from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from .errors import UnwrapError


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def __bool__(self):
        return True

    def is_ok(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return f(self.value)

    def map_error(self, _f: Callable[[Any], Any]) -> Ok[T]:
        return self

    def get(self) -> T:
        return self.value

    def get_or(self, _default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    def __bool__(self):
        return False

    def is_ok(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, _f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> Failure[E]:
        return self

    def map_error(self, f: Callable[[E], F]) -> Failure[F]:
        return Failure(f(self.error))

    def get(self) -> NoReturn:
        """Raise the failure. Exceptions are raised as they are, any other
        payload is wrapped in an `UnwrapError`."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def get_or(self, default: U) -> U:
        return default


Result = Union[Ok[T], Failure[E]]


def catching(f: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Run `f` and wrap its outcome: `Ok` with the return value, or `Failure`
    with the exception it raised.

    Only `Exception` is caught; `KeyboardInterrupt` and friends pass through.
    """
    try:
        return Ok(f(*args, **kwargs))
    except Exception as e:
        return Failure(e)
