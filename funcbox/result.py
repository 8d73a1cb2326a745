"""
result.py - Success/Failure container for fallible computations.

A Result is set once at construction and never changes. map and flat_map
run on Success only; a Failure passes through them as the very same object,
so the first failure of a chain is the one that comes out at the end.
recover and fold are the ways back to a plain value.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Callable, Any, Optional
from dataclasses import dataclass

from .either import Either, Left, Right
from .errors import FailureError, MissingArgumentError, MissingValueError
from .functions import require
from .option import Option

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Result(ABC, Generic[T, E]):
    """Either a Success holding a value or a Failure holding an error."""

    __slots__ = ()

    @staticmethod
    def success(value: T) -> 'Result[T, Any]':
        return Success(value)

    @staticmethod
    def failure(error: E) -> 'Result[Any, E]':
        """Build a Failure; ``error`` must not be None."""
        return Failure(error)

    @abstractmethod
    def is_success(self) -> bool:
        ...

    def is_failure(self) -> bool:
        return not self.is_success()

    @abstractmethod
    def get_or_null(self) -> Optional[T]:
        ...

    @abstractmethod
    def exception_or_null(self) -> Optional[E]:
        ...

    # ---------- Transformations ----------

    def map(self, func: Callable[[T], U]) -> 'Result[U, E]':
        require(func, "func")
        if self.is_failure():
            return self
        return Success(func(self.get_or_null()))

    def flat_map(self, func: Callable[[T], 'Result[U, E]']) -> 'Result[U, E]':
        require(func, "func")
        if self.is_failure():
            return self
        result = func(self.get_or_null())
        if result is None:
            raise MissingValueError("flat_map function returned None instead of a Result")
        if not isinstance(result, Result):
            raise TypeError(f"flat_map function must return a Result, got {type(result).__name__}")
        return result

    bind = flat_map

    # ---------- Side effects ----------

    def on_success(self, action: Callable[[T], Any]) -> 'Result[T, E]':
        require(action, "action")
        if self.is_success():
            action(self.get_or_null())
        return self

    def on_failure(self, action: Callable[[E], Any]) -> 'Result[T, E]':
        require(action, "action")
        if self.is_failure():
            action(self.exception_or_null())
        return self

    # ---------- Recovery / folding ----------

    def get_or_else(self, supplier: Callable[[], T]) -> T:
        require(supplier, "supplier")
        return self.get_or_null() if self.is_success() else supplier()

    def recover(self, func: Callable[[E], T]) -> T:
        """Return the value, or turn the error into one with ``func``."""
        require(func, "func")
        return self.get_or_null() if self.is_success() else func(self.exception_or_null())

    def fold(self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:
        require(on_failure, "on_failure")
        require(on_success, "on_success")
        if self.is_success():
            return on_success(self.get_or_null())
        return on_failure(self.exception_or_null())

    def get_or_throw(self) -> T:
        """
        Return the value or raise the error.

        An Exception is re-raised as the same object. Any other error value is
        wrapped in FailureError.
        """
        if self.is_success():
            return self.get_or_null()
        error = self.exception_or_null()
        if isinstance(error, Exception):
            raise error
        logger.debug(f"get_or_throw wrapping non-Exception error {error!r}")
        if isinstance(error, BaseException):
            raise FailureError(error) from error
        raise FailureError(error)

    # ---------- Conversions ----------

    def to_either(self) -> Either[E, T]:
        if self.is_success():
            return Right(self.get_or_null())
        return Left(self.exception_or_null())

    def to_option(self) -> Option[T]:
        return Option.of(self.get_or_null()) if self.is_success() else Option.empty()


@dataclass(frozen=True)
class Success(Result[T, Any]):
    """Success：包含结果值"""
    value: T

    def is_success(self) -> bool:
        return True

    def get_or_null(self) -> T:
        return self.value

    def exception_or_null(self) -> None:
        return None

    def __str__(self):
        return f"Success({self.value})"


@dataclass(frozen=True, eq=False)
class Failure(Result[Any, E]):
    """
    Failure：包含错误

    Two failures are equal when their errors have the same type and the same
    message, even if they are different objects.
    """
    error: E

    def __post_init__(self):
        if self.error is None:
            raise MissingArgumentError("error")

    def is_success(self) -> bool:
        return False

    def get_or_null(self) -> None:
        return None

    def exception_or_null(self) -> E:
        return self.error

    def _key(self):
        return type(self.error), str(self.error)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Failure):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return f"Failure({type(self.error).__name__}: {self.error})"


def run_catching(func: Callable[..., T], *args, **kwargs) -> Result[T, Exception]:
    """将可能抛出异常的调用转换为 Result"""
    require(func, "func")
    try:
        return Success(func(*args, **kwargs))
    except Exception as e:
        logger.debug(f"run_catching captured {type(e).__name__}: {e}")
        return Failure(e)
