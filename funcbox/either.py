"""
either.py - Left/Right disjoint union.

An Either is exactly one of Left or Right, fixed at construction. Either
itself is abstract; fold, for_each and bimap are the ways to handle both
branches at once.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Callable, Any, Optional
from dataclasses import dataclass

from .errors import MissingValueError
from .functions import require
from .option import Option

L = TypeVar('L')
R = TypeVar('R')
L2 = TypeVar('L2')
R2 = TypeVar('R2')
U = TypeVar('U')


# Either 类型：两个分支的不相交并集
class Either(ABC, Generic[L, R]):
    """
    Either 类型：要么是 Left，要么是 Right

    Right is the main channel: map, flat_map, filter_or_else and exists act
    on it and pass a Left through untouched.

    A Left or Right may hold None. get_left() and get_right() return it as is,
    while the operations that hand the payload to a callback raise
    MissingValueError for it.
    """

    __slots__ = ()

    @abstractmethod
    def is_left(self) -> bool:
        ...

    @abstractmethod
    def is_right(self) -> bool:
        ...

    def if_left(self, action: Callable[[L], Any]) -> None:
        require(action, "action")

    def if_right(self, action: Callable[[R], Any]) -> None:
        require(action, "action")

    def get_left(self) -> Optional[L]:
        return None

    def get_right(self) -> Optional[R]:
        return None

    @abstractmethod
    def join_left(self, other: 'Either[L, R]') -> 'Either[L, R]':
        ...

    @abstractmethod
    def join_right(self, other: 'Either[L, R]') -> 'Either[L, R]':
        ...

    @abstractmethod
    def filter_or_else(self, predicate: Callable[[R], bool], or_else: L) -> 'Either[L, R]':
        ...

    def exists(self, predicate: Callable[[R], bool]) -> bool:
        require(predicate, "predicate")
        return False

    @abstractmethod
    def map(self, func: Callable[[R], U]) -> 'Either[L, U]':
        ...

    @abstractmethod
    def flat_map(self, func: Callable[[R], 'Either[L, U]']) -> 'Either[L, U]':
        ...

    def bind(self, func: Callable[[R], 'Either[L, U]']) -> 'Either[L, U]':
        return self.flat_map(func)

    @abstractmethod
    def fold(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        ...

    @abstractmethod
    def for_each(self, on_left: Callable[[L], Any], on_right: Callable[[R], Any]) -> None:
        ...

    @abstractmethod
    def map_left(self, func: Callable[[L], L2]) -> 'Either[L2, R]':
        ...

    @abstractmethod
    def bimap(self, left_func: Callable[[L], L2], right_func: Callable[[R], R2]) -> 'Either[L2, R2]':
        ...

    @abstractmethod
    def swap(self) -> 'Either[R, L]':
        ...

    def to_option(self) -> Option[R]:
        return Option.empty()

    def to_optional(self) -> Optional[R]:
        return None


def _check_either(result: Any) -> 'Either':
    if result is None:
        raise MissingValueError("flat_map function returned None instead of an Either")
    if not isinstance(result, Either):
        raise TypeError(f"flat_map function must return an Either, got {type(result).__name__}")
    return result


@dataclass(frozen=True)
class Left(Either[L, R]):
    """Left：通常表示失败，包含错误信息"""
    value: L

    def _payload(self) -> L:
        if self.value is None:
            raise MissingValueError("Left holds no value")
        return self.value

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def if_left(self, action: Callable[[L], Any]) -> None:
        require(action, "action")(self._payload())

    def get_left(self) -> Optional[L]:
        return self.value

    def join_left(self, other: Either[L, R]) -> Either[L, R]:
        return require(other, "other")

    def join_right(self, other: Either[L, R]) -> Either[L, R]:
        require(other, "other")
        return self

    def filter_or_else(self, predicate: Callable[[R], bool], or_else: L) -> Either[L, R]:
        require(predicate, "predicate")
        return self

    def map(self, func: Callable[[R], U]) -> Either[L, U]:
        require(func, "func")
        return self

    def flat_map(self, func: Callable[[R], Either[L, U]]) -> Either[L, U]:
        require(func, "func")
        return self

    def fold(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        require(on_left, "on_left")
        require(on_right, "on_right")
        return on_left(self._payload())

    def for_each(self, on_left: Callable[[L], Any], on_right: Callable[[R], Any]) -> None:
        require(on_left, "on_left")
        require(on_right, "on_right")
        on_left(self._payload())

    def map_left(self, func: Callable[[L], L2]) -> Either[L2, R]:
        require(func, "func")
        return Left(func(self._payload()))

    def bimap(self, left_func: Callable[[L], L2], right_func: Callable[[R], R2]) -> Either[L2, R2]:
        require(left_func, "left_func")
        require(right_func, "right_func")
        return Left(left_func(self._payload()))

    def swap(self) -> Either[R, L]:
        return Right(self._payload())

    def __str__(self):
        return f"Left({self.value})"


@dataclass(frozen=True)
class Right(Either[L, R]):
    """Right：通常表示成功，包含结果值"""
    value: R

    def _payload(self) -> R:
        if self.value is None:
            raise MissingValueError("Right holds no value")
        return self.value

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def if_right(self, action: Callable[[R], Any]) -> None:
        require(action, "action")(self._payload())

    def get_right(self) -> Optional[R]:
        return self.value

    def join_left(self, other: Either[L, R]) -> Either[L, R]:
        require(other, "other")
        return self

    def join_right(self, other: Either[L, R]) -> Either[L, R]:
        return require(other, "other")

    def filter_or_else(self, predicate: Callable[[R], bool], or_else: L) -> Either[L, R]:
        require(predicate, "predicate")
        return self if predicate(self._payload()) else Left(or_else)

    def exists(self, predicate: Callable[[R], bool]) -> bool:
        require(predicate, "predicate")
        return bool(predicate(self._payload()))

    def map(self, func: Callable[[R], U]) -> Either[L, U]:
        require(func, "func")
        return Right(func(self._payload()))

    def flat_map(self, func: Callable[[R], Either[L, U]]) -> Either[L, U]:
        require(func, "func")
        return _check_either(func(self._payload()))

    def fold(self, on_left: Callable[[L], U], on_right: Callable[[R], U]) -> U:
        require(on_left, "on_left")
        require(on_right, "on_right")
        return on_right(self._payload())

    def for_each(self, on_left: Callable[[L], Any], on_right: Callable[[R], Any]) -> None:
        require(on_left, "on_left")
        require(on_right, "on_right")
        on_right(self._payload())

    def map_left(self, func: Callable[[L], L2]) -> Either[L2, R]:
        require(func, "func")
        self._payload()
        return self

    def bimap(self, left_func: Callable[[L], L2], right_func: Callable[[R], R2]) -> Either[L2, R2]:
        require(left_func, "left_func")
        require(right_func, "right_func")
        return Right(right_func(self._payload()))

    def swap(self) -> Either[R, L]:
        return Left(self._payload())

    def to_option(self) -> Option[R]:
        # Right(None) is empty, not an error
        return Option.of_nullable(self.value)

    def to_optional(self) -> Optional[R]:
        return self.value

    def __str__(self):
        return f"Right({self.value})"
