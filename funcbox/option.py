import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Callable, Any, Iterator, Optional, TYPE_CHECKING
from dataclasses import dataclass

from .errors import MissingArgumentError, MissingValueError
from .functions import require

if TYPE_CHECKING:
    from .result import Result

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')

EMPTY_OPTION_MESSAGE = "Option is empty"

_UNSET = object()


# Option 类型：值存在或不存在
class Option(ABC, Generic[T]):
    """
    Immutable container for "a value or nothing".

    Absence is encoded as None: ``Option.of(None)`` is the empty option, and a
    Some never holds None. Option carries no error context; use Result for
    failures.

        >>> Option.of("  hi  ").map(str.strip).filter(bool).get()
        'hi'
    """

    __slots__ = ()

    # ---------- Constructors ----------

    @staticmethod
    def of(value: Optional[T]) -> 'Option[T]':
        """Wrap a value; None gives the empty option."""
        if value is None:
            return _EMPTY
        return Some(value)

    @staticmethod
    def of_nullable(value: Optional[T]) -> 'Option[T]':
        """Alias of ``of``."""
        return Option.of(value)

    @staticmethod
    def empty() -> 'Option[T]':
        """Canonical empty option."""
        return _EMPTY

    # ---------- Accessors ----------

    @abstractmethod
    def get(self) -> Optional[T]:
        ...

    @abstractmethod
    def is_present(self) -> bool:
        ...

    def is_empty(self) -> bool:
        return not self.is_present()

    def is_not_empty(self) -> bool:
        return self.is_present()

    # ---------- Side effects ----------

    def apply(self, action: Callable[[T], Any]) -> 'Option[T]':
        """Run ``action(value)`` if present, then return self."""
        require(action, "action")
        if self.is_present():
            action(self.get())
        return self

    def and_(self, action: Callable[[], Any]) -> 'Option[T]':
        """Run ``action()`` regardless of presence, then return self."""
        require(action, "action")()
        return self

    def if_present(self, action: Callable[[T], Any]) -> None:
        require(action, "action")
        if self.is_present():
            action(self.get())

    def if_empty(self, action: Callable[[], Any]) -> None:
        require(action, "action")
        if self.is_empty():
            action()

    def if_empty_or_else(self, if_empty: Callable[[], Any], or_else: Callable[[T], Any]) -> None:
        """Run ``if_empty()`` when empty, ``or_else(value)`` otherwise."""
        require(if_empty, "if_empty")
        require(or_else, "or_else")
        if self.is_empty():
            if_empty()
        else:
            or_else(self.get())

    # ---------- Transformations ----------

    def map(self, func: Callable[[T], Optional[U]]) -> 'Option[U]':
        """Map a present value; a None result gives the empty option."""
        require(func, "func")
        if self.is_empty():
            return _EMPTY
        return Option.of_nullable(func(self.get()))

    def map_to(self, func: Callable[[Optional[T]], U]) -> U:
        """
        Apply ``func`` to the raw payload, even when empty.

        ``func`` receives None for the empty option and must handle it.
        """
        require(func, "func")
        return func(self.get())

    def flat_map(self, func: Callable[[T], 'Option[U]']) -> 'Option[U]':
        require(func, "func")
        if self.is_empty():
            return _EMPTY
        result = func(self.get())
        if result is None:
            raise MissingValueError("flat_map function returned None instead of an Option")
        if not isinstance(result, Option):
            raise TypeError(f"flat_map function must return an Option, got {type(result).__name__}")
        return result

    bind = flat_map

    def filter(self, predicate: Callable[[T], bool]) -> 'Option[T]':
        require(predicate, "predicate")
        if self.is_empty():
            return self
        return self if predicate(self.get()) else _EMPTY

    def take_if(self, predicate: Callable[[T], bool]) -> 'Option[T]':
        """Keep this option only if ``predicate`` holds."""
        require(predicate, "predicate")
        if self.is_empty():
            return _EMPTY
        return self if predicate(self.get()) else _EMPTY

    def take_unless(self, predicate: Callable[[T], bool]) -> 'Option[T]':
        """Keep this option only if ``predicate`` does not hold."""
        require(predicate, "predicate")
        if self.is_empty():
            return _EMPTY
        return _EMPTY if predicate(self.get()) else self

    # ---------- Type checks ----------

    def is_instance(self, cls: type) -> bool:
        require(cls, "cls")
        return self.is_present() and isinstance(self.get(), cls)

    def if_instance(self, cls: type, action: Any = _UNSET) -> Optional['Option[Any]']:
        """
        Without ``action``: the value narrowed to ``cls`` as an Option, or empty.
        With ``action``: call ``action(value)`` when the value is a ``cls``.
        """
        require(cls, "cls")
        if action is _UNSET:
            return self if self.is_instance(cls) else _EMPTY
        require(action, "action")
        if self.is_instance(cls):
            action(self.get())
        return None

    def if_instance_run(self, cls: type, action: Callable[[], Any]) -> None:
        """Call ``action()`` when the value is a ``cls``."""
        require(cls, "cls")
        require(action, "action")
        if self.is_instance(cls):
            action()

    def if_not_instance(self, cls: type) -> 'Option[T]':
        require(cls, "cls")
        if self.is_empty():
            return _EMPTY
        return _EMPTY if isinstance(self.get(), cls) else self

    # ---------- Branching / fallbacks ----------

    def if_present_or_else(self, func: Callable[[T], R], or_else_get: Callable[[], R]) -> R:
        require(func, "func")
        require(or_else_get, "or_else_get")
        return func(self.get()) if self.is_present() else or_else_get()

    def if_present_or_else_get(self, if_present: Callable[[], R], or_else_get: Callable[[], R]) -> R:
        """Branch between two suppliers, ignoring the value."""
        require(if_present, "if_present")
        require(or_else_get, "or_else_get")
        return if_present() if self.is_present() else or_else_get()

    def or_else(self, other: T) -> T:
        return self.get() if self.is_present() else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        require(supplier, "supplier")
        return self.get() if self.is_present() else supplier()

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        """Return the value, or raise the error built by ``error_supplier``."""
        require(error_supplier, "error_supplier")
        if self.is_present():
            return self.get()
        raise error_supplier()

    # ---------- Conversions ----------

    def to_optional(self) -> Optional[T]:
        """The payload as a plain ``typing.Optional`` value."""
        return self.get()

    def run_catching(self, func: Callable[[T], U]) -> 'Result[U, Exception]':
        """
        Call ``func`` on the value and capture the outcome as a Result.

        An empty option gives a Failure carrying MissingValueError, and
        ``func`` is not called.
        """
        from .result import Result

        require(func, "func")
        if self.is_empty():
            return Result.failure(MissingValueError(EMPTY_OPTION_MESSAGE))
        try:
            return Result.success(func(self.get()))
        except Exception as e:
            logger.debug(f"run_catching captured {type(e).__name__}: {e}")
            return Result.failure(e)

    # ---------- Python protocols ----------

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self.get()

    def __bool__(self) -> bool:
        return self.is_present()


@dataclass(frozen=True)
class Some(Option[T]):
    """Some：包含一个非 None 的值"""
    value: T

    def __post_init__(self):
        if self.value is None:
            raise MissingArgumentError("value")

    def get(self) -> T:
        return self.value

    def is_present(self) -> bool:
        return True

    def __str__(self):
        return f"Some({self.value})"


class Nothing(Option[T]):
    """Nothing：没有值. Every Nothing equals every other Nothing."""

    __slots__ = ()

    def get(self) -> None:
        return None

    def is_present(self) -> bool:
        return False

    def __eq__(self, other):
        return isinstance(other, Nothing)

    def __hash__(self):
        return hash(Nothing)

    def __str__(self):
        return "Nothing"

    def __repr__(self):
        return "Nothing"


_EMPTY: Option[Any] = Nothing()


def option(value: Optional[T]) -> Option[T]:
    """将值转换为 Option"""
    return Option.of_nullable(value)
