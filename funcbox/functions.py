from typing import Callable, Any, TypeVar
from functools import wraps

from .errors import MissingArgumentError

T = TypeVar('T')


def require(value: T, name: str) -> T:
    """Return ``value`` or raise MissingArgumentError if it is None."""
    if value is None:
        raise MissingArgumentError(name)
    return value


def identity(x: Any) -> Any:
    """Identity function - returns the input unchanged."""
    return x


def catching(func: Callable) -> Callable:
    """
    Decorator: turn a function that may raise into one that returns a Result.

    Any Exception raised by ``func`` becomes a Failure, a normal return
    becomes a Success.
    """
    require(func, "func")

    @wraps(func)
    def wrapper(*args, **kwargs):
        from .result import run_catching
        return run_catching(func, *args, **kwargs)

    return wrapper
