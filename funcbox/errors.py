"""Exception hierarchy for funcbox."""

from typing import Any


class FuncboxError(Exception):
    """Base exception for all funcbox errors."""


class MissingArgumentError(FuncboxError, TypeError):
    """A required callable, predicate or type argument was None."""

    def __init__(self, name: str):
        super().__init__(f"{name} must not be None")
        self.name = name


class MissingValueError(FuncboxError, ValueError):
    """There was no value to compute on."""


class FailureError(FuncboxError, RuntimeError):
    """Raised by Result.get_or_throw() for an error that is not an Exception.

    The original error value is kept in ``error``.
    """

    def __init__(self, error: Any):
        super().__init__(f"Result failed with {error!r}")
        self.error = error
