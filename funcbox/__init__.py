# Immutable functional containers: Option, Result, Either
from .errors import FuncboxError, MissingArgumentError, MissingValueError, FailureError
from .functions import require, identity, catching
from .option import Option, Some, Nothing, option, EMPTY_OPTION_MESSAGE
from .either import Either, Left, Right
from .result import Result, Success, Failure, run_catching

__version__ = "1.0.0"

__all__ = [
    'FuncboxError', 'MissingArgumentError', 'MissingValueError', 'FailureError',
    'require', 'identity', 'catching',
    'Option', 'Some', 'Nothing', 'option', 'EMPTY_OPTION_MESSAGE',
    'Either', 'Left', 'Right',
    'Result', 'Success', 'Failure', 'run_catching',
]
