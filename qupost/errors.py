"""
Error kinds and tagged results.

Every operation in qupost checks its preconditions first and raises one of
the exceptions below before doing any work. The exceptions subclass
ValueError, so callers that only care about "bad argument" can catch that.

Callers that prefer error values to exceptions can wrap any call with
attempt(), which returns Ok(value) or Err(kind, message):

    >>> from qupost import attempt, gcd_list
    >>> attempt(gcd_list, [12, 18, 24])
    Ok(value=6)
    >>> attempt(gcd_list, []).kind
    <ErrorKind.EMPTY_INPUT: 'empty_input'>
"""

import enum
from dataclasses import dataclass
from typing import Any, Callable, Union


class ErrorKind(enum.Enum):
    """The distinct ways an operation can refuse its input."""

    INVALID_ARGUMENT = "invalid_argument"
    EMPTY_INPUT = "empty_input"
    INVALID_PERMUTATION = "invalid_permutation"


class QupostError(ValueError):
    """Base class for all errors raised by qupost."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, where: str, message: str):
        self.where = where
        self.message = message
        super().__init__(f"{where}: {message}")


class InvalidArgumentError(QupostError):
    """A count is zero where a positive one is required, or an operand is out of range."""

    kind = ErrorKind.INVALID_ARGUMENT


class EmptyInputError(QupostError):
    """An operation that needs at least one element got none."""

    kind = ErrorKind.EMPTY_INPUT


class InvalidPermutationError(QupostError):
    """A vector is not a bijection on its index range, or lengths differ."""

    kind = ErrorKind.INVALID_PERMUTATION


_ERROR_TYPES = {
    ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
    ErrorKind.EMPTY_INPUT: EmptyInputError,
    ErrorKind.INVALID_PERMUTATION: InvalidPermutationError,
}


# =============================================================================
# Tagged results
# =============================================================================

@dataclass(frozen=True)
class Ok:
    """Successful outcome of an operation."""

    value: Any

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome of an operation, tagged with its ErrorKind."""

    kind: ErrorKind
    where: str
    message: str

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Re-raise the error this result was built from."""
        raise _ERROR_TYPES[self.kind](self.where, self.message)


Result = Union[Ok, Err]


def attempt(func: Callable[..., Any], *args, **kwargs) -> Result:
    """
    Call func and capture a QupostError as an Err instead of raising it.

    Only qupost errors are converted; anything else (a bug, a TypeError from
    a wrong call signature) propagates unchanged.

    Args:
        func: Any qupost operation
        *args, **kwargs: Passed through to func

    Returns:
        Ok(value) on success, Err(kind, where, message) on a refused input
    """
    try:
        return Ok(func(*args, **kwargs))
    except QupostError as exc:
        return Err(exc.kind, exc.where, exc.message)
