# =============================================================================
# core/result.py  -  Ok / Err result container
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every domain operation in core/ returns a Result: either Ok(value) or
#   Err(message).  Expected failures (bad input, a failed remote call) are
#   values, not exceptions, so the tools/ layer can render them uniformly.
#
# HOW TO CONSUME A RESULT:
#
#     match result:
#         case Ok(value):
#             ...
#         case Err(error):
#             ...
#
#   or with the helpers: result.is_ok(), result.map(fn), result.unwrap().
#   unwrap() on the wrong variant raises UnwrapError.  Production code in
#   this repo matches on the variant instead of unwrapping.
#
# REMOTE CALLS:
#   attempt(verb, awaitable) is the single place where a remote call is
#   awaited.  Any exception becomes Err("Failed to <verb>: <message>").
# =============================================================================

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class UnwrapError(AssertionError):
    """Raised when a Result is unwrapped as the variant it does not hold."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Success variant carrying the operation's value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> str:
        raise UnwrapError(f"unwrap_err() called on Ok({self.value!r})")


@dataclass(frozen=True)
class Err:
    """Failure variant carrying a human-readable message."""

    error: str

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Err":
        # Errors pass through untouched.
        return self

    def unwrap(self) -> Any:
        raise UnwrapError(f"unwrap() called on Err({self.error!r})")

    def unwrap_err(self) -> str:
        return self.error


Result = Union[Ok[T], Err]


def describe_error(error: object) -> str:
    """Return the message of a raised error, or the stringified value."""
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return str(error)


async def attempt(
    verb: str,
    call: Awaitable[Any],
    shape: Callable[[Any], T] | None = None,
) -> "Result[T]":
    """Await a remote call, converting any failure into an Err.

    Args:
        verb: Operation-specific verb phrase, e.g. "save albums".
        call: The awaitable returned by a MusicClient method.
        shape: Optional function turning the response body into the
            operation's output type.  It runs inside the same guard, so a
            response of unexpected shape is reported like a failed call.

    Returns:
        Ok(value) on success, Err("Failed to <verb>: <message>") otherwise.
    """
    try:
        response = await call
        return Ok(shape(response) if shape is not None else response)
    except Exception as exc:
        return Err(f"Failed to {verb}: {describe_error(exc)}")
