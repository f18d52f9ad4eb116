"""Error types, Result pattern and error-chain rendering.

A failure travels as ``Err(error)`` where *error* is an ``AppError``, a raised
exception or any printable value. Context is attached outermost-last and read
back outermost-first by :func:`iter_chain`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")

class ErrorKind(Enum):
    UI = auto()
    GENERIC = auto()
    CONTEXT = auto()

@dataclass(frozen=True)
class AppError:
    kind: ErrorKind
    message: str
    source: Optional[str] = None
    cause: Any = None

    def __str__(self) -> str:
        base = self.message if self.kind is ErrorKind.CONTEXT else f"{self.kind.name}: {self.message}"
        return f"{base} (source: {self.source})" if self.source else base

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def context(self, message: str) -> "Ok[T]":
        return self

    def with_context(self, describe: Callable[[], str]) -> "Ok[T]":
        return self

@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def context(self, message: str) -> "Err[AppError]":
        """Wrap the error in a CONTEXT layer carrying *message*."""
        return Err(AppError(ErrorKind.CONTEXT, str(message), cause=self.error))

    def with_context(self, describe: Callable[[], str]) -> "Err[AppError]":
        """Like :meth:`context`, but only builds the message on failure."""
        return self.context(describe())

Result = Union[Ok[T], Err[E]]


def context(result: Result[T, Any], message: str) -> Result[T, Any]:
    if isinstance(result, (Ok, Err)):
        return result.context(message)
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T, Exception]:
    """Call *func* and return its value as ``Ok`` or the raised exception as ``Err``."""
    try:
        return Ok(func(*args, **kwargs))
    except Exception as ex:
        return Err(ex)


def fail(message: str, source: Optional[str] = None, kind: ErrorKind = ErrorKind.GENERIC) -> Err[AppError]:
    return Err(AppError(kind, message, source))


# ----------------------- Error chain ----------------------------------
def _describe(error: Any) -> str:
    text = str(error)
    return text if text else type(error).__name__


def _next_cause(error: Any) -> Any:
    if isinstance(error, AppError):
        return error.cause
    if isinstance(error, BaseException):
        if error.__cause__ is not None:
            return error.__cause__
        if not error.__suppress_context__:
            return error.__context__
    return None


def iter_chain(error: Any) -> Iterator[str]:
    """Yield the messages of *error* and its causes, outermost first.

    The outermost entry is always yielded, even for ``None`` or an empty value.
    """
    seen: set[int] = {id(error)}
    yield _describe(error)
    current = _next_cause(error)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield _describe(current)
        current = _next_cause(current)


def format_chain(error: Any, separator: str = "\n") -> str:
    lines: List[str] = list(iter_chain(error))
    return separator.join(lines)
