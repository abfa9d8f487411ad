"""Try: a result wrapper that turns raised exceptions into data.

A ``Try`` holds exactly one outcome, either a ``Success`` carrying a value or
a ``Failure`` carrying the exception that was raised while producing it.
Combinators (``map``/``bind`` and their async forms) thread failures through a
chain without unwinding the stack, and the caller decides at the end whether
to re-raise (``value``), branch (``match``), or fall back (``value_or*``).

Example:
    ```python
    doubled = Try.create(lambda: int(raw)).map(lambda n: n * 2)
    print(doubled.value_or(-1))
    ```
"""

from __future__ import annotations

import asyncio
import dataclasses
import functools
import logging
from typing import TYPE_CHECKING, Any

from commonext._dev_flags import trace_captures_enabled
from commonext.errors import ContractError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterator

logger = logging.getLogger(__name__)

__all__ = ["Failure", "Outcome", "Success", "Try", "safe", "safe_async"]


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """A successfully produced value."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """A captured failure, containing the raised exception."""

    error: BaseException

    def __post_init__(self) -> None:
        """Reject failures that carry no exception."""
        if not isinstance(self.error, BaseException):
            raise ContractError(
                f"Failure requires an exception instance, got {type(self.error).__name__}",
                hint="Use Try.from_value() for successful results.",
            )


Outcome = Success[Any] | Failure


def _log_capture(exc: BaseException) -> None:
    if trace_captures_enabled():
        logger.debug("Captured %s: %s", type(exc).__name__, exc, exc_info=exc)


@dataclasses.dataclass(frozen=True, slots=True)
class Try[T]:
    """Either a value of type ``T`` or the exception raised producing it.

    Instances are immutable; every combinator returns a new ``Try``.
    """

    outcome: Success[T] | Failure

    # --- Construction ---

    @classmethod
    def from_failure(cls, error: BaseException) -> Try[T]:
        """Wrap an exception. Raises ``ContractError`` if *error* is not one."""
        return cls(Failure(error))

    @classmethod
    def from_value(cls, value: T) -> Try[T]:
        """Wrap a value. ``None`` is a valid success."""
        return cls(Success(value))

    @classmethod
    def create(cls, producer: Callable[[], T]) -> Try[T]:
        """Call *producer* and wrap either its return value or its exception.

        Only ``Exception`` subclasses are captured; ``KeyboardInterrupt`` and
        ``SystemExit`` propagate.
        """
        try:
            value = producer()
        except Exception as exc:
            _log_capture(exc)
            return cls.from_failure(exc)
        return cls.from_value(value)

    @classmethod
    async def create_async(cls, producer: Callable[[], Awaitable[T]]) -> Try[T]:
        """Await *producer()* and wrap either its result or its exception.

        A ``CancelledError`` raised by the producer is captured like any other
        failure. If the calling task is itself being cancelled, the
        cancellation propagates instead.
        """
        try:
            value = await producer()
        except asyncio.CancelledError as exc:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            _log_capture(exc)
            return cls.from_failure(exc)
        except Exception as exc:
            _log_capture(exc)
            return cls.from_failure(exc)
        return cls.from_value(value)

    # --- Transformation ---

    def map[R](self, fn: Callable[[T], R]) -> Try[R]:
        """Apply *fn* to the value; exceptions raised by *fn* are captured.

        On a failure, *fn* is not called and the same exception is carried.
        """
        return self.bind(lambda value: Try.create(lambda: fn(value)))

    async def map_async[R](self, fn: Callable[[T], Awaitable[R]]) -> Try[R]:
        """Async ``map``: await *fn(value)*, capturing any exception."""
        return await self.bind_async(lambda value: Try.create_async(lambda: fn(value)))

    def bind[R](self, fn: Callable[[T], Try[R]]) -> Try[R]:
        """Chain a ``Try``-returning step.

        On a failure, *fn* is not called. *fn* should express failure by
        returning ``Try.from_failure`` rather than raising.
        """
        match self.outcome:
            case Failure(error=error):
                return Try.from_failure(error)
            case Success(value=value):
                return fn(value)

    async def bind_async[R](self, fn: Callable[[T], Awaitable[Try[R]]]) -> Try[R]:
        """Async ``bind``: await the ``Try`` produced by *fn(value)*."""
        match self.outcome:
            case Failure(error=error):
                return Try.from_failure(error)
            case Success(value=value):
                return await fn(value)

    # --- Resolution ---

    def match[R](
        self,
        on_failure: Callable[[BaseException], R],
        on_value: Callable[[T], R],
    ) -> R:
        """Call exactly one handler for the current outcome and return its result."""
        match self.outcome:
            case Failure(error=error):
                return on_failure(error)
            case Success(value=value):
                return on_value(value)

    def destructure(self) -> tuple[BaseException | None, T | None]:
        """Return ``(failure, value)``; the absent side is ``None``."""
        match self.outcome:
            case Failure(error=error):
                return error, None
            case Success(value=value):
                return None, value

    def __iter__(self) -> Iterator[Any]:
        """Allow ``error, value = t``."""
        return iter(self.destructure())

    @property
    def is_failure(self) -> bool:
        return isinstance(self.outcome, Failure)

    @property
    def is_value(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def failure(self) -> BaseException | None:
        """The captured exception, or ``None`` for a success."""
        return self.outcome.error if isinstance(self.outcome, Failure) else None

    @property
    def value(self) -> T:
        """The wrapped value.

        On a failure, re-raises the captured exception object itself, so its
        original traceback and type are kept.
        """
        match self.outcome:
            case Failure(error=error):
                raise error
            case Success(value=value):
                return value

    @property
    def value_or_default(self) -> T | None:
        """The wrapped value, or ``None`` on a failure. Never raises."""
        match self.outcome:
            case Failure():
                return None
            case Success(value=value):
                return value

    def value_or(self, default: T) -> T:
        """The wrapped value, or *default* on a failure."""
        match self.outcome:
            case Failure():
                return default
            case Success(value=value):
                return value

    def value_or_else(self, supplier: Callable[[], T]) -> T:
        """The wrapped value, or ``supplier()`` on a failure."""
        match self.outcome:
            case Failure():
                return supplier()
            case Success(value=value):
                return value

    def otherwise(self, action: Callable[[BaseException], object]) -> Try[T]:
        """Run *action* on the captured exception, if any, and return ``self``."""
        if isinstance(self.outcome, Failure):
            action(self.outcome.error)
        return self

    def __str__(self) -> str:
        match self.outcome:
            case Failure(error=error):
                return f"Failure: {type(error).__name__}: {error}"
            case Success(value=value):
                return f"Value: {value}"


# Decorators (keep original signature via ParamSpec)


def safe[**P, R](fn: Callable[P, R]) -> Callable[P, Try[R]]:
    """Wrap a function so calling it returns a ``Try`` instead of raising.

    Example:
        ```python
        @safe
        def parse_port(raw: str) -> int:
            return int(raw)

        parse_port("80x").is_failure  # True
        ```
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[R]:
        return Try.create(lambda: fn(*args, **kwargs))

    return wrapper


def safe_async[**P, R](fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[Try[R]]]:
    """Wrap an async function so awaiting it returns a ``Try``."""

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[R]:
        return await Try.create_async(lambda: fn(*args, **kwargs))

    return wrapper
