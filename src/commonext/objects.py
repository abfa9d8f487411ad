"""Object helpers: checked casts and membership tests."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from commonext.result import Try


def try_cast[T](value: object, target_type: type[T]) -> Try[T]:
    """Return *value* as a success if it is a *target_type*, else a ``TypeError`` failure.

    Targets ``isinstance`` cannot check, such as ``list[int]``, also yield a
    ``TypeError`` failure.
    """
    return Try.create(lambda: isinstance(value, target_type)).bind(
        lambda matches: Try.from_value(value)
        if matches
        else Try.from_failure(
            TypeError(f"Expected {target_type.__name__}, got {type(value).__name__}")
        )
    )


def as_type[T](value: object, target_type: type[T]) -> T | None:
    """Return *value* if it is a *target_type*, else ``None``."""
    return try_cast(value, target_type).value_or_default


def is_type(value: object, target_type: type[Any] | tuple[type[Any], ...]) -> bool:
    return isinstance(value, target_type)


def is_not_type(value: object, target_type: type[Any] | tuple[type[Any], ...]) -> bool:
    return not isinstance(value, target_type)


def one_of(target: object, *values: Any) -> bool:
    """Return True if *target* equals any of *values*.

    A single non-string iterable argument is expanded, so both
    ``one_of(x, a, b)`` and ``one_of(x, [a, b])`` work.
    """
    candidates: Iterable[Any] = values
    if len(values) == 1 and isinstance(values[0], Iterable) and not isinstance(values[0], (str, bytes)):
        candidates = values[0]
    return any(candidate == target for candidate in candidates)
