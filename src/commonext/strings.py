"""String helpers: blank checks, light escaping, and lenient parsing."""

from __future__ import annotations

import base64
import logging
import re
from typing import TYPE_CHECKING
import unicodedata

from commonext.result import Try
from commonext.serialization import type_adapter

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_CRLF_TAB_RE = re.compile(r"[\t\n\r]")
_PASSTHROUGH_TYPES: tuple[type, ...] = (str, object)


def is_blank(text: str | None) -> bool:
    """Return True for ``None``, empty, or whitespace-only strings."""
    return text is None or not text.strip()


def is_not_blank(text: str | None) -> bool:
    return not is_blank(text)


def to_base64(data: bytes | None) -> str | None:
    """Encode bytes as a base64 string; ``None`` passes through."""
    if data is None:
        return None
    return base64.b64encode(data).decode("ascii")


def escape_xml_characters(text: str) -> str:
    """Replace the ``\\x01`` control character, which XML 1.0 forbids, with ``|``."""
    return text.replace("\x01", "|")


def escape_crlf_tabs(text: str) -> str:
    """Replace every tab, carriage return, and newline with a single space."""
    return _CRLF_TAB_RE.sub(" ", text)


def parse[T](value: str | None, target_type: type[T]) -> T | None:
    """Convert *value* to *target_type*, returning ``None`` when it cannot.

    Conversion is lenient in the way pydantic's lax mode is: ``"42"`` parses
    as ``int``, ``"true"`` as ``bool``, ISO-8601 strings as ``datetime``.
    ``str`` and ``object`` targets return *value* unchanged.

    Lax ``bool`` parsing also accepts ``"1"``/``"0"``, ``"yes"``/``"no"``,
    ``"on"``/``"off"`` and ``"t"``/``"f"``, not only ``"true"``/``"false"``.
    """
    if target_type in _PASSTHROUGH_TYPES:
        return value  # type: ignore[return-value]
    if value is None:
        return None
    return (
        Try.create(lambda: type_adapter(target_type).validate_python(value))
        .otherwise(
            lambda exc: logger.debug(
                "Could not parse %r as %s: %s",
                value,
                getattr(target_type, "__name__", target_type),
                exc,
            )
        )
        .value_or_default
    )


def split_by_size(text: str, size: int) -> list[str]:
    """Split *text* into consecutive chunks of exactly *size* characters.

    A trailing remainder shorter than *size* is dropped.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return [text[i : i + size] for i in range(0, len(text) - size + 1, size)]


def on_blank(text: str | None, fallback: str | Callable[[], str | None] | None) -> str | None:
    """Return *text* unless it is blank, else *fallback* (called if callable)."""
    if is_not_blank(text):
        return text
    if callable(fallback):
        return fallback()
    return fallback


def equals_ignore_case(text: str | None, other: str | None) -> bool:
    """Case-insensitive equality where two ``None`` values are equal."""
    if text is None:
        return other is None
    if other is None:
        return False
    return text.casefold() == other.casefold()


def contains_word(text: str | None, word: str | None) -> bool:
    """Return True if *word* appears in *text* as a whole word.

    Words are split on whitespace and stripped of surrounding punctuation;
    comparison ignores case.
    """
    if text is None or word is None or is_blank(text) or is_blank(word):
        return False
    punctuation = "".join({ch for ch in text if unicodedata.category(ch).startswith("P")})
    target = word.casefold()
    return any(w.strip(punctuation).casefold() == target for w in text.split())


def first_to_upper(text: str | None) -> str:
    """Upper-case the first character; blank input yields ``""``."""
    if text is None or is_blank(text):
        return ""
    return text[0].upper() + text[1:]
