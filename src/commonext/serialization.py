"""JSON serialization wrapper.

``serialize`` and ``deserialize`` never raise: any failure is logged and
reported as ``None``. ``try_deserialize`` keeps the failure as a ``Try`` for
callers that want to inspect it.
"""

from __future__ import annotations

from functools import cache
import json
import logging
import os
from pathlib import Path
from typing import IO, Any

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from commonext.config import Config
from commonext.errors import SerializationError
from commonext.result import Try

logger = logging.getLogger(__name__)

JsonSource = str | os.PathLike[str] | IO[str] | IO[bytes]


@cache
def type_adapter(target_type: Any) -> TypeAdapter[Any]:
    """Return a cached pydantic ``TypeAdapter`` for *target_type*."""
    return TypeAdapter(target_type)


def _log_swallowed(cfg: Config, operation: str, exc: BaseException) -> None:
    level = logging.WARNING if cfg.log_failures else logging.DEBUG
    logger.log(level, "JSON %s failed: %s: %s", operation, type(exc).__name__, exc)


def serialize(obj: Any, *, config: Config | None = None) -> str | None:
    """Render *obj* as JSON text, or ``None`` if *obj* is ``None`` or unserializable.

    Dataclasses, pydantic models, datetimes, UUIDs, sets and similar values
    are converted via pydantic.
    """
    if obj is None:
        return None
    cfg = config or Config()
    return (
        Try.create(
            lambda: json.dumps(
                obj,
                indent=cfg.json_indent,
                sort_keys=cfg.sort_keys,
                ensure_ascii=False,
                default=to_jsonable_python,
            )
        )
        .otherwise(lambda exc: _log_swallowed(cfg, "serialize", exc))
        .value_or_default
    )


_UTF8_BOM = b"\xef\xbb\xbf"


def _strip_bom(data: str | bytes) -> str | bytes:
    if isinstance(data, bytes):
        return data.removeprefix(_UTF8_BOM)
    return data.removeprefix("\ufeff")


def _read_text(source: JsonSource, encoding: str) -> str | bytes:
    # A leading UTF-8 byte-order mark is not valid JSON; drop it.
    if isinstance(source, (str, os.PathLike)):
        return _strip_bom(Path(source).read_text(encoding=encoding))
    if hasattr(source, "read"):
        return _strip_bom(source.read())
    raise SerializationError(
        f"Unsupported JSON source: {type(source).__name__}",
        hint="Pass a file path or a readable stream.",
    )


def try_deserialize[T](
    source: JsonSource, target_type: type[T], *, config: Config | None = None
) -> Try[T]:
    """Read JSON from *source* and validate it as *target_type*.

    *source* is a file path or a readable stream; streams are read but not
    closed.
    """
    cfg = config or Config()
    encoding = cfg.encoding or "utf-8"
    return Try.create(lambda: _read_text(source, encoding)).map(
        lambda text: type_adapter(target_type).validate_json(text)
    )


def deserialize[T](
    source: JsonSource, target_type: type[T], *, config: Config | None = None
) -> T | None:
    """Like ``try_deserialize`` but returns ``None`` on any failure."""
    cfg = config or Config()
    return (
        try_deserialize(source, target_type, config=cfg)
        .otherwise(lambda exc: _log_swallowed(cfg, "deserialize", exc))
        .value_or_default
    )
