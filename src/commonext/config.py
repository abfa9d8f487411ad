"""Configuration: Frozen Config for serialization and resource helpers."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os

from dotenv import load_dotenv

from commonext.errors import ConfigurationError

load_dotenv()

_DEFAULT_ENCODING = "utf-8"
_ENCODING_ENV_VAR = "COMMONEXT_ENCODING"
_LOG_FAILURES_ENV_VAR = "COMMONEXT_LOG_FAILURES"


@dataclass(frozen=True)
class Config:
    """Immutable settings shared by the serialization and resource helpers.

    Text encoding and failure logging are auto-resolved from the environment
    when left as *None*.

    Example:
        config = Config(json_indent=None, sort_keys=True)
        text = serialize({"b": 1, "a": 2}, config=config)
    """

    #: Spaces per indent level; *None* renders compact single-line JSON.
    json_indent: int | None = 2
    sort_keys: bool = False
    #: Auto-resolved from ``COMMONEXT_ENCODING`` (default ``utf-8``) when *None*.
    encoding: str | None = None
    #: Auto-resolved from ``COMMONEXT_LOG_FAILURES`` when *None*.
    log_failures: bool | None = None

    def __post_init__(self) -> None:
        """Resolve environment defaults and validate configuration."""
        if self.json_indent is not None and self.json_indent < 0:
            raise ConfigurationError(
                f"json_indent must be ≥ 0, got {self.json_indent}",
                hint="Use None for compact single-line output.",
            )

        if self.encoding is None:
            resolved = os.environ.get(_ENCODING_ENV_VAR) or _DEFAULT_ENCODING
            object.__setattr__(self, "encoding", resolved)

        try:
            codecs.lookup(str(self.encoding))
        except LookupError:
            raise ConfigurationError(
                f"Unknown text encoding: {self.encoding!r}",
                hint=f"Set {_ENCODING_ENV_VAR} or pass encoding=... with a codec name such as 'utf-8'.",
            ) from None

        if self.log_failures is None:
            object.__setattr__(
                self,
                "log_failures",
                os.environ.get(_LOG_FAILURES_ENV_VAR) == "1",
            )

    def __str__(self) -> str:
        """Return a short, developer-friendly representation."""
        return (
            f"Config(json_indent={self.json_indent!r}, sort_keys={self.sort_keys}, "
            f"encoding={self.encoding!r}, log_failures={self.log_failures})"
        )

    __repr__ = __str__
