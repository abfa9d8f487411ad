"""commonext: A Try result wrapper plus small everyday helpers.

Public API:
    - Try: Capture exceptions as data; compose with map/bind
    - safe / safe_async: Decorators returning Try instead of raising
    - Config: Settings for the serialization and resource helpers
    - strings, objects, xml, resources, serialization: helper modules
"""

from __future__ import annotations

import logging

from commonext import objects, resources, serialization, strings, xml
from commonext.config import Config
from commonext.errors import (
    CommonExtError,
    ConfigurationError,
    ContractError,
    ResourceError,
    SerializationError,
)
from commonext.result import Failure, Outcome, Success, Try, safe, safe_async

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("commonext")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("commonext").addHandler(logging.NullHandler())

__all__ = [
    "CommonExtError",
    "Config",
    "ConfigurationError",
    "ContractError",
    "Failure",
    "Outcome",
    "ResourceError",
    "SerializationError",
    "Success",
    "Try",
    "objects",
    "resources",
    "safe",
    "safe_async",
    "serialization",
    "strings",
    "xml",
]
