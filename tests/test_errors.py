from __future__ import annotations

import pytest

from commonext.errors import (
    CommonExtError,
    ConfigurationError,
    ContractError,
    ResourceError,
    SerializationError,
)

pytestmark = pytest.mark.unit


def test_hint_is_optional_metadata() -> None:
    err = ResourceError("missing", hint="check the package name")

    assert str(err) == "missing"
    assert err.hint == "check the package name"
    assert CommonExtError("plain").hint is None


@pytest.mark.parametrize(
    "cls", [ConfigurationError, ContractError, ResourceError, SerializationError]
)
def test_subclass_hierarchy(cls: type[CommonExtError]) -> None:
    """Every library error is catchable as CommonExtError."""
    assert isinstance(cls("x"), CommonExtError)
