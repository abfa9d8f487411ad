"""XML attribute extraction tests."""

from __future__ import annotations

from xml.etree import ElementTree

import pytest

from commonext import xml

pytestmark = pytest.mark.unit

_DOC = """
<device xmlns:v="urn:vendor" id="d1" v:model="X200" Name="pump">
    <serial>SN-1</serial>
    <location building="B">Hall</location>
    <empty/>
    <nested><inner>1</inner></nested>
    <!-- comment -->
    <v:firmware>2.1</v:firmware>
    <serial>SN-2</serial>
</device>
"""


@pytest.fixture
def device() -> ElementTree.Element:
    return ElementTree.fromstring(_DOC)


def test_get_attribute_values_upper_cases_local_names(device: ElementTree.Element) -> None:
    assert xml.get_attribute_values(device) == {
        "ID": "d1",
        "MODEL": "X200",
        "NAME": "pump",
    }


def test_get_scalar_attribute_values_keeps_only_plain_leaf_children(
    device: ElementTree.Element,
) -> None:
    assert xml.get_scalar_attribute_values(device) == {
        "SERIAL": "SN-2",
        "FIRMWARE": "2.1",
    }


def test_element_without_children_or_attributes() -> None:
    leaf = ElementTree.fromstring("<a/>")

    assert xml.get_attribute_values(leaf) == {}
    assert xml.get_scalar_attribute_values(leaf) == {}
