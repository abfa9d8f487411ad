"""XML helpers for ``xml.etree.ElementTree`` elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element


def _local_name(tag: str) -> str:
    # ElementTree spells namespaced names as "{uri}local".
    return tag.rsplit("}", 1)[-1]


def get_attribute_values(element: Element) -> dict[str, str]:
    """Map each attribute's upper-cased local name to its value."""
    return {_local_name(name).upper(): value for name, value in element.attrib.items()}


def get_scalar_attribute_values(element: Element) -> dict[str, str]:
    """Map upper-cased child names to their text for leaf children.

    A child counts when it has no sub-elements, no attributes, and non-empty
    text. Later duplicates overwrite earlier ones.
    """
    attrs: dict[str, str] = {}
    for child in element:
        if not isinstance(child.tag, str):
            # comments and processing instructions
            continue
        if len(child) or child.attrib or not child.text:
            continue
        attrs[_local_name(child.tag).upper()] = child.text
    return attrs
