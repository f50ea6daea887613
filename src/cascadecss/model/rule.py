"""Rule model: property values, property maps and selector/properties pairs."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union

# A single value, or every value assigned to a key when duplicates are retained.
PropertyValue = Union[str, list[str]]
PropertyMap = dict[str, PropertyValue]

_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


@dataclass(frozen=True)
class Rule:
    """One selector paired with its property declarations."""

    selector: str
    properties: PropertyMap = field(default_factory=dict)


def normalize_selector(text: str) -> str:
    """Collapse runs of whitespace to a single space and trim the ends."""
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


def property_values(value: PropertyValue) -> list[str]:
    """Return *value* as a list, wrapping a single string."""
    if isinstance(value, list):
        return value
    return [value]


def copy_properties(properties: Mapping[str, PropertyValue]) -> PropertyMap:
    """Return an owned copy of *properties* with lowercased keys.

    List values are copied too, so the result shares no mutable state with
    the caller's mapping.
    """
    copied: PropertyMap = {}
    for key, value in properties.items():
        if isinstance(value, (list, tuple)):
            copied[key.lower()] = [str(v) for v in value]
        else:
            copied[key.lower()] = str(value)
    return copied
