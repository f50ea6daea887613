"""Parse one rule's declaration block into a property map."""

from __future__ import annotations

import re

from cascadecss.model.diagnostic import Diagnostic
from cascadecss.model.rule import PropertyMap
from cascadecss.reporting import WarningSink

__all__ = ["PropertyParser", "store_property"]

# Matches a single declaration fragment: name: value
_PROP_RE = re.compile(
    r"""
    \s*
    (?P<name>[\w.\-]+)     # property name
    \s*:\s*                # colon separator
    (?P<value>.*?)         # value, everything up to the end of the fragment
    \s*
    """,
    re.VERBOSE | re.DOTALL,
)

# Legacy browser-targeting hacks: *zoom, -moz-..., _height, escaped names.
_BROWSER_SPECIFIC_RE = re.compile(r"\s*[*\-_]")


def is_browser_specific(fragment: str) -> bool:
    return bool(_BROWSER_SPECIFIC_RE.match(fragment)) or "\\" in fragment


def store_property(
    properties: PropertyMap, name: str, value: str, *, retain_duplicates: bool
) -> None:
    """Store *value* under the lowercased *name*.

    Without duplicate retention the value replaces any previous one. With
    it, a repeated key turns into a list that keeps every value in
    assignment order.
    """
    key = name.lower()
    if not retain_duplicates or key not in properties:
        properties[key] = value
        return
    existing = properties[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        properties[key] = [existing, value]


class PropertyParser:
    """Turns declaration text into a :data:`PropertyMap`."""

    def __init__(
        self,
        *,
        process_browser_specific_properties: bool = False,
        retain_duplicate_properties: bool = False,
    ) -> None:
        self.process_browser_specific_properties = process_browser_specific_properties
        self.retain_duplicate_properties = retain_duplicate_properties

    def parse(self, declaration_text: str, selector_text: str, sink: WarningSink) -> PropertyMap:
        """Parse *declaration_text*; malformed fragments are reported to *sink*."""
        properties: PropertyMap = {}
        for fragment in declaration_text.split(";"):
            if not fragment.strip():
                continue
            if not self.process_browser_specific_properties and is_browser_specific(fragment):
                continue
            match = _PROP_RE.fullmatch(fragment)
            if match is None:
                sink.report(Diagnostic.malformed_property(fragment, selector_text))
                continue
            store_property(
                properties,
                match.group("name"),
                match.group("value"),
                retain_duplicates=self.retain_duplicate_properties,
            )
        return properties
