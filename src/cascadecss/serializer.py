"""Render stored rules back into canonical CSS text."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from cascadecss.model.rule import PropertyValue, property_values

__all__ = ["serialize", "serialize_properties"]


def _declarations(properties: Mapping[str, PropertyValue]) -> Iterable[tuple[str, str]]:
    """Yield ``(name, value)`` pairs sorted by name, one per stored value."""
    for name in sorted(properties):
        for value in property_values(properties[name]):
            yield name.lower(), value


def serialize(rules: Iterable[tuple[str, Mapping[str, PropertyValue]]]) -> str:
    """Serialize ``(selector, properties)`` pairs in the given order.

    Rules without properties are left out entirely. Output is one block per
    rule with tab-indented ``name: value;`` lines and no blank lines between
    blocks.
    """
    parts: list[str] = []
    for selector, properties in rules:
        if not properties:
            continue
        parts.append(f"{selector} {{\n")
        for name, value in _declarations(properties):
            parts.append(f"\t{name}: {value};\n")
        parts.append("}\n")
    return "".join(parts)


def serialize_properties(properties: Mapping[str, PropertyValue] | None) -> str:
    """Serialize one property map as ``name:value;`` fragments for a style attribute."""
    if not properties:
        return ""
    return "".join(f"{name}:{value};" for name, value in _declarations(properties))
