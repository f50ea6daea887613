"""cascadecss model layer -- public type re-exports."""

from cascadecss.model.diagnostic import Diagnostic, DiagnosticKind
from cascadecss.model.rule import (
    PropertyMap,
    PropertyValue,
    Rule,
    copy_properties,
    normalize_selector,
    property_values,
)

__all__ = [
    # rule
    "PropertyValue",
    "PropertyMap",
    "Rule",
    "copy_properties",
    "normalize_selector",
    "property_values",
    # diagnostic
    "DiagnosticKind",
    "Diagnostic",
]
