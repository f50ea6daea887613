"""cascadecss -- read, manipulate and write CSS while respecting the cascade order."""

__version__ = "0.3.0"

from cascadecss.config import EngineConfig  # noqa: E402
from cascadecss.engine import StylesheetEngine  # noqa: E402
from cascadecss.errors import (  # noqa: E402
    CssError,
    EmptyInputError,
    MalformedPropertyError,
    MalformedRuleError,
    MissingArgumentError,
    ParseError,
    UninitializedUseError,
)
from cascadecss.model import Diagnostic, DiagnosticKind, PropertyMap, PropertyValue, Rule  # noqa: E402

__all__ = [
    "__version__",
    "StylesheetEngine",
    "EngineConfig",
    # model
    "Rule",
    "PropertyMap",
    "PropertyValue",
    "Diagnostic",
    "DiagnosticKind",
    # errors
    "CssError",
    "ParseError",
    "MalformedRuleError",
    "MalformedPropertyError",
    "EmptyInputError",
    "MissingArgumentError",
    "UninitializedUseError",
]
