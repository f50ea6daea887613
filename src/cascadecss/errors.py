"""Error hierarchy for cascadecss."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cascadecss.model.diagnostic import Diagnostic


class CssError(Exception):
    """Base error for all cascadecss errors."""


class ParseError(CssError):
    """A recoverable parse problem that was escalated to a hard failure."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


# ---------------------------------------------------------------------------
# Specific parse errors
# ---------------------------------------------------------------------------


class MalformedRuleError(ParseError):
    """A chunk of stylesheet text is not shaped like ``selector { ... }``."""


class MalformedPropertyError(ParseError):
    """A declaration is not shaped like ``name: value``."""


class EmptyInputError(ParseError):
    """No stylesheet data was given to ingest."""


# ---------------------------------------------------------------------------
# Programming errors (never routed through a warning sink)
# ---------------------------------------------------------------------------


class MissingArgumentError(CssError, ValueError):
    """A required argument (selector, property, text, path) was absent or blank."""

    def __init__(self, argument: str, operation: str) -> None:
        super().__init__(f"{operation}() requires a {argument} argument")
        self.argument = argument
        self.operation = operation


class UninitializedUseError(CssError, RuntimeError):
    """An engine method was called on an instance whose __init__ never ran."""

    def __init__(self) -> None:
        super().__init__(
            "StylesheetEngine must be instantiated before it can be used"
        )
