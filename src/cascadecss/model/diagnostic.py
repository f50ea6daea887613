"""Diagnostic model: recoverable problems found while parsing a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """What kind of parse problem a diagnostic describes."""

    MALFORMED_RULE = "malformed_rule"
    MALFORMED_PROPERTY = "malformed_property"
    EMPTY_INPUT = "empty_input"


@dataclass(frozen=True)
class Diagnostic:
    """A single recoverable parse finding.

    Attributes:
        kind: The category of problem.
        message: Human-readable description; also the deduplication key.
        selector: The raw selector text of the owning rule, if applicable.
    """

    kind: DiagnosticKind
    message: str
    selector: str | None = None

    @classmethod
    def malformed_rule(cls, chunk: str) -> Diagnostic:
        return cls(
            DiagnosticKind.MALFORMED_RULE,
            f"Invalid or unexpected style data '{chunk}'",
        )

    @classmethod
    def malformed_property(cls, fragment: str, selector: str) -> Diagnostic:
        return cls(
            DiagnosticKind.MALFORMED_PROPERTY,
            f"Invalid or unexpected property '{fragment}' in style '{selector}'",
            selector=selector,
        )

    @classmethod
    def empty_input(cls) -> Diagnostic:
        return cls(
            DiagnosticKind.EMPTY_INPUT,
            "No stylesheet data was found in the document",
        )

    def __str__(self) -> str:
        return self.message
