"""Warning sinks: collect recoverable parse diagnostics or escalate them.

Every recoverable-error site in the parser calls ``sink.report(diagnostic)``;
the sink chosen at engine construction decides whether processing continues.
"""

from __future__ import annotations

import logging
from typing import Protocol

from cascadecss.config import EngineConfig
from cascadecss.errors import (
    EmptyInputError,
    MalformedPropertyError,
    MalformedRuleError,
    ParseError,
)
from cascadecss.model.diagnostic import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)

_ERROR_TYPES: dict[DiagnosticKind, type[ParseError]] = {
    DiagnosticKind.MALFORMED_RULE: MalformedRuleError,
    DiagnosticKind.MALFORMED_PROPERTY: MalformedPropertyError,
    DiagnosticKind.EMPTY_INPUT: EmptyInputError,
}


class WarningSink(Protocol):
    """Protocol for diagnostic sinks used during ingest."""

    def report(self, diagnostic: Diagnostic) -> None: ...

    def reset(self) -> None: ...

    @property
    def records(self) -> list[Diagnostic]: ...

    def messages(self) -> list[str]: ...


class CollectingSink:
    """Accumulates diagnostics, deduplicated by message text."""

    def __init__(self) -> None:
        self._records: dict[str, Diagnostic] = {}

    def report(self, diagnostic: Diagnostic) -> None:
        logger.warning("%s", diagnostic.message)
        self._records.setdefault(diagnostic.message, diagnostic)

    def reset(self) -> None:
        self._records = {}

    @property
    def records(self) -> list[Diagnostic]:
        return list(self._records.values())

    def messages(self) -> list[str]:
        return list(self._records)


class EscalatingSink:
    """Turns the first reported diagnostic into a :class:`ParseError`."""

    def report(self, diagnostic: Diagnostic) -> None:
        logger.warning("%s", diagnostic.message)
        raise to_error(diagnostic)

    def reset(self) -> None:
        pass

    @property
    def records(self) -> list[Diagnostic]:
        return []

    def messages(self) -> list[str]:
        return []


def to_error(diagnostic: Diagnostic) -> ParseError:
    """Build the :class:`ParseError` subclass matching *diagnostic*'s kind."""
    error_cls = _ERROR_TYPES.get(diagnostic.kind, ParseError)
    return error_cls(diagnostic)


def make_sink(config: EngineConfig) -> WarningSink:
    """Select the diagnostic strategy configured for an engine."""
    if config.escalate_on_parse_error:
        return EscalatingSink()
    return CollectingSink()
