"""Split flattened stylesheet text into raw ``selector { declarations }`` pairs.

Example:
    a, b { color: red; }  /* note */
    .x { margin: 0; }

yields ``RawRule("a, b", " color: red; ")`` and ``RawRule(".x", " margin: 0; ")``.
Nested blocks and at-rules are not understood; braces are only used to cut
the text into chunks.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from cascadecss.model.diagnostic import Diagnostic
from cascadecss.model.rule import normalize_selector
from cascadecss.reporting import WarningSink

__all__ = ["RawRule", "flatten", "split_rules"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_BREAK_TABLE = str.maketrans({"\n": " ", "\r": " ", "\t": " "})

# Cut points: immediately after every closing brace.
_CHUNK_SPLIT_RE = re.compile(r"(?<=\})")

# Matches a complete rule chunk: selector { declarations }
_RULE_RE = re.compile(
    r"""
    \s*
    (?P<selector>[^{]+?)    # everything before the opening brace
    \s*\{                   # opening brace
    (?P<body>.*)            # declarations, not parsed for nested braces
    \}\s*                   # closing brace
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True)
class RawRule:
    """An unparsed rule: grouped selector text and its declaration block."""

    selector_text: str
    declaration_text: str

    @property
    def selectors(self) -> list[str]:
        """The individual selectors of a grouped selector list, trimmed."""
        return [s.strip() for s in self.selector_text.split(",") if s.strip()]


def flatten(text: str) -> str:
    """Replace line breaks and tabs with spaces and drop ``/* */`` comments."""
    return _COMMENT_RE.sub("", text.translate(_LINE_BREAK_TABLE))


def split_rules(text: str, sink: WarningSink) -> Iterator[RawRule]:
    """Yield every well-formed rule in *text*, reporting malformed chunks to *sink*."""
    for chunk in _CHUNK_SPLIT_RE.split(flatten(text)):
        if not chunk.strip():
            continue
        match = _RULE_RE.fullmatch(chunk)
        if match is None:
            sink.report(Diagnostic.malformed_rule(chunk))
            continue
        yield RawRule(
            selector_text=normalize_selector(match.group("selector")),
            declaration_text=match.group("body"),
        )
