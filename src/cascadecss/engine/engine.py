"""Stylesheet engine: ingests CSS text, exposes CRUD on rules, serializes back.

Ordering of selectors may shift when the same selector is seen twice while
ingesting: the last declaration wins and moves the selector to the end of
the store. Direct calls to :meth:`StylesheetEngine.add_selector` and
friends keep a selector where it already is.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from cascadecss.config import EngineConfig
from cascadecss.errors import MissingArgumentError, UninitializedUseError
from cascadecss.model.diagnostic import Diagnostic
from cascadecss.model.rule import (
    PropertyMap,
    PropertyValue,
    Rule,
    copy_properties,
    normalize_selector,
)
from cascadecss.parser.properties import PropertyParser
from cascadecss.parser.splitter import split_rules
from cascadecss.reporting import WarningSink, make_sink
from cascadecss.serializer import serialize, serialize_properties
from cascadecss.store.ordered import OrderedRuleStore

logger = logging.getLogger(__name__)


def _require(value: str | None, argument: str, operation: str) -> str:
    if value is None or not str(value).strip():
        raise MissingArgumentError(argument, operation)
    return str(value)


def _require_path(path: str | Path | None, operation: str) -> Path:
    if path is None or (isinstance(path, str) and not path.strip()):
        raise MissingArgumentError("path", operation)
    return Path(path)


class StylesheetEngine:
    """In-memory, order-preserving model of a CSS stylesheet."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self._store = OrderedRuleStore()
        self._sink: WarningSink = make_sink(self.config)
        self._parser = PropertyParser(
            process_browser_specific_properties=self.config.process_browser_specific_properties,
            retain_duplicate_properties=self.config.retain_duplicate_properties,
        )

    def _state(self, name: str):
        # Missing only when a subclass skipped StylesheetEngine.__init__.
        value = self.__dict__.get(name)
        if value is None:
            raise UninitializedUseError()
        return value

    @property
    def store(self) -> OrderedRuleStore:
        return self._state("_store")

    @property
    def sink(self) -> WarningSink:
        return self._state("_sink")

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, selector: object) -> bool:
        return isinstance(selector, str) and normalize_selector(selector) in self.store

    # --- ingest --------------------------------------------------------------

    def ingest(self, text: str | None) -> None:
        """Parse *text* and merge its rules into the store.

        Grouped selectors (``a, span``) are split into independent rules.
        A selector that is already stored is merged with its new properties
        (new values win per key) and moved to the end.

        Raises:
            MissingArgumentError: *text* is None.
            ParseError: a parse problem was found and the engine escalates.
        """
        store = self.store
        sink = self.sink
        sink.reset()
        if text is None:
            raise MissingArgumentError("css text", "ingest")

        if not text.strip():
            sink.report(Diagnostic.empty_input())
            return

        count = 0
        for raw in split_rules(text, sink):
            properties = self._parser.parse(raw.declaration_text, raw.selector_text, sink)
            for selector in raw.selectors:
                existing = store.get(selector)
                if existing is not None:
                    merged = {**existing, **properties}
                    store.remove(selector)
                    store.store(selector, merged)
                else:
                    store.store(selector, properties)
            count += 1
        logger.info(
            "Ingested %d rule(s); %d selector(s) stored, %d diagnostic(s)",
            count,
            len(store),
            len(sink.records),
        )

    read = ingest

    def diagnostics(self) -> list[str]:
        """Messages of the problems found by the most recent :meth:`ingest`."""
        return self.sink.messages()

    def diagnostic_records(self) -> list[Diagnostic]:
        return self.sink.records

    # --- output --------------------------------------------------------------

    def serialize(self) -> str:
        """Render every non-empty rule, in store order."""
        return serialize(self.store.items())

    write = serialize

    def serialize_selector(self, selector: str) -> str:
        """Render one selector's properties as ``name:value;`` fragments.

        The result has no braces, tabs or newlines and is meant for a
        ``style`` attribute.
        """
        selector = normalize_selector(_require(selector, "selector", "serialize_selector"))
        return serialize_properties(self.store.get(selector))

    output_selector = serialize_selector

    # --- inspection ----------------------------------------------------------

    def list_selectors(self) -> list[str]:
        return self.store.keys()

    def rules(self) -> list[Rule]:
        return [
            Rule(selector=selector, properties=copy_properties(properties))
            for selector, properties in self.store.items()
        ]

    def selector_exists(self, selector: str) -> bool:
        selector = normalize_selector(_require(selector, "selector", "selector_exists"))
        return self.store.exists(selector)

    def get_properties(self, selector: str) -> PropertyMap | None:
        """Return a copy of *selector*'s properties, or None if it is not stored."""
        selector = normalize_selector(_require(selector, "selector", "get_properties"))
        properties = self.store.get(selector)
        if properties is None:
            return None
        return copy_properties(properties)

    # --- mutation ------------------------------------------------------------

    def add_selector(self, selector: str, properties: Mapping[str, PropertyValue]) -> None:
        """Store *properties* under *selector*.

        An existing selector keeps its position (its cascade order) and has
        its properties replaced. Remove it first to move it to the end.
        """
        selector = normalize_selector(_require(selector, "selector", "add_selector"))
        if properties is None:
            raise MissingArgumentError("properties", "add_selector")
        self.store.store(selector, properties)

    def add_properties(self, selector: str, properties: Mapping[str, PropertyValue]) -> None:
        """Merge *properties* into *selector*, keeping its position.

        Unknown selectors are appended as with :meth:`add_selector`.
        """
        selector = normalize_selector(_require(selector, "selector", "add_properties"))
        if properties is None:
            raise MissingArgumentError("properties", "add_properties")
        existing = self.store.get(selector) or {}
        self.store.store(selector, {**existing, **copy_properties(properties)})

    def rename_selector(self, selector: str, new_selector: str) -> None:
        """Rename *selector* in place.

        Renaming a selector that is not stored appends an empty rule named
        *new_selector*; empty rules are not serialized.
        """
        selector = normalize_selector(_require(selector, "selector", "rename_selector"))
        new_selector = normalize_selector(
            _require(new_selector, "new selector", "rename_selector")
        )
        if not self.store.exists(selector):
            logger.info("rename_selector: %r is not stored, adding empty %r", selector, new_selector)
        self.store.rename(selector, new_selector)

    modify_selector = rename_selector

    def remove_selector(self, selector: str) -> None:
        selector = normalize_selector(_require(selector, "selector", "remove_selector"))
        self.store.remove(selector)

    delete_selector = remove_selector

    def remove_property(self, selector: str, property: str) -> None:
        """Drop one property from *selector*; unknown selectors are left alone."""
        selector = normalize_selector(_require(selector, "selector", "remove_property"))
        name = _require(property, "property", "remove_property").strip().lower()
        properties = self.store.get(selector)
        if properties is None:
            return
        remaining = {key: value for key, value in properties.items() if key != name}
        self.store.store(selector, remaining)

    delete_property = remove_property

    # --- files ---------------------------------------------------------------

    def read_file(self, path: str | Path, encoding: str = "utf-8") -> None:
        """Read the stylesheet at *path* and :meth:`ingest` it."""
        path = _require_path(path, "read_file")
        text = path.read_text(encoding=encoding)
        logger.info("Read %d character(s) from %s", len(text), path)
        self.ingest(text)

    def write_file(self, path: str | Path, encoding: str = "utf-8") -> None:
        """Write :meth:`serialize` output to *path*."""
        path = _require_path(path, "write_file")
        path.write_text(self.serialize(), encoding=encoding)
        logger.info("Wrote %d selector(s) to %s", len(self.store), path)
