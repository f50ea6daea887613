"""Ordered selector -> property map store.

Position in the store stands in for cascade order: a later position means a
later (overriding) rule. The store keeps selectors unique and only ever
holds its own copies of property maps.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from cascadecss.model.rule import PropertyMap, PropertyValue, copy_properties

logger = logging.getLogger(__name__)


class OrderedRuleStore:
    """Insertion-ordered mapping of selector strings to property maps."""

    def __init__(self) -> None:
        self._rules: dict[str, PropertyMap] = {}

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, selector: object) -> bool:
        return selector in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._rules))

    def exists(self, selector: str) -> bool:
        return selector in self._rules

    def get(self, selector: str) -> PropertyMap | None:
        """Return the stored map for *selector* (not a copy), or None."""
        return self._rules.get(selector)

    def keys(self) -> list[str]:
        return list(self._rules)

    def items(self) -> list[tuple[str, PropertyMap]]:
        return list(self._rules.items())

    def store(self, selector: str, properties: Mapping[str, PropertyValue]) -> None:
        """Store a copy of *properties* under *selector*.

        A new selector is appended at the end. An existing selector keeps
        its position and only has its map replaced.
        """
        if selector in self._rules:
            logger.debug("Replacing properties of %r in place", selector)
        else:
            logger.debug("Appending %r", selector)
        self._rules[selector] = copy_properties(properties)

    def remove(self, selector: str) -> None:
        """Delete *selector*; does nothing if it is not stored."""
        self._rules.pop(selector, None)

    def rename(self, selector: str, new_selector: str) -> None:
        """Give the rule at *selector*'s position the name *new_selector*.

        If *selector* is not stored, an empty rule named *new_selector* is
        stored instead. Any other rule already named *new_selector* is
        dropped.
        """
        if selector not in self._rules:
            self.store(new_selector, {})
            return
        if selector == new_selector:
            return
        renamed: dict[str, PropertyMap] = {}
        for key, properties in self._rules.items():
            if key == new_selector:
                continue
            if key == selector:
                renamed[new_selector] = properties
            else:
                renamed[key] = properties
        self._rules = renamed
        logger.debug("Renamed %r to %r", selector, new_selector)
