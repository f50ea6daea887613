"""Stylesheet text parsing: rule splitting and declaration parsing."""

from cascadecss.parser.properties import PropertyParser, store_property
from cascadecss.parser.splitter import RawRule, flatten, split_rules

__all__ = ["RawRule", "flatten", "split_rules", "PropertyParser", "store_property"]
