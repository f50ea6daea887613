"""Stylesheet engine -- public API over the parse/store/serialize core."""

from cascadecss.engine.engine import StylesheetEngine

__all__ = ["StylesheetEngine"]
