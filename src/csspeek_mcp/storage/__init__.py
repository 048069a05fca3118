"""Storage package for the stylesheet symbol index."""

from .index_store import StylesheetIndex, StylesheetIndexEntry

__all__ = ["StylesheetIndex", "StylesheetIndexEntry"]
