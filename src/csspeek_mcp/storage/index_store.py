"""In-memory stylesheet symbol index keyed by document URI."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..document import Document
from ..stylesheet.symbols import StylesheetSymbol


@dataclass
class StylesheetIndexEntry:
    """Symbols extracted from the current text of one stylesheet."""
    uri: str                                  # Stylesheet URI
    document: Document                        # Snapshot the symbols were extracted from
    symbols: list[StylesheetSymbol] = field(default_factory=list)

    def to_summary(self) -> dict:
        return {
            "uri": self.uri,
            "language": self.document.language_id,
            "version": self.document.version,
            "symbol_count": len(self.symbols),
        }


class StylesheetIndex:
    """Mapping of stylesheet URI to its index entry.

    Entries are replaced whole on every update and iterate in insertion
    order. There is no removal: a stylesheet stays indexed after its
    document is closed.
    """

    def __init__(self):
        self._entries: dict[str, StylesheetIndexEntry] = {}

    def upsert(self, uri: str, document: Document, symbols: list[StylesheetSymbol]) -> StylesheetIndexEntry:
        """Create or fully replace the entry for ``uri``."""
        entry = StylesheetIndexEntry(uri=uri, document=document, symbols=list(symbols))
        self._entries[uri] = entry
        return entry

    def get(self, uri: str) -> Optional[StylesheetIndexEntry]:
        """Find an entry by URI."""
        return self._entries.get(uri)

    def entries(self) -> list[StylesheetIndexEntry]:
        """Entries in index iteration order."""
        return list(self._entries.values())

    def uris(self) -> list[str]:
        return list(self._entries)

    def symbol_count(self) -> int:
        return sum(len(e.symbols) for e in self._entries.values())

    def __contains__(self, uri: str) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StylesheetIndexEntry]:
        return iter(self.entries())
