"""Workspace state: settings, open documents and the stylesheet index."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import Settings
from .document import Document, Position, path_to_uri, uri_to_path
from .markup.locator import Selector, find_selector
from .resolver import resolve_definition, search_symbols
from .storage import StylesheetIndex, StylesheetIndexEntry
from .stylesheet import STYLESHEET_EXTENSIONS, Location, StylesheetSymbol, is_stylesheet_language, parse_stylesheet


logger = logging.getLogger(__name__)


class Workspace:
    """Owner of everything a lookup reads.

    The stylesheet index is only written by the lifecycle methods
    (``load_stylesheets``, ``sync_document``); lookups only read it.
    """

    def __init__(self, settings: Optional[Settings] = None, index: Optional[StylesheetIndex] = None):
        self.settings = settings or Settings()
        self.index = index if index is not None else StylesheetIndex()
        self.documents: dict[str, Document] = {}

    # Lifecycle

    def load_stylesheets(self, paths: Iterable) -> tuple[list[StylesheetIndexEntry], list[str]]:
        """Read and index stylesheet files from disk, one after another.

        Returns:
            Tuple of (indexed entries, warnings for files that were skipped).
        """
        entries = []
        warnings = []

        for path in paths:
            file_path = Path(path).expanduser()
            language_id = STYLESHEET_EXTENSIONS.get(file_path.suffix.lower())
            if not language_id:
                warnings.append(f"Not a stylesheet: {file_path}")
                continue

            try:
                text = file_path.read_text(encoding="utf-8", errors="replace")
            except OSError as e:
                warnings.append(f"Failed to read {file_path}: {e}")
                continue

            document = Document(uri=path_to_uri(file_path), language_id=language_id, text=text, version=1)
            entries.append(self.index_stylesheet(document))

        logger.info("Loaded %d stylesheets (%d skipped)", len(entries), len(warnings))
        return entries, warnings

    def sync_document(self, document: Document) -> Optional[StylesheetIndexEntry]:
        """Record an opened or changed document.

        Stylesheets are re-extracted and replace their index entry.

        Returns:
            The new index entry, or None when the document is not an
            indexed stylesheet.
        """
        self.documents[document.uri] = document

        if self.is_excluded(document.uri):
            logger.debug("Document excluded: %s", document.uri)
            return None

        logger.debug("Document synced: %s (version %d)", Path(uri_to_path(document.uri)).name, document.version)
        if not is_stylesheet_language(document.language_id):
            return None
        return self.index_stylesheet(document)

    def close_document(self, uri: str) -> bool:
        """Forget an open document. Its index entry, if any, is kept."""
        return self.documents.pop(uri, None) is not None

    def index_stylesheet(self, document: Document) -> StylesheetIndexEntry:
        symbols = parse_stylesheet(document)
        entry = self.index.upsert(document.uri, document, symbols)
        logger.debug("Indexed %s: %d symbols", document.uri, len(symbols))
        return entry

    def update_settings(self, settings: Settings):
        self.settings = settings
        logger.info("Settings updated: %s", settings.to_dict())

    # Queries

    def get_document(self, uri: str) -> Optional[Document]:
        return self.documents.get(uri)

    def is_excluded(self, uri: str) -> bool:
        return self.settings.is_excluded(uri_to_path(uri))

    def should_ignore(self, document: Document) -> bool:
        """Check if definitions may not be requested from ``document``."""
        return (
            document.language_id not in self.settings.peek_from_languages
            or self.is_excluded(document.uri)
        )

    def find_selector(self, document: Document, position: Position) -> Optional[Selector]:
        if self.should_ignore(document):
            logger.debug("Ignoring lookup in %s", document.uri)
            return None
        return find_selector(document, position, self.settings)

    def find_definition(self, document: Document, position: Position) -> tuple[Optional[Selector], list[Location]]:
        """Find the selector at ``position`` and where it is defined."""
        selector = self.find_selector(document, position)
        if selector is None:
            return None, []
        return selector, resolve_definition(selector, self.index)

    def search_symbols(self, query: str) -> list[StylesheetSymbol]:
        return search_symbols(query, self.index)
