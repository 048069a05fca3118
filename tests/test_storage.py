"""Tests for storage module."""

import pytest

from csspeek_mcp.document import Document
from csspeek_mcp.markup import Selector
from csspeek_mcp.resolver import resolve_definition, search_symbols
from csspeek_mcp.storage import StylesheetIndex
from csspeek_mcp.stylesheet import parse_stylesheet


def _stylesheet(uri: str, text: str, version: int = 1) -> Document:
    return Document(uri=uri, language_id="css", text=text, version=version)


def test_upsert_and_get():
    """Test adding an entry and reading it back."""
    index = StylesheetIndex()
    doc = _stylesheet("file:///a.css", ".a {}\n#b {}")

    entry = index.upsert(doc.uri, doc, parse_stylesheet(doc))

    assert index.get("file:///a.css") is entry
    assert "file:///a.css" in index
    assert len(index) == 1
    assert index.symbol_count() == 2
    assert entry.to_summary() == {
        "uri": "file:///a.css",
        "language": "css",
        "version": 1,
        "symbol_count": 2,
    }


def test_upsert_replaces_whole_entry():
    """Test an update drops symbols that no longer exist."""
    index = StylesheetIndex()
    old = _stylesheet("file:///a.css", ".old {}")
    new = _stylesheet("file:///a.css", ".new {}", version=2)

    index.upsert(old.uri, old, parse_stylesheet(old))
    index.upsert(new.uri, new, parse_stylesheet(new))

    entry = index.get("file:///a.css")
    assert [s.name for s in entry.symbols] == [".new"]
    assert entry.document.version == 2
    assert len(index) == 1


def test_upsert_is_idempotent():
    """Test indexing the same text twice gives the same entry."""
    index = StylesheetIndex()
    doc = _stylesheet("file:///a.css", ".a, .b {}")

    first = index.upsert(doc.uri, doc, parse_stylesheet(doc))
    definitions = resolve_definition(Selector("class", "a"), index)
    results = search_symbols("b", index)

    second = index.upsert(doc.uri, doc, parse_stylesheet(doc))

    assert first.symbols == second.symbols
    assert index.symbol_count() == 2
    assert resolve_definition(Selector("class", "a"), index) == definitions
    assert search_symbols("b", index) == results
    assert len(definitions) == 1
    assert len(results) == 1


def test_iteration_order():
    """Test entries iterate in first-insertion order."""
    index = StylesheetIndex()
    for name in ("b", "a", "c"):
        doc = _stylesheet(f"file:///{name}.css", f".{name} {{}}")
        index.upsert(doc.uri, doc, parse_stylesheet(doc))

    # Replacing an entry keeps its place
    doc = _stylesheet("file:///b.css", ".b2 {}", version=2)
    index.upsert(doc.uri, doc, parse_stylesheet(doc))

    assert index.uris() == ["file:///b.css", "file:///a.css", "file:///c.css"]
    assert [e.uri for e in index] == index.uris()


def test_get_missing():
    """Test unknown URIs return None."""
    index = StylesheetIndex()
    assert index.get("file:///missing.css") is None
    assert "file:///missing.css" not in index
