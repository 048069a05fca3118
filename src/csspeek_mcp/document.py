"""Document snapshots with UTF-16 position <-> offset conversion."""

import os
from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse


# File extension to language id mapping (editor language ids)
EXTENSION_LANGUAGE_IDS = {
    ".html": "html",
    ".htm": "html",
    ".xhtml": "html",
    ".vue": "vue",
    ".svelte": "svelte",
    ".php": "php",
    ".erb": "erb",
    ".hbs": "handlebars",
    ".jsx": "javascriptreact",
    ".tsx": "typescriptreact",
    ".js": "javascript",
    ".ts": "typescript",
    ".css": "css",
    ".scss": "scss",
    ".less": "less",
}


@dataclass(frozen=True)
class Position:
    """Zero-based line and UTF-16 character offset."""
    line: int
    character: int

    def to_dict(self) -> dict:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of a text document."""
    uri: str
    language_id: str
    text: str
    version: int = 1
    _line_starts: list[int] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_line_starts", _compute_line_starts(self.text))

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def offset_at(self, position: Position) -> int:
        """Convert a position to a character offset into ``text``.

        Out-of-range lines and characters are clamped to the document and
        line bounds, as editors do.
        """
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self.text)

        line_start = self._line_starts[position.line]
        line_end = self._line_end(position.line)

        units = 0
        offset = line_start
        while offset < line_end:
            width = _utf16_width(self.text[offset])
            if units + width > position.character:
                break
            units += width
            offset += 1
        return offset

    def position_at(self, offset: int) -> Position:
        """Convert a character offset into a position."""
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line]
        character = sum(_utf16_width(ch) for ch in self.text[line_start:offset])
        return Position(line=line, character=character)

    def _line_end(self, line: int) -> int:
        """Offset of the end of a line, excluding its line break."""
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
            if end > 0 and self.text[end] == "\n" and self.text[end - 1] == "\r":
                end -= 1
            return end
        return len(self.text)


def _compute_line_starts(text: str) -> list[int]:
    """Offsets at which each line starts. Handles \\n, \\r\\n and \\r."""
    starts = [0]
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == "\r":
            if i + 1 < length and text[i + 1] == "\n":
                i += 1
            starts.append(i + 1)
        elif ch == "\n":
            starts.append(i + 1)
        i += 1
    return starts


def _utf16_width(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def uri_to_path(uri: str) -> str:
    """Convert a ``file://`` URI to a filesystem path. Other strings pass through."""
    if not uri.startswith("file:"):
        return uri
    parsed = urlparse(uri)
    path = unquote(parsed.path)
    # file:///C:/dir -> C:/dir
    if os.name == "nt" and len(path) > 2 and path[0] == "/" and path[2] == ":":
        path = path[1:]
    return path


def path_to_uri(path) -> str:
    """Convert a filesystem path to a ``file://`` URI."""
    return Path(path).expanduser().resolve().as_uri()


def guess_language_id(uri: str) -> Optional[str]:
    """Guess the editor language id from a URI or path extension."""
    _, ext = os.path.splitext(uri_to_path(uri))
    return EXTENSION_LANGUAGE_IDS.get(ext.lower())


def byte_to_char_converter(text: str, source_bytes: bytes):
    """Build a UTF-8 byte offset -> character offset converter for ``text``."""
    if len(source_bytes) == len(text):
        return lambda byte_offset: byte_offset

    char_at_byte = [0] * (len(source_bytes) + 1)
    byte_offset = 0
    for char_offset, ch in enumerate(text):
        width = len(ch.encode("utf-8", "surrogatepass"))
        for i in range(width):
            char_at_byte[byte_offset + i] = char_offset
        byte_offset += width
    char_at_byte[byte_offset] = len(text)

    return lambda offset: char_at_byte[min(offset, len(source_bytes))]


def normalize_uri(uri_or_path: str) -> str:
    """Return ``uri_or_path`` as a URI, converting bare filesystem paths."""
    if "://" in uri_or_path or uri_or_path.startswith("untitled:"):
        return uri_or_path
    return path_to_uri(uri_or_path)
