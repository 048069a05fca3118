"""Stylesheet symbol and location dataclasses."""

from dataclasses import dataclass

from ..document import Document, Position


SYMBOL_KINDS = ("class", "id", "other")


@dataclass(frozen=True)
class Location:
    """A span inside a document."""
    uri: str                        # Document URI
    start_offset: int               # Start character offset
    end_offset: int                 # End character offset (exclusive)
    start: Position                 # Start position (UTF-16 columns)
    end: Position                   # End position

    @classmethod
    def from_offsets(cls, document: Document, start_offset: int, end_offset: int) -> "Location":
        return cls(
            uri=document.uri,
            start_offset=start_offset,
            end_offset=end_offset,
            start=document.position_at(start_offset),
            end=document.position_at(end_offset),
        )

    def to_dict(self) -> dict:
        return {
            "uri": self.uri,
            "range": {"start": self.start.to_dict(), "end": self.end.to_dict()},
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
        }


@dataclass(frozen=True)
class StylesheetSymbol:
    """A selector extracted from a stylesheet."""
    name: str                       # Selector text as written (e.g. ".a.b", "#main .item")
    kind: str                       # "class" | "id" | "other"
    location: Location              # Where the selector is written

    @property
    def uri(self) -> str:
        return self.location.uri

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind,
            "uri": self.location.uri,
            "location": self.location.to_dict(),
        }
