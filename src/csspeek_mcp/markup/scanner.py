"""Forward-only markup token scanner backed by tree-sitter."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from tree_sitter_language_pack import get_parser

from ..document import byte_to_char_converter
from .languages import MarkupSpec, get_markup_spec


class TokenType(Enum):
    START_TAG = "start_tag"
    END_TAG = "end_tag"
    ATTRIBUTE_NAME = "attribute_name"
    ATTRIBUTE_VALUE = "attribute_value"
    COMMENT = "comment"
    CONTENT = "content"
    EOS = "eos"


@dataclass(frozen=True)
class Token:
    """A markup token with character offsets into the scanned text."""
    kind: TokenType
    text: str
    start_offset: int
    end_offset: int


class Scanner:
    """Lazy token stream over a markup document.

    Mirrors the classic scanner protocol: ``scan()`` advances and returns the
    token type, the accessors describe the current token, and ``EOS`` is
    returned forever once the stream is exhausted. Parsing happens on the
    first ``scan()`` call. Malformed markup never raises; tree-sitter
    recovers and the scanner reports whatever tokens survive.
    """

    def __init__(self, text: str, spec: MarkupSpec):
        self._text = text
        self._spec = spec
        self._tokens = _iter_tokens(text, spec)
        self._token: Optional[Token] = None

    def scan(self) -> TokenType:
        self._token = next(self._tokens, None)
        if self._token is None:
            end = len(self._text)
            self._token = Token(TokenType.EOS, "", end, end)
        return self._token.kind

    def get_token_type(self) -> TokenType:
        return self._token.kind if self._token else TokenType.EOS

    def get_token_text(self) -> str:
        return self._token.text if self._token else ""

    def get_token_offset(self) -> int:
        return self._token.start_offset if self._token else 0

    def get_token_end(self) -> int:
        return self._token.end_offset if self._token else 0

    def get_token(self) -> Optional[Token]:
        return self._token

    def __iter__(self) -> Iterator[Token]:
        while self.scan() is not TokenType.EOS:
            yield self._token


def create_scanner(text: str, language_id: Optional[str] = "html") -> Scanner:
    """Create a scanner for ``text`` using the grammar for ``language_id``."""
    return Scanner(text, get_markup_spec(language_id))


def _iter_tokens(text: str, spec: MarkupSpec) -> Iterator[Token]:
    """Walk the syntax tree in document order and yield markup tokens."""
    source_bytes = text.encode("utf-8", "surrogatepass")
    parser = get_parser(spec.ts_language)
    tree = parser.parse(source_bytes)
    to_char = byte_to_char_converter(text, source_bytes)

    def make_token(kind: TokenType, node) -> Token:
        start = to_char(node.start_byte)
        end = to_char(node.end_byte)
        return Token(kind, text[start:end], start, end)

    # Explicit stack; deeply nested documents would exhaust recursion
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        node_type = node.type

        if node_type in spec.comment_node_types:
            yield make_token(TokenType.COMMENT, node)
            continue

        if node_type in spec.content_node_types:
            yield make_token(TokenType.CONTENT, node)
            continue

        if node_type in spec.attribute_node_types:
            yield from _attribute_tokens(node, spec, make_token)
            continue

        children = list(node.children)
        if node_type in spec.start_tag_node_types or node_type in spec.end_tag_node_types:
            name_node = _tag_name_node(node, spec)
            if name_node is not None:
                kind = TokenType.START_TAG if node_type in spec.start_tag_node_types else TokenType.END_TAG
                yield make_token(kind, name_node)
                children = [c for c in children if c.id != name_node.id]

        stack.extend(reversed(children))


def _tag_name_node(node, spec: MarkupSpec):
    """Find the node holding an element's tag name."""
    if spec.tag_name_field:
        name_node = node.child_by_field_name(spec.tag_name_field)
        if name_node is not None:
            return name_node
    for child in node.children:
        if child.type in spec.tag_name_node_types:
            return child
    return None


def _attribute_tokens(node, spec: MarkupSpec, make_token) -> Iterator[Token]:
    """Yield the name and (optional) value tokens of an attribute node."""
    named = node.named_children
    if not named:
        return

    yield make_token(TokenType.ATTRIBUTE_NAME, named[0])

    for child in named[1:]:
        if child.type in spec.attribute_value_node_types:
            yield make_token(TokenType.ATTRIBUTE_VALUE, child)
            return
        if child.type in spec.expression_node_types:
            literals = child.named_children
            if len(literals) == 1 and literals[0].type in spec.attribute_value_node_types:
                yield make_token(TokenType.ATTRIBUTE_VALUE, literals[0])
            return

