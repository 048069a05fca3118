"""Find the CSS selector referenced at a cursor position in a markup document."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import Settings
from ..document import Document, Position
from .scanner import TokenType, create_scanner


logger = logging.getLogger(__name__)


# Characters that end a word when walking left / right from the cursor
LEFT_DELIMITERS = frozenset(" '\"\n/<>\t\r")
RIGHT_DELIMITERS = frozenset(" '\"\n>\t\r")

QUOTE_CHARS = "\"'`"

# Attribute spellings that mean "class" in component-style markup
CLASS_ATTRIBUTE_ALIASES = {"classname"}

_SUB_VALUE_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class Selector:
    """A selector referenced from markup. ``attribute`` is None for tag names."""
    attribute: Optional[str]
    value: str

    def to_dict(self) -> dict:
        return {"attribute": self.attribute, "value": self.value}

    def __str__(self) -> str:
        if self.attribute == "class":
            return f".{self.value}"
        if self.attribute == "id":
            return f"#{self.value}"
        return self.value


class AttributeState(Enum):
    """The attribute whose value the scanner is currently positioned in."""
    NONE = None
    CLASS = "class"
    ID = "id"
    OTHER = "other"


def next_attribute_state(state: AttributeState, token_type: TokenType, token_text: str = "") -> AttributeState:
    """Transition function for the attribute state machine.

    Tags reset the state, attribute names select it, and every other token
    leaves it unchanged.
    """
    if token_type in (TokenType.START_TAG, TokenType.END_TAG):
        return AttributeState.NONE
    if token_type is TokenType.ATTRIBUTE_NAME:
        name = token_text.lower()
        if name in CLASS_ATTRIBUTE_ALIASES:
            name = "class"
        if name == "class":
            return AttributeState.CLASS
        if name == "id":
            return AttributeState.ID
        return AttributeState.OTHER
    return state


def extract_word(text: str, offset: int) -> tuple[int, str]:
    """Expand ``offset`` to the surrounding word.

    Returns:
        Tuple of (start offset, word). The word is empty when the cursor sits
        between two delimiters.
    """
    offset = max(0, min(offset, len(text)))
    start = offset
    end = offset

    while start > 0 and text[start - 1] not in LEFT_DELIMITERS:
        start -= 1
    while end < len(text) and text[end] not in RIGHT_DELIMITERS:
        end += 1

    return start, text[start:end]


def split_attribute_value(token_text: str, token_offset: int) -> list[tuple[int, str]]:
    """Split an attribute value token into (start offset, sub-value) pairs.

    Surrounding quotes are stripped; offsets account for them so each
    sub-value is addressed by its position in the document.
    """
    value = token_text
    start = token_offset
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[-1] == value[0]:
        value = value[1:-1]
        start += 1
    elif value and value[0] in QUOTE_CHARS:
        # Unterminated quote
        value = value[1:]
        start += 1

    return [(start + m.start(), m.group()) for m in _SUB_VALUE_RE.finditer(value)]


def find_selector(document: Document, position: Position, settings: Optional[Settings] = None) -> Optional[Selector]:
    """Find the selector at ``position`` in a markup document.

    The cursor must be on a class or id listed in a ``class``/``id``
    attribute, or (with ``support_tags``) on an element's tag name. Matching
    is by start offset of the word under the cursor, so partial words inside
    longer identifiers never match.

    Returns:
        The Selector, or None when the cursor is not on one.
    """
    settings = settings or Settings()
    offset = document.offset_at(position)
    return find_selector_at_offset(document.text, offset, settings, document.language_id)


def find_selector_at_offset(
    text: str,
    offset: int,
    settings: Settings,
    language_id: Optional[str] = "html",
) -> Optional[Selector]:
    """Offset-based variant of ``find_selector``."""
    start, word = extract_word(text, offset)
    if not word:
        logger.debug("Invalid selector: no word at offset %d", offset)
        return None

    logger.debug("Looking up %r at offset %d", word, start)

    selector = None
    state = AttributeState.NONE
    scanner = create_scanner(text, language_id)

    token_type = scanner.scan()
    while token_type is not TokenType.EOS:
        if token_type in (TokenType.START_TAG, TokenType.END_TAG):
            if (
                settings.support_tags
                and not word[0].isupper()
                and scanner.get_token_offset() == start
            ):
                selector = Selector(attribute=None, value=word)

        elif token_type is TokenType.ATTRIBUTE_VALUE and state in (AttributeState.CLASS, AttributeState.ID):
            for value_offset, value in split_attribute_value(scanner.get_token_text(), scanner.get_token_offset()):
                if value_offset == start:
                    selector = Selector(attribute=state.value, value=value)
                    break

        if selector:
            break

        state = next_attribute_state(state, token_type, scanner.get_token_text())
        token_type = scanner.scan()

    if selector:
        logger.debug('%s is a "%s"', selector.value, selector.attribute or "html tag")
    else:
        logger.debug("Invalid selector: %r", word)

    return selector
