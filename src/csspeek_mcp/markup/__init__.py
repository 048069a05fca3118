"""Markup package: token scanning and selector lookup in markup documents."""

from .languages import MarkupSpec, MARKUP_REGISTRY, HTML_SPEC, get_markup_spec
from .scanner import Scanner, Token, TokenType, create_scanner
from .locator import (
    AttributeState,
    Selector,
    extract_word,
    find_selector,
    find_selector_at_offset,
    next_attribute_state,
    split_attribute_value,
)

__all__ = [
    "MarkupSpec",
    "MARKUP_REGISTRY",
    "HTML_SPEC",
    "get_markup_spec",
    "Scanner",
    "Token",
    "TokenType",
    "create_scanner",
    "AttributeState",
    "Selector",
    "extract_word",
    "find_selector",
    "find_selector_at_offset",
    "next_attribute_state",
    "split_attribute_value",
]
