"""Stylesheet selector extractor using tree-sitter."""

import logging
from typing import Optional

from tree_sitter_language_pack import get_parser

from ..document import Document, byte_to_char_converter
from .languages import StylesheetSpec, STYLESHEET_REGISTRY
from .selectors import normalize_selector, resolve_nesting, selector_kinds
from .symbols import Location, StylesheetSymbol


logger = logging.getLogger(__name__)


def parse_stylesheet(document: Document) -> list[StylesheetSymbol]:
    """Parse a stylesheet and extract one symbol per selector.

    Args:
        document: Stylesheet snapshot; its ``language_id`` selects the grammar

    Returns:
        Symbols in document order. Unsupported languages yield an empty list.
    """
    if document.language_id not in STYLESHEET_REGISTRY:
        return []

    spec = STYLESHEET_REGISTRY[document.language_id]
    source_bytes = document.text.encode("utf-8", "surrogatepass")

    parser = get_parser(spec.ts_language)
    tree = parser.parse(source_bytes)
    to_char = byte_to_char_converter(document.text, source_bytes)

    symbols = []
    _walk_tree(tree.root_node, spec, document, to_char, symbols, None)

    logger.debug("Extracted %d symbols from %s", len(symbols), document.uri)
    return symbols


def _walk_tree(
    node,
    spec: StylesheetSpec,
    document: Document,
    to_char,
    symbols: list,
    parents: Optional[list[str]] = None
):
    """Recursively walk the AST and extract rule selectors."""
    if node.type in spec.rule_node_types:
        parents = _extract_rule(node, spec, document, to_char, symbols, parents)

    for child in node.children:
        _walk_tree(child, spec, document, to_char, symbols, parents)


def _extract_rule(
    node,
    spec: StylesheetSpec,
    document: Document,
    to_char,
    symbols: list,
    parents: Optional[list[str]] = None
) -> Optional[list[str]]:
    """Extract symbols for each selector of a rule.

    Returns:
        The rule's expanded selectors, used as parents of nested rules.
    """
    selectors_node = next(
        (c for c in node.children if c.type == spec.selectors_node_type), None
    )
    if selectors_node is None:
        return parents

    expanded = []
    for selector_node in selectors_node.named_children:
        if selector_node.type == "comment":
            continue

        start = to_char(selector_node.start_byte)
        end = to_char(selector_node.end_byte)
        text = normalize_selector(document.text[start:end])
        if not text:
            continue

        location = Location.from_offsets(document, start, end)
        for name in resolve_nesting(text, parents):
            for kind in selector_kinds(name):
                symbols.append(StylesheetSymbol(name=name, kind=kind, location=location))
            expanded.append(name)

    return expanded or parents
