"""Stylesheet language registry."""

from dataclasses import dataclass


@dataclass
class StylesheetSpec:
    """Specification for extracting selectors from a stylesheet AST."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Node types that carry a selector list and a declaration block
    rule_node_types: list[str]

    # Child node type holding the selector list of a rule
    selectors_node_type: str


CSS_SPEC = StylesheetSpec(
    ts_language="css",
    rule_node_types=["rule_set"],
    selectors_node_type="selectors",
)


SCSS_SPEC = StylesheetSpec(
    ts_language="scss",
    rule_node_types=["rule_set"],
    selectors_node_type="selectors",
)


# File extension to stylesheet language id
STYLESHEET_EXTENSIONS = {
    ".css": "css",
    ".scss": "scss",
    ".less": "less",
}


# LESS has no grammar of its own; the SCSS grammar understands its nesting,
# variables and mixin calls
STYLESHEET_REGISTRY = {
    "css": CSS_SPEC,
    "scss": SCSS_SPEC,
    "less": SCSS_SPEC,
}


def is_stylesheet_language(language_id: str) -> bool:
    """Check if a language id is handled by the stylesheet extractor."""
    return language_id in STYLESHEET_REGISTRY
