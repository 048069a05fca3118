"""Markup language registry with MarkupSpec definitions for the scanner."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MarkupSpec:
    """Specification for turning a language's AST into markup tokens."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Node types that open an element (emit START_TAG for their name)
    start_tag_node_types: list[str]

    # Node types that close an element (emit END_TAG for their name)
    end_tag_node_types: list[str]

    # Child node types holding the tag name when there is no name field
    tag_name_node_types: list[str]

    # Field name holding the tag name (JSX), if any
    tag_name_field: Optional[str]

    # Node types wrapping a name/value attribute pair
    attribute_node_types: list[str]

    # Attribute value node types (quoted or bare)
    attribute_value_node_types: list[str]

    # Expression containers unwrapped when they hold a single literal (JSX {"a b"})
    expression_node_types: list[str]

    comment_node_types: list[str]
    content_node_types: list[str]


HTML_SPEC = MarkupSpec(
    ts_language="html",
    start_tag_node_types=["start_tag", "self_closing_tag"],
    end_tag_node_types=["end_tag", "erroneous_end_tag"],
    tag_name_node_types=["tag_name", "erroneous_end_tag_name"],
    tag_name_field=None,
    attribute_node_types=["attribute"],
    attribute_value_node_types=["quoted_attribute_value", "attribute_value"],
    expression_node_types=[],
    comment_node_types=["comment"],
    content_node_types=["text", "raw_text"],
)


JSX_SPEC = MarkupSpec(
    ts_language="javascript",
    start_tag_node_types=["jsx_opening_element", "jsx_self_closing_element"],
    end_tag_node_types=["jsx_closing_element"],
    tag_name_node_types=["identifier", "member_expression", "jsx_namespace_name", "nested_identifier"],
    tag_name_field="name",
    attribute_node_types=["jsx_attribute"],
    attribute_value_node_types=["string", "template_string"],
    expression_node_types=["jsx_expression"],
    comment_node_types=["comment"],
    content_node_types=["jsx_text"],
)


TSX_SPEC = MarkupSpec(
    ts_language="tsx",
    start_tag_node_types=JSX_SPEC.start_tag_node_types,
    end_tag_node_types=JSX_SPEC.end_tag_node_types,
    tag_name_node_types=JSX_SPEC.tag_name_node_types,
    tag_name_field=JSX_SPEC.tag_name_field,
    attribute_node_types=JSX_SPEC.attribute_node_types,
    attribute_value_node_types=JSX_SPEC.attribute_value_node_types,
    expression_node_types=JSX_SPEC.expression_node_types,
    comment_node_types=JSX_SPEC.comment_node_types,
    content_node_types=JSX_SPEC.content_node_types,
)


# Editor language id -> markup spec. Anything else is scanned as HTML.
MARKUP_REGISTRY = {
    "html": HTML_SPEC,
    "javascript": JSX_SPEC,
    "javascriptreact": JSX_SPEC,
    "typescript": TSX_SPEC,
    "typescriptreact": TSX_SPEC,
}


def get_markup_spec(language_id: Optional[str]) -> MarkupSpec:
    """Look up the markup spec for a language id, defaulting to HTML."""
    return MARKUP_REGISTRY.get(language_id or "html", HTML_SPEC)
