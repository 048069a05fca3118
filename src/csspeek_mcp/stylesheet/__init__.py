"""Stylesheet package for extracting selector symbols from CSS/SCSS/LESS."""

from .symbols import Location, StylesheetSymbol, SYMBOL_KINDS
from .languages import StylesheetSpec, STYLESHEET_REGISTRY, STYLESHEET_EXTENSIONS, is_stylesheet_language
from .selectors import (
    SimpleSelector,
    normalize_selector,
    resolve_nesting,
    selector_components,
    selector_kinds,
    simple_selectors,
    split_selector_list,
)
from .extractor import parse_stylesheet

__all__ = [
    "Location",
    "StylesheetSymbol",
    "SYMBOL_KINDS",
    "StylesheetSpec",
    "STYLESHEET_REGISTRY",
    "STYLESHEET_EXTENSIONS",
    "is_stylesheet_language",
    "SimpleSelector",
    "normalize_selector",
    "resolve_nesting",
    "selector_components",
    "selector_kinds",
    "simple_selectors",
    "split_selector_list",
    "parse_stylesheet",
]
