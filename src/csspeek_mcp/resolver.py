"""Resolve selectors found in markup to stylesheet symbols."""

from .markup.locator import Selector
from .storage import StylesheetIndex
from .stylesheet.selectors import SimpleSelector, selector_components
from .stylesheet.symbols import Location, StylesheetSymbol


# Interpretations tried, in order, for a workspace symbol query
SEARCH_ATTRIBUTES = ("class", "id")


def selector_matches(selector: Selector, symbol: StylesheetSymbol) -> bool:
    """Check if ``symbol`` defines ``selector``.

    Class and id selectors must appear as whole components of the symbol's
    selector list and the symbol kind must agree. Tag names are compared
    case-insensitively against type selectors.
    """
    components = selector_components(symbol.name)

    if selector.attribute in ("class", "id"):
        return (
            symbol.kind == selector.attribute
            and SimpleSelector(selector.attribute, selector.value) in components
        )

    if selector.attribute is None:
        tag = selector.value.lower()
        return any(c.kind == "tag" and c.name.lower() == tag for c in components)

    return False


def find_symbols(selector: Selector, index: StylesheetIndex) -> list[StylesheetSymbol]:
    """Collect matching symbols in index order, then extraction order.

    A selector indexed under several kinds is reported once per location.
    """
    matches = []
    seen = set()
    for entry in index.entries():
        for symbol in entry.symbols:
            if symbol.location in seen or not selector_matches(selector, symbol):
                continue
            seen.add(symbol.location)
            matches.append(symbol)
    return matches


def resolve_definition(selector: Selector, index: StylesheetIndex) -> list[Location]:
    """Locations defining ``selector``. An empty list means no definition."""
    return [symbol.location for symbol in find_symbols(selector, index)]


def search_symbols(query: str, index: StylesheetIndex) -> list[StylesheetSymbol]:
    """Search the index for a class or id named ``query``.

    Each interpretation in ``SEARCH_ATTRIBUTES`` is resolved separately and
    the results are concatenated in that order without de-duplication.
    """
    query = query.strip()
    if query[:1] in (".", "#"):
        query = query[1:]
    if not query:
        return []

    results = []
    for attribute in SEARCH_ATTRIBUTES:
        results.extend(find_symbols(Selector(attribute=attribute, value=query), index))
    return results
