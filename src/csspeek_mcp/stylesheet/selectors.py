"""Split selector text into the simple selectors it is built from.

A stylesheet symbol name can be a compound (``a.btn.primary``), complex
(``#nav > li .item``) or grouped (``.a, .b``) selector. Lookups must match
whole components only: the class ``foo`` is not ``.foobar``, and the class
``md:flex`` is written ``.md\\:flex``.
"""

import string
from dataclasses import dataclass
from functools import lru_cache


COMBINATORS = frozenset(">+~")

# Pseudo-classes whose arguments the element itself matches
MATCHING_PSEUDO_CLASSES = frozenset({"is", "where", "matches", "any", "-webkit-any", "-moz-any"})

_CLOSERS = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True)
class SimpleSelector:
    """One class, id or type selector inside a larger selector."""
    kind: str                       # "class" | "id" | "tag"
    name: str                       # Unescaped name, without the "." / "#" prefix


def normalize_selector(text: str) -> str:
    """Collapse runs of whitespace (selectors may span lines)."""
    return " ".join(text.split())


def split_selector_list(text: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas inside parentheses, brackets, interpolations and strings, and
    escaped commas, do not split.
    """
    parts = []
    depth = 0
    quote = None
    start = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in _CLOSERS:
            depth += 1
        elif ch in ")]}":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            parts.append(text[start:i].strip())
            start = i + 1
        i += 1
    parts.append(text[start:].strip())
    return [p for p in parts if p]


def simple_selectors(selector: str) -> list[SimpleSelector]:
    """Extract the class, id and type selectors of one complex selector.

    Attribute selectors and pseudo-class arguments are skipped, so
    ``:not(.hidden)`` contributes nothing, except for the matching
    pseudo-classes (``:is()``, ``:where()``) whose arguments style the
    element itself. A type selector is only recognised at the start of a
    compound selector.
    """
    result = []
    compound_start = True
    i = 0
    n = len(selector)

    while i < n:
        ch = selector[i]

        if ch.isspace() or ch in COMBINATORS:
            compound_start = True
            i += 1
            continue

        if ch in ".#":
            if selector.startswith("#{", i):
                # Sass interpolation
                i = _skip_block(selector, i + 1)
            else:
                name, i = _read_identifier(selector, i + 1)
                if name:
                    result.append(SimpleSelector("class" if ch == "." else "id", name))
            compound_start = False
            continue

        if ch in "[{":
            i = _skip_block(selector, i)
            compound_start = False
            continue

        if ch == ":":
            i += 1
            if i < n and selector[i] == ":":
                i += 1
            pseudo, i = _read_identifier(selector, i)
            if i < n and selector[i] == "(":
                end = _skip_block(selector, i)
                if pseudo.lower() in MATCHING_PSEUDO_CLASSES:
                    inner_end = end - 1 if selector[end - 1] == ")" else end
                    for argument in split_selector_list(selector[i + 1:inner_end]):
                        result.extend(simple_selectors(argument))
                i = end
            compound_start = False
            continue

        if ch in "&%":
            # Parent reference or placeholder, with an optional suffix
            _, i = _read_identifier(selector, i + 1)
            compound_start = False
            continue

        if compound_start and (ch.isalpha() or ch in "_\\" or ord(ch) >= 0x80):
            name, i = _read_identifier(selector, i)
            if name:
                result.append(SimpleSelector("tag", name))
            compound_start = False
            continue

        compound_start = False
        i += 1

    return result


@lru_cache(maxsize=4096)
def selector_components(text: str) -> tuple[SimpleSelector, ...]:
    """All simple selectors of every selector in a selector list."""
    components = []
    for selector in split_selector_list(text):
        components.extend(simple_selectors(selector))
    return tuple(components)


def selector_kinds(text: str) -> list[str]:
    """Symbol kinds a selector should be indexed under.

    ``class`` and/or ``id`` (in that order) when the selector contains such
    components, otherwise ``other``.
    """
    present = {c.kind for c in selector_components(text)}
    kinds = [kind for kind in ("class", "id") if kind in present]
    return kinds or ["other"]


def _read_identifier(text: str, i: int) -> tuple[str, int]:
    """Read a CSS identifier starting at ``i``, resolving escapes.

    Returns:
        Tuple of (unescaped identifier, index after it).
    """
    chars = []
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            if i + 1 >= n:
                i += 1
                break
            j = i + 1
            while j < n and j - i <= 6 and text[j] in string.hexdigits:
                j += 1
            if j > i + 1:
                code = int(text[i + 1:j], 16)
                chars.append(chr(code) if 0 < code <= 0x10FFFF else "�")
                # A single whitespace terminates a hex escape
                if j < n and text[j] in " \t\n\r\f":
                    j += 1
                i = j
            else:
                chars.append(text[i + 1])
                i += 2
            continue
        if ch.isalnum() or ch in "-_" or ord(ch) >= 0x80:
            chars.append(ch)
            i += 1
            continue
        break
    return "".join(chars), i


def _skip_block(text: str, i: int) -> int:
    """Skip a bracketed block opening at ``i``. Returns the index after it."""
    opener = text[i]
    closer = _CLOSERS[opener]
    depth = 0
    quote = None
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return n


def resolve_nesting(selector: str, parents) -> list[str]:
    """Expand ``&`` parent references against each parent selector.

    ``&__title`` nested in ``.card, .panel`` becomes ``.card__title`` and
    ``.panel__title``. Selectors without ``&`` (or without parents) are
    returned as written.
    """
    if not parents or "&" not in selector:
        return [selector]
    return [selector.replace("&", parent) for parent in parents]
