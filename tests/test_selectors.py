"""Tests for selector text splitting."""

import pytest
from csspeek_mcp.stylesheet import (
    SimpleSelector,
    normalize_selector,
    resolve_nesting,
    selector_components,
    selector_kinds,
    simple_selectors,
    split_selector_list,
)


def test_split_selector_list():
    """Test top-level commas split and nested commas don't."""
    assert split_selector_list(".a, .b ,#c") == [".a", ".b", "#c"]
    assert split_selector_list(":is(.a, .b) .c") == [":is(.a, .b) .c"]
    assert split_selector_list('[title="x,y"], .z') == ['[title="x,y"]', ".z"]
    assert split_selector_list(".a\\,b") == [".a\\,b"]
    assert split_selector_list("") == []


def test_simple_selectors_compound():
    """Test compound and complex selectors yield each component."""
    assert simple_selectors("a.btn.primary") == [
        SimpleSelector("tag", "a"),
        SimpleSelector("class", "btn"),
        SimpleSelector("class", "primary"),
    ]
    assert simple_selectors("#nav > li .item") == [
        SimpleSelector("id", "nav"),
        SimpleSelector("tag", "li"),
        SimpleSelector("class", "item"),
    ]


def test_simple_selectors_whole_names():
    """Test names are read whole, so foo never matches foobar."""
    components = selector_components(".foobar")
    assert SimpleSelector("class", "foobar") in components
    assert SimpleSelector("class", "foo") not in components


def test_simple_selectors_skips_arguments():
    """Test pseudo-class arguments and attribute selectors are skipped."""
    assert simple_selectors(".item:not(.hidden)") == [SimpleSelector("class", "item")]
    assert simple_selectors('input[type="text"].wide') == [
        SimpleSelector("tag", "input"),
        SimpleSelector("class", "wide"),
    ]
    assert simple_selectors("a::before") == [SimpleSelector("tag", "a")]
    assert simple_selectors(".x:nth-child(2n+1)") == [SimpleSelector("class", "x")]


def test_simple_selectors_escapes():
    """Test CSS escapes are resolved."""
    assert simple_selectors(".md\\:flex") == [SimpleSelector("class", "md:flex")]
    assert simple_selectors(".w-1\\/2") == [SimpleSelector("class", "w-1/2")]
    assert simple_selectors("#\\31 23") == [SimpleSelector("id", "123")]


def test_simple_selectors_scss():
    """Test Sass-specific syntax does not produce bogus components."""
    assert simple_selectors("&.active") == [SimpleSelector("class", "active")]
    assert simple_selectors("&__title") == []
    assert simple_selectors("%placeholder") == []
    assert simple_selectors(".icon-#{$name}") == [SimpleSelector("class", "icon-")]


def test_normalize_selector():
    """Test whitespace runs collapse."""
    assert normalize_selector(".a\n  >   .b\t.c") == ".a > .b .c"


def test_selector_kinds():
    """Test kind classification of selectors."""
    assert selector_kinds(".test") == ["class"]
    assert selector_kinds("#main") == ["id"]
    assert selector_kinds(".nav #logo") == ["class", "id"]
    assert selector_kinds("#logo.nav") == ["class", "id"]
    assert selector_kinds("div > p") == ["other"]
    assert selector_kinds(":root") == ["other"]


def test_resolve_nesting():
    """Test & expands against every parent."""
    assert resolve_nesting("&.active", [".btn"]) == [".btn.active"]
    assert resolve_nesting("&__title", [".card", ".panel"]) == [".card__title", ".panel__title"]
    assert resolve_nesting(".child", [".parent"]) == [".child"]
    assert resolve_nesting("&:hover", None) == ["&:hover"]


def test_simple_selectors_matching_pseudo_classes():
    """Test :is() and :where() arguments count, :not() and :has() don't."""
    assert simple_selectors(".b:is(.foo, .c)") == [
        SimpleSelector("class", "b"),
        SimpleSelector("class", "foo"),
        SimpleSelector("class", "c"),
    ]
    assert simple_selectors(":where(.foo) p") == [
        SimpleSelector("class", "foo"),
        SimpleSelector("tag", "p"),
    ]
    assert simple_selectors(".a:has(.foo)") == [SimpleSelector("class", "a")]
    assert selector_kinds(":where(#app)") == ["id"]
