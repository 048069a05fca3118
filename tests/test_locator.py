"""Tests for selector lookup at a cursor position."""

import pytest
from csspeek_mcp.config import Settings
from csspeek_mcp.document import Document, Position
from csspeek_mcp.markup import (
    AttributeState,
    Selector,
    TokenType,
    extract_word,
    find_selector,
    find_selector_at_offset,
    next_attribute_state,
    split_attribute_value,
)


HTML_SOURCE = '''<!DOCTYPE html>
<html>
  <body>
    <h1 class="test" id="testID">Title</h1>
    <div class="common   other" id="common">x</div>
    <!-- <p id="commented"> -->
    <section id="test-2">plain words here</section>
  </body>
</html>
'''

SIMPLE = '<div class="test"><span id="testID"></span></div>'

TAGS_ON = Settings(support_tags=True)
TAGS_OFF = Settings(support_tags=False)


def _doc(text: str, language_id: str = "html") -> Document:
    return Document(uri="file:///example.html", language_id=language_id, text=text)


def _position_of(doc: Document, needle: str, delta: int = 0) -> Position:
    return doc.position_at(doc.text.index(needle) + delta)


def test_find_class_selector():
    """Test the class value under the cursor is found."""
    doc = _doc(SIMPLE)
    selector = find_selector(doc, _position_of(doc, "test"), TAGS_ON)
    assert selector == Selector(attribute="class", value="test")


def test_find_id_selector():
    """Test the id value under the cursor is found."""
    doc = _doc(SIMPLE)
    selector = find_selector(doc, _position_of(doc, "testID"), TAGS_ON)
    assert selector == Selector(attribute="id", value="testID")


def test_find_tag_selector():
    """Test tag names resolve when support_tags is on."""
    doc = _doc(SIMPLE)
    position = _position_of(doc, "div")

    assert find_selector(doc, position, TAGS_ON) == Selector(attribute=None, value="div")
    assert find_selector(doc, position, TAGS_OFF) is None


def test_find_end_tag_selector():
    """Test closing tag names resolve too."""
    doc = _doc(SIMPLE)
    position = doc.position_at(doc.text.index("</span") + 2)

    assert find_selector(doc, position, TAGS_ON) == Selector(attribute=None, value="span")


def test_cursor_inside_word_resolves_word():
    """Test a cursor in the middle of a value uses the whole word."""
    doc = _doc(HTML_SOURCE)
    selector = find_selector(doc, _position_of(doc, "testID", delta=3), TAGS_ON)
    assert selector == Selector(attribute="id", value="testID")


def test_multiple_class_values():
    """Test each value of a class list is addressable, even with extra spaces."""
    doc = _doc(HTML_SOURCE)

    first = find_selector(doc, _position_of(doc, "common"), TAGS_ON)
    second = find_selector(doc, _position_of(doc, "other"), TAGS_ON)
    id_value = find_selector(doc, _position_of(doc, 'id="common"', delta=4), TAGS_ON)

    assert first == Selector(attribute="class", value="common")
    assert second == Selector(attribute="class", value="other")
    assert id_value == Selector(attribute="id", value="common")


def test_id_after_comment():
    """Test ids after an HTML comment are still found."""
    doc = _doc(HTML_SOURCE)
    selector = find_selector(doc, _position_of(doc, "test-2"), TAGS_ON)
    assert selector == Selector(attribute="id", value="test-2")


def test_commented_out_markup_is_ignored():
    """Test attributes inside comments are not selectors."""
    doc = _doc(HTML_SOURCE)
    assert find_selector(doc, _position_of(doc, "commented"), TAGS_ON) is None


def test_not_a_selector():
    """Test positions that are not on a selector return None."""
    doc = _doc(HTML_SOURCE)

    assert find_selector(doc, _position_of(doc, "plain"), TAGS_ON) is None
    assert find_selector(doc, _position_of(doc, "words"), TAGS_ON) is None
    # On the attribute name rather than its value
    assert find_selector(doc, _position_of(doc, 'class="test"'), TAGS_ON) is None


def test_invalid_positions():
    """Test out-of-range and blank positions return None."""
    doc = _doc(HTML_SOURCE)

    assert find_selector(doc, Position(1000, 19), TAGS_ON) is None
    assert find_selector(doc, Position(2, 0), TAGS_ON) is None
    assert find_selector(_doc(""), Position(0, 0), TAGS_ON) is None


def test_uppercase_word_is_never_a_tag():
    """Test component-style names are not tag selectors."""
    text = 'const App = () => <Button className="primary"><span /></Button>;'
    doc = _doc(text, language_id="javascriptreact")

    assert find_selector(doc, _position_of(doc, "Button"), TAGS_ON) is None
    assert find_selector(doc, _position_of(doc, "span"), TAGS_ON) == Selector(None, "span")


def test_jsx_classname():
    """Test className is treated as class."""
    text = 'export default () => <div className="card card--big" id="root" />;'
    doc = _doc(text, language_id="javascriptreact")

    assert find_selector(doc, _position_of(doc, "card--big"), TAGS_ON) == Selector("class", "card--big")
    assert find_selector(doc, _position_of(doc, "root"), TAGS_ON) == Selector("id", "root")


def test_non_ascii_document():
    """Test offsets stay aligned after multi-byte characters."""
    text = '<p>Grüße \U0001F600</p><div class="after"></div>'
    doc = _doc(text)
    selector = find_selector(doc, _position_of(doc, "after"), TAGS_ON)
    assert selector == Selector(attribute="class", value="after")


def test_find_selector_at_offset():
    """Test the offset-based entry point."""
    offset = SIMPLE.index("test")
    assert find_selector_at_offset(SIMPLE, offset, TAGS_ON) == Selector("class", "test")


def test_extract_word():
    """Test word expansion stops at delimiters."""
    text = '<a class="x yz">'

    assert extract_word(text, text.index("yz") + 1) == (text.index("yz"), "yz")
    assert extract_word(text, 1) == (1, "a")
    assert extract_word("ab cd", 999) == (3, "cd")
    assert extract_word("a  b", 2) == (2, "")


def test_split_attribute_value():
    """Test sub-value offsets account for the stripped quote."""
    assert split_attribute_value('"a bc d"', 10) == [(11, "a"), (13, "bc"), (16, "d")]
    assert split_attribute_value("'x'", 0) == [(1, "x")]
    assert split_attribute_value("bare", 5) == [(5, "bare")]
    assert split_attribute_value('""', 0) == []


def test_attribute_state_transitions():
    """Test the attribute state machine in isolation."""
    state = AttributeState.NONE

    state = next_attribute_state(state, TokenType.ATTRIBUTE_NAME, "CLASS")
    assert state is AttributeState.CLASS

    state = next_attribute_state(state, TokenType.ATTRIBUTE_VALUE, '"a"')
    assert state is AttributeState.CLASS

    assert next_attribute_state(state, TokenType.ATTRIBUTE_NAME, "className") is AttributeState.CLASS
    assert next_attribute_state(state, TokenType.ATTRIBUTE_NAME, "id") is AttributeState.ID
    assert next_attribute_state(state, TokenType.ATTRIBUTE_NAME, "href") is AttributeState.OTHER
    assert next_attribute_state(state, TokenType.START_TAG, "div") is AttributeState.NONE
    assert next_attribute_state(state, TokenType.END_TAG, "div") is AttributeState.NONE
    assert next_attribute_state(state, TokenType.COMMENT, "<!-- -->") is AttributeState.CLASS


def test_text_after_tag_is_not_a_tag():
    """Test element text directly after a tag does not extend the tag name."""
    text = "<p>hello world</p>"
    doc = _doc(text)

    assert extract_word(text, text.index("hello") + 2) == (text.index("hello"), "hello")
    assert find_selector(doc, _position_of(doc, "hello", delta=2), TAGS_ON) is None
    assert find_selector(doc, _position_of(doc, "p"), TAGS_ON) == Selector(None, "p")
