import pytest

from bnfkit import CharRange, CharSet, Literal, TextCursor


def test_literal_matches_and_advances():
    c = TextCursor("Foo")
    tok = Literal("Foo").match(c)
    assert tok is not None
    assert (tok.start, tok.end) == (0, 3)
    assert len(tok) == 3
    assert c.mark() == 3


def test_literal_can_match_again_after_reset():
    rule = Literal("Foo")
    c = TextCursor("Foo")
    assert rule.match(c) is not None
    c.reset(0)
    second = rule.match(c)
    assert second is not None
    assert (second.start, second.end) == (0, 3)


@pytest.mark.parametrize("text", ["Bar", "Fo", "fOO", ""])
def test_literal_failure_keeps_position(text):
    c = TextCursor("x" + text)
    c.read(1)
    assert Literal("Foo").match(c) is None
    assert c.mark() == 1


def test_literal_on_exhausted_cursor_fails_without_reading():
    c = TextCursor("ab")
    c.read(2)
    assert Literal("").match(c) is None
    assert c.mark() == 2
    assert not c.exhausted


def test_literal_mid_input():
    c = TextCursor("xxFoo")
    c.read(2)
    tok = Literal("Foo").match(c)
    assert tok.span == (2, 5)
    assert tok.text(c) == "Foo"


@pytest.mark.parametrize("ch, ok", [
    ("0", True), ("5", True), ("9", True), ("/", False), (":", False), ("a", False),
])
def test_char_range_inclusive_bounds(ch, ok):
    c = TextCursor(ch)
    tok = CharRange("0", "9").match(c)
    assert (tok is not None) is ok
    assert c.mark() == (1 if ok else 0)


def test_char_range_validation():
    with pytest.raises(ValueError):
        CharRange("9", "0")
    with pytest.raises(ValueError):
        CharRange("ab", "z")


def test_char_set_membership():
    rule = CharSet(" \t")
    assert rule.match(TextCursor("\tx")) is not None
    c = TextCursor("x")
    assert rule.match(c) is None
    assert c.mark() == 0
    assert rule.match(TextCursor("")) is None
    with pytest.raises(ValueError):
        CharSet("")
