import io

import pytest

from bnfkit.cursor import StreamCursor, TextCursor, cursor_for


def test_text_cursor_read_mark_reset():
    c = TextCursor("abcdef")
    assert c.mark() == 0
    assert c.read(2) == "ab"
    pos = c.mark()
    assert pos == 2
    assert c.read(3) == "cde"
    c.reset(pos)
    assert c.read(1) == "c"
    assert not c.exhausted


def test_short_read_sets_exhausted_and_reset_clears_it():
    c = TextCursor("ab")
    assert c.read(5) == "ab"
    assert c.exhausted
    assert c.at_end()
    c.reset(0)
    assert not c.exhausted
    assert not c.at_end()


def test_text_cursor_rejects_foreign_positions():
    c = TextCursor("ab")
    with pytest.raises(ValueError):
        c.reset(3)
    with pytest.raises(ValueError):
        c.read(-1)


def test_substring_leaves_position_alone():
    c = TextCursor("hello world")
    c.read(4)
    assert c.substring(6, 11) == "world"
    assert c.mark() == 4


def test_location_is_one_based():
    c = TextCursor("ab\ncd")
    assert c.location(0) == (1, 1)
    assert c.location(4) == (2, 2)


def test_stream_cursor_over_string_io():
    c = StreamCursor(io.StringIO("xyz"))
    start = c.mark()
    assert c.read(2) == "xy"
    assert not c.at_end()
    assert c.read(2) == "z"
    assert c.exhausted
    assert c.at_end()
    assert c.substring(start, 2) == "xy"
    c.reset(start)
    assert c.read(1) == "x"


def test_cursor_for_dispatch():
    assert isinstance(cursor_for("abc"), TextCursor)
    assert isinstance(cursor_for(io.StringIO("abc")), StreamCursor)
    existing = TextCursor("a")
    assert cursor_for(existing) is existing
    with pytest.raises(TypeError):
        cursor_for(42)


class _Pipe(io.RawIOBase):
    def readable(self):
        return True

    def seekable(self):
        return False


def test_stream_cursor_needs_a_seekable_stream():
    with pytest.raises(ValueError):
        StreamCursor(io.TextIOWrapper(_Pipe(), encoding="utf-8"))
