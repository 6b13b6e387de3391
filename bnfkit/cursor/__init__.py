# bnfkit/cursor/__init__.py
"""Input cursors for the bnfkit matcher.

A cursor is a seekable character source with a movable position. The
matcher only ever needs four operations:

- `mark() -> pos`       capture the current position
- `reset(pos)`          jump back to a captured position (backtracking)
- `read(n) -> str`      consume up to n characters
- `at_end() -> bool`    nothing left to read

Reading past the end returns a short string and sets `exhausted`; it never
raises. `reset` clears the flag again.

Positions are opaque and only meaningful for the cursor that produced them.
`TextCursor` uses integer offsets; `StreamCursor` uses the stream's `tell()`
values.
"""

from __future__ import annotations
from typing import Any, Optional, Tuple


class Cursor:
    """Minimal interface the matcher expects."""

    def mark(self) -> Any:
        raise NotImplementedError

    def reset(self, pos: Any) -> None:
        raise NotImplementedError

    def read(self, n: int) -> str:
        raise NotImplementedError

    def at_end(self) -> bool:
        raise NotImplementedError

    def substring(self, start: Any, end: Any) -> str:
        """Text of `[start, end)`; the cursor position is left untouched."""
        raise NotImplementedError

    @property
    def exhausted(self) -> bool:
        """True after a read came back short, until the next `reset`."""
        return self._exhausted


class TextCursor(Cursor):
    """Cursor over an in-memory string. Positions are character offsets."""

    def __init__(self, text: str, pos: int = 0):
        if not isinstance(text, str):
            raise TypeError(f"TextCursor expects str, got {type(text).__name__}")
        self._s = text
        self._n = len(text)
        self._i = 0
        self._exhausted = False
        self.reset(pos)

    @property
    def text(self) -> str:
        return self._s

    def mark(self) -> int:
        return self._i

    def reset(self, pos: int) -> None:
        if not 0 <= pos <= self._n:
            raise ValueError(f"position {pos} outside [0, {self._n}]")
        self._i = pos
        self._exhausted = False

    def read(self, n: int) -> str:
        if n < 0:
            raise ValueError("read size must be non-negative")
        chunk = self._s[self._i:self._i + n]
        self._i += len(chunk)
        if len(chunk) < n:
            self._exhausted = True
        return chunk

    def at_end(self) -> bool:
        return self._i >= self._n

    def substring(self, start: int, end: int) -> str:
        return self._s[start:end]

    def location(self, pos: Optional[int] = None) -> Tuple[int, int]:
        """1-based (line, col) of `pos` (default: the current position)."""
        if pos is None:
            pos = self._i
        line = self._s.count("\n", 0, pos) + 1
        last_nl = self._s.rfind("\n", 0, pos)
        col = pos + 1 if last_nl < 0 else pos - last_nl
        return line, col

    def __repr__(self) -> str:
        return f"TextCursor(pos={self._i}, len={self._n})"


class StreamCursor(Cursor):
    """Cursor over a seekable text stream (io.StringIO, a file in text mode).

    Positions are whatever `tell()` returns. For io.StringIO those are
    character offsets; for real files they are opaque cookies, which is why
    `substring` walks the span one character at a time.
    """

    def __init__(self, stream):
        if not stream.seekable():
            raise ValueError("StreamCursor needs a seekable stream")
        self._f = stream
        self._exhausted = False

    def mark(self):
        return self._f.tell()

    def reset(self, pos) -> None:
        self._f.seek(pos)
        self._exhausted = False

    def read(self, n: int) -> str:
        if n < 0:
            raise ValueError("read size must be non-negative")
        chunk = self._f.read(n)
        if len(chunk) < n:
            self._exhausted = True
        return chunk

    def at_end(self) -> bool:
        pos = self._f.tell()
        probe = self._f.read(1)
        self._f.seek(pos)
        return probe == ""

    def substring(self, start, end) -> str:
        saved = self._f.tell()
        out = []
        try:
            self._f.seek(start)
            while self._f.tell() < end:
                ch = self._f.read(1)
                if not ch:
                    break
                out.append(ch)
        finally:
            self._f.seek(saved)
        return "".join(out)

    def __repr__(self) -> str:
        return f"StreamCursor({self._f!r})"


def cursor_for(source) -> Cursor:
    """Wrap `source` in a cursor: strings get a TextCursor, streams a StreamCursor."""
    if isinstance(source, Cursor):
        return source
    if isinstance(source, str):
        return TextCursor(source)
    if all(hasattr(source, attr) for attr in ("read", "seek", "tell")):
        return StreamCursor(source)
    raise TypeError(f"cannot build a cursor over {type(source).__name__}")


__all__ = ["Cursor", "TextCursor", "StreamCursor", "cursor_for"]
