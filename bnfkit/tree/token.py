# bnfkit/tree/token.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..cursor import Cursor


@dataclass(eq=False)
class Token:
    """One successful match.

    - start/end: half-open span `[start, end)` in cursor positions
    - rule     : the rule object that produced this token
    - children : sub-matches in consumption order (owned by this token)

    Tokens are only ever built for a successful match, with every field
    already known, so a caller never sees a half-filled token.
    """
    start: Any
    end: Any
    rule: Any = field(repr=False)
    children: List["Token"] = field(default_factory=list)

    @property
    def name(self) -> Optional[str]:
        """Name of the producing rule when it is a named rule, else None."""
        return getattr(self.rule, "name", None)

    @property
    def span(self):
        return (self.start, self.end)

    def text(self, cursor: "Cursor") -> str:
        """Matched text, read back from the cursor the match ran against."""
        return cursor.substring(self.start, self.end)

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        # an empty match is still a match
        return True

    def walk(self):
        from .walk import walk
        return walk(self)

    def __repr__(self) -> str:
        label = self.name or type(self.rule).__name__
        return f"Token({label} [{self.start}, {self.end}) children={len(self.children)})"
