# bnfkit/tree/walk.py
"""Pre-order traversal over a token tree without native recursion.

The walker keeps an explicit stack of `[parent, next_child_index]` frames,
so the depth it can handle is bounded by memory, not by the interpreter's
recursion limit. It never mutates the tree.
"""

from __future__ import annotations
from typing import Iterator, List, Optional

from .token import Token


class TokenWalker:
    """Restartable pre-order iterator over a Token tree.

    `current` is the node the walker points at (None when exhausted).
    Two walkers compare equal when they point at the same node object.
    """

    def __init__(self, root: Optional[Token]):
        self._root = root
        self._stack: List[list] = []
        self._current: Optional[Token] = root

    @property
    def root(self) -> Optional[Token]:
        return self._root

    @property
    def current(self) -> Optional[Token]:
        return self._current

    @property
    def depth(self) -> int:
        """Number of open ancestor frames above `current` (root is 0)."""
        return len(self._stack)

    def restart(self) -> None:
        self._stack.clear()
        self._current = self._root

    def advance(self) -> Optional[Token]:
        node = self._current
        if node is None:
            return None
        # descend first
        if node.children:
            self._stack.append([node, 1])
            self._current = node.children[0]
            return self._current
        # otherwise climb until some ancestor still has a sibling to visit
        while self._stack:
            frame = self._stack[-1]
            parent, idx = frame
            if idx < len(parent.children):
                frame[1] = idx + 1
                self._current = parent.children[idx]
                return self._current
            self._stack.pop()
        self._current = None
        return None

    def __iter__(self) -> "TokenWalker":
        return self

    def __next__(self) -> Token:
        node = self._current
        if node is None:
            raise StopIteration
        self.advance()
        return node

    def __eq__(self, other) -> bool:
        if not isinstance(other, TokenWalker):
            return NotImplemented
        return self._current is other._current

    __hash__ = None

    def __repr__(self) -> str:
        return f"TokenWalker(current={self._current!r}, depth={self.depth})"


def walk(root: Optional[Token]) -> Iterator[Token]:
    """Yield every token of the tree in pre-order."""
    return iter(TokenWalker(root))


def walk_with_depth(root: Optional[Token]) -> Iterator[tuple]:
    """Yield `(depth, token)` pairs in pre-order."""
    w = TokenWalker(root)
    while w.current is not None:
        yield w.depth, w.current
        w.advance()


def named_tokens(root: Optional[Token], *names: str) -> Iterator[Token]:
    """Tokens produced by named rules, in source order.

    With no `names` every named token is yielded; otherwise only those whose
    rule name is listed.
    """
    wanted = set(names)
    for tok in walk(root):
        name = tok.name
        if name is None:
            continue
        if not wanted or name in wanted:
            yield tok
