# bnfkit/rules/engine.py
from __future__ import annotations
import logging
from typing import List, Optional

from .ast import (
    Literal, CharRange, CharSet, Seq, Choice, Repeat, Named, Ref, Rule,
)
from ..cursor import Cursor, cursor_for
from ..tree.token import Token

# Backtracking recursive-descent matcher.
# - One case per rule kind; every case restores the cursor on failure.
# - No memoization: a rule may be re-tried at the same position many times.
# - Left recursion is not supported (it recurses until RecursionError).
# - A Repeat whose child succeeds without consuming input loops forever;
#   rules.check.check_grammar reports such repeats before matching.

logger = logging.getLogger(__name__)


def _label(rule: Rule) -> str:
    if isinstance(rule, Named):
        return rule.name
    return type(rule).__name__


class Matcher:
    """Runs rules against a single cursor."""

    def __init__(self, cursor: Cursor):
        self.cursor = cursor

    # ---- helpers ----
    def _passed(self, rule: Rule, start, children: Optional[List[Token]] = None) -> Token:
        tok = Token(start, self.cursor.mark(), rule, children if children is not None else [])
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("pass %s [%s, %s)", _label(rule), tok.start, tok.end)
        return tok

    def _failed(self, rule: Rule, start) -> None:
        self.cursor.reset(start)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("fail %s at %s", _label(rule), start)
        return None

    # ---- dispatch ----
    def match(self, rule: Rule) -> Optional[Token]:
        if isinstance(rule, Literal):
            return self._literal(rule)
        if isinstance(rule, CharRange):
            return self._char_range(rule)
        if isinstance(rule, CharSet):
            return self._char_set(rule)
        if isinstance(rule, Seq):
            return self._seq(rule)
        if isinstance(rule, Choice):
            return self._choice(rule)
        if isinstance(rule, Repeat):
            return self._repeat(rule)
        if isinstance(rule, Named):
            return self._named(rule)
        if isinstance(rule, Ref):
            return self._ref(rule)
        raise TypeError(f"unknown rule: {rule!r}")

    # ---- terminals ----
    def _literal(self, rule: Literal) -> Optional[Token]:
        cur = self.cursor
        if cur.at_end():
            return None
        start = cur.mark()
        # a short read never equals the text
        if cur.read(len(rule.text)) != rule.text:
            return self._failed(rule, start)
        return self._passed(rule, start)

    def _char_range(self, rule: CharRange) -> Optional[Token]:
        cur = self.cursor
        if cur.at_end():
            return None
        start = cur.mark()
        c = cur.read(1)
        if len(c) != 1 or not (rule.low <= c <= rule.high):
            return self._failed(rule, start)
        return self._passed(rule, start)

    def _char_set(self, rule: CharSet) -> Optional[Token]:
        cur = self.cursor
        if cur.at_end():
            return None
        start = cur.mark()
        c = cur.read(1)
        if len(c) != 1 or c not in rule.chars:
            return self._failed(rule, start)
        return self._passed(rule, start)

    # ---- combinators ----
    def _seq(self, rule: Seq) -> Optional[Token]:
        start = self.cursor.mark()
        children: List[Token] = []
        for item in rule.items:
            tok = self.match(item)
            if tok is None:
                return self._failed(rule, start)
            children.append(tok)
        return self._passed(rule, start, children)

    def _choice(self, rule: Choice) -> Optional[Token]:
        start = self.cursor.mark()
        for alt in rule.alts:
            tok = self.match(alt)
            if tok is not None:
                return self._passed(rule, start, [tok])
        return self._failed(rule, start)

    def _repeat(self, rule: Repeat) -> Optional[Token]:
        start = self.cursor.mark()
        children: List[Token] = []
        while True:
            tok = self.match(rule.node)
            if tok is None:
                break
            children.append(tok)
        count = len(children)
        if count < rule.min or (rule.max is not None and count > rule.max):
            return self._failed(rule, start)
        return self._passed(rule, start, children)

    def _named(self, rule: Named) -> Optional[Token]:
        if rule.expr is None:
            raise SyntaxError(f"rule '{rule.name}' is declared but never defined")
        start = self.cursor.mark()
        tok = self.match(rule.expr)
        if tok is None:
            return self._failed(rule, start)
        return self._passed(rule, start, [tok])

    def _ref(self, rule: Ref) -> Optional[Token]:
        if rule.target is None:
            raise SyntaxError("unbound rule reference")
        return self.match(rule.target)


def match(rule: Rule, cursor: Cursor) -> Optional[Token]:
    """Match `rule` at the cursor position. Returns None on failure."""
    return Matcher(cursor).match(rule)


def match_text(rule: Rule, source, require_end: bool = False) -> Optional[Token]:
    """Match `rule` against a string or seekable text stream.

    With `require_end`, a match that leaves input behind counts as a failure
    and the cursor goes back to where it started.
    """
    cursor = cursor_for(source)
    start = cursor.mark()
    tok = Matcher(cursor).match(rule)
    if tok is not None and require_end and not cursor.at_end():
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("unconsumed input after %s at %s", _label(rule), cursor.mark())
        cursor.reset(start)
        return None
    return tok
