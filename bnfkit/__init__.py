# bnfkit/__init__.py
"""bnfkit – composable grammar rules, a backtracking matcher and token trees.

    from bnfkit import Named, Ref, Literal, CharRange, seq, choice, one_or_more, TextCursor

    digits = Named("integer", one_or_more(CharRange("0", "9")))
    cursor = TextCursor("42+1")
    tok = digits.match(cursor)
    tok.text(cursor)  # -> "42"
"""

from .cursor import Cursor, TextCursor, StreamCursor, cursor_for
from .tree import Token, TokenWalker, walk, walk_with_depth, named_tokens
from .rules import (
    Literal, CharRange, CharSet, Seq, Choice, Repeat, Named, Ref, Rule,
    seq, choice, optional, zero_or_more, one_or_more, ws, WHITESPACE,
    Matcher, match, match_text,
    GrammarPrinter, to_text, format_grammar,
    GrammarReport, check_grammar, validate_grammar,
)

__version__ = "0.1.0"
