# bnfkit/rules/__init__.py
"""Grammar combinators for bnfkit.

This package provides:
- rule kinds (Literal, CharRange, CharSet, Seq, Choice, Repeat, Named, Ref)
- construction helpers and the whitespace decorator
- a backtracking matcher that builds Token trees
- a BNF-like grammar printer
- static grammar checks (nullable rules, dangling references)
"""

from .ast import (
    Literal, CharRange, CharSet, Seq, Choice, Repeat, Named, Ref, Rule,
)
from .build import seq, choice, optional, zero_or_more, one_or_more, ws, WHITESPACE
from .engine import Matcher, match, match_text
from .printer import GrammarPrinter, to_text, format_grammar
from .check import GrammarReport, check_grammar, validate_grammar
