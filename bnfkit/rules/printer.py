# bnfkit/rules/printer.py
"""Render rule graphs as BNF-like text (diagnostics only, never re-parsed).

    Literal    "text"
    CharRange  [a-z]
    CharSet    [chars]
    Seq        (a b c)
    Choice     (a|b|c)
    Repeat     x?  x*  x+   ({m,n} / {m,} for other bounds)
    Named      name := body\\n
    Ref        name            (the target's definition is not expanded)

Because a Ref prints only its target's name, recursive grammars print in
finite time.
"""

from __future__ import annotations
from typing import List
import regex as re

from .ast import Literal, CharRange, CharSet, Seq, Choice, Repeat, Named, Ref, Rule

_SIMPLE_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}

_LIT_SPECIAL = re.compile(r'[\\"\p{Cc}]')
_CLASS_SPECIAL = re.compile(r"[\\\]\-\p{Cc}]")


def _escape_char(ch: str) -> str:
    if ch in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[ch]
    if ch in '"]-':
        return "\\" + ch
    return f"\\x{ord(ch):02x}"


def _escape(text: str, special) -> str:
    return special.sub(lambda m: _escape_char(m.group(0)), text)


def _class_text(chars: str) -> str:
    # ' ' and '\t' stay readable; only the class delimiters get escaped
    return _escape(chars, _CLASS_SPECIAL)


def repeat_suffix(rule: Repeat) -> str:
    lo, hi = rule.min, rule.max
    if (lo, hi) == (0, 1):
        return "?"
    if (lo, hi) == (0, None):
        return "*"
    if (lo, hi) == (1, None):
        return "+"
    if hi is None:
        return f"{{{lo},}}"
    return f"{{{lo},{hi}}}"


class GrammarPrinter:
    """Text renderer.

    expand_named=True  : nested Named rules print their full definition
                         (`name := body\\n`), as `to_text` requires
    expand_named=False : nested Named rules print by name only, which is what
                         `format_grammar` uses for its one-line-per-rule form
    """

    def __init__(self, expand_named: bool = True):
        self.expand_named = expand_named

    def text(self, rule: Rule) -> str:
        if isinstance(rule, Named):
            return self.definition(rule) + "\n"
        return self.inline(rule)

    def definition(self, rule: Named) -> str:
        if rule.expr is None:
            return f"{rule.name} := <undefined>"
        return f"{rule.name} := {self.inline(rule.expr)}"

    def inline(self, rule: Rule) -> str:
        if isinstance(rule, Literal):
            return '"' + _escape(rule.text, _LIT_SPECIAL) + '"'
        if isinstance(rule, CharRange):
            return f"[{_class_text(rule.low)}-{_class_text(rule.high)}]"
        if isinstance(rule, CharSet):
            return f"[{_class_text(rule.chars)}]"
        if isinstance(rule, Seq):
            return "(" + " ".join(self.inline(it) for it in rule.items) + ")"
        if isinstance(rule, Choice):
            return "(" + "|".join(self.inline(it) for it in rule.alts) + ")"
        if isinstance(rule, Repeat):
            return self.inline(rule.node) + repeat_suffix(rule)
        if isinstance(rule, Named):
            if self.expand_named:
                return self.definition(rule) + "\n"
            return rule.name
        if isinstance(rule, Ref):
            return rule.name if rule.target is not None else "<unbound>"
        raise TypeError(f"unknown rule: {rule!r}")


def to_text(rule: Rule) -> str:
    """BNF-like text of one rule graph, nested Named rules inlined."""
    return GrammarPrinter().text(rule)


def format_grammar(root: Rule) -> str:
    """Every Named rule reachable from `root`, one `name := body` line each.

    Rules are listed in discovery order (depth-first, left to right) and
    each appears once, however many times it is used or referenced.
    """
    from .check import reachable_named
    printer = GrammarPrinter(expand_named=False)
    lines: List[str] = [printer.definition(n) for n in reachable_named(root)]
    return "\n".join(lines) + ("\n" if lines else "")
