# bnfkit/rules/build.py
"""Construction helpers.

These only assemble rule objects; nothing here matches anything.
"""

from __future__ import annotations

from .ast import CharSet, Choice, Repeat, Rule, Seq

# horizontal whitespace only: newlines stay significant
WHITESPACE = " \t"


def seq(*items: Rule) -> Seq:
    return Seq(list(items))


def choice(*alts: Rule) -> Choice:
    return Choice(list(alts))


def optional(node: Rule) -> Repeat:
    return Repeat(node, 0, 1)


def zero_or_more(node: Rule) -> Repeat:
    return Repeat(node, 0, None)


def one_or_more(node: Rule) -> Repeat:
    return Repeat(node, 1, None)


def ws(node: Rule) -> Seq:
    """Let `node` tolerate surrounding spaces and tabs.

    Builds `Seq([[ \\t]*, node, [ \\t]*])` with fresh whitespace rules on
    every call, so each wrapped rule owns its own padding.
    """
    return Seq([zero_or_more(CharSet(WHITESPACE)), node, zero_or_more(CharSet(WHITESPACE))])
