# bnfkit/calc/grammar.py
"""Arithmetic expression grammar built with bnfkit combinators.

    integer := [0-9]+
    lparen  := "("        rparen := ")"
    add     := "+"        sub    := "-"
    mul     := "*"        div    := "/"
    factor  := integer | (lparen expr rparen)
    term    := factor ((mul|div) factor)*
    expr    := term ((add|sub) term)*

`expr` is used before it is defined, so it is declared first and
back-patched once everything that refers to it exists.
"""

from __future__ import annotations

from ..rules.ast import CharRange, Literal, Named, Ref, Rule
from ..rules.build import choice, one_or_more, seq, ws, zero_or_more

OPERATORS = {"add": "+", "sub": "-", "mul": "*", "div": "/"}


def build_expr_grammar(whitespace: bool = False) -> Named:
    """Return the top rule `expr`.

    With `whitespace=True` every terminal rule tolerates spaces and tabs
    around it, so "1 + 2" matches as well as "1+2".
    """

    def terminal(name: str, body: Rule) -> Named:
        return Named(name, ws(body) if whitespace else body)

    expr = Named("expr")  # placeholder, defined at the end

    integer = terminal("integer", one_or_more(CharRange("0", "9")))
    lparen = terminal("lparen", Literal("("))
    rparen = terminal("rparen", Literal(")"))
    ops = {name: terminal(name, Literal(text)) for name, text in OPERATORS.items()}

    factor = Named("factor", choice(integer, seq(lparen, Ref(expr), rparen)))
    term = Named("term", seq(
        factor,
        zero_or_more(seq(choice(ops["mul"], ops["div"]), Ref(factor))),
    ))
    expr.define(seq(
        term,
        zero_or_more(seq(choice(ops["add"], ops["sub"]), Ref(term))),
    ))
    return expr
