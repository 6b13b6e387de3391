# bnfkit/calc/shunting.py
"""Shunting-yard over a matched expression tree.

The token tree is walked in pre-order; the named leaf tokens come out in
source order, which is exactly the infix sequence the shunting-yard
algorithm wants. Operands are ints, operators their symbols ("+", ...).
"""

from __future__ import annotations
import operator
from typing import List, Union

from ..cursor import Cursor, TextCursor
from ..rules.engine import Matcher
from ..tree.token import Token
from ..tree.walk import named_tokens
from .grammar import OPERATORS, build_expr_grammar

Item = Union[int, str]

# precedence; every operator is left-associative
_PREC = {"+": 10, "-": 10, "*": 20, "/": 20}

_APPLY = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

_LEAVES = ("integer", "lparen", "rparen") + tuple(OPERATORS)


def to_rpn(root: Token, cursor: Cursor) -> List[Item]:
    """Operand/operator sequence in reverse Polish order."""
    out: List[Item] = []
    stack: List[str] = []
    for tok in named_tokens(root, *_LEAVES):
        name = tok.name
        if name == "integer":
            out.append(int(tok.text(cursor).strip()))
        elif name == "lparen":
            stack.append("(")
        elif name == "rparen":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise SyntaxError("unbalanced ')'")
            stack.pop()
        else:
            op = OPERATORS[name]
            while stack and stack[-1] != "(" and _PREC[stack[-1]] >= _PREC[op]:
                out.append(stack.pop())
            stack.append(op)
    while stack:
        op = stack.pop()
        if op == "(":
            raise SyntaxError("unbalanced '('")
        out.append(op)
    return out


def evaluate_rpn(items: List[Item]):
    values: list = []
    for it in items:
        if isinstance(it, int):
            values.append(it)
            continue
        if len(values) < 2:
            raise SyntaxError(f"operator {it!r} is missing an operand")
        rhs = values.pop()
        lhs = values.pop()
        values.append(_APPLY[it](lhs, rhs))
    if len(values) != 1:
        raise SyntaxError(f"malformed expression: {len(values)} values left")
    return values[0]


def parse(text: str, whitespace: bool = False, grammar=None):
    """Match `text` completely; returns `(token, cursor)`.

    Raises SyntaxError with the failing location when the grammar does not
    match the whole input.
    """
    g = grammar if grammar is not None else build_expr_grammar(whitespace=whitespace)
    cursor = TextCursor(text)
    tok = Matcher(cursor).match(g)
    if tok is None:
        raise SyntaxError(f"no match for {text!r}")
    if not cursor.at_end():
        line, col = cursor.location()
        raise SyntaxError(f"unexpected input at {line}:{col}: {text[cursor.mark():]!r}")
    return tok, cursor


def evaluate(text: str, whitespace: bool = False, grammar=None):
    tok, cursor = parse(text, whitespace=whitespace, grammar=grammar)
    return evaluate_rpn(to_rpn(tok, cursor))
