# bnfkit/calc/__init__.py
"""Example consumer: an arithmetic grammar and a shunting-yard evaluator."""

from .grammar import build_expr_grammar, OPERATORS
from .shunting import to_rpn, evaluate_rpn, parse, evaluate
