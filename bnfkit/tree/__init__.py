# bnfkit/tree/__init__.py
"""Token tree produced by the matcher, and its traversal."""

from .token import Token
from .walk import TokenWalker, walk, walk_with_depth, named_tokens
