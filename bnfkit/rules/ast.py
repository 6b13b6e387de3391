# bnfkit/rules/ast.py
"""Rule model: one dataclass per rule kind.

Terminals  : Literal, CharRange, CharSet
Combinators: Seq, Choice, Repeat, Named (each owns its children)
Reference  : Ref (a non-owning link to a Named rule)

Rules compare by identity (`eq=False`): grammars may be cyclic through
`Ref`, so structural equality or a recursive repr would never terminate.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union


class RuleOps:
    """Entry points shared by every rule kind."""

    def match(self, cursor):
        """Match at the cursor position; a Token on success, None on failure."""
        from .engine import match
        return match(self, cursor)

    def to_text(self) -> str:
        from .printer import to_text
        return to_text(self)

    def __str__(self) -> str:
        return self.to_text()


# ---- terminals ----

@dataclass(eq=False)
class Literal(RuleOps):
    text: str


@dataclass(eq=False)
class CharRange(RuleOps):
    low: str   # inclusive
    high: str  # inclusive

    def __post_init__(self):
        if len(self.low) != 1 or len(self.high) != 1:
            raise ValueError(f"CharRange bounds must be single characters: {self.low!r}, {self.high!r}")
        if self.low > self.high:
            raise ValueError(f"empty CharRange [{self.low}-{self.high}]")


@dataclass(eq=False)
class CharSet(RuleOps):
    chars: str

    def __post_init__(self):
        if not self.chars:
            raise ValueError("CharSet needs at least one character")


# ---- combinators ----

@dataclass(eq=False)
class Seq(RuleOps):
    items: List["Rule"]

    def __post_init__(self):
        self.items = list(self.items)
        if not self.items:
            raise ValueError("Seq needs at least one item")


@dataclass(eq=False)
class Choice(RuleOps):
    alts: List["Rule"]

    def __post_init__(self):
        self.alts = list(self.alts)
        if not self.alts:
            raise ValueError("Choice needs at least one alternative")


@dataclass(eq=False)
class Repeat(RuleOps):
    node: "Rule"
    min: int = 0
    max: Optional[int] = None  # None: unbounded

    def __post_init__(self):
        if self.min < 0:
            raise ValueError(f"Repeat min must be >= 0, got {self.min}")
        if self.max is not None and self.max < self.min:
            raise ValueError(f"Repeat min {self.min} exceeds max {self.max}")

    @property
    def unbounded(self) -> bool:
        return self.max is None


@dataclass(eq=False)
class Named(RuleOps):
    """A named rule. `expr` may stay None while a recursive grammar is built.

    Forward declaration:
        expr = Named("expr")          # placeholder
        ... Ref(expr) ...             # rules that refer to it
        expr.define(Seq([...]))       # one-time back-patch
    """
    name: str
    expr: Optional["Rule"] = None

    @property
    def defined(self) -> bool:
        return self.expr is not None

    def define(self, expr: "Rule") -> "Named":
        if self.expr is not None:
            raise SyntaxError(f"rule '{self.name}' is already defined")
        self.expr = expr
        return self


@dataclass(eq=False)
class Ref(RuleOps):
    """Forwarding rule; never owns its target."""
    target: Optional[Named] = field(default=None, repr=False)

    def __post_init__(self):
        if self.target is not None and not isinstance(self.target, Named):
            raise TypeError(f"Ref target must be a Named rule, got {type(self.target).__name__}")

    @property
    def name(self) -> Optional[str]:
        return self.target.name if self.target is not None else None

    @property
    def bound(self) -> bool:
        return self.target is not None

    def bind(self, target: Named) -> "Ref":
        if not isinstance(target, Named):
            raise TypeError(f"Ref target must be a Named rule, got {type(target).__name__}")
        if self.target is not None and self.target is not target:
            raise SyntaxError(f"reference already bound to '{self.target.name}'")
        self.target = target
        return self

    def __repr__(self) -> str:
        return f"Ref({self.name or '<unbound>'})"


Rule = Union[Literal, CharRange, CharSet, Seq, Choice, Repeat, Named, Ref]

TERMINALS = (Literal, CharRange, CharSet)
