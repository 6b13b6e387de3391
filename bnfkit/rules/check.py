# bnfkit/rules/check.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set

from .ast import Literal, CharRange, CharSet, Seq, Choice, Repeat, Named, Ref, Rule


@dataclass
class GrammarReport:
    """
    GrammarReport
    =============
    Result of `check_grammar`.

    - rules    : every rule object reachable from the root (Ref targets
                 included), in discovery order
    - named    : the Named rules among them, in discovery order
    - nullable : ids of rules that can succeed without consuming input
    - problems : human readable defects; empty for a usable grammar
    """
    rules: List[Rule] = field(default_factory=list)
    named: List[Named] = field(default_factory=list)
    nullable: Set[int] = field(default_factory=set)
    problems: List[str] = field(default_factory=list)

    def is_nullable(self, rule: Rule) -> bool:
        return id(rule) in self.nullable

    @property
    def ok(self) -> bool:
        return not self.problems


def _children(rule: Rule) -> List[Rule]:
    if isinstance(rule, Seq):
        return rule.items
    if isinstance(rule, Choice):
        return rule.alts
    if isinstance(rule, Repeat):
        return [rule.node]
    if isinstance(rule, Named):
        return [rule.expr] if rule.expr is not None else []
    if isinstance(rule, Ref):
        return [rule.target] if rule.target is not None else []
    return []


def reachable_rules(root: Rule) -> List[Rule]:
    """Depth-first, left-to-right, each rule object once (explicit stack)."""
    seen: Set[int] = set()
    out: List[Rule] = []
    stack: List[Rule] = [root]
    while stack:
        rule = stack.pop()
        if id(rule) in seen:
            continue
        seen.add(id(rule))
        out.append(rule)
        # push in reverse so the leftmost child is visited first
        stack.extend(reversed(_children(rule)))
    return out


def reachable_named(root: Rule) -> Iterator[Named]:
    for rule in reachable_rules(root):
        if isinstance(rule, Named):
            yield rule


def _compute_nullable(rules: List[Rule]) -> Set[int]:
    """NULLABLE fixpoint: keep adding rules until nothing changes."""
    nullable: Set[int] = set()

    def is_null(r: Rule) -> bool:
        return id(r) in nullable

    changed = True
    while changed:
        changed = False
        for r in rules:
            if id(r) in nullable:
                continue
            if isinstance(r, Literal):
                now = r.text == ""
            elif isinstance(r, (CharRange, CharSet)):
                now = False
            elif isinstance(r, Seq):
                now = all(is_null(it) for it in r.items)
            elif isinstance(r, Choice):
                now = any(is_null(it) for it in r.alts)
            elif isinstance(r, Repeat):
                now = r.min == 0 or is_null(r.node)
            elif isinstance(r, Named):
                now = r.expr is not None and is_null(r.expr)
            elif isinstance(r, Ref):
                now = r.target is not None and is_null(r.target)
            else:
                raise TypeError(f"unknown rule: {r!r}")
            if now:
                nullable.add(id(r))
                changed = True
    return nullable


def _describe(rule: Rule, owner: Dict[int, str]) -> str:
    where = owner.get(id(rule))
    kind = type(rule).__name__
    return f"{kind} in '{where}'" if where else kind


def check_grammar(root: Rule) -> GrammarReport:
    """Inspect the grammar reachable from `root` without matching anything.

    Reported problems:
    - a Ref that was never bound
    - a Named rule that was declared but never defined
    - a Repeat whose child can succeed without consuming input; matching
      such a repeat at a position where the child matches empty never ends
    """
    rules = reachable_rules(root)
    report = GrammarReport(rules=rules)
    report.named = [r for r in rules if isinstance(r, Named)]
    report.nullable = _compute_nullable(rules)

    # nearest enclosing Named rule of each owned rule, for messages
    owner: Dict[int, str] = {}
    for named in report.named:
        stack = [named.expr] if named.expr is not None else []
        while stack:
            r = stack.pop()
            if id(r) in owner or isinstance(r, Named):
                continue
            owner[id(r)] = named.name
            if isinstance(r, Ref):
                continue
            stack.extend(_children(r))

    for r in rules:
        if isinstance(r, Ref) and r.target is None:
            report.problems.append(f"unbound reference ({_describe(r, owner)})")
        elif isinstance(r, Named) and r.expr is None:
            report.problems.append(f"rule '{r.name}' is declared but never defined")
        elif isinstance(r, Repeat) and report.is_nullable(r.node):
            from .printer import GrammarPrinter
            text = GrammarPrinter(expand_named=False).inline(r)
            report.problems.append(
                f"repeated rule can match empty input: {text} ({_describe(r, owner)})"
            )
    return report


def validate_grammar(root: Rule) -> GrammarReport:
    """Like `check_grammar`, but raise SyntaxError when there are problems."""
    report = check_grammar(root)
    if report.problems:
        raise SyntaxError("grammar problems:\n  " + "\n  ".join(report.problems))
    return report
