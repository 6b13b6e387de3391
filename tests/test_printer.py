import pytest

from bnfkit import (
    CharRange, CharSet, Literal, Named, Ref, Repeat, format_grammar, to_text,
    choice, one_or_more, optional, seq, zero_or_more,
)
from bnfkit.calc import build_expr_grammar


@pytest.mark.parametrize("rule, text", [
    (Literal("foo"), '"foo"'),
    (CharRange("a", "z"), "[a-z]"),
    (CharSet("abc"), "[abc]"),
    (seq(Literal("a"), Literal("b")), '("a" "b")'),
    (choice(Literal("a"), Literal("b")), '("a"|"b")'),
    (optional(Literal("a")), '"a"?'),
    (zero_or_more(Literal("a")), '"a"*'),
    (one_or_more(Literal("a")), '"a"+'),
    (Repeat(Literal("a"), 2, 3), '"a"{2,3}'),
    (Repeat(Literal("a"), 2, None), '"a"{2,}'),
    (Named("x", Literal("a")), 'x := "a"\n'),
])
def test_rule_text(rule, text):
    assert to_text(rule) == text
    assert rule.to_text() == text
    assert str(rule) == text


def test_escaping():
    assert to_text(Literal('say "hi"\n')) == '"say \\"hi\\"\\n"'
    assert to_text(CharSet(" \t")) == "[ \\t]"
    assert to_text(CharSet("+-]")) == "[+\\-\\]]"


def test_ref_prints_only_the_target_name():
    loop = Named("loop")
    loop.define(seq(Literal("a"), optional(Ref(loop))))
    assert to_text(loop) == 'loop := ("a" loop?)\n'
    assert to_text(Ref()) == "<unbound>"
    assert to_text(Named("later")) == "later := <undefined>\n"


def test_printing_is_idempotent_and_terminates():
    g = build_expr_grammar()
    first = to_text(g)
    assert first == to_text(g)
    assert first.startswith("expr := (term := (factor := ")
    assert "(lparen := \"(\"\n expr rparen := \")\"\n)" in first


def test_format_grammar_lists_each_rule_once():
    text = format_grammar(build_expr_grammar())
    assert text.splitlines() == [
        "expr := (term ((add|sub) term)*)",
        "term := (factor ((mul|div) factor)*)",
        "factor := (integer|(lparen expr rparen))",
        "integer := [0-9]+",
        "lparen := \"(\"",
        "rparen := \")\"",
        "mul := \"*\"",
        "div := \"/\"",
        "add := \"+\"",
        "sub := \"-\"",
    ]
    assert text == format_grammar(build_expr_grammar())
