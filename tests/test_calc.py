import pytest

from bnfkit.calc import evaluate, evaluate_rpn, parse, to_rpn


@pytest.mark.parametrize("text, rpn, value", [
    ("(1+2)*3", [1, 2, "+", 3, "*"], 9),
    ("1+2+3*4", [1, 2, "+", 3, 4, "*", "+"], 15),
    ("8-3-2", [8, 3, "-", 2, "-"], 3),
    ("8/4/2", [8, 4, "/", 2, "/"], 1.0),
    ("2*(3+4)", [2, 3, 4, "+", "*"], 14),
    ("42", [42], 42),
])
def test_rpn_and_value(text, rpn, value):
    tok, cursor = parse(text)
    assert to_rpn(tok, cursor) == rpn
    assert evaluate_rpn(rpn) == value
    assert evaluate(text) == value


def test_whitespace_grammar_evaluates():
    assert evaluate(" 1 + 2 * ( 3 - 1 ) ", whitespace=True) == 5


@pytest.mark.parametrize("text", ["1+", "(1", "1 + 2", "x"])
def test_bad_input_raises(text):
    with pytest.raises(SyntaxError):
        evaluate(text)


def test_division_by_zero_propagates():
    with pytest.raises(ZeroDivisionError):
        evaluate("1/0")


def test_evaluate_rpn_rejects_malformed_sequences():
    with pytest.raises(SyntaxError):
        evaluate_rpn([1, "+"])
    with pytest.raises(SyntaxError):
        evaluate_rpn([1, 2])
