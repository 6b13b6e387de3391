# bnfkit/bnfc.py
"""bnfc – bnfkit CLI

Examples
    $ python -m bnfkit.bnfc grammar
    $ python -m bnfkit.bnfc check
    $ python -m bnfkit.bnfc match --text "(1+2)*3" -D
    $ python -m bnfkit.bnfc eval --text "1 + 2 + 3 * 4" --ws

Commands
--------
- grammar : print the example expression grammar
- check   : run the static grammar checks and print the report
- match   : match input against the grammar and print the named-token tree
- eval    : match, convert to reverse Polish order and evaluate

With -D/--debug, summaries go to stderr and the matcher's per-rule trace is
switched on through logging.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional

from .calc import build_expr_grammar, evaluate_rpn, to_rpn
from .cursor import TextCursor
from .rules import Matcher, check_grammar, format_grammar, to_text
from .tree import walk_with_depth

# ------------------------------
# helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _setup_debug(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="[TRACE] %(name)s: %(message)s")


def _read_input(args) -> str:
    if args.text is not None:
        return args.text
    with open(args.input, "r", encoding="utf-8") as f:
        # a trailing newline from the editor is not part of the expression
        return f.read().rstrip("\n")


def _match_input(args):
    """Match the input text; returns (token or None, cursor)."""
    text = _read_input(args)
    g = build_expr_grammar(whitespace=args.ws)
    if args.debug:
        _eprint(f"[DEBUG] input length={len(text)} whitespace={args.ws}")
    cursor = TextCursor(text)
    tok = Matcher(cursor).match(g)
    if args.debug:
        _eprint(f"[DEBUG] match {'passed' if tok is not None else 'failed'} | cursor at {cursor.mark()}")
    return tok, cursor


def _report_leftover(cursor: TextCursor) -> None:
    line, col = cursor.location()
    rest = cursor.substring(cursor.mark(), len(cursor.text))
    _eprint(f"[NOT PASSED] unconsumed input at {line}:{col}: {rest!r}")

# ------------------------------
# commands
# ------------------------------

def cmd_grammar(args) -> int:
    g = build_expr_grammar(whitespace=args.ws)
    print(to_text(g) if args.raw else format_grammar(g), end="")
    return 0


def cmd_check(args) -> int:
    g = build_expr_grammar(whitespace=args.ws)
    report = check_grammar(g)
    if args.debug:
        _eprint(f"[DEBUG] reachable rules={len(report.rules)} named={len(report.named)}")
    nullable = [n.name for n in report.named if report.is_nullable(n)]
    print("named   : " + ", ".join(n.name for n in report.named))
    print("nullable: " + (", ".join(nullable) if nullable else "(none)"))
    if report.problems:
        for p in report.problems:
            print(f"[PROBLEM] {p}")
        return 1
    print("[CHECK OK]")
    return 0


def cmd_match(args) -> int:
    tok, cursor = _match_input(args)
    if tok is None:
        _eprint("[NOT PASSED] no match")
        return 1
    for depth, t in walk_with_depth(tok):
        if t.name is None:
            continue
        print(f"{'  ' * depth}{t.name} {t.start}, {t.end}({len(t)}) {t.text(cursor)!r}")
    if not cursor.at_end():
        _report_leftover(cursor)
        return 1
    return 0


def cmd_eval(args) -> int:
    tok, cursor = _match_input(args)
    if tok is None:
        _eprint("[NOT PASSED] no match")
        return 1
    if not cursor.at_end():
        _report_leftover(cursor)
        return 1
    rpn = to_rpn(tok, cursor)
    print("rpn  : " + " ".join(str(it) for it in rpn))
    print(f"value: {evaluate_rpn(rpn)}")
    return 0


def _run(func, args) -> int:
    try:
        return int(func(args))
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]", str(e))
        return 2
    except (ValueError, ZeroDivisionError, OSError) as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

# ------------------------------
# entry point
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="bnfc", description="bnfkit grammar-combinator CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def common(p):
        p.add_argument("--ws", action="store_true", help="allow spaces/tabs around terminals")
        p.add_argument("-D", "--debug", action="store_true", help="print debug summaries and the match trace")

    def source(p):
        src_group = p.add_mutually_exclusive_group(required=True)
        src_group.add_argument("--text", help="input text")
        src_group.add_argument("--input", help="input file path")

    p_grammar = sub.add_parser("grammar", help="print the expression grammar")
    p_grammar.add_argument("--raw", action="store_true", help="print the inlined form of the top rule")
    common(p_grammar)
    p_grammar.set_defaults(func=cmd_grammar)

    p_check = sub.add_parser("check", help="check the grammar for dangling references and empty repeats")
    common(p_check)
    p_check.set_defaults(func=cmd_check)

    p_match = sub.add_parser("match", help="match input and print the named-token tree")
    source(p_match)
    common(p_match)
    p_match.set_defaults(func=cmd_match)

    p_eval = sub.add_parser("eval", help="match input and evaluate it")
    source(p_eval)
    common(p_eval)
    p_eval.set_defaults(func=cmd_eval)

    args = ap.parse_args(argv)
    _setup_debug(args.debug)
    return _run(args.func, args)


if __name__ == "__main__":
    sys.exit(main())
