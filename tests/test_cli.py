import logging

from bnfkit.bnfc import main


def test_grammar_command(capsys):
    assert main(["grammar"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "expr := (term ((add|sub) term)*)"


def test_grammar_raw(capsys):
    assert main(["grammar", "--raw"]) == 0
    assert capsys.readouterr().out.startswith("expr := (term := ")


def test_check_command(capsys):
    assert main(["check", "--ws"]) == 0
    out = capsys.readouterr().out
    assert "[CHECK OK]" in out
    assert "nullable: (none)" in out


def test_match_prints_named_tree(capsys):
    assert main(["match", "--text", "(1+2)*3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "expr 0, 7(7) '(1+2)*3'"
    assert any(line.strip() == "integer 1, 2(1) '1'" for line in lines)


def test_match_reports_leftover(capsys):
    assert main(["match", "--text", "1+2)"]) == 1
    assert "unconsumed input at 1:4" in capsys.readouterr().err


def test_match_from_file(tmp_path, capsys):
    src = tmp_path / "expr.txt"
    src.write_text("2*(3+4)\n", encoding="utf-8")
    assert main(["eval", "--input", str(src)]) == 0
    out = capsys.readouterr().out
    assert "rpn  : 2 3 4 + *" in out
    assert "value: 14" in out


def test_eval_errors(capsys):
    assert main(["eval", "--text", "x"]) == 1
    assert main(["eval", "--text", "1/0"]) == 2
    assert "ZeroDivisionError" in capsys.readouterr().err


def test_debug_trace(capsys, caplog):
    with caplog.at_level(logging.DEBUG, logger="bnfkit.rules.engine"):
        assert main(["eval", "--text", "1+1", "-D"]) == 0
    assert "[DEBUG] match passed" in capsys.readouterr().err
    assert any(r.getMessage().startswith("pass integer") for r in caplog.records)
