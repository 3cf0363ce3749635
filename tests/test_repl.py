import io

import pytest

from minilisp.interpreter import Interpreter
from minilisp.repl import Repl, is_balanced, main


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", True),
        ("5", True),
        ("(+ 1 2)", True),
        ("(+ 1", False),
        ("(+ 1\n (* 2 3)", False),
        ("(+ 1\n (* 2 3))", True),
        (")", True),
    ]
)
def test_is_balanced(text, expected):
    assert is_balanced(text) is expected


def test_feed_accumulates_until_balanced():
    repl = Repl(prompt="")
    assert repl.feed("(+ 1\n") is None
    assert repl.feed("   (* 2 3)\n") is None
    assert repl.feed(")\n") == "7"
    assert repl.buffer == ""


def test_feed_skips_blank_lines():
    repl = Repl(prompt="")
    assert repl.feed("\n") is None
    assert repl.feed("   \t\n") is None
    assert repl.buffer == ""


def test_feed_reports_errors_and_recovers():
    repl = Repl(prompt="")
    assert repl.feed("(foo 1)\n") == "error: Unknown operator 'foo'"
    assert repl.buffer == ""
    assert repl.feed("(+ 1 true)\n") == "error: + argument 2 must be integer, got bool"
    assert repl.feed("(+ 1 1)\n") == "2"


def test_feed_shares_one_session():
    interp = Interpreter()
    repl = Repl(interp, prompt="")
    assert repl.feed("(global x 5)\n") == "nil"
    assert repl.feed("x\n") == "5"
    assert interp.env.lookup("x") == 5


def test_run_session():
    stdin = io.StringIO("(+ 1\n 2)\n\n(global x 5)\nx\n(foo)\n")
    stdout = io.StringIO()
    Repl(stdin=stdin, stdout=stdout, prompt="> ").run()
    assert stdout.getvalue() == (
        "> 3\n"
        "> > nil\n"
        "> 5\n"
        "> error: Unknown operator 'foo'\n"
        "> \n"
    )


def test_run_prints_program_output_in_order(capsys):
    stdin = io.StringIO("(block (print 1) 2)\n")
    Repl(stdin=stdin, prompt="").run()
    assert capsys.readouterr().out == "1\n2\n\n"


def test_main_runs_script(tmp_path, capsys):
    script = tmp_path / "answer.lisp"
    script.write_text("(global x 2)\n(print (* x 21))\n", encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "42\n"


def test_main_reports_script_errors(tmp_path, capsys):
    script = tmp_path / "bad.lisp"
    script.write_text("(print 1)\n(+ 1 true)\n", encoding="utf-8")
    assert main([str(script)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "error: + argument 2 must be integer, got bool" in captured.err


def test_main_starts_repl_without_file(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(* 6 7)\n"))
    monkeypatch.setenv("MINILISP_PROMPT", "$ ")
    assert main([]) == 0
    assert capsys.readouterr().out == "$ 42\n$ \n"


@pytest.mark.parametrize(
    "text,expected",
    [
        ('(print "(")', True),
        ('(print ")")', True),
        ('(print "(" ', False),
        ('(print "unterminated', False),
        (r'(print "\"(")', True),
    ]
)
def test_is_balanced_ignores_parens_in_strings(text, expected):
    assert is_balanced(text) is expected


def test_feed_evaluates_strings_holding_parens(capsys):
    repl = Repl(prompt="")
    assert repl.feed('(print "(")\n') == "nil"
    assert repl.feed('(print ")")\n') == "nil"
    assert repl.buffer == ""
    assert capsys.readouterr().out == '"("\n")"\n'


def test_feed_waits_for_string_to_close():
    repl = Repl(prompt="")
    assert repl.feed('(print "a\n') is None
    assert repl.feed('b")\n') == "nil"


def test_feed_survives_nesting_beyond_the_stack(monkeypatch):
    monkeypatch.setenv("MINILISP_MAX_DEPTH", "100000")
    repl = Repl(prompt="")
    out = repl.feed("(block " * 3000 + ")" * 3000 + "\n")
    assert out.startswith("error: ")
    assert repl.feed("(+ 1 2)\n") == "3"
