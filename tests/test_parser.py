import pytest
from hypothesis import given, strategies as st

from minilisp.errors import MiniLispSyntaxError
from minilisp.reader.parser import TokenStream, parse, parse_all
from minilisp.reader.tokenizer import Token, lex
from minilisp.types.expression import Compound, Literal, SymbolRef
from minilisp.types.nil import Nil
from minilisp.types.value import INT_MAX, INT_MIN, render


@pytest.mark.parametrize(
    "source,expected",
    [
        ("nil", Literal(Nil)),
        ("6", Literal(6)),
        ("-45", Literal(-45)),
        ("true", Literal(True)),
        ("false", Literal(False)),
        ('"Hello, world!"', Literal("Hello, world!")),
        ("abc", SymbolRef("abc")),
        ("+", SymbolRef("+")),
        ("(block)", Compound("block", ())),
        ("(+ 1 2)", Compound("+", (Literal(1), Literal(2)))),
        (
            "(+ 4 (* 3 5))",
            Compound("+", (Literal(4), Compound("*", (Literal(3), Literal(5))))),
        ),
        (
            "(+ 4 (* 3 5) (* 4 6))",
            Compound("+", (
                Literal(4),
                Compound("*", (Literal(3), Literal(5))),
                Compound("*", (Literal(4), Literal(6))),
            )),
        ),
        (
            "(global abc (+ abc 1))",
            Compound("global", (SymbolRef("abc"), Compound("+", (SymbolRef("abc"), Literal(1))))),
        ),
    ]
)
def test_parse(source, expected):
    assert parse(source) == expected


def test_parse_from_tokens():
    assert parse([Token("integer", 3)]) == Literal(3)


def test_literal_equality_respects_kind():
    assert Literal(1) != Literal(True)
    assert Literal(0) != Literal(Nil)
    assert Literal("1") != Literal(1)


def test_compound_args_are_immutable():
    expr = Compound("+", [Literal(1)])
    assert expr.args == (Literal(1),)


@pytest.mark.parametrize(
    "source",
    [
        "",
        "   ",
        "(",
        "(+ 1",
        "(+ 1 (* 2 3)",
        ")",
        "(+ 1))",
        "1 2",
        "(1 2)",
        "((+ 1 2))",
        "()",
        "(true)",
        '("print" 1)',
    ]
)
def test_parse_errors(source):
    with pytest.raises(MiniLispSyntaxError):
        parse(source)


def test_depth_limit():
    source = "(+ " * 3 + "1" + ")" * 3
    assert parse(source, max_depth=3) == Compound(
        "+", (Compound("+", (Compound("+", (Literal(1),)),)),)
    )
    with pytest.raises(MiniLispSyntaxError):
        parse(source, max_depth=2)


def test_deep_nesting_is_a_syntax_error_not_a_crash():
    source = "(block " * 5000 + ")" * 5000
    with pytest.raises(MiniLispSyntaxError):
        parse(source)


def test_depth_limit_from_environment(monkeypatch):
    monkeypatch.setenv("MINILISP_MAX_DEPTH", "1")
    assert parse("(+ 1 2)") == Compound("+", (Literal(1), Literal(2)))
    with pytest.raises(MiniLispSyntaxError):
        parse("(+ 1 (+ 2 3))")


def test_parse_all():
    assert parse_all("(global x 1) x 5") == [
        Compound("global", (SymbolRef("x"), Literal(1))),
        SymbolRef("x"),
        Literal(5),
    ]
    assert parse_all("") == []


def test_token_stream_peek_and_advance():
    stream = TokenStream(lex("(a)"))
    assert stream.peek() == ("lparen", "(")
    assert stream.advance() == ("lparen", "(")
    assert stream.advance() == ("symbol", "a")
    assert not stream.at_end()
    assert stream.advance() == ("rparen", ")")
    assert stream.at_end()
    assert stream.advance() is None


@pytest.mark.parametrize("source", ["(+ 4 (* 3 5))", "(block)", '(print "a b")', "(if (< i 10) nil false)"])
def test_str_reproduces_source(source):
    assert str(parse(source)) == source


@given(st.one_of(
    st.integers(min_value=INT_MIN, max_value=INT_MAX).map(str),
    st.sampled_from(["true", "false", "nil"]),
))
def test_literal_round_trip(text):
    expr = parse(text)
    assert isinstance(expr, Literal)
    assert render(expr.value) == text


def test_configured_depth_beyond_the_stack_is_a_syntax_error(monkeypatch):
    monkeypatch.setenv("MINILISP_MAX_DEPTH", "100000")
    source = "(block " * 5000 + ")" * 5000
    with pytest.raises(MiniLispSyntaxError):
        parse(source)
    with pytest.raises(MiniLispSyntaxError):
        parse_all(source)
