#! /usr/bin/env py.test

import io
import types

import pytest

from exprcalc.core.numeric import Float, Integer
from exprcalc.exceptions.calc_exceptions import (
    InvalidNumber,
    LexError,
    UnexpectedChar,
    UnknownFunction,
)
from exprcalc.parser.token.lexer import (
    COMMA,
    FUNCTION,
    LPAREN,
    NUMBER,
    OPERATOR,
    RPAREN,
    Token,
    dump_tokens,
    iter_tokens,
    tokenize,
)


def num(value):
    return Token(NUMBER, value)


def op(value):
    return Token(OPERATOR, value)


def test_tokenize_expression():
    tokens = tokenize("1 + (2 * 3 - 10.5) / sin(0.5)")
    assert tokens == [
        num(Integer(1)),
        op("+"),
        Token(LPAREN, "("),
        num(Integer(2)),
        op("*"),
        num(Integer(3)),
        op("-"),
        num(Float(10.5)),
        Token(RPAREN, ")"),
        op("/"),
        Token(FUNCTION, "sin"),
        Token(LPAREN, "("),
        num(Float(0.5)),
        Token(RPAREN, ")"),
    ]


def test_tokenize_pow_with_comma():
    tokens = tokenize("pow(2,3)")
    assert [t.kind for t in tokens] == [FUNCTION, LPAREN, NUMBER, COMMA, NUMBER, RPAREN]


@pytest.mark.parametrize("name", ["cos", "acos", "sin", "asin", "tan", "atan", "sqrt", "pow"])
def test_function_names(name):
    assert tokenize(name) == [Token(FUNCTION, name)]


def test_greedy_identifier():
    # acos must not be read as a + cos
    assert tokenize("acos") == [Token(FUNCTION, "acos")]
    with pytest.raises(UnknownFunction) as excinfo:
        tokenize("cosine(1)")
    assert excinfo.value.name == "cosine"


@pytest.mark.parametrize("name", ["foo", "saad", "COS", "Sin", "pi", "x"])
def test_unknown_function(name):
    with pytest.raises(UnknownFunction) as excinfo:
        tokenize(f"{name}(10)")
    assert excinfo.value.name == name
    assert name in str(excinfo.value)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", Integer(0)),
        ("42", Integer(42)),
        ("007", Integer(7)),
        ("2.0", Float(2.0)),
        ("2.50", Float(2.5)),
        ("10.5", Float(10.5)),
        ("9223372036854775807", Integer(2**63 - 1)),
    ],
)
def test_number_tags(text, expected):
    (token,) = tokenize(text)
    assert token.kind == NUMBER
    assert token.value == expected
    assert type(token.value) is type(expected)


def test_float_literal_is_never_integer():
    (token,) = tokenize("2.0")
    assert token.value != Integer(2)
    assert not token.value.is_integer


@pytest.mark.parametrize(
    "text", ["3.", "3.+1", ".5", "1.2.3", ".", "9223372036854775808", "1" * 5000]
)
def test_invalid_number(text):
    with pytest.raises(InvalidNumber):
        tokenize(text)


def test_invalid_number_text():
    with pytest.raises(InvalidNumber) as excinfo:
        tokenize("1 + 3. * 2")
    assert excinfo.value.text == "3."


def test_huge_float_literal_is_invalid():
    with pytest.raises(InvalidNumber):
        tokenize("9" * 400 + ".0")


@pytest.mark.parametrize(
    "text,char,position",
    [
        ("#", "#", 0),
        ("1 + 2 % 3", "%", 6),
        ("2 ^ 3", "^", 2),
        ("1 = 1", "=", 2),
    ],
)
def test_unexpected_char(text, char, position):
    with pytest.raises(UnexpectedChar) as excinfo:
        tokenize(text)
    assert excinfo.value.char == char
    assert excinfo.value.position == position


def test_lex_errors_share_base():
    for text in ("#", "3.", "foo"):
        with pytest.raises(LexError):
            tokenize(text)


def test_whitespace_is_skipped():
    assert tokenize(" \t1\n+\r\n2 ") == [num(Integer(1)), op("+"), num(Integer(2))]
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_positions():
    tokens = tokenize("12 + sqrt(4)")
    assert [t.pos for t in tokens] == [0, 3, 5, 9, 10, 11]


def test_iter_tokens_is_lazy():
    tokens = iter_tokens("1 + 2 #")
    assert isinstance(tokens, types.GeneratorType)
    assert next(tokens) == num(Integer(1))
    assert next(tokens) == op("+")
    assert next(tokens) == num(Integer(2))
    with pytest.raises(UnexpectedChar):
        next(tokens)


def test_token_str():
    assert str(num(Integer(3))) == "number 3"
    assert str(Token(FUNCTION, "pow")) == "function 'pow'"
    assert str(Token(RPAREN, ")")) == "')'"


def test_dump_tokens():
    out = io.StringIO()
    dump_tokens(tokenize("pow(2, 0.5)"), out=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 6
    assert lines[0].split() == ["0", "function", "pow"]
    assert lines[4].split() == ["7", "number", "0.5"]


def test_long_integer_literal_is_invalid_number():
    with pytest.raises(InvalidNumber) as excinfo:
        tokenize("2 + " + "9" * 5000)
    assert excinfo.value.text == "9" * 5000


def test_leading_zeros_do_not_count():
    assert tokenize("0" * 30 + "42") == [num(Integer(42))]


def test_token_inequality():
    assert num(Integer(1)) != num(Float(1.0))
    assert op("+") != op("-")
    assert not (op("+") != op("+"))
