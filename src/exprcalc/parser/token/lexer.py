#! /usr/bin/env python

# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Lexer for arithmetic expressions.

Turns text like ``cos(1) + (2 * 3 - 10.5)/sqrt(4)`` into a stream of
:class:`Token` objects.
"""

import math
import re
import sys

from exprcalc.core.numeric import Float, Integer, in_int_range
from exprcalc.exceptions.calc_exceptions import (
    InvalidNumber,
    UnexpectedChar,
    UnknownFunction,
)

NUMBER = "number"
OPERATOR = "operator"
FUNCTION = "function"
LPAREN = "lparen"
RPAREN = "rparen"
COMMA = "comma"

# name -> number of arguments
FUNCTIONS = {
    "cos": 1,
    "acos": 1,
    "sin": 1,
    "asin": 1,
    "tan": 1,
    "atan": 1,
    "sqrt": 1,
    "pow": 2,
}

PUNCTUATION = {
    "+": OPERATOR,
    "-": OPERATOR,
    "*": OPERATOR,
    "/": OPERATOR,
    "(": LPAREN,
    ")": RPAREN,
    ",": COMMA,
}

PATTERN = "\n".join(
    [
        r"(?P<space>\s+)",
        r"|(?P<number>[0-9.]+)",
        r"|(?P<name>[A-Za-z_][A-Za-z0-9_]*)",
        r"|(?P<char>.)",
    ]
)

rx_pattern = re.compile(PATTERN, re.VERBOSE | re.DOTALL)
rx_number = re.compile(r"[0-9]+(?:\.[0-9]+)?")


class Token:
    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind, value, pos=None):
        self.kind = kind
        self.value = value
        self.pos = pos

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"Token({self.kind!r}, {self.value!r})"

    def __str__(self):
        if self.kind == NUMBER:
            return f"number {self.value}"
        if self.kind == FUNCTION:
            return f"function {self.value!r}"
        return repr(self.value)


def as_number(text):
    """convert the text of a numeric literal to Integer or Float"""
    if not rx_number.fullmatch(text):
        raise InvalidNumber(text)

    if "." in text:
        value = float(text)
        if not math.isfinite(value):
            raise InvalidNumber(text)
        return Float(value)

    # more than 19 significant digits is beyond 2**63
    if len(text.lstrip("0")) > 19:
        raise InvalidNumber(text)
    value = int(text)
    if not in_int_range(value):
        raise InvalidNumber(text)
    return Integer(value)


def iter_tokens(input_string):
    """lazily yield the tokens of input_string"""
    for match in rx_pattern.finditer(input_string):
        kind = match.lastgroup
        text = match.group(kind)
        pos = match.start()

        if kind == "space":
            continue
        if kind == "number":
            yield Token(NUMBER, as_number(text), pos)
        elif kind == "name":
            if text not in FUNCTIONS:
                raise UnknownFunction(text)
            yield Token(FUNCTION, text, pos)
        elif text in PUNCTUATION:
            yield Token(PUNCTUATION[text], text, pos)
        else:
            raise UnexpectedChar(text, pos)


def tokenize(input_string):
    return list(iter_tokens(input_string))


def dump_tokens(tokens, out=None):
    if out is None:
        out = sys.stdout
    for token in tokens:
        out.write(f"{token.pos:>4} {token.kind:<9} {token.value}\n")
