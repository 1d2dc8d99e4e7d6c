#! /usr/bin/env python

# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Recursive descent parser for arithmetic expressions.

Grammar, highest precedence last::

    expr    := term (('+' | '-') term)*
    term    := unary (('*' | '/') unary)*
    unary   := '-' unary | primary
    primary := number | '(' expr ')' | function '(' expr (',' expr)* ')'

Binary operators are left associative. The number of function arguments
is checked against exprcalc.parser.token.lexer.FUNCTIONS after the
argument list has been read.
"""

from exprcalc.exceptions.calc_exceptions import UnexpectedEnd, UnexpectedToken, WrongArity
from exprcalc.parser.nodes import BinaryOp, FunctionCall, Literal, Negate
from exprcalc.parser.token.lexer import (
    COMMA,
    FUNCTION,
    FUNCTIONS,
    LPAREN,
    NUMBER,
    OPERATOR,
    RPAREN,
)

OPERAND = "an operand"


class Parser:
    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self._lookahead = next(self._tokens, None)

    def advance(self):
        token = self._lookahead
        self._lookahead = next(self._tokens, None)
        return token

    def _at(self, kind, *values):
        token = self._lookahead
        if token is None or token.kind != kind:
            return False
        return not values or token.value in values

    def expect(self, kind, expected):
        token = self._lookahead
        if token is None:
            raise UnexpectedEnd(expected)
        if token.kind != kind:
            raise UnexpectedToken(token, expected)
        return self.advance()

    def parse(self):
        if self._lookahead is None:
            raise UnexpectedEnd(OPERAND)
        node = self.parse_expr()
        if self._lookahead is not None:
            raise UnexpectedToken(self._lookahead, "end of input")
        return node

    def parse_expr(self):
        node = self.parse_term()
        while self._at(OPERATOR, "+", "-"):
            op = self.advance().value
            node = BinaryOp(op, node, self.parse_term())
        return node

    def parse_term(self):
        node = self.parse_unary()
        while self._at(OPERATOR, "*", "/"):
            op = self.advance().value
            node = BinaryOp(op, node, self.parse_unary())
        return node

    def parse_unary(self):
        if self._at(OPERATOR, "-"):
            self.advance()
            return Negate(self.parse_unary())
        return self.parse_primary()

    def parse_primary(self):
        token = self._lookahead
        if token is None:
            raise UnexpectedEnd(OPERAND)

        if token.kind == NUMBER:
            self.advance()
            return Literal(token.value)

        if token.kind == LPAREN:
            self.advance()
            node = self.parse_expr()
            self.expect(RPAREN, "')'")
            return node

        if token.kind == FUNCTION:
            self.advance()
            return self.parse_call(token.value)

        raise UnexpectedToken(token, OPERAND)

    def parse_call(self, name):
        self.expect(LPAREN, "'('")

        args = []
        if not self._at(RPAREN):
            args.append(self.parse_expr())
            while self._at(COMMA):
                self.advance()
                args.append(self.parse_expr())
        self.expect(RPAREN, "',' or ')'")

        arity = FUNCTIONS[name]
        if len(args) != arity:
            raise WrongArity(name, arity, len(args))
        return FunctionCall(name, args)


def parse(tokens):
    """parse a token sequence into a syntax tree"""
    return Parser(tokens).parse()
