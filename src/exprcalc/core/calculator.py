# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

import contextlib

from exprcalc.core.evaluator import evaluate
from exprcalc.exceptions.calc_exceptions import Overflow
from exprcalc.parser.expr import parse
from exprcalc.parser.token.lexer import iter_tokens


@contextlib.contextmanager
def nesting_guard():
    """report hitting the interpreter's recursion limit as Overflow"""
    try:
        yield
    except RecursionError:
        raise Overflow("nesting depth", "expression nested too deeply") from None


def evaluate_expression(text):
    """Evaluate the expression in text and return an Integer or Float.

    Raises a subclass of EvaluationError (LexError, ParseError or
    EvalError) for the first problem found. Nothing is cached between
    calls.
    """
    with nesting_guard():
        return evaluate(parse(iter_tokens(text)))
