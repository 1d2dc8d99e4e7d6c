# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""evaluate arithmetic expressions with integer/float aware semantics"""

from exprcalc.core.calculator import evaluate_expression
from exprcalc.core.numeric import Float, Integer
from exprcalc.exceptions.calc_exceptions import (
    DivisionByZero,
    DomainError,
    EvalError,
    EvaluationError,
    InvalidNumber,
    LexError,
    Overflow,
    ParseError,
    UnexpectedChar,
    UnexpectedEnd,
    UnexpectedToken,
    UnknownFunction,
    WrongArity,
)

__all__ = [
    "DivisionByZero",
    "DomainError",
    "EvalError",
    "EvaluationError",
    "Float",
    "Integer",
    "InvalidNumber",
    "LexError",
    "Overflow",
    "ParseError",
    "UnexpectedChar",
    "UnexpectedEnd",
    "UnexpectedToken",
    "UnknownFunction",
    "WrongArity",
    "evaluate_expression",
]
