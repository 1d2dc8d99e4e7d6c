#! /usr/bin/env python

# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Evaluate syntax trees built by exprcalc.parser.expr.

Integer operands stay integers for ``+ - *``, negation and ``pow`` with a
non-negative integer exponent. Everything else is computed on floats.
Results that do not fit the tag (integers outside 64 bits, infinite
floats) raise Overflow; undefined function arguments raise DomainError.
"""

import math
import operator

from exprcalc.core.numeric import Float, Integer
from exprcalc.exceptions.calc_exceptions import DivisionByZero, DomainError, Overflow
from exprcalc.parser.nodes import BinaryOp, FunctionCall, Literal, Negate

binary_ops = {}
functions = {}


def _divide(x, y):
    if y == 0:
        raise DivisionByZero()
    return x / y


def addop(op, int_fun, float_fun):
    """register a binary operator. int_fun is None if the operator
    always works on floats"""
    binary_ops[op] = (int_fun, float_fun)


a = addop
a("+", operator.add, operator.add)
a("-", operator.sub, operator.sub)
a("*", operator.mul, operator.mul)
a("/", None, _divide)
del a


def addfunc(name, fun, domain=None):
    """register a float function of one argument. domain, if given, is
    a predicate that must hold for the argument"""

    def wrap(arg):
        x = arg.as_float().value
        if domain is not None and not domain(x):
            raise DomainError(name, arg)
        return Float(fun(x), name)

    functions[name] = wrap


def _unit_interval(x):
    return -1.0 <= x <= 1.0


a = addfunc
a("cos", math.cos)
a("acos", math.acos, _unit_interval)
a("sin", math.sin)
a("asin", math.asin, _unit_interval)
a("tan", math.tan)
a("atan", math.atan)
a("sqrt", math.sqrt, lambda x: x >= 0)
del a


def _int_pow(base, exponent):
    if base in (-1, 0, 1) or exponent <= 1:
        return base**exponent
    # |base| >= 2, anything beyond 2**63 does not fit
    if exponent >= 64:
        raise Overflow("pow")
    return base**exponent


def _pow(base, exponent):
    if base.is_integer and exponent.is_integer and exponent.value >= 0:
        return Integer(_int_pow(base.value, exponent.value), "pow")

    x = base.as_float().value
    y = exponent.as_float().value
    if x == 0 and y < 0:
        raise DomainError("pow", base)
    if x < 0 and not y.is_integer():
        raise DomainError("pow", base)
    try:
        result = math.pow(x, y)
    except OverflowError:
        raise Overflow("pow") from None
    return Float(result, "pow")


functions["pow"] = _pow


def apply_binary(op, left, right):
    int_fun, float_fun = binary_ops[op]
    if int_fun is not None and left.is_integer and right.is_integer:
        return Integer(int_fun(left.value, right.value), op)
    return Float(float_fun(left.as_float().value, right.as_float().value), op)


def negate(value):
    if value.is_integer:
        return Integer(-value.value, "negation")
    return Float(-value.value)


def _eval_literal(node):
    return node.value


def _eval_binary(node):
    left = evaluate(node.left)
    right = evaluate(node.right)
    return apply_binary(node.op, left, right)


def _eval_call(node):
    args = [evaluate(arg) for arg in node.args]
    return functions[node.name](*args)


def _eval_negate(node):
    return negate(evaluate(node.operand))


dispatch = {
    Literal: _eval_literal,
    BinaryOp: _eval_binary,
    FunctionCall: _eval_call,
    Negate: _eval_negate,
}


def evaluate(node):
    """compute the Integer or Float value of a syntax tree"""
    return dispatch[type(node)](node)
