#! /usr/bin/env python

# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""Tagged numeric values.

Literals and evaluation results share one representation: an ``Integer``
holding a python int restricted to the signed 64 bit range, or a ``Float``
holding a finite python float. The tag decides how operators combine
their operands, so it is never inferred from the number itself.
"""

import math

from exprcalc.exceptions.calc_exceptions import Overflow

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class Number:
    __slots__ = ("value",)

    is_integer = False

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Number):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.value!r})"

    def __str__(self):
        return repr(self.value)

    def as_float(self):
        return Float(float(self.value))


class Integer(Number):
    __slots__ = ()

    is_integer = True

    def __init__(self, value, operation="integer arithmetic"):
        """operation names the computation in the Overflow raised for
        values outside the 64 bit range"""
        if not in_int_range(value):
            raise Overflow(operation)
        super().__init__(int(value))


class Float(Number):
    __slots__ = ()

    def __init__(self, value, operation="floating point arithmetic"):
        value = float(value)
        if not math.isfinite(value):
            raise Overflow(operation)
        super().__init__(value)

    def as_float(self):
        return self


def in_int_range(value):
    return INT_MIN <= value <= INT_MAX
