# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""syntax tree nodes produced by exprcalc.parser.expr"""


class Node:
    __slots__ = ()

    def children(self):
        return ()

    def __iter__(self):
        return iter(self.children())

    def _key(self):
        return tuple(getattr(self, name) for name in self.__slots__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __repr__(self):
        args = ", ".join(repr(value) for value in self._key())
        return f"{self.__class__.__name__}({args})"


class Literal(Node):
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value


class BinaryOp(Node):
    __slots__ = ("op", "left", "right")

    def __init__(self, op, left, right):
        self.op = op
        self.left = left
        self.right = right

    def children(self):
        return (self.left, self.right)


class FunctionCall(Node):
    __slots__ = ("name", "args")

    def __init__(self, name, args):
        self.name = name
        self.args = tuple(args)

    def children(self):
        return self.args


class Negate(Node):
    __slots__ = ("operand",)

    def __init__(self, operand):
        self.operand = operand

    def children(self):
        return (self.operand,)
