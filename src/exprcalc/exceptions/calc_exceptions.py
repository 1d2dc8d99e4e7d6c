# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.


class EvaluationError(Exception):
    stage = "Evaluation"


class LexError(EvaluationError):
    stage = "Lexing"


class ParseError(EvaluationError):
    stage = "Parsing"


class EvalError(EvaluationError):
    stage = "Evaluation"


class UnexpectedChar(LexError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"unexpected character {char!r} at position {position}")


class InvalidNumber(LexError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"invalid number: {text!r}")


class UnknownFunction(LexError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"unknown function: {name!r}")


class UnexpectedToken(ParseError):
    def __init__(self, found, expected):
        self.found = found
        self.expected = expected
        super().__init__(f"unexpected {found}, expected {expected}")


class UnexpectedEnd(ParseError):
    def __init__(self, expected="an operand"):
        self.expected = expected
        super().__init__(f"unexpected end of input, expected {expected}")


class WrongArity(ParseError):
    def __init__(self, function, expected, actual):
        self.function = function
        self.expected = expected
        self.actual = actual
        plural = "" if expected == 1 else "s"
        super().__init__(
            f"{function}() takes {expected} argument{plural}, got {actual}"
        )


class DivisionByZero(EvalError):
    def __init__(self):
        super().__init__("division by zero")


class DomainError(EvalError):
    def __init__(self, function, value):
        self.function = function
        self.value = value
        super().__init__(f"{function}() is undefined for {value}")


class Overflow(EvalError):
    def __init__(self, operation, message=None):
        self.operation = operation
        super().__init__(message or f"numeric overflow in {operation}")
