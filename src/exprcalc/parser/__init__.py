#! /usr/bin/env python

# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

import sys

from exprcalc.parser.expr import Parser, parse
from exprcalc.parser.nodes import BinaryOp, FunctionCall, Literal, Negate, Node
from exprcalc.parser.token.lexer import Token, iter_tokens, tokenize

__all__ = [
    "BinaryOp",
    "FunctionCall",
    "Literal",
    "Negate",
    "Node",
    "Parser",
    "Token",
    "iter_tokens",
    "parse",
    "show",
    "tokenize",
]


def _label(node):
    if isinstance(node, Literal):
        return repr(node.value)
    if isinstance(node, BinaryOp):
        return f"BinaryOp {node.op!r}"
    if isinstance(node, FunctionCall):
        return f"FunctionCall {node.name}"
    return node.__class__.__name__


def show(node, out=None, indent=0):
    """write an indented dump of the tree rooted at node"""
    if out is None:
        out = sys.stdout
    out.write("{}{}\n".format("    " * indent, _label(node)))
    for child in node:
        show(child, out=out, indent=indent + 1)
