# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""exprcalc - installed via setuptools' entry_points"""

import io
import logging
import sys
import time

import click

from exprcalc import parser
from exprcalc.core.calculator import nesting_guard
from exprcalc.core.evaluator import evaluate
from exprcalc.core.numeric import Float
from exprcalc.exceptions.calc_exceptions import EvaluationError
from exprcalc.parser.token.lexer import dump_tokens
from exprcalc.utils import conf
from exprcalc.utils.log import setup_console_logging

log = logging.getLogger(__name__)

PROMPT = "> "


def format_value(value, float_precision=None):
    """integers without decimal point, floats as repr or with
    float_precision significant digits"""
    if isinstance(value, Float) and float_precision is not None:
        return "%.*g" % (float_precision, value.value)
    return str(value)


def format_error(err):
    return f"{err.stage} error: {err}"


def _dump_tree(tree):
    buf = io.StringIO()
    parser.show(tree, out=buf)
    return buf.getvalue().rstrip("\n")


def run(text, out, show_tokens=False, show_ast=False, float_precision=None):
    """evaluate text and write the (optional) diagnostics and the result to out"""
    stime = time.time()
    tokens = parser.tokenize(text)
    log.debug(f"tokens: {tokens!r}")
    if show_tokens:
        dump_tokens(tokens, out=out)

    with nesting_guard():
        tree = parser.parse(tokens)
        if log.isEnabledFor(logging.DEBUG):
            log.debug("syntax tree:\n" + _dump_tree(tree))
        if show_ast:
            parser.show(tree, out=out)
        value = evaluate(tree)

    log.debug(f"{text!r} -> {value!r} in {time.time() - stime:.6f}s")
    out.write(format_value(value, float_precision) + "\n")
    return value


def _read_lines():
    try:
        import readline  # noqa: F401 makes input() use readline
    except ImportError:
        pass

    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def interactive(out, **kw):
    """read-eval-print loop, every line is evaluated on its own"""
    for line in _read_lines():
        if not line.strip():
            continue
        try:
            run(line, out, **kw)
        except EvaluationError as err:
            click.echo(format_error(err), err=True)


@click.command()
@click.option("-i", "--interactive", "repl", is_flag=True, help="read expressions from stdin, one per line")
@click.option("--tokens", "show_tokens", is_flag=True, help="print the token stream")
@click.option("--ast", "show_ast", is_flag=True, help="print the syntax tree")
@click.option("-c", "--config", type=click.Path(exists=True, dir_okay=False), help="additional configuration file")
@click.option("-v", "--verbose", is_flag=True, help="log debug output to stderr")
@click.option("--log-level", help="log level (default: from configuration, WARNING)")
@click.argument("expression", nargs=-1)
def main(repl, show_tokens, show_ast, config, verbose, log_level, expression):
    """Evaluate EXPRESSION and print the result.

    All arguments are joined with spaces. Put -- in front of an expression
    that starts with a minus sign.
    """
    if config:
        conf.readrc(config)

    if verbose:
        log_level = logging.DEBUG
    setup_console_logging(level=log_level or conf.log_level, stream=sys.stderr)

    try:
        float_precision = conf.float_precision
    except ValueError:
        raise click.ClickException("output.float_precision must be an integer")

    out = sys.stdout
    options = {
        "show_tokens": show_tokens,
        "show_ast": show_ast,
        "float_precision": float_precision,
    }

    if repl:
        interactive(out, **options)
        return

    if not expression:
        raise click.UsageError("missing EXPRESSION argument")

    text = " ".join(expression)
    try:
        run(text, out, **options)
    except EvaluationError as err:
        click.echo(format_error(err), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
