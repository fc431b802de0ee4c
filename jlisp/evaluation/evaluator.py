"""Core evaluator for the Jlisp interpreter.

Symbols are resolved through the environment chain, S-expressions are
reduced, every other value evaluates to itself.
"""

from __future__ import annotations

from jlisp import LispValue
from jlisp.types.environment import Environment
from jlisp.types.symbol import Symbol
from jlisp.types.value import LispError, SExpr, is_function, type_name
from jlisp.evaluation.apply import apply


def evaluate(env: Environment, value: LispValue) -> LispValue:
    """Evaluate `value` in `env` and return the resulting value."""
    match value:
        case Symbol():
            return env.lookup(value)
        case SExpr():
            return reduce_sexpr(env, value)
        case _:
            return value


def reduce_sexpr(env: Environment, seq: SExpr) -> LispValue:
    """Reduce an S-expression.

    Every child is evaluated left to right before any of them is inspected,
    so side effects of later children happen even when an earlier child
    produced an Error. The first Error then wins.
    """
    cells = [evaluate(env, cell) for cell in seq]

    for cell in cells:
        if isinstance(cell, LispError):
            return cell

    if not seq:
        return seq
    if len(cells) == 1:
        return cells[0]

    fn = cells[0]
    if not is_function(fn):
        return LispError(
            "S-Expression starts with incorrect type. "
            f"Got {type_name(fn)}, Expected Function."
        )
    return apply(env, fn, SExpr(cells[1:]), evaluate)
