"""Application engine for Jlisp.

Builtins are Python callables taking the calling environment and the list of
already-evaluated arguments. Their argument checks raise JlispError
subclasses; this module is the boundary where those become Error values.

Closures bind arguments to formals left to right. Binding stops early at
`&`, which collects every remaining argument into a Q-expression. When the
formals run out the body is evaluated; otherwise the partially bound closure
is returned so that it can be called again with the rest.
"""

from __future__ import annotations

from jlisp import LispValue, Builtin
from jlisp.types.environment import Environment
from jlisp.types.errors import JlispError
from jlisp.types.lambda_fn import Lambda
from jlisp.types.symbol import REST
from jlisp.types.value import LispError, QExpr, SExpr

_REST_FORMAT_ERROR = "Function format invalid. Symbol '&' not followed by single symbol."


def apply_lambda(env: Environment, fn: Lambda, args: SExpr, evaluate_fn) -> LispValue:
    """Bind `args` to the formals of a copy of `fn`, then call or return it.

    - `env` is the caller's environment; on a complete call it becomes the
      parent of the closure's own environment.
    - A call with fewer arguments than formals returns the partially bound
      closure (a new Function value).
    """
    fn = fn.copy()
    formals = fn.formals
    given = len(args)
    total = len(formals)

    remaining = list(args)
    while remaining:
        if not formals:
            return LispError(
                f"Function passed too many arguments. Got {given}, Expected {total}."
            )

        sym = formals.pop(0)

        if sym == REST:
            if len(formals) != 1:
                return LispError(_REST_FORMAT_ERROR)
            fn.env.define(formals.pop(0), QExpr(remaining))
            remaining = []
            break

        fn.env.define(sym, remaining.pop(0))

    # A rest formal with no arguments left for it binds the empty list.
    if formals and formals[0] == REST:
        if len(formals) != 2:
            return LispError(_REST_FORMAT_ERROR)
        formals.pop(0)
        fn.env.define(formals.pop(0), QExpr())

    if formals:
        return fn

    fn.env.outer = env
    return evaluate_fn(fn.env, SExpr(fn.body))


def apply(
    env: Environment,
    fn: Lambda | Builtin,
    args: SExpr,
    evaluate_fn,
) -> LispValue:
    """Apply either a Lambda or a builtin to evaluated arguments."""
    if isinstance(fn, Lambda):
        return apply_lambda(env, fn, args, evaluate_fn)
    try:
        return fn(env, args)
    except JlispError as exc:
        return LispError(str(exc))
