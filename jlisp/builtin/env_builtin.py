"""Built-in functions for the Jlisp runtime environment.

This module defines list manipulation, arithmetic, comparison, conditionals,
variable definition, string/error and loading primitives, plus `register`,
which installs them into a root environment.

Every builtin has the signature `fn(env, args)` where `args` is the list of
already-evaluated arguments. Argument problems are raised as JlispError
subclasses and turned into Error values by the application engine.
"""
from __future__ import annotations

from jlisp import LispValue
from jlisp.types.environment import Environment
from jlisp.types.errors import JlispArityError, JlispTypeError, JlispValueError
from jlisp.types.lambda_fn import Lambda
from jlisp.types.symbol import Symbol
from jlisp.types.value import (
    KIND_NAMES,
    LispError,
    QExpr,
    SExpr,
    to_string,
    type_name,
    values_equal,
)
from jlisp.evaluation.evaluator import evaluate
from jlisp.modules.loader import load_file


# -------------------------------
# Argument checks
# -------------------------------
def check_count(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise JlispArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, Expected {expected}."
        )


def check_not_none(name: str, args: list[LispValue]) -> None:
    if not args:
        raise JlispArityError(f"Function '{name}' passed no arguments.")


def check_type(name: str, args: list[LispValue], index: int, expected: type) -> None:
    if type_name(args[index]) != KIND_NAMES[expected]:
        raise JlispTypeError(
            f"Function '{name}' passed incorrect type for argument {index}. "
            f"Got {type_name(args[index])}, Expected {KIND_NAMES[expected]}."
        )


def check_not_empty(name: str, args: list[LispValue], index: int) -> None:
    if not args[index]:
        raise JlispValueError(f"Function '{name}' passed {{}} for argument {index}.")


# -------------------------------
# List functions
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> QExpr:
    """Return the arguments as a Q-expression."""
    return QExpr(args)


def head(env: Environment, args: list[LispValue]) -> QExpr:
    """Q-expression holding only the first element of a non-empty Q-expression."""
    check_count("head", args, 1)
    check_type("head", args, 0, QExpr)
    check_not_empty("head", args, 0)
    return QExpr(args[0][:1])


def tail(env: Environment, args: list[LispValue]) -> QExpr:
    """Q-expression with the first element removed."""
    check_count("tail", args, 1)
    check_type("tail", args, 0, QExpr)
    check_not_empty("tail", args, 0)
    return QExpr(args[0][1:])


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate a Q-expression as an S-expression in the calling environment."""
    check_count("eval", args, 1)
    check_type("eval", args, 0, QExpr)
    return evaluate(env, SExpr(args[0]))


def join(env: Environment, args: list[LispValue]) -> QExpr:
    """Concatenate Q-expressions left to right."""
    check_not_none("join", args)
    for i in range(len(args)):
        check_type("join", args, i, QExpr)
    result = QExpr()
    for item in args:
        result.extend(item)
    return result


# -------------------------------
# Arithmetic
# -------------------------------
# Numbers are signed 64-bit; results wrap in two's complement.
_WORD = 2 ** 64
_SIGN = 2 ** 63


def _wrap(x: int) -> int:
    return (x + _SIGN) % _WORD - _SIGN


def _truncating_div(x: int, y: int) -> int:
    # Integer division rounding toward zero.
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _power(x: int, n: int) -> int:
    if n <= 0:
        return 1
    return pow(x, n, _WORD)


def _fold(op: str, args: list[LispValue]) -> LispValue:
    """Left fold of `op` over Number arguments; unary `-` negates."""
    check_not_none(op, args)
    for i in range(len(args)):
        check_type(op, args, i, int)

    x, *rest = args
    if op == "-" and not rest:
        return _wrap(-x)

    for y in rest:
        match op:
            case "+":
                x += y
            case "-":
                x -= y
            case "*":
                x *= y
            case "/":
                if y == 0:
                    raise JlispValueError("Division by zero!")
                x = _truncating_div(x, y)
            case "^":
                x = _power(x, y)
        x = _wrap(x)
    return x


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return _fold("+", args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    return _fold("-", args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return _fold("*", args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    return _fold("/", args)


def power(env: Environment, args: list[LispValue]) -> LispValue:
    return _fold("^", args)


# -------------------------------
# Comparison
# -------------------------------
def _order(op: str, args: list[LispValue]) -> int:
    check_count(op, args, 2)
    check_type(op, args, 0, int)
    check_type(op, args, 1, int)
    a, b = args
    match op:
        case ">":
            return int(a > b)
        case "<":
            return int(a < b)
        case ">=":
            return int(a >= b)
        case _:
            return int(a <= b)


def gt(env: Environment, args: list[LispValue]) -> int:
    return _order(">", args)


def lt(env: Environment, args: list[LispValue]) -> int:
    return _order("<", args)


def gte(env: Environment, args: list[LispValue]) -> int:
    return _order(">=", args)


def lte(env: Environment, args: list[LispValue]) -> int:
    return _order("<=", args)


def equals(env: Environment, args: list[LispValue]) -> int:
    """1 if both arguments are structurally equal, else 0."""
    check_count("==", args, 2)
    return int(values_equal(args[0], args[1]))


def not_equals(env: Environment, args: list[LispValue]) -> int:
    check_count("!=", args, 2)
    return int(not values_equal(args[0], args[1]))


def if_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(if cond {then} {else}): evaluate one branch, chosen by a non-zero Number."""
    check_count("if", args, 3)
    check_type("if", args, 0, int)
    check_type("if", args, 1, QExpr)
    check_type("if", args, 2, QExpr)
    cond, then, otherwise = args
    return evaluate(env, SExpr(then if cond else otherwise))


# -------------------------------
# Variables and functions
# -------------------------------
def lambda_builtin(env: Environment, args: list[LispValue]) -> Lambda:
    r"""(\ {formals} {body}) -> a new closure with an empty private scope."""
    check_count("\\", args, 2)
    check_type("\\", args, 0, QExpr)
    check_type("\\", args, 1, QExpr)
    for formal in args[0]:
        if not isinstance(formal, Symbol):
            raise JlispTypeError(
                f"Cannot define non-symbol. Got {type_name(formal)}, Expected Symbol."
            )
    formals, body = args
    return Lambda(formals, body, Environment())


def _bind(env: Environment, args: list[LispValue], name: str) -> SExpr:
    check_not_none(name, args)
    check_type(name, args, 0, QExpr)
    syms = args[0]
    for sym in syms:
        if not isinstance(sym, Symbol):
            raise JlispTypeError(
                f"Function '{name}' cannot define non-symbol. "
                f"Got {type_name(sym)}, Expected Symbol."
            )
    if len(syms) != len(args) - 1:
        raise JlispArityError(
            f"Function '{name}' passed too many arguments for symbols. "
            f"Got {len(syms)}, Expected {len(args) - 1}."
        )

    for sym, value in zip(syms, args[1:]):
        if name == "def":
            env.define_global(sym, value)
        else:
            env.define(sym, value)
    return SExpr()


def define(env: Environment, args: list[LispValue]) -> SExpr:
    """(def {a b} 1 2): bind in the root environment."""
    return _bind(env, args, "def")


def put(env: Environment, args: list[LispValue]) -> SExpr:
    """(= {a b} 1 2): bind in the calling environment."""
    return _bind(env, args, "=")


# -------------------------------
# Strings, errors and I/O
# -------------------------------
def error(env: Environment, args: list[LispValue]) -> LispError:
    """Turn a String into an Error value."""
    check_count("error", args, 1)
    check_type("error", args, 0, str)
    return LispError(args[0])


def print_builtin(env: Environment, args: list[LispValue]) -> SExpr:
    """Print each argument followed by a space, then a newline."""
    print("".join(f"{to_string(a)} " for a in args))
    return SExpr()


def load(env: Environment, args: list[LispValue]) -> LispValue:
    """(load "file"): evaluate every form of a file in the calling environment."""
    check_count("load", args, 1)
    check_type("load", args, 0, str)
    return load_file(env, args[0])


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            # List functions
            Symbol("list"): list_builtin,
            Symbol("head"): head,
            Symbol("tail"): tail,
            Symbol("eval"): eval_builtin,
            Symbol("join"): join,
            # Math functions
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("^"): power,
            # Variable functions
            Symbol("\\"): lambda_builtin,
            Symbol("def"): define,
            Symbol("="): put,
            # String functions
            Symbol("load"): load,
            Symbol("error"): error,
            Symbol("print"): print_builtin,
            # Comparison functions
            Symbol("if"): if_builtin,
            Symbol("=="): equals,
            Symbol("!="): not_equals,
            Symbol(">"): gt,
            Symbol("<"): lt,
            Symbol(">="): gte,
            Symbol("<="): lte,
        }
    )
