"""The Jlisp value model.

Numbers are Python ints and Strings are Python strs. The remaining variants
are the small classes below plus Symbol and Lambda. Every operation that has
to know the variant of a value (naming, copying, comparing, printing) is a
single `match` over the variants in this module, so a new variant only has
to be taught here.
"""

from __future__ import annotations

from io import StringIO

from jlisp import LispValue
from jlisp.types.symbol import Symbol
from jlisp.types.lambda_fn import Lambda


class LispError:
    """An error carried as an ordinary value through evaluation."""

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other) -> bool:
        return values_equal(self, other)

    def __ne__(self, other) -> bool:
        return not self == other

    __hash__ = None

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"LispError({self.message!r})"


class Expr(list):
    """Ordered sequence of values; the common base of SExpr and QExpr.

    Converting between the two (`QExpr(sexpr)`) only changes the container
    class; the element objects are shared, never copied.
    """

    __slots__ = ()

    def __eq__(self, other) -> bool:
        return values_equal(self, other)

    def __ne__(self, other) -> bool:
        return not self == other

    __hash__ = None

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class SExpr(Expr):
    """Evaluated list: head is applied to the rest."""

    __slots__ = ()


class QExpr(Expr):
    """Quoted list: evaluates to itself."""

    __slots__ = ()


def is_function(value: LispValue) -> bool:
    return isinstance(value, Lambda) or _is_builtin(value)


def _is_builtin(value: LispValue) -> bool:
    # Builtins are plain Python callables; no other value type is callable.
    return callable(value) and not isinstance(value, type)


def type_name(value: LispValue) -> str:
    """Return the user-facing name of a value's variant."""
    match value:
        case int():
            return "Number"
        case LispError():
            return "Error"
        case Symbol():
            return "Symbol"
        case str():
            return "String"
        case SExpr():
            return "S-Expression"
        case QExpr():
            return "Q-Expression"
        case Lambda():
            return "Function"
        case _ if _is_builtin(value):
            return "Function"
        case _:
            return "Unknown"


# Variant classes accepted by the argument checks, keyed by their name.
KIND_NAMES: dict[type, str] = {
    int: "Number",
    LispError: "Error",
    Symbol: "Symbol",
    str: "String",
    SExpr: "S-Expression",
    QExpr: "Q-Expression",
    Lambda: "Function",
}


def copy_value(value: LispValue) -> LispValue:
    """Deep, independent copy of `value`.

    Immutable atoms (numbers, strings, symbols, errors) and builtin
    references are shared; containers and closures are rebuilt.
    """
    match value:
        case Expr():
            return type(value)(copy_value(cell) for cell in value)
        case Lambda():
            return value.copy()
        case _:
            return value


def values_equal(x: LispValue, y: LispValue) -> bool:
    """Deep structural equality; values of different variants never match."""
    if type_name(x) != type_name(y):
        return False
    match x:
        case LispError():
            return x.message == y.message
        case Expr():
            return len(x) == len(y) and all(
                values_equal(a, b) for a, b in zip(x, y)
            )
        case Lambda():
            return (
                isinstance(y, Lambda)
                and values_equal(x.formals, y.formals)
                and values_equal(x.body, y.body)
            )
        case _ if _is_builtin(x):
            return x is y
        case _:
            return x == y


# Escape sequences understood in string literals and re-applied on printing.
ESCAPES: dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}

_PRINT_ESCAPES: dict[str, str] = {
    char: "\\" + code for code, char in ESCAPES.items() if code != "'"
}


def escape_string(text: str) -> str:
    return "".join(_PRINT_ESCAPES.get(ch, ch) for ch in text)


def _write(buffer: StringIO, value: LispValue) -> None:
    match value:
        case int():
            buffer.write(str(value))
        case LispError():
            buffer.write(f"Error: {value.message}")
        case Symbol():
            buffer.write(value.id)
        case str():
            buffer.write('"')
            buffer.write(escape_string(value))
            buffer.write('"')
        case SExpr():
            _write_expr(buffer, value, "(", ")")
        case QExpr():
            _write_expr(buffer, value, "{", "}")
        case Lambda():
            buffer.write("(\\ ")
            _write(buffer, value.formals)
            buffer.write(" ")
            _write(buffer, value.body)
            buffer.write(")")
        case _:
            buffer.write("<function>")


def _write_expr(buffer: StringIO, value: Expr, open_: str, close: str) -> None:
    buffer.write(open_)
    for i, cell in enumerate(value):
        if i:
            buffer.write(" ")
        _write(buffer, cell)
    buffer.write(close)


def to_string(value: LispValue) -> str:
    """Render a value the way the REPL prints it."""
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()
