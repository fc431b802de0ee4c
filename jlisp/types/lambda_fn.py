"""Closure representation for Jlisp."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jlisp.types.environment import Environment
    from jlisp.types.value import QExpr


class Lambda:
    """A user-defined function: formal parameters, body and a private scope.

    `formals` is a Q-expression of Symbols (possibly `& rest`), `body` a
    Q-expression evaluated as an S-expression on a complete call. `env`
    holds the formals bound so far; each Lambda owns its env exclusively,
    so copying a Lambda copies the env too.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: QExpr, body: QExpr, env: Environment):
        self.formals: QExpr = formals
        self.body: QExpr = body
        self.env: Environment = env

    def copy(self) -> Lambda:
        from jlisp.types.value import copy_value

        return Lambda(copy_value(self.formals), copy_value(self.body), self.env.copy())

    def __eq__(self, other) -> bool:
        # Captured environments are not compared.
        from jlisp.types.value import values_equal

        return values_equal(self, other)

    def __ne__(self, other) -> bool:
        return not self == other

    __hash__ = None

    def __str__(self) -> str:
        from jlisp.types.value import to_string

        return to_string(self)

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
