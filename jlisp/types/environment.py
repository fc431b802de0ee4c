"""Runtime environment for Jlisp.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. Values are copied on the way in and on the way
out, so no two scopes (and no two closures) ever share a mutable value.
"""

from __future__ import annotations

from typing import Optional

from jlisp import LispValue
from jlisp.types.errors import JlispInvalidSymbol
from jlisp.types.symbol import Symbol
from jlisp.types.value import LispError, copy_value, to_string


class Environment:
    """Hierarchical mapping from Symbols to Jlisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        """Return the outermost environment of the chain."""
        return self.frames()[-1]

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in this frame.

        An existing binding in this frame is replaced; bindings of the same
        name in outer frames are shadowed, never modified.

        Raises JlispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise JlispInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = copy_value(value)

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in the root frame."""
        self.root().define(name, value)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`.

        The chain is searched from this frame outward; an unbound name yields
        an Error value rather than raising.
        """
        env = self.find(name)
        if env is None:
            return LispError(f"Unbound symbol '{name}'")
        return copy_value(env.vars[name])

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def copy(self) -> Environment:
        """Copy this frame's bindings deeply; the outer link is shared."""
        env = Environment(self.outer)
        for k, v in self.vars.items():
            env.vars[k] = copy_value(v)
        return env

    def frames(self) -> list[Environment]:
        """This frame followed by every enclosing frame up to the root."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            chain.append(env)
            env = env.outer
        return chain

    def _render_vars(self) -> str:
        # Values are shown as the REPL prints them.
        return "{" + ", ".join(f"{k}: {to_string(v)}" for k, v in self.vars.items()) + "}"

    def __str__(self) -> str:
        """This frame only; ` -> ...` marks an enclosing frame."""
        if self.outer is None:
            return self._render_vars()
        return self._render_vars() + " -> ..."

    def __repr__(self) -> str:
        """Every frame of the chain, innermost first."""
        return "<Environment chain: " + " -> ".join(e._render_vars() for e in self.frames()) + ">"
