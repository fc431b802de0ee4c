from __future__ import annotations
import sys


class Symbol:
    """A name in Jlisp source: a variable, a builtin or a formal parameter.

    Symbols compare and hash by name, so they can key Environment frames
    directly. Names are interned because the same few names are looked up on
    every call.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# In a formals list, `&` is followed by the one formal that collects every
# remaining argument as a Q-expression: {x & xs}.
REST = Symbol("&")
