"""Convert parse-tree nodes into Jlisp values."""

from __future__ import annotations

from jlisp import LispValue
from jlisp.reader.parser import AstNode, DELIMITERS
from jlisp.types.symbol import Symbol
from jlisp.types.value import ESCAPES, LispError, QExpr, SExpr, Expr

# Literals must fit a signed 64-bit integer.
MIN_NUMBER = -(2 ** 63)
MAX_NUMBER = 2 ** 63 - 1

SKIPPED_KINDS = frozenset({"delimiter", "comment"})


def read_number(node: AstNode) -> LispValue:
    x = int(node.contents)
    if not MIN_NUMBER <= x <= MAX_NUMBER:
        return LispError("invalid number")
    return x


def unescape(text: str) -> str:
    """Decode backslash escapes; an unknown escape is kept as written."""
    out = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n and text[i + 1] in ESCAPES:
            out.append(ESCAPES[text[i + 1]])
            i += 2
            continue
        if ch == "\\" and i + 1 < n:
            out.append(text[i:i + 2])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def read_string(node: AstNode) -> str:
    return unescape(node.contents[1:-1])


def read(node: AstNode) -> LispValue:
    """Adapt a node (and its subtree) into a value.

    The root and `sexpr` nodes become S-expressions, `qexpr` nodes
    Q-expressions; delimiter and comment children contribute nothing.
    """
    match node.kind:
        case "number":
            return read_number(node)
        case "symbol":
            return Symbol(node.contents)
        case "string":
            return read_string(node)
        case "qexpr":
            container: Expr = QExpr()
        case "sexpr" | "root":
            container = SExpr()
        case _:
            raise ValueError(f"Cannot read node of kind {node.kind!r}")

    for child in node.children:
        if child.kind in SKIPPED_KINDS or child.contents in DELIMITERS:
            continue
        container.append(read(child))
    return container
