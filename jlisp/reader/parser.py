"""
  Jlisp Reader: lexer and tree builder.

- Lexes source text with a single alternation regex (number before symbol,
  so `-5` is a number and `-` a symbol)
- Builds a concrete tree of AstNode objects; nothing is interpreted here:

    - program            -> AstNode("root", children=[...])
    - ( ... ) / { ... }  -> AstNode("sexpr" / "qexpr", children=[...])
    - parens and braces  -> AstNode("delimiter", "(") etc., kept as children
    - ; comments         -> AstNode("comment", "; text"), kept as children
    - atoms              -> AstNode("number" / "symbol" / "string", raw text)

  Turning nodes into values is the job of jlisp.reader.adapter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from jlisp.types.errors import JlispSyntaxError


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\r\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings, may span lines
    r"|(?P<number>-?[0-9]+)"
    r"|(?P<symbol>[a-zA-Z0-9_+\-*^/\\=<>!&|]+)",
    re.DOTALL,
)

OPENERS: dict[str, tuple[str, str]] = {
    "(": ("sexpr", ")"),
    "{": ("qexpr", "}"),
}

DELIMITERS = frozenset("(){}")


@dataclass
class Token:
    kind: str
    text: str
    line: int
    column: int


@dataclass
class AstNode:
    """A parse-tree node: a kind tag, the literal text and ordered children."""

    kind: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    line: int = 1
    column: int = 1


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator; whitespace is dropped, comments are kept."""
    pos = 0
    line = 1
    line_start = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise JlispSyntaxError(
                f"{filename}:{line}:{pos - line_start + 1}: error: "
                f"unexpected character {source[pos]!r}"
            )
        kind = m.lastgroup
        text = m.group()
        if kind != "whitespace":
            yield Token(kind, text, line, pos - line_start + 1)
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = m.end()


class TokenStream:
    def __init__(self, tokens: Iterator[Token], filename: str = "<stdin>"):
        self.tokens = iter(tokens)
        self.filename = filename
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _error(self, tok: Optional[Token], message: str) -> JlispSyntaxError:
        if tok is None:
            return JlispSyntaxError(f"{self.filename}: error: {message} at end of input")
        return JlispSyntaxError(f"{self.filename}:{tok.line}:{tok.column}: error: {message}")

    def parse_expr(self) -> AstNode:
        tok = self.advance()
        if tok is None:
            raise self._error(None, "expected expression")

        if tok.kind in ("lparen", "lbrace"):
            kind, closer = OPENERS[tok.text]
            node = AstNode(kind, "", [AstNode("delimiter", tok.text, [], tok.line, tok.column)],
                           tok.line, tok.column)
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self._error(None, f"expected '{closer}'")
                if nxt.kind in ("rparen", "rbrace"):
                    self.advance()
                    if nxt.text != closer:
                        raise self._error(nxt, f"expected '{closer}' but got '{nxt.text}'")
                    node.children.append(AstNode("delimiter", nxt.text, [], nxt.line, nxt.column))
                    return node
                node.children.append(self.parse_expr())

        if tok.kind in ("rparen", "rbrace"):
            raise self._error(tok, f"unexpected '{tok.text}'")

        return AstNode(tok.kind, tok.text, [], tok.line, tok.column)

    def parse_all(self) -> Iterator[AstNode]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str, filename: str = "<stdin>") -> AstNode:
    """Parse a whole program into a root node."""
    stream = TokenStream(lex(source, filename), filename)
    return AstNode("root", "", list(stream.parse_all()))


def parse_file(path: str | Path) -> AstNode:
    """Read and parse a file; an unreadable file is reported as a syntax error."""
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        raise JlispSyntaxError(f"{path}: Unable to open file!") from None
    return parse(source, str(path))
