# Core type aliases for Jlisp's data model.
# Runtime values are plain Python objects where Python already has the right
# type (int for Number, str for String) and small classes from jlisp.types
# for the rest (Symbol, LispError, SExpr, QExpr, Lambda).
#
# LispValue: any evaluated or unevaluated Jlisp value.
# Builtin:   signature shared by every primitive registered in the root env.

from typing import Any, Callable

__version__ = "0.1"

LispValue = Any

Builtin = Callable[[Any, list], LispValue]
