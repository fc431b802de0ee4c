from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from jlisp import LispValue
from jlisp.config import get_load_roots
from jlisp.evaluation.evaluator import evaluate
from jlisp.reader.adapter import read
from jlisp.reader.parser import parse_file
from jlisp.types.environment import Environment
from jlisp.types.errors import JlispSyntaxError
from jlisp.types.value import LispError, SExpr, to_string

logger = logging.getLogger(__name__)


# Resolve a load path: as given first, then underneath the load roots

def resolve_path(path: str) -> Optional[Path]:
    candidate = Path(path)
    if candidate.is_file():
        return candidate
    if candidate.is_absolute():
        return None
    for root in get_load_roots():
        candidate = root / path
        if candidate.is_file():
            return candidate
    return None


def load_file(env: Environment, path: str) -> LispValue:
    """Evaluate every top-level form of `path` in `env`.

    Returns an Error if the file cannot be read or parsed, else the empty
    S-expression. Forms evaluating to an Error are printed and loading goes
    on with the next form.
    """
    resolved = resolve_path(path)
    try:
        tree = parse_file(resolved if resolved is not None else path)
    except JlispSyntaxError as exc:
        logger.debug("could not load %s: %s", path, exc)
        return LispError(f"Could not load library {exc}")

    forms = read(tree)
    logger.debug("loading %s (%d forms)", resolved, len(forms))
    for form in forms:
        result = evaluate(env, form)
        if isinstance(result, LispError):
            print(to_string(result))
    logger.info("loaded %s", resolved)
    return SExpr()
