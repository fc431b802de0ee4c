from __future__ import annotations
import logging
from typing import Literal

from jlisp import LispValue
from jlisp.builtin.env_builtin import register
from jlisp.config import get_prelude_path
from jlisp.evaluation.evaluator import evaluate
from jlisp.modules.loader import load_file
from jlisp.reader.adapter import read
from jlisp.reader.parser import parse
from jlisp.types.environment import Environment
from jlisp.types.value import LispError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Jlisp code.
    Owns the root Environment, which persists across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)
        logger.debug("root environment ready with %d builtins", len(self.env.vars))

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path.is_file():
                result = load_file(self.env, str(path))
                if isinstance(result, LispError):
                    logger.warning("prelude %s not loaded: %s", path, result.message)
                else:
                    logger.debug("prelude loaded from %s", path)
            else:
                # Be permissive: no prelude found -> proceed
                logger.debug("no prelude at %s", path)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate each top-level form of `code`, logging Error results."""
        for form in read(parse(code, "<prelude>")):
            result = evaluate(self.env, form)
            if isinstance(result, LispError):
                logger.warning("prelude form failed: %s", result.message)

    def eval(self, code: str) -> LispValue:
        """Evaluate a line of input as one S-expression, like the REPL does.

        `(+ 1 2)` and `+ 1 2` both evaluate to 3. Raises JlispSyntaxError if
        `code` does not parse.
        """
        return evaluate(self.env, read(parse(code)))

    def load(self, path: str) -> LispValue:
        return load_file(self.env, path)
