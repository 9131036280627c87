from __future__ import annotations
from typing import Iterator, Literal

from minirack import Expression
from minirack.reader.parser import parse
from minirack.evaluation.evaluator import evaluate
from minirack.types.frame import Frame
from minirack.builtin.env_builtin import new_global_frame


class Interpreter:
    """
    A minirack session: reads and evaluates code against one global frame.
    Definitions persist across calls, including calls that fail part way.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Frame = new_global_frame()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import to avoid circular imports
                from minirack.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                pass
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in parse(code):
            evaluate(expr, self.env)

    def eval_all(self, code: str) -> Iterator[Expression]:
        """Yield the value of each top-level expression in `code`.

        The text is parsed up front: a syntax error raises before anything
        is evaluated.
        """
        for expr in parse(code):
            yield evaluate(expr, self.env)

    def eval(self, code: str) -> Expression | None:
        """Evaluate every expression in `code`; return the last value or None."""
        result = None
        for result in self.eval_all(code):
            pass
        return result
