from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import LispRuntimeError
from slisp.types.environment import Environment
from slisp.types.nil import Nil


class WhileLoopEval:
    """Implements (while condition body...).

    The body runs in the enclosing environment so `set!` on surrounding
    bindings is visible to the condition. Returns the last body value of the
    final iteration, or nil when the body never runs.
    """

    def __init__(self, condition: SExpression, body: list[SExpression], evaluator):
        self.condition = condition
        self.body = body
        self.evaluator = evaluator

    def _check(self, env: Environment) -> bool:
        value = self.evaluator.eval_form(self.condition, env)
        if not isinstance(value, bool):
            raise LispRuntimeError("'while' expects the first argument to be a boolean.")
        return value

    def eval(self, env: Environment) -> LispValue:
        result: LispValue = Nil
        while self._check(env):
            for form in self.body:
                result = self.evaluator.eval_form(form, env)
        return result


def while_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    if len(args) < 2:
        raise LispRuntimeError("'while' requires a condition and a body")
    return WhileLoopEval(args[0], list(args[1:]), evaluator).eval(env)
