from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError, LispRuntimeError
from slisp.types.environment import Environment
from slisp.types.nil import Nil
from slisp.types.tail_call import TailCall


def if_form(args: list[SExpression], env: Environment, evaluator) -> LispValue | TailCall:
    if len(args) not in (2, 3):
        raise LispRuntimeError("'if' expects 2 or 3 arguments.")

    condition = evaluator.eval_form(args[0], env)
    # No truthiness: the condition must be a boolean
    if not isinstance(condition, bool):
        raise GeneralError("'if' expects the first argument to be a boolean condition")

    if condition:
        return TailCall(args[1], env)
    if len(args) == 3:
        return TailCall(args[2], env)
    return Nil
