from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError
from slisp.evaluation.apply import call_function
from slisp.types.environment import Environment
from slisp.types.function import Function
from slisp.types.nil import Nil
from slisp.types.tail_call import TailCall


def apply_form(args: list[SExpression], env: Environment, evaluator) -> LispValue | TailCall:
    """
    (apply fn args)
    Calls fn with the elements of the list args. The call happens in tail
    position, exactly as if it had been written out directly.
    """
    if len(args) != 2:
        raise GeneralError("'apply' requires 2 arguments")

    fn = evaluator.eval_form(args[0], env)
    arg_list = evaluator.eval_form(args[1], env)

    if not isinstance(fn, Function):
        raise GeneralError("'apply' requires the first argument to be a function")
    if arg_list is Nil:
        arg_list = []
    if not isinstance(arg_list, list):
        raise GeneralError("'apply' requires the second argument to be a list")

    return call_function(fn, list(arg_list), env, evaluator)
