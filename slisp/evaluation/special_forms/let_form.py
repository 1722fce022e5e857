from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError, LispRuntimeError
from slisp.evaluation.apply import run_body
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol
from slisp.types.tail_call import TailCall


def let_form(args: list[SExpression], env: Environment, evaluator) -> LispValue | TailCall:
    """
    (let (name value-form ...) body...)
    Bindings are made left to right in one new frame, so later value forms see
    earlier names. The last body form is returned in tail position.
    """
    if len(args) < 2:
        raise LispRuntimeError("'let' requires at least 2 arguments")

    bindings = args[0]
    if not isinstance(bindings, list):
        raise GeneralError("'let' requires the first argument to be a list of bindings")
    if len(bindings) % 2 != 0:
        raise GeneralError("'let' requires an even number of items in the binding list")

    local_env = env.child()
    for name, value_form in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise GeneralError(f"'let' binding names must be symbols, got {name!r}")
        local_env.bind_local(name, evaluator.eval_form(value_form, local_env))

    return run_body(args[1:], local_env, evaluator)
