"""Special form: defmacro.

Rebinds a function value globally with its macro flag set.
"""

from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError
from slisp.types.environment import Environment
from slisp.types.function import Function
from slisp.types.symbol import Symbol


def defmacro_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    """(defmacro name fn-form): returns the qualified name of the macro."""
    if len(args) != 2:
        raise GeneralError("'defmacro' requires 2 arguments")

    name, fn_form = args
    if not isinstance(name, Symbol):
        raise GeneralError(f"Macro name must be a symbol, got {name!r}")

    fn = evaluator.eval_form(fn_form, env)
    if not isinstance(fn, Function):
        raise GeneralError("'defmacro' requires the second argument to be a function")

    return env.bind_global(name, fn.as_macro())
