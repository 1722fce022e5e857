from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError, LispRuntimeError
from slisp.types.environment import Environment
from slisp.types.function import Function, parse_parameters
from slisp.types.symbol import Symbol


def _is_parameter_list(form: SExpression) -> bool:
    return isinstance(form, list) and all(isinstance(p, Symbol) for p in form)


def _docstring(first: SExpression, env: Environment, evaluator) -> str | None:
    """Return the docstring `first` denotes, or None when it is not one.

    A docstring may be a literal string, a symbol bound to a string, or a list
    form evaluating to a string. A list made only of symbols is always read as
    the parameter list.
    """
    if isinstance(first, str):
        return first
    if isinstance(first, Symbol):
        try:
            value = env.lookup(first)
        except LispRuntimeError:
            return None
        return value if isinstance(value, str) else None
    if isinstance(first, list) and first and not _is_parameter_list(first):
        value = evaluator.eval_form(first, env)
        if not isinstance(value, str):
            raise GeneralError("'function' docstring must evaluate to a string")
        return value
    return None


def function_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    """
    (function [docstring] (params...) body...)
    Builds a closure over `env`, tagged with the namespace it was defined in.
    """
    docstring = None
    if len(args) >= 3:
        docstring = _docstring(args[0], env, evaluator)
        if docstring is not None:
            args = args[1:]

    if len(args) < 2:
        raise GeneralError("'function' expects a parameter list and a body")

    params_form, body = args[0], args[1:]
    if isinstance(params_form, Symbol):
        params_form = env.lookup(params_form)
    if not isinstance(params_form, list):
        raise GeneralError("function arguments must be a list")

    params, rest = parse_parameters(params_form)
    return Function(
        params=params,
        rest=rest,
        body=list(body),
        docstring=docstring,
        is_macro=False,
        namespace=env.namespace,
        env=env,
    )
