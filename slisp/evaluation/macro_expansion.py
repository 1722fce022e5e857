from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from slisp import SExpression
from slisp.errors import LispRuntimeError
from slisp.evaluation.apply import call_function
from slisp.types.environment import Environment
from slisp.types.function import Function
from slisp.types.symbol import Symbol
from slisp.types.tail_call import TailCall

if TYPE_CHECKING:
    from slisp.evaluation.evaluator import Evaluator

_LITERALS = frozenset(("true", "false", "nil"))


def macro_function(form: SExpression, env: Environment) -> Optional[Function]:
    """Return the macro a form invokes, or None if it is not a macro call."""
    if not isinstance(form, list) or not form:
        return None
    head = form[0]
    if not isinstance(head, Symbol) or head.id in _LITERALS:
        return None
    try:
        value = env.lookup(head)
    except LispRuntimeError:
        return None
    if isinstance(value, Function) and value.is_macro:
        return value
    return None


def is_macro(form: SExpression, env: Environment) -> bool:
    return macro_function(form, env) is not None


def expand_1(macro: Function, form: list, env: Environment, evaluator: Evaluator) -> SExpression:
    """Run one macro transformer over the unevaluated argument forms."""
    result = call_function(macro, list(form[1:]), env, evaluator)
    if isinstance(result, TailCall):
        result = evaluator.eval_form(result.form, result.env)
    return result


def macro_expand(form: SExpression, env: Environment, evaluator: Evaluator) -> SExpression:
    """Expand the head position until the form is no longer a macro call."""
    while True:
        macro = macro_function(form, env)
        if macro is None:
            return form
        form = expand_1(macro, form, env, evaluator)
