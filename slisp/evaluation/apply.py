"""Function call protocol for SLisp.

Native functions are invoked directly with the evaluated argument list, the
evaluator handle and the calling environment. Interpreted functions get a
fresh frame (parented on their closure environment, governed by their
defining namespace), run every body form but the last for effect and hand
the last one back to the trampoline as a TailCall.

Macro expansion reuses `call_function` with unevaluated argument forms.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from slisp import LispValue, SExpression
from slisp.errors import LispRuntimeError
from slisp.printer import print_term
from slisp.types.bind import bind_arguments
from slisp.types.environment import Environment
from slisp.types.function import Function
from slisp.types.nil import Nil
from slisp.types.tail_call import TailCall

if TYPE_CHECKING:
    from slisp.evaluation.evaluator import Evaluator


def run_body(body: list[SExpression], env: Environment, evaluator: Evaluator) -> LispValue | TailCall:
    """Evaluate all but the last form for effect; the last is left in tail position."""
    if not body:
        return Nil
    for form in body[:-1]:
        evaluator.eval_form(form, env)
    return TailCall(body[-1], env)


def call_function(
    fn: Function,
    args: list[LispValue],
    env: Environment,
    evaluator: Evaluator,
) -> LispValue | TailCall:
    if fn.native is not None:
        return fn.native(args, evaluator, env)
    call_env = bind_arguments(fn, args)
    return run_body(fn.body, call_env, evaluator)


def apply_function(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluator: Evaluator,
    head_form: SExpression = None,
) -> LispValue | TailCall:
    """Apply an evaluated head to evaluated arguments, or fail if it is not a function."""
    if not isinstance(head, Function):
        culprit = head_form if head_form is not None else head
        raise LispRuntimeError(f"{print_term(culprit)} is not a function.")
    return call_function(head, args, env, evaluator)
