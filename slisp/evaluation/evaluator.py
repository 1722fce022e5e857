"""Core evaluator and trampoline for the SLisp interpreter.

`eval_form` keeps a mutable current form and environment and loops instead
of recursing whenever a special form or an interpreted call leaves a form in
tail position (a TailCall). Only non-tail subexpressions (arguments,
conditions, binding values) recurse, so tail-recursive user functions run in
constant native stack.
"""

from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError, LispRuntimeError, RuntimeErrorWithForm
from slisp.evaluation.apply import apply_function
from slisp.evaluation.macro_expansion import macro_expand
from slisp.evaluation.special_forms import SPECIAL_FORMS
from slisp.loader import WorkingDirectoryStack
from slisp.types.environment import Environment
from slisp.types.namespace import NamespaceRegistry
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol
from slisp.types.tail_call import TailCall

LITERALS: dict[str, LispValue] = {
    "true": True,
    "false": False,
    "nil": Nil,
}


class Evaluator:
    """Evaluates terms against a namespace registry it is handed by its host."""

    def __init__(self, registry: NamespaceRegistry, cwd_stack: WorkingDirectoryStack | None = None):
        self.registry = registry
        self.cwd_stack = cwd_stack if cwd_stack is not None else WorkingDirectoryStack()

    def eval(self, form: SExpression, env: Environment) -> tuple[LispValue, Environment]:
        """Top-level entry point: evaluate `form` and return (value, environment)."""
        try:
            return self.eval_form(form, env), env
        except RecursionError:
            raise LispRuntimeError("Maximum recursion depth exceeded") from None

    def eval_atom(self, form: SExpression, env: Environment) -> LispValue:
        match form:
            case Symbol():
                if form.id in LITERALS:
                    return LITERALS[form.id]
                return env.lookup(form)
            case []:
                return []
            case _:
                return form

    def eval_form(self, form: SExpression, env: Environment) -> LispValue:
        while True:
            if not isinstance(form, list) or not form:
                return self.eval_atom(form, env)

            try:
                # Special form names cannot be shadowed by macros
                handler = SPECIAL_FORMS.get(form[0]) if isinstance(form[0], Symbol) else None
                if handler is None:
                    expanded = macro_expand(form, env, self)
                    if expanded is not form:
                        form = expanded
                        continue

                head = form[0]
                if handler is not None:
                    result = handler(form[1:], env, self)
                else:
                    values = [self.eval_form(x, env) for x in form]
                    result = apply_function(values[0], values[1:], env, self, head)
            except RuntimeErrorWithForm:
                raise
            except (GeneralError, LispRuntimeError) as e:
                raise RuntimeErrorWithForm(e, form) from e

            if isinstance(result, TailCall):
                form, env = result.form, result.env
                continue
            return result
