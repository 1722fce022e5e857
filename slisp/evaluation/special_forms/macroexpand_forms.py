"""Special form exposing the macro expander to Lisp code.

(macroexpand form) expands the head position of `form` to a fixpoint and
returns the expansion without evaluating it. The argument is not evaluated;
one leading (quote ...) is unwrapped so both (macroexpand (m x)) and
(macroexpand '(m x)) work.
"""

from slisp import SExpression
from slisp.errors import GeneralError
from slisp.evaluation.macro_expansion import macro_expand
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol


def macroexpand_form(args: list[SExpression], env: Environment, evaluator) -> SExpression:
    if len(args) != 1:
        raise GeneralError("'macroexpand' expects exactly 1 argument")
    form = args[0]
    if isinstance(form, list) and len(form) == 2 and form[0] == Symbol("quote"):
        form = form[1]
    return macro_expand(form, env, evaluator)
