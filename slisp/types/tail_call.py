from __future__ import annotations

from slisp import SExpression
from slisp.types.environment import Environment


class TailCall:
    """Returned by special forms and interpreted calls for forms in tail position.

    The evaluator loop picks `form` up as its next current form, evaluated in
    `env`, instead of recursing.
    """

    __slots__ = ("form", "env")

    def __init__(self, form: SExpression, env: Environment):
        self.form = form
        self.env = env
