from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.evaluation.apply import run_body
from slisp.types.environment import Environment
from slisp.types.tail_call import TailCall


def do_form(args: list[SExpression], env: Environment, evaluator) -> LispValue | TailCall:
    return run_body(args, env, evaluator)
