from __future__ import annotations

from slisp import LispValue, SExpression
from slisp.errors import GeneralError
from slisp.types.environment import Environment
from slisp.types.symbol import Symbol
from slisp.types.tail_call import TailCall

QUOTE = Symbol("quote")
UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")
# Qualified so a namespace shadowing cons/concat cannot change quasiquote
CONS = Symbol("core/cons")
CONCAT = Symbol("core/concat")


def _is_call_of(form: SExpression, head: Symbol) -> bool:
    return isinstance(form, list) and len(form) > 0 and form[0] == head


def quasiquote_expand(ast: SExpression) -> SExpression:
    """Rewrite a quasiquoted template into an equivalent cons/concat expression."""
    if isinstance(ast, list) and ast:
        if ast[0] == UNQUOTE:
            if len(ast) != 2:
                raise GeneralError("'unquote' expects 1 argument")
            return ast[1]

        acc: SExpression = [QUOTE, []]
        for elt in reversed(ast):
            if _is_call_of(elt, SPLICE_UNQUOTE):
                if len(elt) != 2:
                    raise GeneralError("'splice-unquote' expects 1 argument")
                acc = [CONCAT, elt[1], acc]
            else:
                acc = [CONS, quasiquote_expand(elt), acc]
        return acc

    if isinstance(ast, (Symbol, list, dict)):
        return [QUOTE, ast]
    return ast


def quote_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    if len(args) != 1:
        raise GeneralError(f"'quote' expects 1 argument, got {len(args)}.")
    return args[0]


def quasiquote_form(args: list[SExpression], env: Environment, evaluator) -> TailCall:
    if len(args) != 1:
        raise GeneralError(f"'quasiquote' expects 1 argument, got {len(args)}.")
    return TailCall(quasiquote_expand(args[0]), env)


def unquote_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    raise GeneralError("'unquote' is not valid outside of quasiquote")


def splice_unquote_form(args: list[SExpression], env: Environment, evaluator) -> LispValue:
    raise GeneralError("'splice-unquote' is not valid outside of quasiquote")
