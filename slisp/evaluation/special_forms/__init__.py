"""Registry of special forms for the SLisp evaluator.

Maps Symbols to handlers with the signature (args, env, evaluator). A handler
returns either a value or a TailCall that the evaluator loop continues with.
"""

from slisp.types.symbol import Symbol
from slisp.evaluation.special_forms.define_form import def_form
from slisp.evaluation.special_forms.let_form import let_form
from slisp.evaluation.special_forms.set_form import set_form
from slisp.evaluation.special_forms.apply_form import apply_form
from slisp.evaluation.special_forms.quote_forms import (
    quote_form,
    quasiquote_form,
    unquote_form,
    splice_unquote_form,
)
from slisp.evaluation.special_forms.do_form import do_form
from slisp.evaluation.special_forms.function_form import function_form
from slisp.evaluation.special_forms.if_form import if_form
from slisp.evaluation.special_forms.while_form import while_form
from slisp.evaluation.special_forms.defmacro_form import defmacro_form
from slisp.evaluation.special_forms.macroexpand_forms import macroexpand_form

SPECIAL_FORMS = {
    Symbol("def"): def_form,
    Symbol("let"): let_form,
    Symbol("set!"): set_form,
    Symbol("apply"): apply_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("unquote"): unquote_form,
    Symbol("splice-unquote"): splice_unquote_form,
    Symbol("do"): do_form,
    Symbol("function"): function_form,
    Symbol("if"): if_form,
    Symbol("while"): while_form,
    Symbol("defmacro"): defmacro_form,
    Symbol("macroexpand"): macroexpand_form,
}
