import pytest

from slisp.errors import GeneralError, RuntimeErrorWithForm
from slisp.evaluation.special_forms.quote_forms import quasiquote_expand
from slisp.reader.parser import read_one
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


def test_quasiquote_with_unquote(interp):
    interp.eval("(def b 5)")
    assert interp.eval("`(a ~b)") == [Symbol("a"), 5]


def test_quasiquote_splice(interp):
    assert interp.eval("`(1 ~@(list 2 3) 4)") == [1, 2, 3, 4]
    assert interp.eval("`(1 ~@(list) 2)") == [1, 2]


def test_quasiquote_nested_lists(interp):
    interp.eval("(def x 1)")
    assert interp.eval("`(a (b ~x) c)") == read_one("(a (b 1) c)")


def test_quasiquote_atoms(interp):
    assert interp.eval("`sym") == Symbol("sym")
    assert interp.eval("`5") == 5
    assert interp.eval('`"s"') == "s"
    assert interp.eval("`()") == []


def test_quasiquote_evaluates_unquoted_expressions(interp):
    assert interp.eval("`(sum ~(+ 1 2))") == [Symbol("sum"), 3]


def test_quasiquote_uses_core_constructors(interp):
    # Shadowing cons in the user namespace must not change quasiquote
    interp.eval("(def cons (function (a b) 'shadowed))")
    assert interp.eval("`(1 2)") == [1, 2]


def test_quasiquote_expansion_shape():
    expanded = quasiquote_expand(read_one("(a ~b ~@c)"))
    assert expanded == read_one("(core/cons 'a (core/cons b (core/concat c '())))")


def test_quasiquote_in_a_macro(interp):
    interp.eval("(defmacro my-when (function (c & body) `(if ~c (do ~@body) nil)))")
    assert interp.eval("(my-when true 1 2)") == 2
    assert interp.eval("(my-when false 1 2)") is Nil


@pytest.mark.parametrize("code", ["(unquote x)", "~x", "(splice-unquote x)", "~@x"])
def test_unquote_outside_quasiquote(interp, code):
    with pytest.raises(RuntimeErrorWithForm) as info:
        interp.eval(code)
    assert isinstance(info.value.error, GeneralError)
