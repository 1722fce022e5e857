import pytest

from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(not true)", False),
        ("(identity 4)", 4),
        ("(inc 1)", 2),
        ("(dec 1)", 0),
        ("(when true 1 2)", 2),
        ("(unless false 1 2)", 2),
        ("(map inc (list 1 2 3))", [2, 3, 4]),
        ("(map inc (list))", []),
        ("(map (function (x) (list x)) (list 1 2))", [[1], [2]]),
        ("(filter (function (x) (> x 1)) (list 1 2 3))", [2, 3]),
        ("(reduce + 0 (list 1 2 3 4))", 10),
        ("(reduce (function (acc x) (cons x acc)) (list) (list 1 2 3))", [3, 2, 1]),
        ("(math/abs -3)", 3),
        ("(math/abs 2.5)", 2.5),
        ("(math/max 1 5 3)", 5),
        ("(math/min 4 2 8)", 2),
        ("(math/max 7)", 7),
        ("(math/even? 4)", True),
        ("(math/odd? 4)", False),
        ("(math/odd? -3)", True),
        ('(string/join ", " (list "a" "b" "c"))', "a, b, c"),
        ('(string/join "-" (list 1 2))', "1-2"),
        ('(string/join "-" (list))', ""),
    ],
)
def test_stdlib_functions(std_interp, code, expected):
    assert std_interp.eval(code) == expected


def test_when_and_unless_return_nil(std_interp):
    assert std_interp.eval("(when false 1)") is Nil
    assert std_interp.eval("(unless true 1)") is Nil


def test_defn(std_interp):
    assert std_interp.eval("(defn square (x) (* x x))") == Symbol("user/square")
    assert std_interp.eval("(square 5)") == 25


def test_defn_with_docstring(std_interp):
    std_interp.eval('(defn greet "Greets someone." (name) (str "hi " name))')
    assert std_interp.eval('(greet "bob")') == "hi bob"
    assert std_interp.eval("(doc greet)") == "Greets someone."


def test_defn_expansion(std_interp):
    assert std_interp.eval("(macroexpand '(defn f (x) x))") == [
        Symbol("def"),
        Symbol("f"),
        [Symbol("function"), [Symbol("x")], Symbol("x")],
    ]


def test_library_functions_are_documented(std_interp):
    assert std_interp.eval("(doc map)").startswith("(f xs)")
    assert std_interp.eval("(doc math/abs)").startswith("(x)")


def test_imported_libraries(std_interp):
    std_interp.eval("(import 'math)")
    assert std_interp.eval("(abs -1)") == 1
    std_interp.eval("(import 'string :as 's)")
    assert std_interp.eval('(s/upper-case "x")') == "X"


def test_stdlib_closures_see_callers_values(std_interp):
    std_interp.eval("(def offset 10)")
    assert std_interp.eval("(map (function (x) (+ x offset)) (list 1 2))") == [11, 12]


def test_user_definitions_do_not_leak_into_core(std_interp):
    std_interp.eval("(defn inc (x) (+ x 100))")
    assert std_interp.eval("(inc 1)") == 101
    assert std_interp.eval("(core/inc 1)") == 2
    assert std_interp.eval("(map core/inc (list 1))") == [2]
