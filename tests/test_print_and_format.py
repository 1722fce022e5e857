import pytest

from slisp.printer import display_term, print_term
from slisp.types.function import Function
from slisp.types.nil import Nil
from slisp.types.symbol import Key, Symbol


@pytest.mark.parametrize(
    "term,printed",
    [
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-3, "-3"),
        (1.0, "1.0"),
        (2.5, "2.5"),
        (1e16, "10000000000000000.0"),
        (1.5e-7, "0.00000015"),
        (-0.0, "-0.0"),
        ("plain", '"plain"'),
        ('q"uote', '"q\\"uote"'),
        ("line\nbreak\ttab\\", '"line\\nbreak\\ttab\\\\"'),
        (Symbol("sym"), "sym"),
        (Key("k"), ":k"),
        (Nil, "nil"),
        ([], "()"),
        ([1, [Symbol("a"), "s"]], '(1 (a "s"))'),
        ({}, "{}"),
        ({Key("a"): 1, "b": [2]}, '{:a 1 "b" (2)}'),
    ],
)
def test_print_term(term, printed):
    assert print_term(term) == printed


def test_display_term_leaves_top_level_strings_raw():
    assert display_term("a\nb") == "a\nb"
    assert display_term(["a"]) == '("a")'
    assert display_term(1) == "1"


def test_print_functions():
    fn = Function(params=[Symbol("x")], body=[Symbol("x")])
    assert print_term(fn) == "#<function>"
    assert print_term(fn.as_macro()) == "#<macro>"
    assert print_term(Function.builtin(lambda args, ev, env: Nil)) == "#<function>"


def test_printed_terms_read_back(interp):
    value = interp.eval("(list 1 2.5 \"s\" 'sym :k (list true false))")
    assert interp.eval(f"'{print_term(value)}") == [
        1, 2.5, "s", Symbol("sym"), Key("k"), [Symbol("true"), Symbol("false")]
    ]


def test_large_floats_survive_str_and_read_string(interp):
    assert interp.eval("(read-string (str (* 1.0 10000000000000000)))") == 1e16
    assert interp.eval("(read-string (str (/ 1.0 1000000000)))") == 1e-9
