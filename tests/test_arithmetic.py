import pytest
from hypothesis import given, strategies as st

from slisp.errors import RuntimeErrorWithForm, GeneralError
from slisp.interpreter import Interpreter

# One shared interpreter: hypothesis runs many examples per test and the
# arithmetic builtins hold no state.
INTERP = Interpreter(stdlib=False)

small_ints = st.integers(min_value=-10**12, max_value=10**12)
nonzero_ints = small_ints.filter(lambda n: n != 0)


def ev(code):
    return INTERP.eval(code)


@given(small_ints, small_ints)
def test_integer_addition_stays_integer(a, b):
    result = ev(f"(+ {a} {b})")
    assert type(result) is int
    assert result == a + b


@given(small_ints)
def test_float_promotion(a):
    result = ev(f"(+ {a} 1.0)")
    assert type(result) is float
    assert result == a + 1.0


@given(small_ints, nonzero_ints)
def test_division_and_modulo_agree(a, b):
    q = ev(f"(/ {a} {b})")
    r = ev(f"(mod {a} {b})")
    assert type(q) is int
    assert q * b + r == a
    assert abs(r) < abs(b)
    # Truncating division: the remainder takes the sign of the dividend
    assert r == 0 or (r > 0) == (a > 0)


@given(small_ints, small_ints)
def test_comparisons_match_python(a, b):
    assert ev(f"(< {a} {b})") is (a < b)
    assert ev(f"(> {a} {b})") is (a > b)
    assert ev(f"(<= {a} {b})") is (a <= b)
    assert ev(f"(>= {a} {b})") is (a >= b)
    assert ev(f"(== {a} {b})") is (a == b)


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 2 3)", 6),
        ("(- 10 1 2)", 7),
        ("(- 5)", -5),
        ("(- 2.5)", -2.5),
        ("(* 2 3 4)", 24),
        ("(* 2 1.5)", 3.0),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7.0 2)", 3.5),
        ("(/ 100 2 5)", 10),
        ("(mod 7 3)", 1),
        ("(mod -7 3)", -1),
        ("(mod 7.5 2)", 1.5),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 1 1 2)", True),
        ("(> 3 2.5)", True),
        ("(>= 2 2.0)", True),
        ("(== 1 1.0)", True),
        ("(== 1 1 1)", True),
        ("(== 1 2)", False),
        ("(== true 1)", False),
        ("(== (list 1 2) (list 1 2))", True),
        ("(== (list 1 2) (list 1 2 3))", False),
        ("(== \"a\" \"a\")", True),
        ("(== 'a 'a)", True),
        ("(== :a :a)", True),
        ("(== :a 'a)", False),
        ("(== nil nil)", True),
        ("(&& true true)", True),
        ("(&& true false true)", False),
        ("(|| false true)", True),
        ("(|| false false)", False),
        ("(! false)", True),
    ],
)
def test_numeric_and_boolean_builtins(code, expected):
    result = ev(code)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "code,message",
    [
        ("(/ 1 0)", "Division by zero"),
        ("(mod 1 0)", "Modulo by zero"),
        ('(+ 1 "a")', 'Invalid argument type: "a"'),
        ("(< 1 true)", "Invalid argument type: true"),
        ("(&& true 1)", "'&&' expects boolean arguments. Got 1"),
        ("(! 1)", "'!' expects boolean arguments. Got 1"),
    ],
)
def test_invalid_arithmetic(code, message):
    with pytest.raises(RuntimeErrorWithForm) as info:
        ev(code)
    assert isinstance(info.value.error, GeneralError)
    assert str(info.value.error) == message


def test_equality_requires_two_arguments():
    with pytest.raises(RuntimeErrorWithForm, match="'==' requires at least 2 arguments"):
        ev("(== 1)")
