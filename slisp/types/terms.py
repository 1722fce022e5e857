"""Term-level rules shared by the evaluator and the builtins.

Covers the numeric tower (pairwise int -> float promotion), structural
equality, which variants may key a dictionary, and user-facing type names.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from slisp import LispValue
from slisp.errors import GeneralError
from slisp.types.nil import NilType
from slisp.types.symbol import Key, Symbol


def is_number(x: LispValue) -> bool:
    # bool subclasses int in Python but is a distinct variant here
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def is_integer(x: LispValue) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def is_float(x: LispValue) -> bool:
    return isinstance(x, float)


def promote(a: int | float, b: int | float) -> tuple[int | float, int | float]:
    """Promote an integer to float when the other operand is a float."""
    if isinstance(a, float) and not isinstance(b, float):
        return a, float(b)
    if isinstance(b, float) and not isinstance(a, float):
        return float(a), b
    return a, b


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def add(a, b):
    a, b = promote(a, b)
    return a + b


def subtract(a, b):
    a, b = promote(a, b)
    return a - b


def multiply(a, b):
    a, b = promote(a, b)
    return a * b


def divide(a, b):
    a, b = promote(a, b)
    if b == 0:
        raise GeneralError("Division by zero")
    if isinstance(a, float):
        return a / b
    return _trunc_div(a, b)


def modulo(a, b):
    a, b = promote(a, b)
    if b == 0:
        raise GeneralError("Modulo by zero")
    if isinstance(a, float):
        return math.fmod(a, b)
    # Remainder takes the sign of the dividend
    return a - b * _trunc_div(a, b)


def less_than(a, b) -> bool:
    a, b = promote(a, b)
    return a < b


def greater_than(a, b) -> bool:
    a, b = promote(a, b)
    return a > b


NumericOp = Callable[[int | float, int | float], int | float | bool]


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality between two terms."""
    if a is b:
        return True
    if is_number(a) and is_number(b):
        a, b = promote(a, b)
        return a == b
    match a:
        case bool():
            return isinstance(b, bool) and a == b
        case list():
            return (
                isinstance(b, list)
                and len(a) == len(b)
                and all(is_equal(x, y) for x, y in zip(a, b))
            )
        case dict():
            if not isinstance(b, dict) or len(a) != len(b):
                return False
            for k, v in a.items():
                if k not in b or not is_equal(v, b[k]):
                    return False
            return True
        case str() | Symbol() | Key() | NilType():
            return type(a) is type(b) and a == b
        case _:
            # Functions (and anything else) compare by identity
            return False


@dataclass(frozen=True)
class BooleanKey:
    """A boolean stored as a dictionary key, kept apart from 0 and 1."""

    value: bool


def check_key(key: LispValue) -> LispValue:
    """Validate that `key` may be used as a dictionary key and return the stored key."""
    if isinstance(key, bool):
        return BooleanKey(key)
    if isinstance(key, (str, Symbol, Key, int, float, NilType)):
        return key
    raise GeneralError(f"Invalid dictionary key: {type_name(key)}")


def key_term(key: LispValue) -> LispValue:
    """Inverse of `check_key`: the term a stored dictionary key stands for."""
    return key.value if isinstance(key, BooleanKey) else key


def type_name(x: LispValue) -> str:
    # Local import to avoid a cycle with function.py
    from slisp.types.function import Function

    match x:
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case str():
            return "string"
        case list():
            return "list"
        case dict():
            return "dictionary"
        case Symbol():
            return "symbol"
        case Key():
            return "key"
        case NilType():
            return "nil"
        case Function():
            return "macro" if x.is_macro else "function"
        case _:
            return type(x).__name__
