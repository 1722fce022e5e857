"""Native builtins of the `math` namespace."""

from __future__ import annotations

import math

from slisp.builtin import BuiltinTable, check_arg_count
from slisp.errors import GeneralError, LispRuntimeError
from slisp.printer import print_term
from slisp.types.terms import is_integer, is_number

builtins = BuiltinTable("math")


def _number(name: str, value) -> int | float:
    if not is_number(value):
        raise GeneralError(f"'{name}' expects a number. Got {print_term(value)}")
    return value


@builtins.define("range", "(min max)\nCreates a list of numbers min <= n < max.")
def range_builtin(args, evaluator, env):
    if len(args) != 2:
        raise LispRuntimeError("'range' requires 2 arguments")
    lo, hi = args
    if not (is_integer(lo) and is_integer(hi)):
        raise LispRuntimeError("'range' requires 2 integer arguments")
    return list(range(lo, hi))


@builtins.define("sqrt", "(x)\nSquare root of x as a float.")
def sqrt(args, evaluator, env):
    check_arg_count("sqrt", args, 1)
    x = _number("sqrt", args[0])
    if x < 0:
        raise GeneralError("'sqrt' of a negative number")
    return math.sqrt(x)


@builtins.define("pow", "(x y)\nx raised to the power y; integers stay integers for non-negative y.")
def pow_builtin(args, evaluator, env):
    check_arg_count("pow", args, 2)
    x, y = _number("pow", args[0]), _number("pow", args[1])
    if is_integer(x) and is_integer(y) and y >= 0:
        return x ** y
    try:
        return math.pow(x, y)
    except (ValueError, OverflowError) as e:
        raise GeneralError(f"'pow' failed: {e}") from e


@builtins.define("floor", "(x)\nLargest integer not greater than x.")
def floor(args, evaluator, env):
    check_arg_count("floor", args, 1)
    return math.floor(_number("floor", args[0]))


@builtins.define("ceil", "(x)\nSmallest integer not less than x.")
def ceil(args, evaluator, env):
    check_arg_count("ceil", args, 1)
    return math.ceil(_number("ceil", args[0]))
