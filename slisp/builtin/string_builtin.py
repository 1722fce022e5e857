"""Native builtins of the `string` namespace."""

from __future__ import annotations

from slisp.builtin import BuiltinTable
from slisp.errors import LispRuntimeError

builtins = BuiltinTable("string")


def _one_string(name: str, args) -> str:
    if len(args) != 1:
        raise LispRuntimeError(f"'{name}' requires one argument")
    if not isinstance(args[0], str):
        raise LispRuntimeError(f"'{name}' requires a string argument")
    return args[0]


@builtins.define("capitalize", "(str)\nCapitalizes each word of the string.")
def capitalize(args, evaluator, env):
    return _one_string("capitalize", args).title()


@builtins.define("upper-case", "(str)\nConverts the string to upper case.")
def upper_case(args, evaluator, env):
    return _one_string("upper-case", args).upper()


@builtins.define("lower-case", "(str)\nConverts the string to lower case.")
def lower_case(args, evaluator, env):
    return _one_string("lower-case", args).lower()


@builtins.define("split", "(str sep)\nSplits str on every occurrence of sep.")
def split(args, evaluator, env):
    if len(args) != 2 or not all(isinstance(a, str) for a in args):
        raise LispRuntimeError("'split' requires two string arguments")
    s, sep = args
    if not sep:
        raise LispRuntimeError("'split' separator must not be empty")
    return s.split(sep)
