"""Native builtins of the `core` namespace.

Stdio, reading and evaluation, namespace control, type predicates and the
numeric and boolean operators. Every callback receives evaluated arguments.
"""

from __future__ import annotations

from typing import Callable

from slisp import LispValue
from slisp.builtin import BuiltinTable, check_arg_count, check_min_args
from slisp.config import CORE_NAMESPACE
from slisp.errors import GeneralError, LispRuntimeError
from slisp.loader import load_file
from slisp.printer import display_term, print_term
from slisp.reader.parser import read_one
from slisp.types.environment import Environment
from slisp.types.function import Function
from slisp.types.nil import Nil, NilType
from slisp.types.symbol import Key, Symbol
from slisp.types.tail_call import TailCall
from slisp.types import terms

builtins = BuiltinTable(CORE_NAMESPACE)

AS_KEY = Key("as")


def _string_arg(name: str, value: LispValue) -> str:
    if not isinstance(value, str):
        raise GeneralError(f"'{name}' requires the argument to be a string")
    return value


def _symbol_name(name: str, value: LispValue) -> str:
    if not isinstance(value, Symbol):
        raise LispRuntimeError(f"'{name}' expects a symbol as an argument")
    return value.id


# -------------------------------
# Stdio, reading and evaluation
# -------------------------------
@builtins.define("print", "(& xs)\nPrints the arguments separated by commas.")
def print_builtin(args, evaluator, env):
    print(",".join(display_term(a) for a in args))
    return Nil


@builtins.define("input", "([prompt])\nReads one line from stdin; nil at end of input.")
def input_builtin(args, evaluator, env):
    if len(args) > 1:
        raise GeneralError("'input' expects 0 or 1 argument")
    prompt = _string_arg("input", args[0]) if args else ""
    try:
        line = input(prompt)
    except EOFError:
        return Nil
    return line if line else Nil


@builtins.define("read-string", "(s)\nReads the first form in the string s.")
def read_string(args, evaluator, env):
    check_arg_count("read-string", args, 1)
    return read_one(_string_arg("read-string", args[0]))


@builtins.define("slurp", "(path)\nReturns the contents of the file at path, or nil if it is missing.")
def slurp(args, evaluator, env):
    check_arg_count("slurp", args, 1)
    filename = _string_arg("slurp", args[0])
    path = evaluator.cwd_stack.resolve(filename)
    try:
        return path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError):
        print(f"File {filename} not found.")
        return Nil


@builtins.define("eval", "(form)\nEvaluates form in the calling environment.")
def eval_builtin(args, evaluator, env):
    check_arg_count("eval", args, 1)
    return TailCall(args[0], env)


@builtins.define("load-file", "(path)\nEvaluates every form of a file into the current namespace.")
def load_file_builtin(args, evaluator, env):
    check_arg_count("load-file", args, 1)
    return load_file(evaluator, _string_arg("load-file", args[0]), env.namespace)


@builtins.define("str", "(& xs)\nConcatenates the printed forms of the arguments.")
def str_builtin(args, evaluator, env):
    check_min_args("str", args, 1)
    return "".join(display_term(a) for a in args)


@builtins.define("string=", "(a b & more)\nTrue if every string argument is equal.")
def string_equals(args, evaluator, env):
    check_min_args("string=", args, 2)
    for a in args:
        if not isinstance(a, str):
            raise LispRuntimeError(f"'string=' expects string arguments. Got {print_term(a)}")
    return all(a == args[0] for a in args[1:])


# -------------------------------
# Namespaces
# -------------------------------
@builtins.define("in-ns", "(name)\nSwitches the current namespace, creating it if needed.")
def in_ns(args, evaluator, env: Environment):
    if len(args) != 1:
        raise LispRuntimeError("'in-ns' expects one argument.")
    name = _symbol_name("in-ns", args[0])
    env.change_namespace(evaluator.registry.create_or_get(name))
    return Nil


@builtins.define("import", "(name [:as alias])\nImports a namespace, or aliases it when :as is given.")
def import_builtin(args, evaluator, env: Environment):
    if len(args) not in (1, 3):
        raise GeneralError("'import' expects a namespace name, optionally followed by :as alias")
    ns = evaluator.registry.require(_symbol_name("import", args[0]))
    if len(args) == 1:
        env.namespace.import_namespace(ns)
        return Nil
    if args[1] != AS_KEY:
        raise GeneralError(f"'import' expected :as, got {print_term(args[1])}")
    env.namespace.add_alias(_symbol_name("import", args[2]), ns)
    return Nil


@builtins.define("doc", "(f)\nReturns the docstring of a function.")
def doc(args, evaluator, env):
    if len(args) != 1:
        raise LispRuntimeError("'doc' requires 1 argument")
    if not isinstance(args[0], Function):
        raise LispRuntimeError("'doc' requires the argument to be a function")
    return args[0].docstring or ""


# -------------------------------
# Type predicates
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]) -> None:
    def body(args, evaluator, env):
        check_arg_count(name, args, 1)
        return test(args[0])

    builtins.define(name, f"(x)\nReturns true if x is a {name[:-1]}.")(body)


_predicate("list?", lambda x: isinstance(x, list))
_predicate("symbol?", lambda x: isinstance(x, Symbol))
_predicate("key?", lambda x: isinstance(x, Key))
_predicate("string?", lambda x: isinstance(x, str))
_predicate("number?", terms.is_number)
_predicate("integer?", terms.is_integer)
_predicate("float?", terms.is_float)
_predicate("boolean?", lambda x: isinstance(x, bool))
_predicate("dictionary?", lambda x: isinstance(x, dict))
_predicate("function?", lambda x: isinstance(x, Function))
_predicate("macro?", lambda x: isinstance(x, Function) and x.is_macro)
_predicate("nil?", lambda x: isinstance(x, NilType))


@builtins.define("type", "(x)\nReturns the type name of x as a string.")
def type_builtin(args, evaluator, env):
    check_arg_count("type", args, 1)
    return terms.type_name(args[0])


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def _numbers(args: list[LispValue]) -> list[int | float]:
    for a in args:
        if not terms.is_number(a):
            raise GeneralError(f"Invalid argument type: {print_term(a)}")
    return args


def _fold(op: terms.NumericOp, args: list[int | float]) -> int | float:
    result = args[0]
    for x in args[1:]:
        result = op(result, x)
    return result


def _chain(op: terms.NumericOp, args: list[int | float]) -> bool:
    return all(op(a, b) for a, b in zip(args, args[1:]))


@builtins.define("+", "(& xs)\nSum of the arguments.")
def add(args, evaluator, env):
    if not args:
        return 0
    return _fold(terms.add, _numbers(args))


@builtins.define("-", "(x & xs)\nSubtracts the rest from x, or negates a single argument.")
def sub(args, evaluator, env):
    check_min_args("-", args, 1)
    nums = _numbers(args)
    if len(nums) == 1:
        return -nums[0]
    return _fold(terms.subtract, nums)


@builtins.define("*", "(& xs)\nProduct of the arguments.")
def mul(args, evaluator, env):
    if not args:
        return 1
    return _fold(terms.multiply, _numbers(args))


@builtins.define("/", "(x y & more)\nDivides x by the rest; integer division truncates.")
def div(args, evaluator, env):
    check_min_args("/", args, 2)
    return _fold(terms.divide, _numbers(args))


@builtins.define("mod", "(x y & more)\nRemainder of x by the rest, signed like x.")
def mod(args, evaluator, env):
    check_min_args("mod", args, 2)
    return _fold(terms.modulo, _numbers(args))


def _comparison(name: str, op: terms.NumericOp) -> None:
    def body(args, evaluator, env):
        check_min_args(name, args, 2)
        return _chain(op, _numbers(args))

    builtins.define(name, f"(a b & more)\nTrue if every adjacent pair satisfies {name}.")(body)


_comparison("<", terms.less_than)
_comparison(">", terms.greater_than)
_comparison("<=", lambda a, b: not terms.greater_than(a, b))
_comparison(">=", lambda a, b: not terms.less_than(a, b))


@builtins.define("==", "(a b & more)\nStructural equality of every argument with the first.")
def equals(args, evaluator, env):
    if len(args) < 2:
        raise LispRuntimeError("'==' requires at least 2 arguments")
    return all(terms.is_equal(args[0], x) for x in args[1:])


# -------------------------------
# Boolean logic
# -------------------------------
def _booleans(name: str, args: list[LispValue]) -> list[bool]:
    for a in args:
        if not isinstance(a, bool):
            raise GeneralError(f"'{name}' expects boolean arguments. Got {print_term(a)}")
    return args


@builtins.define("&&", "(a b & more)\nTrue if every argument is true.")
def logical_and(args, evaluator, env):
    check_min_args("&&", args, 2)
    return all(_booleans("&&", args))


@builtins.define("||", "(a b & more)\nTrue if any argument is true.")
def logical_or(args, evaluator, env):
    check_min_args("||", args, 2)
    return any(_booleans("||", args))


@builtins.define("!", "(x)\nBoolean negation.")
def logical_not(args, evaluator, env):
    check_arg_count("!", args, 1)
    return not _booleans("!", args)[0]
