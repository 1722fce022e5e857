"""List and dictionary builtins, bound into the `core` namespace.

Collections are values: every operation returns a new list or dictionary
and leaves its arguments untouched.
"""

from __future__ import annotations

from slisp import LispValue
from slisp.builtin import BuiltinTable, check_arg_count
from slisp.config import CORE_NAMESPACE
from slisp.errors import GeneralError, LispRuntimeError
from slisp.types.nil import Nil, NilType
from slisp.types.terms import check_key, is_integer, key_term

builtins = BuiltinTable(CORE_NAMESPACE)


def _list_arg(name: str, value: LispValue) -> list:
    if not isinstance(value, list):
        raise GeneralError(f"'{name}' expects an argument that is a list")
    return value


def _dict_arg(name: str, value: LispValue) -> dict:
    if not isinstance(value, dict):
        raise GeneralError(f"'{name}' expects an argument that is a dictionary")
    return value


# -------------------------------
# Lists
# -------------------------------
@builtins.define("list", "(& items)\nConstructs a new list containing the items.")
def list_builtin(args, evaluator, env):
    return list(args)


@builtins.define("cons", "(i l)\nConstructs a new list where i is the first element, and l is the rest.")
def cons(args, evaluator, env):
    check_arg_count("cons", args, 2)
    match args[1]:
        case list():
            return [args[0], *args[1]]
        case NilType():
            return [args[0]]
        case _:
            raise GeneralError("'cons' requires the second argument to be a list or 'nil'")


@builtins.define("concat", "(& xs)\nConcatenates lists; non-list arguments are added as single items.")
def concat(args, evaluator, env):
    result: list = []
    for a in args:
        if isinstance(a, list):
            result.extend(a)
        else:
            result.append(a)
    return result


@builtins.define("first", "(x)\nReturns the first item in the collection x.")
def first(args, evaluator, env):
    check_arg_count("first", args, 1)
    items = _list_arg("first", args[0])
    return items[0] if items else Nil


@builtins.define("rest", "(x)\nReturns all but the first item in the collection x.")
def rest(args, evaluator, env):
    check_arg_count("rest", args, 1)
    return _list_arg("rest", args[0])[1:]


@builtins.define("last", "(x)\nReturns the last item in the collection x.")
def last(args, evaluator, env):
    check_arg_count("last", args, 1)
    items = _list_arg("last", args[0])
    return items[-1] if items else Nil


@builtins.define("at", "(x i)\nReturns the item at index i from collection x.")
def at(args, evaluator, env):
    if len(args) != 2:
        raise LispRuntimeError("'at' requires 2 arguments.")
    items, index = args
    if not isinstance(items, list):
        raise LispRuntimeError("'at' requires the first argument to be a list.")
    if not is_integer(index):
        raise LispRuntimeError("'at' requires the second argument to be an integer.")
    if index < 0 or index >= len(items):
        raise LispRuntimeError(f"Index out of range: {index}")
    return items[index]


@builtins.define("count", "(x)\nReturns the count/length of the collection or string x.")
def count(args, evaluator, env):
    if len(args) != 1:
        raise LispRuntimeError("'count' expects 1 argument")
    if isinstance(args[0], (list, str, dict)):
        return len(args[0])
    raise LispRuntimeError("'count' expects an argument that is a list, dictionary or a string")


@builtins.define("empty?", "(x)\nReturns a boolean indicating whether the string/collection is empty.")
def is_empty(args, evaluator, env):
    check_arg_count("empty?", args, 1)
    match args[0]:
        case list() | str() | dict():
            return len(args[0]) == 0
        case NilType():
            return True
        case _:
            return False


# -------------------------------
# Dictionaries
# -------------------------------
@builtins.define("hash-map", "(& kvs)\nBuilds a dictionary from alternating keys and values.")
def hash_map(args, evaluator, env):
    if len(args) % 2 != 0:
        raise GeneralError("'hash-map' requires an even number of arguments")
    return {check_key(k): v for k, v in zip(args[::2], args[1::2])}


@builtins.define("get", "(d k [default])\nLooks up k in dictionary d; default or nil when missing.")
def get(args, evaluator, env):
    if len(args) not in (2, 3):
        raise GeneralError("'get' expects 2 or 3 arguments")
    d = _dict_arg("get", args[0])
    default = args[2] if len(args) == 3 else Nil
    return d.get(check_key(args[1]), default)


@builtins.define("assoc", "(d k v & kvs)\nReturns a copy of d with the given keys set.")
def assoc(args, evaluator, env):
    if len(args) < 3 or len(args) % 2 == 0:
        raise GeneralError("'assoc' requires a dictionary followed by key/value pairs")
    result = dict(_dict_arg("assoc", args[0]))
    for k, v in zip(args[1::2], args[2::2]):
        result[check_key(k)] = v
    return result


@builtins.define("keys", "(d)\nReturns the keys of dictionary d as a list.")
def keys(args, evaluator, env):
    check_arg_count("keys", args, 1)
    return [key_term(k) for k in _dict_arg("keys", args[0])]


@builtins.define("values", "(d)\nReturns the values of dictionary d as a list.")
def values(args, evaluator, env):
    check_arg_count("values", args, 1)
    return list(_dict_arg("values", args[0]).values())
