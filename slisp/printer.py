"""Printing of terms.

`print_term` renders a term readably (strings quoted and escaped), which is
what the REPL shows. `display_term` renders a top-level string raw, as
`str` and `print` do; strings nested in collections stay quoted.
"""

from __future__ import annotations

import math
from decimal import Decimal

from slisp import LispValue
from slisp.types.function import Function
from slisp.types.nil import NilType
from slisp.types.symbol import Key, Symbol
from slisp.types.terms import key_term

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}


def _escape_string(s: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in s)


def _format_float(x: float) -> str:
    # Positional notation only; the reader has no exponent syntax
    if not math.isfinite(x):
        return repr(x)
    text = format(Decimal(repr(x)), "f")
    return text if "." in text else text + ".0"


def print_term(x: LispValue, readably: bool = True) -> str:
    match x:
        case bool():
            return "true" if x else "false"
        case int():
            return repr(x)
        case float():
            return _format_float(x)
        case str():
            return f'"{_escape_string(x)}"' if readably else x
        case Symbol():
            return x.id
        case Key():
            return f":{x.id}"
        case NilType():
            return "nil"
        case list():
            return "(" + " ".join(print_term(e) for e in x) + ")"
        case dict():
            items = " ".join(
                f"{print_term(key_term(k))} {print_term(v)}" for k, v in x.items()
            )
            return "{" + items + "}"
        case Function():
            return repr(x)
        case _:
            return str(x)


def display_term(x: LispValue) -> str:
    return print_term(x, readably=False)
