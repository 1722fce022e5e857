# Core type aliases for the SLisp data model.
# Terms are plain Python values (list, dict, int, float, str, bool) plus a small
# set of dedicated classes (Symbol, Key, Nil, Function). There is no Cons type.
#
# Naming guidance:
# - SExpression: use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Native callback: (evaluated args, evaluator, calling environment) -> value
NativeFn = Callable[[list, Any, Any], LispValue]
