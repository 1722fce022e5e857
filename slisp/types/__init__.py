from slisp.types.symbol import Symbol, Key
from slisp.types.nil import Nil, NilType
from slisp.types.namespace import Namespace, NamespaceRegistry
from slisp.types.environment import Environment
from slisp.types.function import Function
