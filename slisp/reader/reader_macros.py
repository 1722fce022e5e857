from __future__ import annotations

from slisp.types.symbol import Symbol

# Quote-family reader macros: the macro symbol wraps the next form read.
QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
}

# Longest first so '~@x' is never read as (unquote @x)
PREFIXES: list[str] = sorted(QUOTE_FORMS, key=len, reverse=True)

# '#' followed by a list L reads as (function . L)
FUNCTION_SHORTHAND = "#"
FUNCTION = Symbol("function")

# '{k v ...}' reads as (hash-map k v ...)
HASH_MAP = Symbol("hash-map")

KEY_PREFIX = ":"


def split_prefix(text: str) -> tuple[Symbol, str] | None:
    """Split a symbol like "'foo" into (quote, "foo"), or return None."""
    for prefix in PREFIXES:
        if text.startswith(prefix) and len(text) > len(prefix):
            return QUOTE_FORMS[prefix], text[len(prefix):]
    return None
