"""
  SLisp Tokenizer

Turns source text into a flat list of positioned tokens:

    (  )  {  }            structural delimiters
    symbol(text)          any run of non-delimiter, non-whitespace characters
    integer(n) float(n)   a leading '-' belongs to a number only before a digit
    string(text)          double quoted; escapes \\n \\t \\" \\\\ and \\xHH

Whitespace is skipped and ';' starts a comment running to end of line.
Malformed input raises LexerError with the source line and a caret marker.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from slisp.errors import LexerError


class TokenType(Enum):
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    SYMBOL = "symbol"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True)
class TokenPosition:
    line: int
    column: int


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Any = None
    # Positions are diagnostics only; two tokens with equal type/value are equal
    position: TokenPosition | None = field(default=None, compare=False)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.value})"
        return f"Token({self.type.value}, {self.value!r})"


DELIMITERS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

NUMBER_RE = re.compile(r"-?[0-9][0-9.]*")

SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def is_symbol_char(ch: str) -> bool:
    if ch.isspace() or ch in DELIMITERS or ch in '";':
        return False
    # Letters, numbers, punctuation and symbols; control characters are rejected
    return unicodedata.category(ch)[0] in "LNPS"


class Tokenizer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self._line_starts = [0] + [m.end() for m in re.finditer("\n", source)]

    # --- positions and diagnostics ---
    def position(self, offset: int) -> TokenPosition:
        line = 0
        lo, hi = 0, len(self._line_starts) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            if self._line_starts[mid] <= offset:
                line = mid
                lo = mid + 1
            else:
                hi = mid - 1
        return TokenPosition(line + 1, offset - self._line_starts[line] + 1)

    def error(self, msg: str, offset: int) -> LexerError:
        pos = self.position(offset)
        line_start = self._line_starts[pos.line - 1]
        line_end = self.source.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.source)
        return LexerError(msg, pos.line, pos.column, self.source[line_start:line_end])

    # --- scanning ---
    def _skip_whitespace_and_comments(self) -> None:
        src, n = self.source, len(self.source)
        while self.pos < n:
            ch = src[self.pos]
            if ch.isspace():
                self.pos += 1
            elif ch == ";":
                end = src.find("\n", self.pos)
                self.pos = n if end == -1 else end + 1
            else:
                break

    def _read_string(self) -> Token:
        src, n = self.source, len(self.source)
        start = self.pos
        self.pos += 1  # opening quote
        chars: list[str] = []
        while True:
            if self.pos >= n:
                raise self.error("Unterminated string", start)
            ch = src[self.pos]
            if ch == '"':
                self.pos += 1
                return Token(TokenType.STRING, "".join(chars), self.position(start))
            if ch != "\\":
                chars.append(ch)
                self.pos += 1
                continue

            esc_at = self.pos
            if self.pos + 1 >= n:
                raise self.error("Unterminated string", start)
            esc = src[self.pos + 1]
            if esc in SIMPLE_ESCAPES:
                chars.append(SIMPLE_ESCAPES[esc])
                self.pos += 2
            elif esc == "x":
                digits = src[self.pos + 2:self.pos + 4]
                if len(digits) != 2 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                    raise self.error(f"Invalid hex escape '\\x{digits}'", esc_at)
                chars.append(chr(int(digits, 16)))
                self.pos += 4
            else:
                raise self.error(f"Unknown escape character '\\{esc}'", esc_at)

    def _read_number(self, match: re.Match) -> Token:
        text = match.group(0)
        start = self.pos
        self.pos = match.end()
        if "." in text:
            try:
                return Token(TokenType.FLOAT, float(text), self.position(start))
            except ValueError:
                raise self.error(f"{text} is not a valid floating point number.", start) from None
        return Token(TokenType.INTEGER, int(text), self.position(start))

    def _read_symbol(self) -> Token:
        src, n = self.source, len(self.source)
        start = self.pos
        while self.pos < n and is_symbol_char(src[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self.error(f"Unrecognized character '{src[start]}'", start)
        return Token(TokenType.SYMBOL, src[start:self.pos], self.position(start))

    def next_token(self) -> Token | None:
        self._skip_whitespace_and_comments()
        if self.pos >= len(self.source):
            return None

        ch = self.source[self.pos]
        if ch in DELIMITERS:
            tok = Token(DELIMITERS[ch], None, self.position(self.pos))
            self.pos += 1
            return tok
        if ch == '"':
            return self._read_string()
        m = NUMBER_RE.match(self.source, self.pos)
        if m:
            return self._read_number(m)
        return self._read_symbol()

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok is None:
                return
            yield tok


def tokenize(source: str) -> list[Token]:
    """Tokenize the whole of `source`."""
    return list(Tokenizer(source))
