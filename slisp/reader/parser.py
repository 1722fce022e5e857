"""
  SLisp Reader

Consumes the token list one token at a time and builds terms:

    - lists        -> Python list
    - {k v ...}    -> [hash-map k v ...]
    - symbols      -> Symbol, or Key when written ':name'
    - strings      -> str
    - numbers      -> int/float
    - 'x `x ~x ~@x -> [quote x], [quasiquote x], [unquote x], [splice-unquote x]
    - #(...)       -> [function ...]

Running out of tokens inside an open list raises ReaderIncomplete so an
interactive front-end can ask for more input.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator, Optional

from slisp import SExpression
from slisp.errors import ReaderError, ReaderIncomplete
from slisp.reader.lexer import Token, TokenPosition, TokenType, tokenize
from slisp.reader.reader_macros import (
    FUNCTION,
    FUNCTION_SHORTHAND,
    HASH_MAP,
    KEY_PREFIX,
    QUOTE_FORMS,
    split_prefix,
)
from slisp.types.nil import Nil
from slisp.types.symbol import Key, Symbol


class Reader:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next_token(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def read_form(self) -> SExpression:
        tok = self.next_token()
        if tok is None:
            raise ReaderIncomplete()
        return self.read_token(tok)

    def read_token(self, tok: Token) -> SExpression:
        match tok.type:
            case TokenType.LPAREN:
                return self.read_sequence(TokenType.RPAREN)
            case TokenType.LBRACE:
                return [HASH_MAP, *self.read_sequence(TokenType.RBRACE)]
            case TokenType.RPAREN | TokenType.RBRACE:
                raise ReaderError(f"Unexpected '{tok.type.value}'" + self._where(tok))
            case TokenType.INTEGER | TokenType.FLOAT | TokenType.STRING:
                return tok.value
            case TokenType.SYMBOL:
                return self.read_symbol(tok)
        raise ReaderError(f"Unknown token {tok!r}")

    def read_sequence(self, closer: TokenType) -> list[SExpression]:
        items: list[SExpression] = []
        while True:
            tok = self.next_token()
            if tok is None:
                raise ReaderIncomplete()
            if tok.type == closer:
                return items
            if tok.type in (TokenType.RPAREN, TokenType.RBRACE):
                raise ReaderError(f"Unexpected '{tok.type.value}'" + self._where(tok))
            items.append(self.read_token(tok))

    def read_symbol(self, tok: Token) -> SExpression:
        text: str = tok.value

        # Standalone reader macros apply to the next form
        if text in QUOTE_FORMS:
            return [QUOTE_FORMS[text], self.read_form()]

        if text == FUNCTION_SHORTHAND:
            nxt = self.next_token()
            if nxt is None:
                raise ReaderIncomplete()
            if nxt.type != TokenType.LPAREN:
                raise ReaderError("Expected '(' after '#'" + self._where(nxt))
            return [FUNCTION, *self.read_sequence(TokenType.RPAREN)]

        # Reader macros attached to the following text, e.g. 'foo or ~@xs
        split = split_prefix(text)
        if split is not None:
            macro, rest = split
            # The remainder is read in place so it can consume the forms after it
            self.tokens[self.pos:self.pos] = _retokenize(rest, tok, len(text) - len(rest))
            return [macro, self.read_form()]

        if text.startswith(KEY_PREFIX) and len(text) > len(KEY_PREFIX):
            return Key(text[len(KEY_PREFIX):])

        return Symbol(text)

    @staticmethod
    def _where(tok: Token) -> str:
        if tok.position is None:
            return ""
        return f" at line {tok.position.line}, column {tok.position.column}"

    def read_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.read_form()


def _retokenize(text: str, tok: Token, offset: int) -> list[Token]:
    """Tokenize the tail of `tok` starting `offset` characters in."""
    tokens = tokenize(text)
    if tok.position is None:
        return tokens
    line, column = tok.position.line, tok.position.column + offset - 1
    return [
        replace(t, position=TokenPosition(line, column + t.position.column))
        for t in tokens
    ]


def read_one(source: str) -> SExpression:
    """Read the first form in `source`; empty input reads as nil."""
    reader = Reader(tokenize(source))
    if reader.at_end():
        return Nil
    return reader.read_form()


def read_all(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(Reader(tokenize(source)).read_all())
