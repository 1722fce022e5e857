from slisp.reader.lexer import Token, TokenPosition, TokenType, Tokenizer, tokenize
from slisp.reader.parser import Reader, read_all, read_one
