import pytest
from hypothesis import given, strategies as st

from slisp.errors import LexerError, ReaderError, ReaderIncomplete
from slisp.printer import print_term
from slisp.reader.lexer import Token, TokenType, tokenize
from slisp.reader.parser import read_all, read_one
from slisp.types.nil import Nil
from slisp.types.symbol import Key, Symbol

L = Token(TokenType.LPAREN)
R = Token(TokenType.RPAREN)


def sym(name):
    return Token(TokenType.SYMBOL, name)


def integer(n):
    return Token(TokenType.INTEGER, n)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", [L, sym("+"), integer(1), integer(2), R]),
        ("-5", [integer(-5)]),
        ("-", [sym("-")]),
        ("(- 5)", [L, sym("-"), integer(5), R]),
        ("1.5", [Token(TokenType.FLOAT, 1.5)]),
        ("{:a 1}", [Token(TokenType.LBRACE), sym(":a"), integer(1), Token(TokenType.RBRACE)]),
        ("'x", [sym("'x")]),
        ("~@xs", [sym("~@xs")]),
        ("#(a)", [sym("#"), L, sym("a"), R]),
        (" ; comment\n a b", [sym("a"), sym("b")]),
        ("a;b\nc", [sym("a"), sym("c")]),
        ("string=", [sym("string=")]),
        ("empty?", [sym("empty?")]),
    ],
)
def test_tokenize_basic(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        (r'"hello"', "hello"),
        (r'"a\nb"', "a\nb"),
        (r'"tab\there"', "tab\there"),
        (r'"say \"hi\""', 'say "hi"'),
        (r'"back\\slash"', "back\\slash"),
        (r'"\x41\x62"', "Ab"),
        ('"multi\nline"', "multi\nline"),
    ],
)
def test_tokenize_strings(source, expected):
    assert tokenize(source) == [Token(TokenType.STRING, expected)]


def test_token_positions():
    tokens = tokenize("(a\n  bc)")
    assert [(t.position.line, t.position.column) for t in tokens] == [(1, 1), (1, 2), (2, 3), (2, 5)]


@pytest.mark.parametrize(
    "source,diagnostic",
    [
        ('(a "abc', 'Unterminated string at line 1, column 4:\n(a "abc\n   ^'),
        (r'"a\q"', "Unknown escape character '\\q' at line 1, column 3:\n\"a\\q\"\n  ^"),
        (r'"\xZZ"', "Invalid hex escape '\\xZZ' at line 1, column 2:\n\"\\xZZ\"\n ^"),
        ("(a\n 1.2.3)", "1.2.3 is not a valid floating point number. at line 2, column 2:\n 1.2.3)\n ^"),
        ("a \x01", "Unrecognized character '\x01' at line 1, column 3:\na \x01\n  ^"),
    ],
)
def test_lexer_error_diagnostics(source, diagnostic):
    with pytest.raises(LexerError) as info:
        tokenize(source)
    assert str(info.value) == diagnostic
    assert info.value.diagnostic() == diagnostic


def test_lexer_error_fields():
    with pytest.raises(LexerError) as info:
        tokenize('(def x\n  "oops)')
    err = info.value
    assert (err.line, err.column) == (2, 3)
    assert err.source_line == '  "oops)'


def test_read_nested_list():
    assert read_one('(a (b 1) "s")') == [Symbol("a"), [Symbol("b"), 1], "s"]


@pytest.mark.parametrize(
    "sugar,expanded",
    [
        ("'x", "(quote x)"),
        ("' x", "(quote x)"),
        ("`(a ~b)", "(quasiquote (a (unquote b)))"),
        ("`(a ~@b)", "(quasiquote (a (splice-unquote b)))"),
        ("'(1 2)", "(quote (1 2))"),
        ("''x", "(quote (quote x))"),
        ("#((x) x)", "(function (x) x)"),
        ("`~(+ 1 2)", "(quasiquote (unquote (+ 1 2)))"),
        ("''(a)", "(quote (quote (a)))"),
        ("'#((x) x)", "(quote (function (x) x))"),
        ("`(a ~'(b c))", "(quasiquote (a (unquote (quote (b c)))))"),
        ("`(~@'(1 2) 3)", "(quasiquote ((splice-unquote (quote (1 2))) 3))"),
        ("{:a 1 :b 2}", "(hash-map :a 1 :b 2)"),
    ],
)
def test_reader_macros(sugar, expanded):
    assert read_one(sugar) == read_one(expanded)


def test_nested_prefix_reads_the_following_form():
    assert read_all("''(a) b") == [
        [Symbol("quote"), [Symbol("quote"), [Symbol("a")]]],
        Symbol("b"),
    ]
    with pytest.raises(ReaderError, match="column 4"):
        read_one("'# x")


def test_prefix_applies_to_literals():
    assert read_one("'5") == [Symbol("quote"), 5]
    assert read_one("'\"s\"") == [Symbol("quote"), "s"]


def test_keys_and_symbols():
    assert read_one(":foo") == Key("foo")
    assert read_one(":") == Symbol(":")
    assert read_one("foo/bar") == Symbol("foo/bar")
    assert read_one("/") == Symbol("/")


def test_read_empty_input_is_nil():
    assert read_one("") is Nil
    assert read_one("  ; only a comment") is Nil
    assert read_all("") == []


def test_read_all():
    assert read_all("1 (a) \"s\"") == [1, [Symbol("a")], "s"]


@pytest.mark.parametrize("source", ["(a b", "(a (b c)", "'", "(", "{:a 1", "#", "'#", "`~"])
def test_unterminated_forms_are_incomplete(source):
    with pytest.raises(ReaderIncomplete):
        read_one(source)


@pytest.mark.parametrize("source", [")", "(a))", "}", "(a }", "# x"])
def test_unexpected_closers(source):
    with pytest.raises(ReaderError):
        read_all(source)


def test_incomplete_is_not_a_lexer_error():
    with pytest.raises(ReaderIncomplete) as info:
        read_one("(a b")
    assert not isinstance(info.value, LexerError)
    assert str(info.value) == "expected ')'"


@given(st.integers())
def test_integers_tokenize_to_one_token(n):
    assert tokenize(str(n)) == [integer(n)]


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_printed_floats_read_back(f):
    assert read_one(print_term(f)) == f


@given(st.from_regex(r"[a-z][a-z0-9\-?!*]{0,10}", fullmatch=True))
def test_symbols_read_back(name):
    assert read_one(name) == Symbol(name)


@given(st.lists(st.integers(), max_size=20))
def test_integer_lists_read_back(xs):
    assert read_one("(" + " ".join(map(str, xs)) + ")") == xs


@given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=30))
def test_escaped_strings_read_back(s):
    assert read_one(print_term(s)) == s
