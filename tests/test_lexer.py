import pytest

from novalang.lexer import Lexer, tokenize
from novalang.tokens import Token, TokenType


def kinds(source):
    return [t.type for t in tokenize(source)]


def test_assignment_statement_kinds():
    assert kinds("x = (1 + y) * 2;") == [
        TokenType.IDENTIFIER,
        TokenType.ASSIGN,
        TokenType.LPAREN,
        TokenType.NUMBER,
        TokenType.PLUS,
        TokenType.IDENTIFIER,
        TokenType.RPAREN,
        TokenType.STAR,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_values_are_the_lexemes():
    tokens = tokenize("total = 42 * rate;")
    assert [t.value for t in tokens] == ["total", "=", "42", "*", "rate", ";", ""]


def test_empty_source_gives_eof_at_start():
    assert tokenize("") == [Token(TokenType.EOF, "", 1, 1)]


def test_whitespace_only_source_gives_single_eof():
    tokens = tokenize(" \t\v\f\r ")
    assert [t.type for t in tokens] == [TokenType.EOF]


@pytest.mark.parametrize(
    "word, kind",
    [
        ("print", TokenType.PRINT),
        ("printer", TokenType.IDENTIFIER),
        ("Print", TokenType.IDENTIFIER),
        ("abc123", TokenType.IDENTIFIER),
    ],
)
def test_keywords_and_identifiers(word, kind):
    tokens = tokenize(word)
    assert tokens[0] == Token(kind, word, 1, 1)
    assert tokens[1].type is TokenType.EOF


def test_number_then_letters_split():
    tokens = tokenize("12ab")
    assert [(t.type, t.value) for t in tokens[:-1]] == [
        (TokenType.NUMBER, "12"),
        (TokenType.IDENTIFIER, "ab"),
    ]


@pytest.mark.parametrize("char", ["_", "-", "/", "é", "#"])
def test_unknown_characters_are_invalid_tokens(char):
    tokens = tokenize(f"a{char}b")
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.IDENTIFIER, "a"),
        (TokenType.INVALID, char),
        (TokenType.IDENTIFIER, "b"),
        (TokenType.EOF, ""),
    ]


def test_nul_character_ends_input():
    tokens = tokenize("x\0y")
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.IDENTIFIER, "x"),
        (TokenType.EOF, ""),
    ]


def test_columns_locate_lexemes_on_one_line():
    source = "alpha =  beta*(7+gamma) ;"
    for token in tokenize(source)[:-1]:
        start = token.col - 1
        assert token.line == 1
        assert source[start : start + len(token.value)] == token.value


def test_lines_and_columns_locate_lexemes_across_lines():
    source = "a = 1;\n  print a\t+ 22;\n\nb=(a);"
    lines = source.split("\n")
    for token in tokenize(source)[:-1]:
        text = lines[token.line - 1]
        start = token.col - 1
        assert text[start : start + len(token.value)] == token.value


def test_eof_after_trailing_newline_starts_new_line():
    source = "x = 1;\nprint x;\n"
    eof = tokenize(source)[-1]
    assert eof.type is TokenType.EOF
    assert eof.line == source.count("\n") + 1
    assert eof.col == 1


def test_exactly_one_eof_at_end():
    tokens = tokenize("print 1; print 2;")
    assert [t.type for t in tokens].count(TokenType.EOF) == 1
    assert tokens[-1].type is TokenType.EOF


def test_module_function_matches_lexer_class():
    source = "v = 3 * (v + 4);"
    assert tokenize(source) == Lexer(source).tokenize()