"""Turns Nova source text into tokens."""

from __future__ import annotations

import string
from collections.abc import Iterator

from .tokens import Token, TokenType

_END = "\0"
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = _DIGITS | _LETTERS

_SINGLE_CHAR = {
    "+": TokenType.PLUS,
    "*": TokenType.STAR,
    "=": TokenType.ASSIGN,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_KEYWORDS = {"print": TokenType.PRINT}


class Lexer:
    """Scans source text, tracking line and column as it goes.

    A NUL character ends the input just as the end of the text does.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    def tokenize(self) -> list[Token]:
        """Return every remaining token, ending with an EOF token."""
        return list(self._scan())

    def _scan(self) -> Iterator[Token]:
        while True:
            token = self._next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return _END

    def _advance(self) -> str:
        c = self._peek()
        self._pos += 1
        if c == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return c

    def _skip_whitespace(self) -> None:
        while self._peek() in _WHITESPACE:
            self._advance()

    def _take_while(self, allowed: frozenset[str]) -> str:
        chars = []
        while self._peek() in allowed:
            chars.append(self._advance())
        return "".join(chars)

    def _next_token(self) -> Token:
        self._skip_whitespace()
        line, col = self._line, self._col
        c = self._peek()

        if c in _DIGITS:
            return Token(TokenType.NUMBER, self._take_while(_DIGITS), line, col)

        if c in _LETTERS:
            word = self._take_while(_ALNUM)
            kind = _KEYWORDS.get(word, TokenType.IDENTIFIER)
            return Token(kind, word, line, col)

        if c == _END:
            return Token(TokenType.EOF, "", line, col)

        self._advance()
        return Token(_SINGLE_CHAR.get(c, TokenType.INVALID), c, line, col)


def tokenize(source: str) -> list[Token]:
    """Tokenize a whole source text."""
    return Lexer(source).tokenize()