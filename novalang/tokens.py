"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of token in Nova source."""

    IDENTIFIER = enum.auto()
    NUMBER = enum.auto()
    PLUS = enum.auto()
    STAR = enum.auto()
    ASSIGN = enum.auto()
    PRINT = enum.auto()
    SEMICOLON = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    EOF = enum.auto()
    INVALID = enum.auto()


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind and the 1-based position where it starts."""

    type: TokenType
    value: str
    line: int
    col: int