"""Recursive-descent parser from tokens to a list of statements."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import AssignNode, BinaryOpNode, Expression, IdentifierNode, NumberNode, PrintNode, Statement
from .tokens import Token, TokenType

_INT_MAX = 2**31 - 1


class ParseError(Exception):
    """Raised when the tokens do not form a valid program."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


class Parser:
    """Parses statements of the form ``print expr;`` and ``name = expr;``.

    Grammar::

        expression := term ("+" term)*
        term       := factor ("*" factor)*
        factor     := NUMBER | IDENTIFIER | "(" expression ")"
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.EOF:
            last = self._tokens[-1] if self._tokens else None
            line = last.line if last else 1
            col = last.col + len(last.value) if last else 1
            self._tokens.append(Token(TokenType.EOF, "", line, col))
        self._pos = 0

    def parse(self) -> list[Statement]:
        """Parse statements until the end of input."""
        statements = []
        while self._peek().type is not TokenType.EOF:
            statements.append(self._statement())
        return statements

    def _peek(self) -> Token:
        return self._tokens[min(self._pos, len(self._tokens) - 1)]

    def _advance(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def _match(self, kind: TokenType) -> bool:
        if self._peek().type is kind:
            self._advance()
            return True
        return False

    def _expect(self, kind: TokenType, message: str) -> None:
        if not self._match(kind):
            raise ParseError(message, self._peek())

    def _statement(self) -> Statement:
        token = self._peek()
        if token.type is TokenType.PRINT:
            self._advance()
            expr = self._expression()
            self._expect(TokenType.SEMICOLON, "Expected ';'")
            return PrintNode(expr)
        if token.type is TokenType.IDENTIFIER:
            name = self._advance().value
            self._expect(TokenType.ASSIGN, "Expected '='")
            expr = self._expression()
            self._expect(TokenType.SEMICOLON, "Expected ';'")
            return AssignNode(name, expr)
        raise ParseError("Unknown statement", token)

    def _expression(self) -> Expression:
        node = self._term()
        while self._match(TokenType.PLUS):
            node = BinaryOpNode("+", node, self._term())
        return node

    def _term(self) -> Expression:
        node = self._factor()
        while self._match(TokenType.STAR):
            node = BinaryOpNode("*", node, self._factor())
        return node

    def _factor(self) -> Expression:
        token = self._peek()
        if token.type is TokenType.NUMBER:
            self._advance()
            value = int(token.value)
            if value > _INT_MAX:
                raise ParseError(f"Number out of range: {token.value}", token)
            return NumberNode(value)
        if token.type is TokenType.IDENTIFIER:
            self._advance()
            return IdentifierNode(token.value)
        if self._match(TokenType.LPAREN):
            node = self._expression()
            self._expect(TokenType.RPAREN, "Expected ')'")
            return node
        raise ParseError("Invalid expression", token)


def parse(tokens: Iterable[Token]) -> list[Statement]:
    """Parse a token sequence into statements."""
    return Parser(tokens).parse()