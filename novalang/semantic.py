"""Checks that every variable is assigned before it is read."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import AssignNode, BinaryOpNode, IdentifierNode, Node, PrintNode


class SemanticError(Exception):
    """Raised when a program reads a variable that was never assigned."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class SemanticAnalyzer:
    """Tracks defined variables across the statements it is given.

    Definitions persist between calls to :meth:`analyze`.
    """

    def __init__(self) -> None:
        self._defined: set[str] = set()

    def analyze(self, nodes: Iterable[Node]) -> frozenset[str]:
        """Check the statements in order and return the names defined so far."""
        for node in nodes:
            self._check(node)
        return frozenset(self._defined)

    def _check(self, node: Node) -> None:
        if isinstance(node, AssignNode):
            # The right-hand side is checked before the name becomes defined.
            self._check(node.expr)
            self._defined.add(node.var)
        elif isinstance(node, PrintNode):
            self._check(node.expr)
        elif isinstance(node, BinaryOpNode):
            self._check(node.left)
            self._check(node.right)
        elif isinstance(node, IdentifierNode):
            if node.name not in self._defined:
                raise SemanticError(node.name)


def analyze(nodes: Iterable[Node]) -> frozenset[str]:
    """Check a whole program and return the names it defines."""
    return SemanticAnalyzer().analyze(nodes)