"""Lowers the syntax tree to a flat three-address instruction list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .nodes import AssignNode, BinaryOpNode, IdentifierNode, Node, NumberNode, PrintNode

_BINARY_OPS = {"+": "add"}


@dataclass(frozen=True)
class IRInstruction:
    """One instruction: ``op`` applied to ``arg1`` and ``arg2`` into ``result``."""

    op: str
    arg1: str = ""
    arg2: str = ""
    result: str = ""


class IRGenerator:
    """Generates IR; temporary names keep counting across calls."""

    def __init__(self) -> None:
        self._temp_count = 0
        self._instructions: list[IRInstruction] = []

    def generate(self, ast: Iterable[Node]) -> list[IRInstruction]:
        """Return the instructions for the given statements."""
        self._instructions = []
        for node in ast:
            if isinstance(node, AssignNode):
                value = self._expr(node.expr)
                self._emit(IRInstruction("store", value, "", node.var))
            elif isinstance(node, PrintNode):
                value = self._expr(node.expr)
                self._emit(IRInstruction("print", value))
        return list(self._instructions)

    def _new_temp(self) -> str:
        name = f"t{self._temp_count}"
        self._temp_count += 1
        return name

    def _emit(self, instruction: IRInstruction) -> None:
        self._instructions.append(instruction)

    def _expr(self, node: Node) -> str:
        if isinstance(node, NumberNode):
            temp = self._new_temp()
            self._emit(IRInstruction("load_const", str(node.value), "", temp))
            return temp
        if isinstance(node, IdentifierNode):
            return node.name
        if isinstance(node, BinaryOpNode):
            lhs = self._expr(node.left)
            rhs = self._expr(node.right)
            result = self._new_temp()
            self._emit(IRInstruction(_BINARY_OPS.get(node.op, "mul"), lhs, rhs, result))
            return result
        return ""