"""Syntax tree nodes for Nova programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberNode:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class IdentifierNode:
    """A reference to a variable."""

    name: str


@dataclass(frozen=True)
class BinaryOpNode:
    """A binary operation; ``op`` is ``"+"`` or ``"*"``."""

    op: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class AssignNode:
    """``var = expr;``"""

    var: str
    expr: Expression


@dataclass(frozen=True)
class PrintNode:
    """``print expr;``"""

    expr: Expression


Expression = Union[NumberNode, IdentifierNode, BinaryOpNode]
Statement = Union[AssignNode, PrintNode]
Node = Union[Expression, Statement]