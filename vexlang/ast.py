"""Syntax tree nodes for Vex programs and a printer for them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


class NodeType(enum.Enum):
    """The kinds of node a Vex syntax tree is built from."""

    INT_LIT = enum.auto()
    FLOAT_LIT = enum.auto()
    STRING_LIT = enum.auto()
    CHAR_LIT = enum.auto()
    BOOL_LIT = enum.auto()
    IDENTIFIER = enum.auto()
    VAR_DECL = enum.auto()
    UNARY_EXPR = enum.auto()
    BLOCK = enum.auto()
    PRINT = enum.auto()
    BINARY_EXPR = enum.auto()


class Node:
    """Base class of every syntax tree node."""

    node_type: ClassVar[NodeType]


@dataclass
class IntLit(Node):
    node_type: ClassVar[NodeType] = NodeType.INT_LIT
    value: int


@dataclass
class FloatLit(Node):
    node_type: ClassVar[NodeType] = NodeType.FLOAT_LIT
    value: float


@dataclass
class StringLit(Node):
    node_type: ClassVar[NodeType] = NodeType.STRING_LIT
    value: str


@dataclass
class CharLit(Node):
    node_type: ClassVar[NodeType] = NodeType.CHAR_LIT
    value: str


@dataclass
class BoolLit(Node):
    node_type: ClassVar[NodeType] = NodeType.BOOL_LIT
    value: bool


@dataclass
class Identifier(Node):
    node_type: ClassVar[NodeType] = NodeType.IDENTIFIER
    name: str


@dataclass
class VarDecl(Node):
    """A ``val`` binding; ``type_name`` is None when the type is inferred."""

    node_type: ClassVar[NodeType] = NodeType.VAR_DECL
    name: str
    type_name: str | None = None
    expr: Node | None = None


@dataclass
class UnaryExpr(Node):
    node_type: ClassVar[NodeType] = NodeType.UNARY_EXPR
    op: str
    operand: Node


@dataclass
class BinaryExpr(Node):
    node_type: ClassVar[NodeType] = NodeType.BINARY_EXPR
    op: str
    left: Node
    right: Node


@dataclass
class Block(Node):
    node_type: ClassVar[NodeType] = NodeType.BLOCK
    statements: list[Node] = field(default_factory=list)


@dataclass
class Print(Node):
    node_type: ClassVar[NodeType] = NodeType.PRINT
    value: Node
    type_name: str


def _render(node: Node | None, indent: int, out: list[str]) -> None:
    if node is None:
        return
    pad = "  " * indent
    match node:
        case IntLit(value=value):
            out.append(f"{pad}IntLiteral: {int(value)}\n")
        case FloatLit(value=value):
            out.append(f"{pad}FloatLiteral: {float(value):f}\n")
        case CharLit(value=value):
            out.append(f"{pad}CharLiteral: '{value}'\n")
        case StringLit(value=value):
            out.append(f"{pad}StringLiteral: {value}\n")
        case BoolLit(value=value):
            out.append(f"{pad}BoolLiteral: {int(value)}\n")
        case Identifier(name=name):
            out.append(f"{pad}Identifier: {name}\n")
        case BinaryExpr(op=op, left=left, right=right):
            out.append(f"{pad}BinaryOp: '{op}'\n")
            _render(left, indent + 1, out)
            _render(right, indent + 1, out)
        case UnaryExpr(op=op, operand=operand):
            out.append(f"{pad}UnaryExpr: '{op}'\n")
            _render(operand, indent + 1, out)
        case VarDecl(name=name, type_name=type_name, expr=expr):
            shown = type_name if type_name else "<inferred>"
            out.append(f"{pad}VarDecl: Type: {shown}, Identifier: {name}")
            if expr is not None:
                out.append(" =\n")
                _render(expr, indent + 1, out)
        case Block(statements=statements):
            out.append(f"{pad}Block:\n")
            for statement in statements:
                _render(statement, indent + 1, out)
        case Print(value=value, type_name=type_name):
            out.append(f"{pad}Print:\n")
            out.append(f"{'  ' * (indent + 1)}Type: {type_name}\n")
            _render(value, indent + 2, out)


def format_ast(node: Node | None, indent: int = 0) -> str:
    """Return the indented text dump of ``node`` and its children."""
    parts: list[str] = []
    _render(node, indent, parts)
    return "".join(parts)


def print_ast(node: Node | None, indent: int = 0) -> None:
    """Write the text dump of ``node`` to standard output."""
    print(format_ast(node, indent), end="")