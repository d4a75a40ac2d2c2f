"""Static type checking of Vex syntax trees."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from .ast import (
    BinaryExpr,
    Block,
    BoolLit,
    CharLit,
    FloatLit,
    Identifier,
    IntLit,
    Node,
    StringLit,
    VarDecl,
)


class TypeKind(enum.Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    CHAR = "char"
    STRING = "string"
    ERROR = "<error>"


class VexTypeError(Exception):
    """A program failed type checking."""


class UndefinedIdentifierError(VexTypeError):
    """An identifier was used without a binding in scope."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Undefined identifier: {name}")
        self.name = name


_ANNOTATIONS = {
    "int": TypeKind.INT,
    "float": TypeKind.FLOAT,
    "bool": TypeKind.BOOL,
    "char": TypeKind.CHAR,
    "string": TypeKind.STRING,
}

_INT_OPS = frozenset({"+", "-", "*", "/"})
_FLOAT_OPS = frozenset({"+.", "-.", "*.", "/."})
_COMPARISON_OPS = frozenset({"==", "!=", "<", "<=", ">", ">="})
_LOGICAL_OPS = frozenset({"&&", "||"})


class TypeEnv:
    """One binding in a chain of scopes; the innermost binding comes first."""

    __slots__ = ("name", "kind", "parent")

    def __init__(self, name: str, kind: TypeKind, parent: TypeEnv | None = None) -> None:
        self.name = name
        self.kind = kind
        self.parent = parent

    def __iter__(self) -> Iterator[TypeEnv]:
        frame: TypeEnv | None = self
        while frame is not None:
            yield frame
            frame = frame.parent

    def lookup(self, name: str) -> TypeKind | None:
        """Return the kind of the innermost binding of ``name``, or None."""
        return next((frame.kind for frame in self if frame.name == name), None)

    def bind(self, name: str, kind: TypeKind) -> TypeEnv:
        """Return a new environment with ``name`` bound on top of this one."""
        return TypeEnv(name, kind, self)

    def update(self, ident_node: Node, new_kind: TypeKind) -> None:
        """Give the first unresolved binding of the identifier a concrete kind."""
        if not isinstance(ident_node, Identifier):
            return
        for frame in self:
            if frame.name == ident_node.name and frame.kind is TypeKind.ERROR:
                frame.kind = new_kind
                return


def type_to_string(kind: TypeKind) -> str:
    """Return the source-level name of a type kind."""
    if isinstance(kind, TypeKind):
        return kind.value
    return "<invalid>"


def lookup_type(env: TypeEnv | None, name: str) -> TypeKind | None:
    return env.lookup(name) if env is not None else None


def add_binding(env: TypeEnv | None, name: str, kind: TypeKind) -> TypeEnv:
    return TypeEnv(name, kind, env)


def update_binding(env: TypeEnv | None, ident_node: Node, new_kind: TypeKind) -> None:
    if env is not None:
        env.update(ident_node, new_kind)


def typecheck_binary(op: str, left: TypeKind, right: TypeKind) -> TypeKind:
    """Return the result type of applying ``op`` to operands of these types."""
    if op in _INT_OPS:
        if left is TypeKind.INT and right is TypeKind.INT:
            return TypeKind.INT
        raise VexTypeError("Operands to '+' (int ops) must both be int")
    if op in _FLOAT_OPS:
        if left is TypeKind.FLOAT and right is TypeKind.FLOAT:
            return TypeKind.FLOAT
        raise VexTypeError("Operands to '+.' (float ops) must both be float")
    if op in _COMPARISON_OPS:
        if left is right and left in (TypeKind.INT, TypeKind.FLOAT):
            return TypeKind.BOOL
        raise VexTypeError(
            "Comparison operators require both operands to be int or float"
        )
    if op in _LOGICAL_OPS:
        if left is TypeKind.BOOL and right is TypeKind.BOOL:
            return TypeKind.BOOL
        raise VexTypeError("Logical operators require both operands to be bool")
    raise VexTypeError("Unsupported binary operator")


def _annotation(type_name: str, message: str) -> TypeKind:
    try:
        return _ANNOTATIONS[type_name]
    except KeyError:
        raise VexTypeError(message) from None


def typecheck_expr_with_env(node: Node | None, env: TypeEnv | None) -> TypeKind:
    """Return the type of ``node`` in the environment ``env``."""
    match node:
        case IntLit():
            return TypeKind.INT
        case FloatLit():
            return TypeKind.FLOAT
        case BoolLit():
            return TypeKind.BOOL
        case CharLit():
            return TypeKind.CHAR
        case StringLit():
            return TypeKind.STRING
        case BinaryExpr(op=op, left=left, right=right):
            return typecheck_binary(
                op,
                typecheck_expr_with_env(left, env),
                typecheck_expr_with_env(right, env),
            )
        case Identifier(name=name):
            kind = lookup_type(env, name)
            if kind is None:
                raise UndefinedIdentifierError(name)
            return kind
        case VarDecl(type_name=type_name, expr=expr):
            if expr is None:
                raise VexTypeError("Missing initializer in val binding")
            value_kind = typecheck_expr_with_env(expr, env)
            if not type_name:
                return value_kind
            annotated = _annotation(type_name, "Unknown type annotation in val binding")
            if annotated is not value_kind:
                raise VexTypeError("Type mismatch in val binding")
            return annotated
        case Block(statements=statements):
            block_env = env
            last = TypeKind.ERROR
            for statement in statements:
                last = typecheck_expr_with_env(statement, block_env)
                if isinstance(statement, VarDecl):
                    bound = last
                    if statement.type_name:
                        bound = _annotation(
                            statement.type_name,
                            "Unknown type annotation in block val binding",
                        )
                    block_env = add_binding(block_env, statement.name, bound)
            return last
    raise VexTypeError("Unsupported expression type")


def typecheck(node: Node | None) -> TypeKind:
    """Type-check a whole program in an empty environment."""
    return typecheck_expr_with_env(node, None)