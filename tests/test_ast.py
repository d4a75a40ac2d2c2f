import pytest

from vexlang.ast import (
    BinaryExpr,
    Block,
    BoolLit,
    CharLit,
    FloatLit,
    Identifier,
    IntLit,
    NodeType,
    Print,
    StringLit,
    UnaryExpr,
    VarDecl,
    format_ast,
    print_ast,
)


def test_int_literal():
    assert format_ast(IntLit(42)) == "IntLiteral: 42\n"


def test_float_literal_uses_six_decimals():
    assert format_ast(FloatLit(1.5)) == "FloatLiteral: 1.500000\n"


def test_bool_literal_printed_as_number():
    assert format_ast(BoolLit(True)) == "BoolLiteral: 1\n"


def test_char_string_identifier():
    assert format_ast(CharLit("a")) == "CharLiteral: 'a'\n"
    assert format_ast(StringLit("hi")) == "StringLiteral: hi\n"
    assert format_ast(Identifier("x")) == "Identifier: x\n"


def test_none_renders_nothing():
    assert format_ast(None) == ""
    assert format_ast(None, 3) == ""


@pytest.mark.parametrize("indent", [0, 1, 4])
def test_indent_prefix(indent):
    text = format_ast(Identifier("y"), indent)
    assert text.startswith("  " * indent)
    assert text[2 * indent:] == format_ast(Identifier("y"))


def test_binary_children_indented():
    left, right = IntLit(1), Identifier("z")
    text = format_ast(BinaryExpr("+", left, right))
    assert text == "BinaryOp: '+'\n" + format_ast(left, 1) + format_ast(right, 1)


def test_unary_child_indented():
    operand = BoolLit(False)
    text = format_ast(UnaryExpr("!", operand), 2)
    lines = text.splitlines()
    assert lines[0] == "    UnaryExpr: '!'"
    assert lines[1] == format_ast(operand, 3).rstrip("\n")


def test_var_decl_without_expr_has_no_newline():
    text = format_ast(VarDecl("x"))
    assert text == "VarDecl: Type: <inferred>, Identifier: x"


def test_var_decl_with_expr():
    expr = IntLit(7)
    text = format_ast(VarDecl("x", "int", expr))
    assert text == "VarDecl: Type: int, Identifier: x =\n" + format_ast(expr, 1)


def test_block_lists_statements():
    stmts = [IntLit(1), Identifier("a")]
    text = format_ast(Block(stmts))
    assert text.splitlines()[0] == "Block:"
    assert text == "Block:\n" + "".join(format_ast(s, 1) for s in stmts)


def test_print_node_layout():
    value = StringLit("s")
    text = format_ast(Print(value, "string"), 1)
    lines = text.splitlines()
    assert lines[0] == "  Print:"
    assert lines[1] == "    Type: string"
    assert lines[2] == format_ast(value, 3).rstrip("\n")


def test_node_types():
    assert IntLit(0).node_type is NodeType.INT_LIT
    assert VarDecl("v").node_type is NodeType.VAR_DECL
    assert Block().node_type is NodeType.BLOCK
    assert Block().statements == []


def test_print_ast_matches_format(capsys):
    tree = Block([VarDecl("x", None, BinaryExpr("*", IntLit(2), IntLit(3)))])
    print_ast(tree, 1)
    assert capsys.readouterr().out == format_ast(tree, 1)