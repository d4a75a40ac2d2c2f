# vexlang

Building blocks for a front end of the Vex language, as a Python
library. It has syntax-tree nodes and a tree printer, and a type checker
for Vex expressions and `val` bindings. It also renders coloured error
reports that point at a source column, and produces the text of the
compiler's informational options.

It needs nothing beyond the standard library, and Python 3.10 or later.

## Syntax tree: `vexlang.ast`

`NodeType` lists the node kinds. Each kind has a dataclass derived from
`Node`, and each class carries its kind in the class attribute
`node_type`:

| Class        | Fields                                   |
|--------------|------------------------------------------|
| `IntLit`     | `value: int`                             |
| `FloatLit`   | `value: float`                           |
| `StringLit`  | `value: str`                             |
| `CharLit`    | `value: str`                             |
| `BoolLit`    | `value: bool`                            |
| `Identifier` | `name: str`                              |
| `VarDecl`    | `name`, `type_name` (None = inferred), `expr` |
| `UnaryExpr`  | `op`, `operand`                          |
| `BinaryExpr` | `op`, `left`, `right`                    |
| `Block`      | `statements: list[Node]`                 |
| `Print`      | `value`, `type_name`                     |

`format_ast(node, indent=0)` renders a tree as indented text, two spaces
per level. `print_ast(node, indent=0)` writes the same text to standard
output. `None` renders as an empty string.

```python
from vexlang.ast import BinaryExpr, IntLit, format_ast

print(format_ast(BinaryExpr("+", IntLit(1), IntLit(2))), end="")
# BinaryOp: '+'
#   IntLiteral: 1
#   IntLiteral: 2
```

## Type checking: `vexlang.typechecker`

`typecheck(node)` checks a tree in an empty environment and returns the
`TypeKind` of its value (`INT`, `FLOAT`, `BOOL`, `CHAR`, `STRING`).
`typecheck_expr_with_env(node, env)` does the same in a given
environment.

- `+ - * /` take two ints and give an int. `+. -. *. /.` take two floats
  and give a float.
- `== != < <= > >=` take two ints or two floats and give a bool.
- `&&` and `||` take two bools and give a bool.
- A `VarDecl` needs an initializer. With an annotation (`int`, `float`,
  `bool`, `char`, `string`), the annotation must match the type of the
  value.
- A `Block` binds each `VarDecl` for the statements after it. It returns
  the type of its last statement, or `TypeKind.ERROR` when it is empty.
- `UnaryExpr` and `Print` nodes are not supported by the checker.

A failed check raises `VexTypeError`. A name with no binding raises
`UndefinedIdentifierError`, a subclass of `VexTypeError` with the name in
`.name`. `typecheck_binary(op, left, right)` checks a single operator.
`type_to_string(kind)` gives a type's name as the language writes it:
`"<error>"` for `ERROR`, and `"<invalid>"` for anything that is not a
`TypeKind`.

Environments are `TypeEnv` chains, innermost binding first:

- `bind(name, kind)` returns a new environment with one more binding.
- `lookup(name)` returns the innermost kind for a name, or `None`.
- `update(ident_node, new_kind)` gives a concrete kind to the first
  binding of that identifier that is still `ERROR`.
- Iterating a `TypeEnv` yields each frame, innermost first.

The functions `lookup_type`, `add_binding` and `update_binding` do the
same and also accept `None` as the empty environment.

```python
from vexlang.ast import Block, Identifier, IntLit, VarDecl, BinaryExpr
from vexlang.typechecker import typecheck

program = Block([
    VarDecl("x", "int", IntLit(3)),
    BinaryExpr("<", Identifier("x"), IntLit(4)),
])
print(typecheck(program))  # TypeKind.BOOL
```

## Diagnostics: `vexlang.diagnostics`

`format_error(message, filename, line, column)` builds the coloured
report. It holds the message and the `file:line:column` location. Next
comes the source line, read from `filename` when it can be read, then a
caret under the column and the closing "Compilation Failed" line.
`report_error(...)` writes that report to standard output. It then
raises `CompilationError`, which carries `.message`, `.report` and
`exit_code = 1`. `source_line(path, line_number)` returns one line of a
file (1-based, with its newline) or `None` past the end. `Color` holds
the ANSI colour sequences.

## Options: `vexlang.options`

`handle_cli_option(arg, out=None, err=None)` handles these arguments:

- `--version` / `-v`
- `--help` / `-h`
- `--help=optimizers`, `--help=target` and `--help=warnings`

It writes the text to `out`, which defaults to standard output. An
unknown help topic gets an error message on `err`, which defaults to
standard error. It returns `True` when the argument was one of these
options, and `False` otherwise. The texts are also available
directly:

- `help_menu()`, `optimizers_help()`, `target_help()` and
  `warnings_help()`
- `version_string()`, for example `vex version 0.1.0 (Linux 0.1.0)`
- `system_info()`, the operating system name, or `"Unknown"`

```python
import sys
from vexlang.options import handle_cli_option, version_string

print(version_string())
handle_cli_option("--help=optimizers", sys.stdout, sys.stderr)
```

## What it does not do

There is no lexer or parser: trees are built in Python from the node
classes. There is also no command-line program that reads a Vex source
file, and no code generation. The options module only produces the
informational texts. It does not act on `-S`, `-c`, `-o` or `-O`.