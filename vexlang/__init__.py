"""Vex language front-end pieces: syntax tree, type checker, diagnostics and informational options."""

__version__ = "0.1.0"
__all__ = ["ast", "typechecker", "diagnostics", "options"]