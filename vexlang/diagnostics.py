"""Coloured compiler error reports pointing at a source location."""

from __future__ import annotations

import enum
import sys


class Color(enum.Enum):
    """ANSI escape sequences used in diagnostics."""

    LIGHT_GREEN = "\x1b[1;32m"
    LIGHT_YELLOW = "\x1b[1;33m"
    LIGHT_CYAN = "\x1b[1;36m"
    LIGHT_MAGENTA = "\x1b[1;35m"
    LIGHT_RED = "\x1b[38;2;217;114;131m"
    LIGHT_BLUE = "\x1b[1;34m"
    GREEN = "\x1b[38;2;112;191;177m"
    YELLOW = "\x1b[38;2;200;159;101m"
    CYAN = "\x1b[0;36m"
    WHITE = "\x1b[0;37m"
    MAGENTA = "\x1b[38;2;170;142;212m"
    RED = "\x1b[0;31m"
    BLUE = "\x1b[38;2;118;148;212m"
    BLACK = "\x1b[1;30m"
    GRAY = "\x1b[38;5;7m"
    RESET = "\x1b[0m"


class CompilationError(Exception):
    """Compilation stopped on an error; ``report`` holds the rendered text."""

    exit_code = 1

    def __init__(self, message: str, report: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.report = report


def source_line(path: str, line_number: int) -> str | None:
    """Return line ``line_number`` (1-based) of ``path`` with its newline, or None."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        for number, line in enumerate(handle, start=1):
            if number == line_number:
                return line
    return None


def format_error(message: str, filename: str, line: int, column: int) -> str:
    """Render an error report for ``filename`` at ``line``:``column``."""
    blue, gray = Color.BLUE.value, Color.GRAY.value
    red = Color.LIGHT_RED.value
    parts = [
        f"{red}error{gray}: {message}\n",
        f"{blue}  --> {gray}{filename}:{line}:{column}\n",
    ]
    try:
        text = source_line(filename, line)
    except OSError:
        text = None
    if text is not None:
        parts.append(f"{blue}   |\n{Color.WHITE.value}")
        parts.append(f"{Color.MAGENTA.value} {line} {blue}| {gray}   {text}")
    parts.append(f"{blue}\n   |{' ' * (column + 2)}{red} ^\n")
    parts.append(f"{blue}   |\n")
    parts.append(f"{gray}Compilation Failed. Exited at code: 1\n")
    return "".join(parts)


def report_error(message: str, filename: str, line: int, column: int) -> None:
    """Print an error report to standard output and stop compilation."""
    report = format_error(message, filename, line, column)
    sys.stdout.write(report)
    raise CompilationError(message, report)