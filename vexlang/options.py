"""Command-line informational options: help, version and system details."""

from __future__ import annotations

import platform
import sys
from typing import TextIO

MAJOR_VERSION = 0
MINOR_VERSION = 1
PATCH_VERSION = 0

_VERSION = f"{MAJOR_VERSION}.{MINOR_VERSION}.{PATCH_VERSION}"


def help_menu() -> str:
    return (
        "Usage: vex [options] file...\n"
        "Options:\n"
        " --help           Displays this information.\n"
        " --help={optimizers|warnings|target}[,...].\n\n"
        " --version        Display compiler version information.\n\n"
        " -save-temps      Do not delete intermediate files.\n\n"
        " -S               Compile only; do not assemble or link.\n"
        " -c               Compile and assemble, but do not link.\n"
        " -o <file>        Place the output into <file>.\n\n"
        "Report bugs to the project's issue tracker."
    )


def optimizers_help() -> str:
    return (
        "The following options control optimizations:\n"
        " -O<number>        Set optimization level to <number>\n"
    )


def target_help() -> str:
    return "The following options are target specific:\n"


def warnings_help() -> str:
    return "The following options control compiler warning messages:\n"


def system_info() -> str:
    """Return the operating system name, or "Unknown" if it cannot be found."""
    return platform.system() or "Unknown"


def version_string() -> str:
    return f"vex version {_VERSION} ({system_info()} {_VERSION})"


_HELP_TOPICS = {
    "optimizers": optimizers_help,
    "target": target_help,
    "warnings": warnings_help,
}


def handle_cli_option(
    arg: str, out: TextIO | None = None, err: TextIO | None = None
) -> bool:
    """Handle an informational option; return True if the program should stop."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    if arg in ("--version", "-v"):
        out.write(version_string() + "\n")
        return True
    if arg in ("--help", "-h"):
        out.write(help_menu() + "\n")
        return True
    if arg.startswith("--help="):
        topic = arg[len("--help="):]
        render = _HELP_TOPICS.get(topic)
        if render is None:
            err.write(f"unrecognized argument to '--help=' option: '{topic}'\n")
        else:
            out.write(render() + "\n")
        return True
    return False