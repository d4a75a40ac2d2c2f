import pytest

from vexlang.diagnostics import (
    Color,
    CompilationError,
    format_error,
    report_error,
    source_line,
)


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "main.vex"
    path.write_text("val x = 1\nval y = x +. 2\nprint y\n", encoding="utf-8")
    return str(path)


def test_format_error_uses_escape_codes(program):
    text = format_error("bad operands", program, 2, 5)
    assert f"\x1b[38;2;118;148;212m  --> \x1b[38;5;7m{program}:2:5\n" in text
    assert "\x1b[38;5;7mCompilation Failed. Exited at code: 1\n" in text
    assert Color.BLUE.value == "\x1b[38;2;118;148;212m"
    assert Color.GRAY.value == "\x1b[38;5;7m"


def test_source_line(program):
    assert source_line(program, 2) == "val y = x +. 2\n"
    assert source_line(program, 1).startswith("val x")


def test_source_line_out_of_range(program):
    assert source_line(program, 99) is None
    assert source_line(program, 0) is None


def test_format_error_contents(program):
    text = format_error("bad operands", program, 2, 5)
    assert f"{Color.LIGHT_RED.value}error{Color.GRAY.value}: bad operands\n" in text
    assert f"{program}:2:5\n" in text
    assert "val y = x +. 2\n" in text
    assert text.endswith("Compilation Failed. Exited at code: 1\n")


@pytest.mark.parametrize("column", [0, 3, 10])
def test_caret_offset(program, column):
    text = format_error("oops", program, 1, column)
    caret_line = next(l for l in text.split("\n") if l.endswith(" ^"))
    bar = caret_line.index("|")
    spaces = caret_line[bar + 1:caret_line.index(Color.LIGHT_RED.value)]
    assert spaces == " " * (column + 2)


def test_missing_line_omits_source(program):
    text = format_error("oops", program, 42, 1)
    assert Color.MAGENTA.value not in text
    assert f"{program}:42:1" in text


def test_missing_file_still_formats(tmp_path):
    missing = str(tmp_path / "absent.vex")
    text = format_error("oops", missing, 1, 1)
    assert f"{missing}:1:1" in text
    assert Color.MAGENTA.value not in text


def test_report_error_prints_and_raises(program, capsys):
    with pytest.raises(CompilationError) as info:
        report_error("bad operands", program, 2, 5)
    out = capsys.readouterr().out
    assert out == format_error("bad operands", program, 2, 5)
    assert info.value.report == out
    assert info.value.message == "bad operands"
    assert info.value.exit_code == 1