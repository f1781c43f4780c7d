import os
import sys
from pathlib import Path

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import meow


def write_script(directory: Path, name: str, source: str) -> Path:
    path = directory / name
    path.write_text(source, encoding="utf-8")
    return path


def fake_input(lines):
    remaining = iter(lines)

    def read(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return read


def test_run_script_prints_final_value(tmp_path: Path, capsys):
    script = write_script(tmp_path, "sum.meow", "set a = 2;\na * 21\n")
    assert meow.run_script(str(script)) == 0
    assert capsys.readouterr().out == "42\n"


def test_run_script_null_result_prints_nothing(tmp_path: Path, capsys):
    script = write_script(tmp_path, "hello.meow", 'meow("hello");\n')
    assert meow.run_script(str(script)) == 0
    assert capsys.readouterr().out == "Meow! hello\n"


def test_run_script_requires_extension(tmp_path: Path, capsys):
    script = write_script(tmp_path, "hello.txt", "1\n")
    assert meow.run_script(str(script)) == 1
    assert capsys.readouterr().out == "File must have the extension .meow\n"


def test_run_script_reports_parse_errors(tmp_path: Path, capsys):
    script = write_script(tmp_path, "bad.meow", "set = 1;\n")
    assert meow.run_script(str(script)) == 1
    out = capsys.readouterr().out
    assert out.startswith("\tExpected next token to be ")


def test_run_script_reports_runtime_error(tmp_path: Path, capsys):
    script = write_script(tmp_path, "oops.meow", "set x = 1;\nx + true\n")
    assert meow.run_script(str(script)) == 1
    assert capsys.readouterr().out == f"\ttype mismatch: 1 + true on line 2 in {script}\n"


def test_run_script_includes_relative_to_script(tmp_path: Path, monkeypatch, capsys):
    project = tmp_path / "project"
    project.mkdir()
    write_script(project, "helpers.meow", "set double = function(x) { x * 2 };\n")
    script = write_script(project, "main.meow", 'include "helpers";\ndouble(21)\n')
    monkeypatch.chdir(tmp_path)
    assert meow.run_script(str(script)) == 0
    assert capsys.readouterr().out == "42\n"


def test_run_script_missing_library(tmp_path: Path, capsys):
    script = write_script(tmp_path, "main.meow", 'include "nowhere";\n')
    assert meow.run_script(str(script)) == 1
    assert capsys.readouterr().out.startswith("LibraryNotFoundException: Lib not found: 'nowhere'")


def test_run_script_missing_file(tmp_path: Path, capsys):
    assert meow.run_script(str(tmp_path / "ghost.meow")) == 1
    assert capsys.readouterr().out.startswith("FileNotFoundError:")


def test_main_help(capsys):
    assert meow.main(["meow", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_run_subcommand(tmp_path: Path, capsys):
    script = write_script(tmp_path, "one.meow", "1\n")
    assert meow.main(["meow", "run", str(script)]) == 0
    assert capsys.readouterr().out == "1\n"


def test_main_rejects_unknown_arguments(capsys):
    assert meow.main(["meow", "a", "b", "c"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_repl_session(monkeypatch, capsys):
    lines = ["set x = 2;", "x * 3", "if (true) {", "  x", "}", "foo", "exit"]
    monkeypatch.setattr("builtins.input", fake_input(lines))
    assert meow.main(["meow"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[2:] == [
        "null",
        "6",
        "2",
        "\tidentifier not found: foo on line 1 in <stdin>",
    ]


def test_repl_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", fake_input(["1 + 1"]))
    meow.run_repl()
    out = capsys.readouterr().out.splitlines()
    assert out[-2:] == ["2", ""]


def test_repl_recovers_from_syntax_error(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", fake_input(["set = 1;", "5", "quit"]))
    meow.run_repl()
    out = capsys.readouterr().out.splitlines()
    assert out[2].startswith("\tExpected next token to be ")
    assert out[-1] == "5"
