import io
import sys

import pytest

from jsonnetcore.cliutil import (
    CommandLineError,
    next_arg,
    read_input,
    safe_str_to_int,
    simplify_args,
    write_output_file,
)


@pytest.mark.parametrize(
    "given, expected",
    [
        ([], []),
        (["-a"], ["-a"]),
        (["-a", "-b"], ["-a", "-b"]),
        (["-a", "-c", "-b"], ["-a", "-c", "-b"]),
        (["-abc"], ["-a", "-b", "-c"]),
        (["-acb"], ["-a", "-c", "-b"]),
    ],
)
def test_simplify_args(given, expected):
    assert simplify_args(given) == expected


def test_simplify_args_stops_at_double_dash():
    assert simplify_args(["-ab", "--", "-cd"]) == ["-a", "-b", "--", "-cd"]


def test_simplify_args_keeps_long_options():
    assert simplify_args(["--jpath", "x"]) == ["--jpath", "x"]


def test_next_arg_returns_following_argument():
    assert next_arg(["-o", "out.json"], 0) == "out.json"


def test_next_arg_missing():
    with pytest.raises(CommandLineError, match="Expected another commandline argument."):
        next_arg(["-o"], 0)


@pytest.mark.parametrize("text, expected", [("42", 42), ("-7", -7), ("+3", 3)])
def test_safe_str_to_int(text, expected):
    assert safe_str_to_int(text) == expected


@pytest.mark.parametrize("text", ["4x", " 4", "", "1_000", "99999999999999999999"])
def test_safe_str_to_int_invalid(text):
    with pytest.raises(CommandLineError, match="Invalid integer"):
        safe_str_to_int(text)


def test_read_input_code():
    assert read_input(True, "1 + 1") == ("1 + 1", "<cmdline>")


def test_read_input_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("{a: 1}"))
    assert read_input(False, "-") == ("{a: 1}", "<stdin>")


def test_read_input_file(tmp_path):
    path = tmp_path / "in.jsonnet"
    path.write_text("[1,\r\n2]", encoding="utf-8", newline="")
    assert read_input(False, str(path)) == ("[1,\r\n2]", str(path))


def test_read_input_missing_file(tmp_path):
    with pytest.raises(CommandLineError, match="Opening input file"):
        read_input(False, str(tmp_path / "missing.jsonnet"))


def test_write_output_to_stdout(capsys):
    write_output_file("hello\n", "", False)
    assert capsys.readouterr().out == "hello\n"


def test_write_output_creates_dirs(tmp_path):
    target = tmp_path / "a" / "b" / "out.json"
    write_output_file("{}\n", str(target), True)
    assert target.read_text(encoding="utf-8") == "{}\n"


def test_write_output_without_dirs_fails(tmp_path):
    target = tmp_path / "missing" / "out.json"
    with pytest.raises(FileNotFoundError):
        write_output_file("{}", str(target), False)