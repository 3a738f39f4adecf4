import io
import sys

import pytest

from wordcount import cli
from wordcount.config import CONFIG_ENV
from wordcount.environment import os_name, program_name


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    (tmp_path / "blues.txt").write_text("one two\nthree four five\n", encoding="utf-8")
    (tmp_path / "ice.txt").write_text("Some say the world will end in fire\n", encoding="utf-8")
    (tmp_path / "accents.txt").write_text("crème brûlée\n", encoding="utf-8")
    return tmp_path


def test_cli_default_columns(capsys):
    assert cli.main(["blues.txt"]) == 0
    captured = capsys.readouterr()
    assert captured.out == " 2  5 24 blues.txt\n"
    assert captured.err == ""


def test_cli_two_files_prints_total(capsys):
    assert cli.main(["blues.txt", "ice.txt"]) == 0
    assert capsys.readouterr().out == (
        " 2  5 24 blues.txt\n"
        " 1  8 36 ice.txt\n"
        " 3 13 60 total\n"
    )


def test_cli_words_only_keeps_shared_padding(capsys):
    cli.main(["-w", "blues.txt"])
    assert capsys.readouterr().out == " 5 blues.txt\n"


def test_cli_combined_short_flags(capsys):
    cli.main(["-mc", "accents.txt"])
    assert capsys.readouterr().out == "13 16 accents.txt\n"


def test_cli_long_flags(capsys):
    cli.main(["--lines", "--chars", "accents.txt"])
    assert capsys.readouterr().out == " 1 13 accents.txt\n"


def test_cli_missing_file_goes_to_stderr_and_exits_zero(capsys):
    if os_name() != "linux":
        pytest.skip(f"Not tested on this operating system: {os_name()}")

    assert cli.main(["does_not_exist.txt", "blues.txt"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "No such file or directory: does_not_exist.txt\n"
    assert captured.out == " 2  5 24 blues.txt\n"


def test_cli_every_input_failing_exits_zero(capsys):
    assert cli.main(["nope1.txt", "nope2.txt"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert len(captured.err.splitlines()) == 2


def test_cli_directory_is_a_failure(workdir, capsys):
    if os_name() != "linux":
        pytest.skip(f"Not tested on this operating system: {os_name()}")

    (workdir / "subdir").mkdir()
    cli.main(["subdir"])
    assert capsys.readouterr().err == "Is a directory: subdir\n"


def test_cli_reads_stdin_without_files(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"piped text\n")))
    cli.main([])
    assert capsys.readouterr().out == " 1  2 11 -\n"


def test_cli_config_default_columns(monkeypatch, capsys):
    monkeypatch.setenv(CONFIG_ENV, '{"columns": ["chars"]}')
    cli.main(["accents.txt"])
    assert capsys.readouterr().out == "13 accents.txt\n"


def test_cli_flags_override_config(monkeypatch, capsys):
    monkeypatch.setenv(CONFIG_ENV, '{"columns": ["chars"]}')
    cli.main(["-c", "accents.txt"])
    assert capsys.readouterr().out == "16 accents.txt\n"


def test_cli_unknown_flag_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-z", "blues.txt"])
    assert excinfo.value.code == 2


def test_help_uses_program_name():
    assert cli.build_parser(prog="rwc").format_usage().startswith("usage: rwc")
    assert program_name("/usr/local/bin/wc") == "wc"
    assert program_name("__main__.py") == "wc"


def test_cli_bytes_are_raw_size_with_bom_stripping_codec(workdir, monkeypatch, capsys):
    (workdir / "a.txt").write_bytes(b"abc\n")
    monkeypatch.setenv(CONFIG_ENV, '{"columns": ["chars", "bytes"], "encoding": "utf-8-sig"}')
    assert cli.main(["a.txt"]) == 0
    assert capsys.readouterr().out == "4 4 a.txt\n"


def test_cli_unknown_encoding_in_config_falls_back(workdir, monkeypatch, capsys):
    (workdir / "a.txt").write_bytes(b"abc\n")
    monkeypatch.setenv(CONFIG_ENV, '{"encoding": "no-such-codec"}')
    assert cli.main(["missing.txt", "a.txt"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "1 1 4 a.txt\n"
    assert captured.err.endswith(": missing.txt\n")
