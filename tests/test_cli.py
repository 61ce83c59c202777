"""Test command-line argument handling."""

import pytest
from nanoedit import __main__ as cli


def test_no_arguments():
    options, filename = cli.parse_args([])
    assert filename is None
    assert options == {"version": False, "keytest": False, "log_file": None}


def test_single_file_argument():
    _, filename = cli.parse_args(["notes.txt"])
    assert filename == "notes.txt"


def test_log_file_option():
    options, filename = cli.parse_args(["--log-file", "edit.log", "notes.txt"])
    assert options["log_file"] == "edit.log"
    assert filename == "notes.txt"


@pytest.mark.parametrize("args", [
    ["--bogus"],
    ["--log-file"],
    ["a.txt", "b.txt"],
])
def test_invalid_arguments(args):
    with pytest.raises(ValueError):
        cli.parse_args(args)


def test_version_flag(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["nanoedit", "--version"])
    cli.main()
    assert capsys.readouterr().out.startswith("nanoedit ")


def test_bad_option_exits_with_usage(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["nanoedit", "--nope"])
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert excinfo.value.code == 2
    assert "unknown option" in capsys.readouterr().err


def test_main_opens_file_and_runs(monkeypatch):
    calls = []

    class FakeEditor:
        def __init__(self, settings=None):
            calls.append(("init", settings is not None))

        def load_file(self, filename):
            calls.append(("load", filename))

        def run(self):
            calls.append(("run",))

    monkeypatch.setattr("sys.argv", ["nanoedit", "notes.txt"])
    monkeypatch.setattr("nanoedit.editor.Editor", FakeEditor)
    monkeypatch.setattr("nanoedit.settings_persistence.SettingsPersistence", lambda: object())

    cli.main()

    assert calls == [("init", True), ("load", "notes.txt"), ("run",)]
