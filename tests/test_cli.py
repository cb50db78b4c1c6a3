from __future__ import annotations

import logging
from pathlib import Path

import pytest

from python_skeleton.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["My-Project", "my_package"])
    assert args.project == "My-Project"
    assert args.package == "my_package"
    assert args.doc is False
    assert args.verbose is False
    assert args.directory is None


def test_parser_requires_both_names():
    with pytest.raises(SystemExit) as excinfo:
        main(["My-Project"])
    assert excinfo.value.code == 2


def test_cli_creates_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["My-Project", "my_package", "--doc", "--directory", str(tmp_path)])
    assert exit_code == 0
    assert (tmp_path / "My-Project" / "docs").is_dir()
    assert (tmp_path / "My-Project" / "src" / "my_package" / "db.py").is_file()
    assert "ready" in capsys.readouterr().out


def test_cli_defaults_to_current_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.chdir(tmp_path)
    assert main(["Demo", "demo"]) == 0
    assert (tmp_path / "Demo" / "README.md").is_file()
    assert not (tmp_path / "Demo" / "docs").exists()


@pytest.mark.parametrize(
    "argv, message",
    [
        (["my-project", "my_package"], "invalid project name 'my-project'"),
        (["My-Project", "My_Package"], "invalid package name 'My_Package'"),
    ],
)
def test_cli_rejects_bad_names(tmp_path: Path, capsys: pytest.CaptureFixture[str], argv, message):
    exit_code = main([*argv, "--directory", str(tmp_path)])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert message in captured.err
    assert captured.out == ""
    assert list(tmp_path.iterdir()) == []


def test_cli_reports_existing_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["Demo", "demo", "--directory", str(tmp_path)]) == 0
    capsys.readouterr()

    assert main(["Demo", "demo", "--directory", str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert "already exists" in err
    assert str(tmp_path / "Demo") in err


def test_cli_verbose_logs_progress(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    assert main(["Demo", "demo", "-v", "--directory", str(tmp_path)]) == 0

    messages = [record.getMessage() for record in caplog.records if record.levelno == logging.INFO]
    root = tmp_path / "Demo"
    assert f"Creating directory: {root}" in messages
    assert f"Creating directory: {root / 'src' / 'demo'}" in messages
    assert f"Created file {root / 'README.md'}" in messages
    assert f"Created file {root / 'src' / 'demo' / 'main.py'}" in messages


def test_cli_is_quiet_without_verbose(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    assert main(["Demo", "demo", "--directory", str(tmp_path)]) == 0
    assert not [record for record in caplog.records if record.name.startswith("python_skeleton")]


def test_cli_reports_io_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    not_a_directory = tmp_path / "occupied"
    not_a_directory.write_text("", encoding="utf-8")

    exit_code = main(["Demo", "demo", "--directory", str(not_a_directory)])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: cannot create ")
    assert str(not_a_directory) in captured.err
    assert not_a_directory.is_file()
