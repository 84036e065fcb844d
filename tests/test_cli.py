from __future__ import annotations

from pathlib import Path

import pytest

from construct import __version__
from construct.cli import main


def test_cli_generate_creates_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["generate", "acme/widget", "--directory", str(tmp_path)])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == 'Project "acme/widget" created.'
    assert (tmp_path / "widget" / "src" / "Widget.php").exists()


def test_cli_rejects_invalid_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["generate", "noSlash", "-d", str(tmp_path)])

    assert exit_code == 1
    assert '"noSlash" is not a valid project name' in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_reports_existing_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "widget").mkdir()

    exit_code = main(["generate", "acme/widget", "-d", str(tmp_path)])

    assert exit_code == 1
    assert "step 1 (root) failed" in capsys.readouterr().err


def test_cli_requires_a_command():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_cli_version(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_cli_creates_missing_directory(tmp_path: Path):
    target = tmp_path / "nested" / "output"

    exit_code = main(["generate", "acme/widget", "-d", str(target)])

    assert exit_code == 0
    assert (target / "widget" / "composer.json").exists()
