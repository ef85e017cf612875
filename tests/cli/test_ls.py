import pytest

from dirops.cli.main import app
from dirops.dirent import DirEntry, EntryType, is_supported_platform
from tests.conftest import run_cli

pytestmark = pytest.mark.skipif(not is_supported_platform(), reason="platform has no registered struct dirent layout")


def test_ls_basic(populated_dir, capsys):
    exit_code = run_cli(app, ["ls", str(populated_dir)])
    assert exit_code == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [".hidden", "alpha.py", "bar.txt", "folder1"]


def test_ls_default_cwd(populated_dir, monkeypatch, capsys):
    monkeypatch.chdir(populated_dir / "folder1")
    exit_code = run_cli(app, ["ls"])
    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["file1.txt", "folder1_1"]


def test_ls_config_ignore(populated_dir, monkeypatch, capsys):
    (populated_dir / "pyproject.toml").write_text('[tool.dirops]\nignore = ["*.py", ".*", "folder1/"]\n')
    monkeypatch.chdir(populated_dir)

    exit_code = run_cli(app, ["ls"])
    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["bar.txt", "pyproject.toml"]

    exit_code = run_cli(app, ["ls", "--all"])
    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [".hidden", "alpha.py", "bar.txt", "folder1", "pyproject.toml"]


def test_ls_long(populated_dir, capsys):
    exit_code = run_cli(app, ["ls", "--long", str(populated_dir / "folder1")])
    assert exit_code == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 2
    assert lines[0].split()[-1] == "file1.txt"
    assert lines[1].split()[-1] == "folder1_1"


def test_ls_missing(tmp_path, capsys):
    exit_code = run_cli(app, ["ls", str(tmp_path / "missing")])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert "Error:" in captured.err
    assert "No such file or directory" in captured.err


def test_ls_invalid_config(populated_dir, monkeypatch, capsys):
    (populated_dir / "pyproject.toml").write_text("[tool.dirops]\nignore = 5\n")
    monkeypatch.chdir(populated_dir)
    exit_code = run_cli(app, ["ls"])
    assert exit_code == 1
    assert "Invalid [tool.dirops] configuration: ignore:" in capsys.readouterr().err


def test_ls_ignore_directory_without_d_type(populated_dir, monkeypatch, mocker, capsys):
    (populated_dir / "pyproject.toml").write_text('[tool.dirops]\nignore = ["folder1/", "bar.txt/"]\n')
    monkeypatch.chdir(populated_dir)
    mocker.patch(
        "dirops.scandir",
        return_value=[
            DirEntry("folder1", 1, EntryType.UNKNOWN),
            DirEntry("bar.txt", 2, EntryType.UNKNOWN),
        ],
    )
    exit_code = run_cli(app, ["ls"])
    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["bar.txt"]
