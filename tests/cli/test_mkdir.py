import os
import stat

from dirops.cli.main import app
from tests.conftest import run_cli


def test_mkdir_basic(tmp_path):
    exit_code = run_cli(app, ["mkdir", str(tmp_path / "foo")])
    assert exit_code == 0
    assert (tmp_path / "foo").is_dir()


def test_mkdir_mode(tmp_path):
    exit_code = run_cli(app, ["mkdir", str(tmp_path / "foo"), "--mode", "700"])
    assert exit_code == 0
    assert stat.S_IMODE(os.stat(tmp_path / "foo").st_mode) == 0o700


def test_mkdir_config_mode(tmp_cwd):
    (tmp_cwd / "pyproject.toml").write_text('[tool.dirops]\nmode = "700"\n')
    exit_code = run_cli(app, ["mkdir", "foo"])
    assert exit_code == 0
    assert stat.S_IMODE(os.stat(tmp_cwd / "foo").st_mode) == 0o700


def test_mkdir_existing(tmp_path, capsys):
    exit_code = run_cli(app, ["mkdir", str(tmp_path)])
    assert exit_code == 1
    assert "File exists" in capsys.readouterr().err


def test_mkdir_invalid_mode(tmp_path, capsys):
    exit_code = run_cli(app, ["mkdir", str(tmp_path / "foo"), "--mode", "9z"])
    assert exit_code == 1
    assert "Invalid mode" in capsys.readouterr().err
    assert not (tmp_path / "foo").exists()


def test_mkdir_invalid_config_mode(tmp_cwd, capsys):
    (tmp_cwd / "pyproject.toml").write_text('[tool.dirops]\nmode = "rwx"\n')
    exit_code = run_cli(app, ["mkdir", "foo"])
    assert exit_code == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Invalid [tool.dirops] configuration: mode:")
    assert "Traceback" not in err
    assert not (tmp_cwd / "foo").exists()
