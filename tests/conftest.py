import pytest

import dirops.project
from dirops import MemoryFilesystem


def run_cli(app, args):
    """Run a CLI app with support for both Cyclopts v3 and v4.

    Cyclopts v3 returns None on success.
    Cyclopts v4 raises SystemExit with code 0 on success.

    Parameters
    ----------
    app : callable
        The CLI app to run.
    args : list
        Command line arguments.

    Returns
    -------
    int
        Exit code (0 for success).
    """
    try:
        result = app(args)
        # v3 behavior: returns None or int
        return result if isinstance(result, int) else 0
    except SystemExit as e:
        # v4 behavior: raises SystemExit
        return e.code if e.code is not None else 0


@pytest.fixture(autouse=True)
def cache_clear():
    dirops.project.load_config.cache_clear()


@pytest.fixture
def tmp_cwd(tmp_path, monkeypatch):
    """Change to a temporary directory for the duration of the test."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def memory_fs():
    return MemoryFilesystem()


@pytest.fixture
def populated_dir(tmp_path):
    (tmp_path / "alpha.py").write_text("def alpha():\n    pass")
    (tmp_path / "bar.txt").write_text("bar contents")
    (tmp_path / ".hidden").write_text("")
    (tmp_path / "folder1" / "folder1_1").mkdir(parents=True)
    (tmp_path / "folder1" / "file1.txt").write_text("file1 contents")
    return tmp_path
