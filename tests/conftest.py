from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for `import pathdb` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def db(tmp_path: Path):
    """
    A fresh database in an empty temp directory.
    """
    from pathdb import Database

    return Database(tmp_path / "data", "test")


@pytest.fixture
def raw_db(tmp_path: Path):
    from pathdb import Database

    return Database(tmp_path / "data", "test", raw=True)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """
    Strip PATHDB_* variables so settings tests only see what they set.
    """
    for name in ("PATHDB_DIR", "PATHDB_NAME", "PATHDB_FILENAME", "PATHDB_RAW"):
        # setenv first so teardown also reverts values written by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
