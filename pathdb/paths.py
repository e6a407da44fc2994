from __future__ import annotations

import os
from pathlib import Path

FILE_SUFFIX = ".json"


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def database_file(directory: str | os.PathLike[str], name: str, filename: str | None = None) -> Path:
    # directory/(filename or name).json
    base = filename if filename else name
    return ensure_dir(Path(directory)) / f"{base}{FILE_SUFFIX}"
