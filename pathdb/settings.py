from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Location
    directory: str
    name: str
    filename: str | None

    # Read mode: plain values instead of live objects
    raw: bool


def get_settings() -> Settings:
    directory = os.getenv("PATHDB_DIR", "./data")
    name = os.getenv("PATHDB_NAME", "db")
    filename = os.getenv("PATHDB_FILENAME") or None
    raw = _env_bool("PATHDB_RAW", False)

    return Settings(
        directory=directory,
        name=name,
        filename=filename,
        raw=raw,
    )


def load_settings(env_file: str | os.PathLike[str] = "local.env") -> Settings:
    # Real environment variables take precedence over the file.
    load_dotenv(env_file, override=False)
    return get_settings()
