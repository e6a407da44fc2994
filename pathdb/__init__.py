from __future__ import annotations

from .database import Database
from .errors import (
    ErrorKind,
    InvalidCallbackError,
    InvalidIdError,
    InvalidOptionsError,
    InvalidValueError,
    NotFoundError,
    PathDBError,
)
from .live import LiveObject, origin_id
from .settings import Settings, get_settings, load_settings
from .values import MISSING

__all__ = [
    "Database",
    "LiveObject",
    "origin_id",
    "MISSING",
    "Settings",
    "get_settings",
    "load_settings",
    "ErrorKind",
    "PathDBError",
    "InvalidIdError",
    "InvalidValueError",
    "InvalidOptionsError",
    "InvalidCallbackError",
    "NotFoundError",
]
