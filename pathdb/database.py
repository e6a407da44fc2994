from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable

from . import accessor
from .disk_store import DiskJsonDocumentStore
from .errors import InvalidCallbackError, InvalidIdError, InvalidValueError, NotFoundError
from .live import LiveObject
from .options import DatabaseOptions
from .paths import database_file
from .settings import Settings, get_settings
from .values import MISSING, canonicalize, is_truthy, is_valid_value

logger = logging.getLogger(__name__)

# Legacy spelling of "the whole document" accepted by find/filter.
ROOT_ID = "/"

Predicate = Callable[[Any], Any]


class Database:
    """
    A single JSON document on disk, addressed by dot-separated ids.

    Every call reloads the file, works on the fresh in-memory tree and, for
    writes, rewrites the whole file. Reads that land on a mapping return a
    LiveObject unless the database was opened with raw=True.

    Example:
        db = Database(directory="./data", name="users")
        db.create("0001", {"name": "David", "country": "CO"})
        user = db.get("0001")
        user.name = "Deivid"
        user.save()
    """

    def __init__(
        self,
        directory: str | os.PathLike[str] | None = None,
        name: str | None = None,
        *,
        raw: bool = False,
        filename: str | None = None,
    ):
        self._options = DatabaseOptions.parse(directory=directory, name=name, raw=raw, filename=filename)
        self._store = DiskJsonDocumentStore(
            database_file(self._options.directory, self._options.name, self._options.filename)
        )
        if self._store.ensure_exists():
            logger.info("Created database %r at %s", self._options.name, self._store.path)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Database":
        s = settings or get_settings()
        return cls(s.directory, s.name, raw=s.raw, filename=s.filename)

    @property
    def name(self) -> str:
        return self._options.name

    @property
    def path(self) -> Path:
        return self._store.path

    @property
    def raw(self) -> bool:
        return self._options.raw

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, path={str(self.path)!r}, raw={self.raw})"

    # Reads

    def all(self) -> Any:
        """Return the whole document."""
        return self._wrap(self._store.load(), None)

    def get(self, id: str) -> Any:
        """
        Return the value at `id`, or None when nothing is stored there.

        Raises:
            InvalidIdError: If `id` is malformed
        """
        _check_id(id)
        return self._wrap(self._resolve(id), id)

    def exists(self, id: str) -> bool:
        """
        True when the value at `id` is truthy.

        0, False, "" and null count as absent even though the key is present.
        """
        _check_id(id)
        return is_truthy(self._resolve(id))

    def find(self, predicate: Predicate, start_id: str | None = None) -> Any:
        """
        Return the first value under `start_id` (default: the whole document)
        for which `predicate(value)` is truthy, or None.

        A first match stored under the empty-string key counts as no match,
        so None is returned without scanning further.

        Raises:
            InvalidIdError: If `start_id` is malformed
            InvalidCallbackError: If `predicate` is not callable
        """
        base_id = self._scan_base(predicate, start_id)
        base = self._store.load() if base_id is None else self._resolve(base_id)
        if not is_truthy(base):
            return None
        for key, value in accessor.entries(base):
            if predicate(value):
                if key == "":
                    return None
                return self._wrap(value, accessor.join_id(base_id, key))
        return None

    def filter(self, predicate: Predicate, start_id: str | None = None) -> list[Any]:
        """
        Return every value under `start_id` for which `predicate(value)` is truthy.

        When every match is a mapping (and the database is not raw) the result
        is a list of LiveObjects. Otherwise it is a list of (key, value) tuples.

        Raises:
            InvalidIdError: If `start_id` is malformed
            InvalidCallbackError: If `predicate` is not callable
        """
        base_id = self._scan_base(predicate, start_id)
        base = self._store.load() if base_id is None else self._resolve(base_id)
        if not is_truthy(base):
            return []
        matches = [(key, value) for key, value in accessor.entries(base) if predicate(value)]
        if not self.raw and all(isinstance(value, Mapping) for _, value in matches):
            return [LiveObject(value, accessor.join_id(base_id, key), self) for key, value in matches]
        return matches

    # Writes

    def create(self, id: str, initial_value: Any) -> Any:
        """
        Store `initial_value` at `id` unless a truthy value is already there.

        Returns the value held at `id` afterwards: the existing one, or the
        newly stored one.

        Raises:
            InvalidIdError: If `id` is malformed
            InvalidValueError: If `initial_value` is not a storable kind
        """
        _check_id(id)
        _check_value(initial_value)
        existing = self._resolve(id)
        if is_truthy(existing):
            return existing
        return self._write(id, initial_value, create_only=True)

    def set(self, id: str, value: Any) -> Any:
        """
        Overwrite the value at `id`, creating intermediate levels as needed.

        Raises:
            InvalidIdError: If `id` is malformed
            InvalidValueError: If `value` is not a storable kind
        """
        _check_id(id)
        _check_value(value)
        return self._write(id, value, create_only=False)

    def delete(self, id: str) -> Any:
        """
        Remove the value at `id` and return it.

        Raises:
            InvalidIdError: If `id` is malformed
            NotFoundError: If the value at `id` is falsy
        """
        _check_id(id)
        previous = self._resolve(id)
        if not is_truthy(previous):
            raise NotFoundError(id)
        self._write(id, MISSING, create_only=False)
        logger.debug("Deleted %s from %s", id, self.path)
        return previous

    # Internals

    def _resolve(self, id: str) -> Any:
        return accessor.resolve(self._store.load(), id)

    def _write(self, id: str, value: Any, *, create_only: bool) -> Any:
        doc = self._store.load()
        stored = accessor.assign(doc, id, value, create_only=create_only)
        self._store.save(doc)
        return _public(stored)

    def _commit(self, id: str | None, fields: dict[str, Any]) -> Any:
        """Persist a live object's fields at `id` (None: the whole document)."""
        if id is None:
            doc = canonicalize(fields)
            self._store.save(doc)
            return doc
        return self._write(id, fields, create_only=False)

    def _scan_base(self, predicate: Predicate, start_id: str | None) -> str | None:
        if start_id is None or start_id == ROOT_ID:
            base_id = None
        else:
            _check_id(start_id)
            base_id = start_id
        if not callable(predicate):
            raise InvalidCallbackError()
        return base_id

    def _wrap(self, value: Any, id: str | None) -> Any:
        if not self.raw and isinstance(value, Mapping):
            return LiveObject(value, id, self)
        return _public(value)


def _check_id(id: Any) -> None:
    if not accessor.validate_id(id):
        raise InvalidIdError()


def _check_value(value: Any) -> None:
    if not is_valid_value(value):
        raise InvalidValueError()


def _public(value: Any) -> Any:
    return None if value is MISSING else value
