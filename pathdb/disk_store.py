from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .interfaces import DocumentStore
from .json_store import atomic_write_json, read_json
from .locks import GLOBAL_PATH_LOCKS

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(DocumentStore):
    """
    Stores a single JSON document on disk at a fixed path.

    - Returns an empty dict for a missing/empty file or a non-mapping root.
    - Raises on a file that is not valid document text.
    - Writes atomically.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def ensure_exists(self) -> bool:
        """Create the file holding an empty document if absent. Returns True if created."""
        lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        with lock:
            if self._path.exists():
                return False
            atomic_write_json(self._path, {})
        logger.debug("Created empty document at %s", self._path)
        return True

    def load(self) -> dict[str, Any]:
        lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        with lock:
            raw = read_json(self._path)
        if not isinstance(raw, dict):
            if raw is not None:
                logger.warning("Document root in %s is not a mapping; treating it as empty", self._path)
            return {}
        return raw

    def save(self, doc: dict[str, Any]) -> None:
        lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        with lock:
            atomic_write_json(self._path, doc)
