from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from .values import decode, dumps_document

logger = logging.getLogger(__name__)


def read_json(path: Path) -> Any | None:
    """
    Read a document from disk.

    Returns None for missing or empty files. Anything that is not valid
    document text raises json.JSONDecodeError.
    """
    if not path.exists():
        return None
    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        return None
    return decode(raw)


def atomic_write_json(path: Path, payload: Mapping[str, Any]) -> None:
    """
    Atomically write a document to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    text = dumps_document(payload)
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
        tmp_path.replace(path)
    finally:
        tmp_path.unlink(missing_ok=True)
    logger.debug("Wrote %d bytes to %s", len(text), path)
