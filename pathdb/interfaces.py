from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class DocumentStore(Protocol):
    """
    A single JSON-like document persisted as a whole.
    """

    @property
    def path(self) -> Path:
        ...

    def load(self) -> dict[str, Any]:
        """Load and return the full document (never None)."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full document atomically."""
        ...
