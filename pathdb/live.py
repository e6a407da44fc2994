from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from .database import Database

logger = logging.getLogger(__name__)


class LiveObject(dict):
    """
    A detached, editable copy of a mapping read from a database.

    Fields are plain dict items and can also be reached as attributes:

        user = db.get("0001")
        user.name = "Deivid"      # same as user["name"] = "Deivid"
        user.save()

    Nothing is written until save(). Attributes that clash with dict methods
    (``items``, ``keys``, ...) or with ``save`` are only reachable with item
    access. The origin path is kept out of the field namespace; read it with
    origin_id(obj).
    """

    __slots__ = ("_id", "_database")

    def __init__(self, fields: Mapping[str, Any], id: str | None, database: "Database"):
        super().__init__(fields)
        object.__setattr__(self, "_id", id)
        object.__setattr__(self, "_database", database)

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!s} has no field {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _RESERVED:
            raise AttributeError(f"{name!r} is read-only")
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!s} has no field {name!r}") from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, {dict.__repr__(self)})"

    def __reduce__(self) -> Any:
        # Copies and pickles are plain dicts; the database binding does not travel.
        return (dict, (dict(self),))

    def save(self) -> dict[str, Any]:
        """
        Write the current fields back to the origin path and return what was stored.

        The file is reloaded first, so changes made to other ids since this
        object was read are kept, while the origin path itself is overwritten.
        """
        stored = self._database._commit(self._id, dict(self))
        self.clear()
        self.update(stored)
        logger.debug("Saved live object at %s", self._id or "<root>")
        return stored


_RESERVED = frozenset({"save", "_id", "_database"})


def origin_id(obj: LiveObject) -> str | None:
    """Path a live object was read from, or None when it is the whole document."""
    return obj._id
