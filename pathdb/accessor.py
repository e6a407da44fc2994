"""
Dot-path access into an in-memory document tree.

A path such as "0001.info.country" is split on "." and walked one mapping
at a time. Writes create any missing intermediate level as an empty mapping,
replacing whatever non-mapping value sat there before.
"""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from .values import MISSING, canonicalize, is_truthy

SEPARATOR = "."


def validate_id(id: Any) -> bool:
    if not isinstance(id, str) or not id:
        return False
    if id.endswith(SEPARATOR):
        return False
    return "" not in id.split(SEPARATOR)


def split_id(id: str) -> list[str]:
    return id.split(SEPARATOR)


def join_id(parent: str | None, key: str) -> str:
    return key if parent is None else f"{parent}{SEPARATOR}{key}"


def resolve(document: MutableMapping[str, Any], path: str, *, create_missing: bool = False) -> Any:
    """
    Return the value stored at `path`, or MISSING.

    With `create_missing`, every intermediate level that is not a mapping is
    replaced in place by an empty one while walking. Reads leave it off so a
    lookup never changes the tree.
    """
    segments = split_id(path)
    node: Any = document
    for segment in segments[:-1]:
        child = node.get(segment, MISSING)
        if not isinstance(child, MutableMapping):
            if not create_missing:
                return MISSING
            child = {}
            node[segment] = child
        node = child
    return node.get(segments[-1], MISSING)


def assign(document: MutableMapping[str, Any], path: str, value: Any, *, create_only: bool = False) -> Any:
    """
    Store `value` at `path` and return what is now held there.

    With `create_only`, a truthy value already at `path` wins: it is returned
    and nothing is written. Assigning MISSING removes the key.
    """
    segments = split_id(path)
    parent: Any = document
    for segment in segments[:-1]:
        child = parent.get(segment, MISSING)
        if not isinstance(child, MutableMapping):
            child = {}
            parent[segment] = child
        parent = child

    last = segments[-1]
    current = parent.get(last, MISSING)
    if create_only and is_truthy(current):
        return current

    stored = canonicalize(value)
    if stored is MISSING:
        parent.pop(last, None)
    else:
        parent[last] = stored
    return stored


def entries(value: Any) -> list[tuple[str, Any]]:
    """Key/value pairs of a mapping in insertion order; nothing for other kinds."""
    if not isinstance(value, Mapping):
        return []
    return list(value.items())
