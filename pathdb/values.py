from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from typing import Any

UNDEFINED_TOKEN = "undefined"

# A JSON string literal, or a bare `undefined` token outside of one.
_UNDEFINED_RE = re.compile(r'"(?:[^"\\]|\\.)*"|\bundefined\b')


class _Missing:
    """
    The "no value" marker. Falsy, a singleton, and written as `undefined`
    by `serialize`.
    """

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()

# Marks a value that canonical JSON cannot carry (dropped from objects, null in arrays).
_DROP = object()


def is_valid_value(value: Any) -> bool:
    if value is None or value is MISSING:
        return True
    return isinstance(value, (str, int, float, bool, Mapping, list, tuple))


def is_truthy(value: Any) -> bool:
    """
    Truthiness as the document sees it: empty mappings and arrays count as
    present, while 0, NaN, "", None and MISSING do not.
    """
    if value is None or value is MISSING:
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


def serialize(value: Any) -> str:
    """
    Encode an accepted value into the document's text form.

    Arrays are encoded element by element, so a MISSING element comes out as
    the bare token `undefined`; the same token is produced for MISSING itself
    and for any kind `is_valid_value` rejects. Mappings use plain JSON object
    encoding, which drops such entries instead.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return "null"
        return json.dumps(value)
    if isinstance(value, Mapping):
        return dumps_document(value)
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(serialize(item) for item in value) + "]"
    return UNDEFINED_TOKEN


def dumps_document(doc: Mapping[str, Any]) -> str:
    """Compact, insertion-ordered, strict ASCII JSON for a whole mapping (non-ASCII is \\u-escaped)."""
    return json.dumps(_to_json(doc), separators=(",", ":"), allow_nan=False)


def decode(text: str) -> Any:
    """
    Parse document text. Strict JSON, except that a bare `undefined` token
    decodes to MISSING. A bare NaN literal reads the same way; Infinity reads
    as None.
    """
    if UNDEFINED_TOKEN in text:
        text = _UNDEFINED_RE.sub(_undefined_to_constant, text)
    return json.loads(text, parse_constant=_parse_constant)


def canonicalize(value: Any) -> Any:
    """
    Return the value exactly as it will be stored: a fresh copy decoded from
    its serialized text, with MISSING dropped from mappings and nulled inside
    arrays. A top-level MISSING is returned unchanged.
    """
    decoded = decode(serialize(value))
    if decoded is MISSING:
        return MISSING
    return _prune(decoded)


def _undefined_to_constant(match: re.Match[str]) -> str:
    token = match.group(0)
    return "NaN" if token == UNDEFINED_TOKEN else token


def _parse_constant(token: str) -> Any:
    return MISSING if token == "NaN" else None


def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune(v) for k, v in value.items() if v is not MISSING}
    if isinstance(value, list):
        return [None if item is MISSING else _prune(item) for item in value]
    return value


def _to_json(value: Any) -> Any:
    if value is None or isinstance(value, (str, bool)):
        return value
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        for key, item in value.items():
            converted = _to_json(item)
            if converted is not _DROP:
                out[_object_key(key)] = converted
        return out
    if isinstance(value, (list, tuple)):
        items = []
        for item in value:
            converted = _to_json(item)
            items.append(None if converted is _DROP else converted)
        return items
    return _DROP


def _object_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, bool):
        return serialize(key)
    return str(key)
