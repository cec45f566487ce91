"""Normalization of raw type definitions.

Raw definitions come from JSON files (string keys) or from keyword
arguments and enum-keyed mappings built in code. :func:`normalize_raw` is
the single step that turns either into a plain ``str``-keyed dict, so the
record classes never need to look a field up under more than one key.
"""
from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..exceptions import SchemaValidationError

_STEM_RE = re.compile(r"(\w+)\.json", re.IGNORECASE)


def atom_name(value: Any) -> str:
    """Return the name of a symbol-like value.

    Enum members name themselves by their string value (or their member
    name when the value is not a string); everything else goes through
    ``str()``.
    """
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    return str(value)


def is_symbol_like(value: Any) -> bool:
    """True for enum members and strings that are valid identifiers."""
    if isinstance(value, Enum):
        return True
    return isinstance(value, str) and value.isidentifier()


def normalize_raw(raw: Any, *, source: Optional[Path | str] = None) -> Dict[str, Any]:
    """Return ``raw`` with every key converted to its string name.

    When a string key and a symbol-like key name the same field, the string
    key wins regardless of insertion order.

    Raises:
        SchemaValidationError: If ``raw`` is not a mapping.
    """
    if not isinstance(raw, Mapping):
        raise SchemaValidationError(
            f"type definition must be an object, got {type(raw).__name__}",
            source=str(source) if source is not None else None,
        )
    out: Dict[str, Any] = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            out.setdefault(atom_name(key), value)
    for key, value in raw.items():
        if isinstance(key, str):
            out[key] = value
    return out


def infer_type_from_path(source: Optional[Path | str]) -> Optional[str]:
    """Return the first run of word characters directly preceding ``.json``.

    >>> infer_type_from_path("lib/epiphany/entity_types/weighted_lift.json")
    'weighted_lift'
    """
    if source is None:
        return None
    match = _STEM_RE.search(str(source))
    return match.group(1) if match else None


def unwrap_intent(
    data: Any,
    name: Optional[str] = None,
    *,
    source: Optional[Path | str] = None,
) -> Dict[str, Any]:
    """Flatten a wrapped intent definition.

    Intent files hold a single top-level key, the intent name, wrapping the
    intent fields::

        {"book_flight": {"required_entities": ["origin"]}}

    The wrapped fields are merged into the top level and ``type`` is set to
    the wrapping key. When ``name`` is given and present it selects the
    wrapping key; otherwise the first key is used.

    Raises:
        SchemaValidationError: If there is no wrapping key or it does not
            wrap a mapping.
    """
    src = str(source) if source is not None else None
    if not isinstance(data, Mapping) or not data:
        raise SchemaValidationError(
            "intent definition must be an object with one top-level key naming the intent",
            source=src,
        )
    key = name if name is not None and name in data else next(iter(data))
    nested = data[key]
    if not isinstance(nested, Mapping):
        raise SchemaValidationError(
            f"intent definition '{key}' must wrap an object of fields, got {type(nested).__name__}",
            source=src,
        )
    merged: Dict[str, Any] = dict(data)
    merged.update(nested)
    merged["type"] = atom_name(key)
    return merged


def string_tuple(value: Any) -> Tuple[str, ...]:
    """Coerce a list-like value of names into a tuple of strings."""
    return tuple(_names(value))


def string_list(value: Any) -> List[str]:
    """Coerce a list-like value of names into a new list of strings."""
    return list(_names(value))


def _names(value: Any) -> Iterable[str]:
    if value is None:
        return ()
    if isinstance(value, (str, Enum)):
        return (atom_name(value),)
    return (atom_name(item) for item in value if item is not None)


__all__ = [
    "atom_name",
    "is_symbol_like",
    "normalize_raw",
    "infer_type_from_path",
    "unwrap_intent",
    "string_tuple",
    "string_list",
]
