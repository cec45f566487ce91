"""
Epiphany data resource helpers.

Provides access to the bundled configuration defaults and JSON schemas
using importlib.resources.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Args:
        subpackage: Name of the data subpackage (e.g., "config", "schemas")
        filename: Optional filename within the subpackage

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("schemas", "entity_type.schema.json")
        PosixPath('/path/to/epiphany/data/schemas/entity_type.schema.json')
    """
    pkg = resources.files("epiphany.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=16)
def read_json(subpackage: str, filename: str) -> dict[str, Any]:
    """Read and parse a bundled JSON file (cached)."""
    path = get_data_path(subpackage, filename)
    return json.loads(path.read_text(encoding="utf-8"))


# Clear caches (useful for testing)
def clear_caches() -> None:
    """Clear all read caches."""
    read_json.cache_clear()


__all__ = [
    "get_data_path",
    "read_json",
    "clear_caches",
]
