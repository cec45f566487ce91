"""JSON file reading for type definitions."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_ENCODING = "utf-8"


def read_json(file_path: Path | str, *, encoding: str = DEFAULT_ENCODING) -> Any:
    """Read and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON. Not caught here.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")

    with open(path, "r", encoding=encoding) as f:
        return json.load(f)


__all__ = ["read_json", "DEFAULT_ENCODING"]
