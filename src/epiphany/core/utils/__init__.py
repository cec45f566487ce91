"""Shared helpers for path resolution and JSON I/O."""
from __future__ import annotations

from .json_io import read_json
from .paths import PROJECT_ROOT_ENV, resolve_project_root

__all__ = ["read_json", "resolve_project_root", "PROJECT_ROOT_ENV"]
