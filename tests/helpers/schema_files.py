"""Helpers for writing type definition files in tests."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def write_entity(root: Path, name: str, data: Any) -> Path:
    """Write ``lib/epiphany/entity_types/<name>.json`` under ``root``."""
    return write_json(root / "lib" / "epiphany" / "entity_types" / f"{name}.json", data)


def write_intent(root: Path, name: str, data: Any) -> Path:
    """Write ``lib/epiphany/intent_types/<name>.json`` under ``root``."""
    return write_json(root / "lib" / "epiphany" / "intent_types" / f"{name}.json", data)


def write_project_config(root: Path, name: str, text: str) -> Path:
    """Write a project overlay ``.epiphany/config/<name>.yml``."""
    path = root / ".epiphany" / "config" / f"{name}.yml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
