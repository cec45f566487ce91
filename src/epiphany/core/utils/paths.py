"""Project root resolution.

The Epiphany library lives under ``<project-root>/lib/epiphany``. The
project root is the current working directory unless the
``EPIPHANY_PROJECT_ROOT`` environment variable points somewhere else.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..exceptions import ConfigError

PROJECT_ROOT_ENV = "EPIPHANY_PROJECT_ROOT"


def resolve_project_root(explicit: Optional[Path | str] = None) -> Path:
    """Resolve the project root.

    Resolution priority:
    1. ``explicit`` argument
    2. ``EPIPHANY_PROJECT_ROOT`` environment variable
    3. Current working directory

    Raises:
        ConfigError: If an explicit or environment root does not exist.
    """
    if explicit is not None:
        root = Path(explicit).expanduser().resolve()
        if not root.is_dir():
            raise ConfigError(f"Project root does not exist: {root}", context={"path": str(root)})
        return root

    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        root = Path(env_root).expanduser().resolve()
        if not root.is_dir():
            raise ConfigError(
                f"{PROJECT_ROOT_ENV} points at missing path: {root}",
                context={"path": str(root)},
            )
        return root

    return Path.cwd().resolve()


__all__ = ["PROJECT_ROOT_ENV", "resolve_project_root"]
