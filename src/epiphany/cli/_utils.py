"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from epiphany.core.config import LoggingConfig, SchemaConfig
from epiphany.core.schema import TypeRegistry
from epiphany.core.stdlib_logging import configure_stdlib_logging
from epiphany.core.utils.paths import resolve_project_root


def get_repo_root(args: argparse.Namespace) -> Path:
    """Project root from ``--repo-root`` or the usual resolution."""
    raw = getattr(args, "repo_root", None)
    return resolve_project_root(raw or None)


def setup_logging(args: argparse.Namespace, repo_root: Path) -> None:
    """Configure logging from configuration, honouring ``--log-level``."""
    cfg = LoggingConfig(repo_root=repo_root)
    level: Optional[str] = getattr(args, "log_level", None)
    configure_stdlib_logging(level=level or cfg.level, log_path=cfg.log_file)


def build_registry(args: argparse.Namespace, *, validate_files: Optional[bool] = None) -> TypeRegistry:
    """Create a TypeRegistry for the project selected by ``args``."""
    repo_root = get_repo_root(args)
    setup_logging(args, repo_root)
    overrides = {"validate_files": validate_files} if validate_files is not None else None
    settings = SchemaConfig(repo_root=repo_root, overrides=overrides)
    return TypeRegistry(settings=settings)


__all__ = ["get_repo_root", "setup_logging", "build_registry"]
