"""Base class for section-specific configuration classes.

All section configs share the same initialization pattern:
- Create a ConfigManager instance
- Load the full configuration
- Extract section-specific configuration
- Store repo_root for path resolution

Example:
    >>> class SchemaConfig(DomainConfig):
    ...     def __init__(self, repo_root: Optional[Path] = None):
    ...         super().__init__(repo_root=repo_root, section="schema")
"""
from __future__ import annotations

from abc import ABC
from pathlib import Path
from typing import Optional

from .manager import ConfigManager


class DomainConfig(ABC):
    """Abstract base class for section-specific configuration classes.

    Attributes:
        repo_root: Resolved project root path
        _mgr: ConfigManager instance for loading configuration
        _full_config: Fully merged configuration (all sections)
        _section_config: Section-specific configuration

    Args:
        repo_root: Optional project root. When None, ConfigManager
            resolves it from the environment or the working directory.
        section: Name of the configuration section (e.g., "schema", "logging")
        validate: Validate the merged configuration against the bundled schema.
    """

    def __init__(self, repo_root: Optional[Path] = None, *, section: str, validate: bool = False) -> None:
        self._mgr = ConfigManager(repo_root=repo_root)
        self._full_config = self._mgr.load_config(validate=validate)
        self._section_config = self._full_config.get(section, {}) or {}
        self.repo_root = self._mgr.repo_root


__all__ = ["DomainConfig"]
