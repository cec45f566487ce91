"""Section configs for the schema library and logging."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from .base import DomainConfig

ENTITY_TYPES = "entity_types"
INTENT_TYPES = "intent_types"
CATEGORIES = (ENTITY_TYPES, INTENT_TYPES)


class SchemaConfig(DomainConfig):
    """Typed access to the ``schema`` configuration section."""

    def __init__(
        self,
        repo_root: Optional[Path] = None,
        *,
        validate: bool = False,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(repo_root=repo_root, section="schema", validate=validate)
        if overrides:
            self._section_config = {**self._section_config, **overrides}

    @property
    def library_dir(self) -> Path:
        """Absolute path of the type library (``<root>/lib/epiphany`` by default)."""
        raw = Path(str(self._section_config.get("library_dir") or "lib/epiphany"))
        return raw if raw.is_absolute() else self.repo_root / raw

    def category_dir(self, category: str) -> Path:
        """Directory holding the JSON files of ``category``.

        Raises:
            ValueError: For an unknown category.
        """
        if category not in CATEGORIES:
            raise ValueError(f"Unknown type category: {category!r} (expected one of {CATEGORIES})")
        dirname = self._section_config.get(f"{category}_dir") or category
        return self.library_dir / str(dirname)

    @property
    def file_pattern(self) -> str:
        return str(self._section_config.get("file_pattern") or "*.json")

    @property
    def encoding(self) -> str:
        return str(self._section_config.get("encoding") or "utf-8")

    @property
    def validate_files(self) -> bool:
        return bool(self._section_config.get("validate_files", False))


class LoggingConfig(DomainConfig):
    """Typed access to the ``logging`` configuration section."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        super().__init__(repo_root=repo_root, section="logging")

    @property
    def level(self) -> str:
        return str(self._section_config.get("level") or "WARNING").upper()

    @property
    def log_file(self) -> Optional[Path]:
        raw = self._section_config.get("file")
        if not raw:
            return None
        path = Path(str(raw))
        return path if path.is_absolute() else self.repo_root / path


__all__ = [
    "SchemaConfig",
    "LoggingConfig",
    "ENTITY_TYPES",
    "INTENT_TYPES",
    "CATEGORIES",
]
