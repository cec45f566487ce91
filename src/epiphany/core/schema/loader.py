"""Resolution and parsing of type definition files.

Definitions live in one directory per category::

    <project-root>/lib/epiphany/entity_types/*.json
    <project-root>/lib/epiphany/intent_types/*.json
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import jsonschema

from epiphany.data import read_json as read_bundled_json

from ..config.domains import CATEGORIES, SchemaConfig
from ..utils.json_io import read_json
from .parsing import atom_name

logger = logging.getLogger(__name__)


def flatten_names(names: Iterable[Any]) -> List[str]:
    """Flatten nested name groups into a flat list of string names."""
    out: List[str] = []
    for name in names:
        if isinstance(name, (list, tuple, set, frozenset)):
            out.extend(flatten_names(name))
        elif name is not None:
            out.append(atom_name(name))
    return out


class TypeFileLoader:
    """Resolve a category and optional names to definition files and parse them.

    Args:
        settings: Schema settings; resolved from the project root when omitted.
        project_root: Project root used when ``settings`` is not given.
    """

    def __init__(
        self,
        settings: Optional[SchemaConfig] = None,
        *,
        project_root: Optional[Path] = None,
    ) -> None:
        self.settings = settings or SchemaConfig(repo_root=project_root)

    def category_dir(self, category: str) -> Path:
        return self.settings.category_dir(category)

    def file_paths_for(self, category: str, names: Sequence[Any] = ()) -> List[Path]:
        """Resolve definition files for ``category``.

        With zero or one name argument every file matching the configured
        pattern is returned, sorted by name. With more than one, each
        (flattened) name resolves to ``<name>.json``; names without a file
        contribute nothing.
        """
        directory = self.category_dir(category)
        if len(names) > 1:
            paths: List[Path] = []
            for name in flatten_names(names):
                path = directory / f"{name}.json"
                if path.is_file():
                    paths.append(path)
                else:
                    logger.debug("No %s definition for %r at %s", category, name, path)
            return paths

        if not directory.is_dir():
            logger.debug("Type directory %s does not exist", directory)
            return []
        return sorted(p for p in directory.glob(self.settings.file_pattern) if p.is_file())

    def read(self, path: Path, category: Optional[str] = None) -> Any:
        """Parse one definition file.

        When ``schema.validate_files`` is enabled and ``category`` is given,
        the document is checked against the bundled category schema.

        Raises:
            json.JSONDecodeError: Malformed JSON (propagated unchanged).
            jsonschema.ValidationError: Schema violation when validating.
        """
        data = read_json(path, encoding=self.settings.encoding)
        if category is not None and self.settings.validate_files:
            self.validate(data, category)
        return data

    def validate(self, data: Any, category: str) -> None:
        """Check ``data`` against the bundled JSON schema for ``category``."""
        if category not in CATEGORIES:
            raise ValueError(f"Unknown type category: {category!r}")
        schema = read_bundled_json("schemas", f"{category[:-1]}.schema.json")
        jsonschema.validate(instance=data, schema=schema)

    def load(self, category: str, names: Sequence[Any] = ()) -> List[Tuple[Path, Any]]:
        """Resolve and parse files, returning ``(path, data)`` pairs."""
        paths = self.file_paths_for(category, names)
        logger.debug("Loading %d %s file(s)", len(paths), category)
        return [(path, self.read(path, category)) for path in paths]


__all__ = ["TypeFileLoader", "flatten_names"]
