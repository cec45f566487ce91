"""
Epiphany configuration management (YAML).

Precedence (in increasing order):
  1) Bundled defaults (``epiphany/data/config/defaults.yaml``)
  2) Project overlays (``<project-root>/.epiphany/config/*.yml``)
  3) Environment overrides (``EPIPHANY_*``)

Environment overrides:
- Path separator: double underscore ``__`` (e.g.,
  ``EPIPHANY_schema__validate_files=true``).
- Case handling: case-insensitive lookup against existing keys; new keys
  keep the case they were given in.
- Type coercion: bool/int/float/JSON-like strings are coerced.
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from ..exceptions import ConfigError
from ..utils.paths import resolve_project_root

logger = logging.getLogger(__name__)

ENV_PREFIX = "EPIPHANY_"
PROJECT_CONFIG_DIRNAME = ".epiphany"


class ConfigManager:
    """Load, merge, and validate Epiphany configuration.

    Typical usage:

    ```python
    from epiphany.core.config import ConfigManager
    mgr = ConfigManager()
    cfg = mgr.load_config(validate=True)
    ```

    Attributes:
        repo_root: Project root used to resolve config files.
        core_config_dir: Bundled config directory holding ``defaults.yaml``.
        project_config_dir: Project overlay directory
            (``<repo_root>/.epiphany/config``), where ``*.yml`` files are loaded.
        schemas_dir: Directory holding the bundled JSON schemas.
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        from epiphany.data import get_data_path

        self.repo_root = resolve_project_root(repo_root)
        self.core_config_dir = get_data_path("config")
        self.core_defaults_path = self.core_config_dir / "defaults.yaml"
        self.project_config_dir = self.repo_root / PROJECT_CONFIG_DIRNAME / "config"
        self.schemas_dir = get_data_path("schemas")

    # ---------- Merge helpers ----------
    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge ``override`` into ``base`` returning a copy.

        Dicts are merged recursively. Lists support simple strategies:
        - If override list begins with a string starting with ``+``, append the
          remaining items to the base list.
        - If override list begins with ``=``, replace base with the remaining items.
        - Otherwise, replace the entire list with the override list.
        """
        result: Dict[str, Any] = dict(base)
        for key, value in (override or {}).items():
            if key in result:
                if isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = self.deep_merge(result[key], value)
                elif isinstance(result[key], list) and isinstance(value, list):
                    result[key] = self._merge_arrays(result[key], value)
                else:
                    result[key] = value
            else:
                result[key] = value
        return result

    def _merge_arrays(self, base: List[Any], override: List[Any]) -> List[Any]:
        if not override:
            return base
        first = override[0]
        if isinstance(first, str):
            if first.startswith("+"):
                return [*base, *override[1:]]
            if first == "=":
                return list(override[1:])
        return list(override)

    # ---------- IO helpers ----------
    def load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file into a dict.

        Returns an empty dict when the file does not exist.

        Raises:
            yaml.YAMLError: If the file exists but contains invalid YAML.
        """
        if not path.exists():
            return {}
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data or {}

    # ---------- Validation ----------
    def validate_schema(self, config: Dict[str, Any], schema_name: str) -> None:
        """Validate configuration against a bundled JSON schema file.

        Raises:
            jsonschema.ValidationError: If validation fails.
        """
        schema_path = self.schemas_dir / schema_name
        if not schema_path.exists():
            logger.warning("Schema %s not found at %s", schema_name, schema_path)
            return
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
        jsonschema.validate(instance=config, schema=schema)

    # ---------- Type coercion helpers ----------
    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        """Coerce string to bool/int/float/JSON when appropriate.

        Falls back to the stripped string when no coercion applies. ``null``
        maps to ``None``.
        """
        if value.strip().lower() == "null":
            return None
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    # ---------- Environment overrides ----------
    def _iter_env_overrides(self, *, strict: bool) -> Iterator[Tuple[List[str], Any, str]]:
        """Yield parsed environment overrides as (path, value, raw_key).

        Segments are separated by double underscores. Keys with an empty
        segment are malformed: they raise when ``strict`` and are skipped
        otherwise.
        """
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            # EPIPHANY_PROJECT_ROOT is a path setting, not a config key.
            if "__" not in raw:
                continue
            segs = raw.split("__")
            if any(seg == "" for seg in segs):
                if strict:
                    raise ConfigError(
                        f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'",
                        context={"key": key},
                    )
                continue
            yield segs, self._coerce_type(os.environ[key]), raw

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        """Set a nested value into ``root`` creating dicts as needed.

        Existing keys are matched case-insensitively.

        Raises:
            ConfigError: When the path traverses a non-dict value.
        """
        cur = root
        for i, part in enumerate(path):
            lower_map = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            use_key = lower_map.get(part.lower(), part)
            if i == len(path) - 1:
                cur[use_key] = value
                return
            nxt = cur.get(use_key)
            if nxt is None:
                nxt = {}
                cur[use_key] = nxt
            elif not isinstance(nxt, dict):
                raise ConfigError(
                    f"Path traverses non-dict value (path='{'__'.join(path)}', "
                    f"got {type(nxt).__name__})",
                    context={"path": "__".join(path)},
                )
            cur = nxt

    def apply_env_overrides(self, cfg: Dict[str, Any], *, strict: bool) -> None:
        """Apply ``EPIPHANY_*`` overrides in-place to ``cfg``."""
        for path, typed_value, raw in self._iter_env_overrides(strict=strict):
            try:
                self._set_nested(cfg, path, typed_value)
            except ConfigError:
                if strict:
                    raise
                logger.debug("Skipping unusable override %s%s", ENV_PREFIX, raw)

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load configuration with correct precedence and optional validation.

        Precedence (lowest to highest): defaults, project, env.

        Args:
            validate: When ``True`` (default), validate the merged configuration
                against ``config.schema.json`` and treat malformed env keys as
                errors.
        """
        cfg: Dict[str, Any] = self.load_yaml(self.core_defaults_path)

        if self.project_config_dir.exists():
            for path in sorted(self.project_config_dir.glob("*.yml")):
                logger.debug("Applying project config overlay %s", path)
                cfg = self.deep_merge(cfg, self.load_yaml(path))

        self.apply_env_overrides(cfg, strict=validate)

        if validate:
            self.validate_schema(cfg, "config.schema.json")

        return cfg


__all__ = ["ConfigManager", "ENV_PREFIX", "PROJECT_CONFIG_DIRNAME"]
