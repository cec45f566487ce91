"""Tests for layered configuration loading."""
from __future__ import annotations

from pathlib import Path

import jsonschema
import pytest

from epiphany.core.config import ConfigManager, LoggingConfig, SchemaConfig
from epiphany.core.exceptions import ConfigError
from helpers.schema_files import write_project_config


class TestLoadConfig:
    def test_bundled_defaults(self, isolated_project_env: Path) -> None:
        cfg = ConfigManager().load_config()
        assert cfg["schema"]["library_dir"] == "lib/epiphany"
        assert cfg["schema"]["entity_types_dir"] == "entity_types"
        assert cfg["schema"]["intent_types_dir"] == "intent_types"
        assert cfg["schema"]["validate_files"] is False
        assert cfg["logging"]["level"] == "WARNING"

    def test_project_overlay(self, isolated_project_env: Path) -> None:
        write_project_config(isolated_project_env, "schema", "schema:\n  library_dir: vocab\n")
        cfg = ConfigManager().load_config()
        assert cfg["schema"]["library_dir"] == "vocab"
        assert cfg["schema"]["entity_types_dir"] == "entity_types"

    def test_overlays_applied_in_name_order(self, isolated_project_env: Path) -> None:
        write_project_config(isolated_project_env, "a", "logging:\n  level: INFO\n")
        write_project_config(isolated_project_env, "b", "logging:\n  level: DEBUG\n")
        assert ConfigManager().load_config()["logging"]["level"] == "DEBUG"

    def test_env_override_wins(self, isolated_project_env: Path, monkeypatch) -> None:
        write_project_config(isolated_project_env, "schema", "schema:\n  validate_files: false\n")
        monkeypatch.setenv("EPIPHANY_schema__validate_files", "true")
        assert ConfigManager().load_config()["schema"]["validate_files"] is True

    def test_env_override_case_insensitive(self, isolated_project_env: Path, monkeypatch) -> None:
        monkeypatch.setenv("EPIPHANY_SCHEMA__LIBRARY_DIR", "vocab")
        cfg = ConfigManager().load_config()
        assert cfg["schema"]["library_dir"] == "vocab"
        assert "LIBRARY_DIR" not in cfg["schema"]

    def test_malformed_env_key_strict(self, isolated_project_env: Path, monkeypatch) -> None:
        monkeypatch.setenv("EPIPHANY_schema____encoding", "latin-1")
        with pytest.raises(ConfigError):
            ConfigManager().load_config(validate=True)
        assert ConfigManager().load_config(validate=False)["schema"]["encoding"] == "utf-8"

    def test_invalid_config_rejected_by_schema(self, isolated_project_env: Path) -> None:
        write_project_config(isolated_project_env, "schema", "schema:\n  validate_files: sometimes\n")
        with pytest.raises(jsonschema.ValidationError):
            ConfigManager().load_config(validate=True)

    def test_repo_root_from_environment(self, isolated_project_env: Path) -> None:
        assert ConfigManager().repo_root == isolated_project_env.resolve()

    def test_missing_repo_root(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            ConfigManager(tmp_path / "nope")


class TestMerge:
    def test_deep_merge(self, isolated_project_env: Path) -> None:
        mgr = ConfigManager()
        merged = mgr.deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}})
        assert merged == {"a": {"b": 1, "c": 3}}

    def test_list_strategies(self, isolated_project_env: Path) -> None:
        mgr = ConfigManager()
        assert mgr.deep_merge({"l": [1]}, {"l": ["+", 2]}) == {"l": [1, 2]}
        assert mgr.deep_merge({"l": [1]}, {"l": ["=", 2]}) == {"l": [2]}
        assert mgr.deep_merge({"l": [1]}, {"l": [3]}) == {"l": [3]}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("true", True),
        ("False", False),
        ("12", 12),
        ("1.5", 1.5),
        ('["a"]', ["a"]),
        ("null", None),
        (" plain ", "plain"),
    ],
)
def test_coerce_type(isolated_project_env: Path, raw, expected) -> None:
    assert ConfigManager()._coerce_type(raw) == expected


class TestSectionConfigs:
    def test_schema_config_paths(self, isolated_project_env: Path) -> None:
        settings = SchemaConfig()
        root = isolated_project_env.resolve()
        assert settings.library_dir == root / "lib" / "epiphany"
        assert settings.category_dir("entity_types") == root / "lib" / "epiphany" / "entity_types"
        assert settings.file_pattern == "*.json"
        assert settings.encoding == "utf-8"
        assert settings.validate_files is False

    def test_schema_config_overrides(self, isolated_project_env: Path) -> None:
        settings = SchemaConfig(overrides={"intent_types_dir": "intents", "validate_files": True})
        assert settings.category_dir("intent_types").name == "intents"
        assert settings.validate_files is True

    def test_unknown_category(self, isolated_project_env: Path) -> None:
        with pytest.raises(ValueError):
            SchemaConfig().category_dir("widgets")

    def test_logging_config(self, isolated_project_env: Path) -> None:
        write_project_config(isolated_project_env, "logging", "logging:\n  level: debug\n  file: logs/epiphany.log\n")
        cfg = LoggingConfig()
        assert cfg.level == "DEBUG"
        assert cfg.log_file == isolated_project_env.resolve() / "logs" / "epiphany.log"
