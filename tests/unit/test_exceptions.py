from __future__ import annotations

from epiphany.core.exceptions import (
    ConfigError,
    EpiphanyError,
    SchemaArgumentError,
    SchemaFileNotFoundError,
    SchemaValidationError,
)


def test_argument_error_is_value_error() -> None:
    err = SchemaArgumentError("name: is required", field="name", reason="missing")
    assert isinstance(err, ValueError)
    assert isinstance(err, EpiphanyError)
    assert err.to_json_error() == {
        "message": "name: is required",
        "code": "SchemaArgumentError",
        "context": {"field": "name", "reason": "missing"},
    }


def test_file_not_found_error_hierarchy() -> None:
    err = SchemaFileNotFoundError("gone", field="conf_filepath", path="x.json")
    assert isinstance(err, SchemaArgumentError)
    assert isinstance(err, FileNotFoundError)
    assert err.reason == "not_found"
    assert str(err) == "gone"


def test_validation_error_source() -> None:
    err = SchemaValidationError("bad", source="a.json")
    assert err.context == {"source": "a.json"}
    assert isinstance(err, ValueError)


def test_config_error_is_runtime_error() -> None:
    assert isinstance(ConfigError("x"), RuntimeError)
