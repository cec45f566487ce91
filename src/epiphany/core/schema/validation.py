"""Argument validation and record factories for custom registrations.

Every ``build_*`` factory returns a :class:`Validated` result holding either
the built record or a :class:`FieldError` naming the offending argument.
:class:`~epiphany.core.schema.registry.TypeRegistry` unwraps these (raising
on error); callers that want to recover can use the factories directly.

Malformed JSON in a referenced file is not an argument problem and still
raises from the parser.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Generic, Mapping, Optional, Tuple, TypeVar

from ..analyzer import CustomAnalyzer, is_direct_subclass
from ..exceptions import SchemaArgumentError, SchemaFileNotFoundError
from ..utils.json_io import DEFAULT_ENCODING, read_json
from .models import CUSTOM_ANALYZER, EntityType, IntentType
from .parsing import atom_name, is_symbol_like, normalize_raw, unwrap_intent

T = TypeVar("T")

MISSING = "missing"
INVALID = "invalid"
NOT_FOUND = "not_found"


@dataclass(frozen=True)
class FieldError:
    """Which registration argument was missing or invalid, and why.

    Attributes:
        field: Argument name (``name``, ``conf_filepath``, ``entity_name``, ...)
        reason: One of ``missing``, ``invalid``, ``not_found``
        message: Human-readable description
        path: Offending file path for ``not_found`` errors
    """

    field: str
    reason: str
    message: str
    path: Optional[str] = None

    def to_exception(self) -> SchemaArgumentError:
        if self.reason == NOT_FOUND:
            return SchemaFileNotFoundError(self.message, field=self.field, path=self.path)
        return SchemaArgumentError(self.message, field=self.field, reason=self.reason)


@dataclass(frozen=True)
class Validated(Generic[T]):
    """Either a value or a :class:`FieldError`."""

    value: Optional[T] = None
    error: Optional[FieldError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the error as an exception."""
        if self.error is not None:
            raise self.error.to_exception()
        return self.value  # type: ignore[return-value]


def _fail(field: str, reason: str, message: str, path: Optional[str] = None) -> Validated[Any]:
    return Validated(error=FieldError(field=field, reason=reason, message=message, path=path))


# ---------- Argument validation ----------

def validate_custom_args(args: Mapping[str, Any], *, caller: str = "custom_entity") -> Validated[Tuple[str, Path]]:
    """Check ``name`` and ``conf_filepath`` (or ``conf_file_path``) of a file registration."""
    filepath = args.get("conf_filepath") or args.get("conf_file_path")
    if not args.get("name"):
        return _fail("name", MISSING, f"name: is required for Tokenizer {caller}.")
    if not filepath:
        return _fail("conf_filepath", MISSING, f"conf_filepath: is required for Tokenizer {caller}.")
    path = Path(filepath)
    if not path.is_file():
        return _fail(
            "conf_filepath",
            NOT_FOUND,
            f"conf_filepath: {filepath} : ERROR - provided conf file does not exist",
            path=str(filepath),
        )
    return Validated(value=(atom_name(args["name"]), path))


def validate_entity_analyzer_args(args: Mapping[str, Any]) -> Validated[Dict[str, Any]]:
    """Check a callback entity registration and synthesize its ``type`` and ``validation_type``."""
    entity_name = args.get("entity_name")
    analyzer = args.get("custom_analyzer")
    if not entity_name:
        return _fail("entity_name", MISSING, "entity_name: is required for Tokenizer custom entity callback.")
    if not is_symbol_like(entity_name):
        return _fail(
            "entity_name",
            INVALID,
            "entity_name: must be a symbol-like name (identifier string or enum member) "
            "for Tokenizer custom entity callback.",
        )
    if not analyzer:
        return _fail("custom_analyzer", MISSING, "custom_analyzer: is required for Tokenizer custom entity type analyzer.")
    if not is_direct_subclass(analyzer):
        return _fail(
            "custom_analyzer",
            INVALID,
            f"custom_analyzer: must be a subclass of {CustomAnalyzer.__module__}.{CustomAnalyzer.__qualname__}",
        )
    normalized = dict(args)
    normalized["type"] = atom_name(entity_name)
    normalized["validation_type"] = CUSTOM_ANALYZER
    return Validated(value=normalized)


def validate_intent_callback_args(args: Mapping[str, Any]) -> Validated[Dict[str, Any]]:
    """Check a callback intent registration and synthesize its ``type``."""
    intent_name = args.get("intent_name")
    if not intent_name:
        return _fail("intent_name", MISSING, "intent_name: is required for Tokenizer custom intent callback.")
    if not is_symbol_like(intent_name):
        return _fail(
            "intent_name",
            INVALID,
            "intent_name: must be a symbol-like name (identifier string or enum member) "
            "for Tokenizer custom intent callback.",
        )
    if not args.get("required_entities"):
        return _fail(
            "required_entities",
            MISSING,
            "required_entities: [some_entity] is required for Tokenizer custom intent callback.",
        )
    normalized = dict(args)
    normalized["type"] = atom_name(intent_name)
    return Validated(value=normalized)


# ---------- Factories ----------

def build_custom_entity(*, encoding: str = DEFAULT_ENCODING, **args: Any) -> Validated[EntityType]:
    """Build an EntityType from ``conf_filepath`` named ``name``."""
    checked = validate_custom_args(args, caller="custom_entity")
    if not checked.ok:
        return Validated(error=checked.error)
    name, path = checked.unwrap()
    conf = normalize_raw(read_json(path, encoding=encoding), source=path)
    conf["type"] = name
    return Validated(value=EntityType.from_raw(conf, source=path))


def build_custom_intent(*, encoding: str = DEFAULT_ENCODING, **args: Any) -> Validated[IntentType]:
    """Build an IntentType from the wrapped definition in ``conf_filepath``."""
    checked = validate_custom_args(args, caller="custom_intent")
    if not checked.ok:
        return Validated(error=checked.error)
    name, path = checked.unwrap()
    conf = unwrap_intent(read_json(path, encoding=encoding), name, source=path)
    conf["type"] = name
    return Validated(value=IntentType.from_raw(conf, source=path))


def build_entity_type_and_analyzer(**args: Any) -> Validated[EntityType]:
    """Build a custom-analyzer EntityType from the registration arguments themselves."""
    checked = validate_entity_analyzer_args(args)
    if not checked.ok:
        return Validated(error=checked.error)
    raw = checked.unwrap()
    return Validated(value=EntityType.from_raw(raw, source=raw["type"]))


def build_intent_type_by_callback(**args: Any) -> Validated[IntentType]:
    """Build an IntentType from the registration arguments themselves."""
    checked = validate_intent_callback_args(args)
    if not checked.ok:
        return Validated(error=checked.error)
    raw = checked.unwrap()
    return Validated(value=IntentType.from_raw(raw, source=raw["type"]))


__all__ = [
    "FieldError",
    "Validated",
    "MISSING",
    "INVALID",
    "NOT_FOUND",
    "validate_custom_args",
    "validate_entity_analyzer_args",
    "validate_intent_callback_args",
    "build_custom_entity",
    "build_custom_intent",
    "build_entity_type_and_analyzer",
    "build_intent_type_by_callback",
]
