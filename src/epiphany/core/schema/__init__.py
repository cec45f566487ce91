"""Entity type and intent type schema registry.

- **Records**: EntityType (immutable), IntentType (mutable)
- **Loading**: TypeFileLoader resolves and parses library JSON files
- **Validation**: structured FieldError results for custom registrations
- **Registry**: TypeRegistry, the object a tokenizer queries

Example usage:
    from epiphany.core.schema import TypeRegistry

    registry = TypeRegistry()
    registry.default_entity_types("exercise", "metric")
    phrases = registry.get_entity_type("metric").phrases_for_validation()
"""
from __future__ import annotations

from .models import CUSTOM_ANALYZER, TEXT_MATCH, EntityType, IntentType
from .loader import TypeFileLoader
from .parsing import normalize_raw, unwrap_intent
from .validation import (
    FieldError,
    Validated,
    build_custom_entity,
    build_custom_intent,
    build_entity_type_and_analyzer,
    build_intent_type_by_callback,
)
from .registry import TypeRegistry

__all__ = [
    # Records
    "EntityType",
    "IntentType",
    "TEXT_MATCH",
    "CUSTOM_ANALYZER",
    # Loading
    "TypeFileLoader",
    "normalize_raw",
    "unwrap_intent",
    # Validation
    "FieldError",
    "Validated",
    "build_custom_entity",
    "build_custom_intent",
    "build_entity_type_and_analyzer",
    "build_intent_type_by_callback",
    # Registry
    "TypeRegistry",
]
