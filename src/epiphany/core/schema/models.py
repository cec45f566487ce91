"""Entity type and intent type records.

EntityType is an immutable value object: every field is fixed at
construction and sequences are stored as tuples. IntentType is a plain
mutable record; callers may adjust it after loading.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import inflection

from ..exceptions import SchemaValidationError
from .parsing import (
    atom_name,
    infer_type_from_path,
    normalize_raw,
    string_list,
    string_tuple,
)

TEXT_MATCH = "text_match"
CUSTOM_ANALYZER = "custom_analyzer"


def _phrase_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v is not None]


def _resolve_type(data: Dict[str, Any], source: Optional[Path | str]) -> str:
    explicit = data.get("type")
    if explicit is not None and atom_name(explicit):
        return atom_name(explicit)
    inferred = infer_type_from_path(source)
    if inferred:
        return inferred
    raise SchemaValidationError(
        "type name missing: no 'type' field and no '<name>.json' source to infer it from",
        source=str(source) if source is not None else None,
    )


@dataclass(frozen=True)
class EntityType:
    """A named span of meaning the tokenizer can recognize.

    Attributes:
        type: Entity type name (e.g. ``metric``)
        validation_type: Matching strategy tag (``text_match``, ``custom_analyzer``, ...)
        known_phrases: Literal phrases used for matching
        required_entities: Entity type names that must co-occur
        custom_analyzer: Analyzer class for callback-registered entity types
        source: File path or registration name the record was built from
    """

    type: str
    validation_type: Optional[str] = None
    known_phrases: Tuple[str, ...] = ()
    required_entities: Tuple[str, ...] = ()
    custom_analyzer: Any = field(default=None, compare=False)
    source: Optional[str] = field(default=None, compare=False)
    _phrases: Optional[Tuple[str, ...]] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_raw(cls, raw: Mapping[Any, Any], source: Optional[Path | str] = None) -> "EntityType":
        """Build an EntityType from a raw definition.

        Args:
            raw: Parsed JSON object or keyword mapping; string keys take
                precedence over symbol-like keys naming the same field.
            source: Definition file path (used to infer ``type``) or name.

        Raises:
            SchemaValidationError: If ``raw`` is not a mapping or no type name
                can be determined.
        """
        data = normalize_raw(raw, source=source)
        validation_type = data.get("validation_type")
        return cls(
            type=_resolve_type(data, source),
            validation_type=atom_name(validation_type) if validation_type is not None else None,
            known_phrases=tuple(_phrase_list(data.get("known_phrases"))),
            required_entities=string_tuple(data.get("required_entities")),
            custom_analyzer=data.get("custom_analyzer"),
            source=str(source) if source is not None else None,
        )

    def phrases_for_validation(self) -> Tuple[str, ...]:
        """Known phrases expanded to lower-case singular, original and plural forms.

        Empty entries are dropped and duplicates removed, keeping the first
        occurrence. Computed once per instance.
        """
        if self._phrases is None:
            expanded: List[str] = []
            for phrase in self.known_phrases:
                lowered = phrase.lower()
                expanded.extend(
                    (inflection.singularize(lowered), lowered, inflection.pluralize(lowered))
                )
            phrases = tuple(dict.fromkeys(p for p in expanded if p))
            object.__setattr__(self, "_phrases", phrases)
        return self._phrases  # type: ignore[return-value]

    @property
    def is_text_match(self) -> bool:
        return self.validation_type == TEXT_MATCH

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (analyzer classes by qualified name)."""
        analyzer = self.custom_analyzer
        if isinstance(analyzer, type):
            analyzer = f"{analyzer.__module__}.{analyzer.__qualname__}"
        return {
            "type": self.type,
            "validation_type": self.validation_type,
            "known_phrases": list(self.known_phrases),
            "required_entities": list(self.required_entities),
            "custom_analyzer": analyzer,
        }


@dataclass
class IntentType:
    """A named user intent composed of entity types and boost keywords."""

    type: str
    required_entities: List[str] = field(default_factory=list)
    optional_entities: List[str] = field(default_factory=list)
    keywords_boost: List[str] = field(default_factory=list)
    source: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_raw(cls, raw: Mapping[Any, Any], source: Optional[Path | str] = None) -> "IntentType":
        """Build an IntentType from an already unwrapped raw definition.

        Raises:
            SchemaValidationError: If no type name can be determined.
        """
        data = normalize_raw(raw, source=source)
        return cls(
            type=_resolve_type(data, source),
            required_entities=string_list(data.get("required_entities")),
            optional_entities=string_list(data.get("optional_entities")),
            keywords_boost=_phrase_list(data.get("keywords_boost")),
            source=str(source) if source is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "required_entities": list(self.required_entities),
            "optional_entities": list(self.optional_entities),
            "keywords_boost": list(self.keywords_boost),
        }


__all__ = ["EntityType", "IntentType", "TEXT_MATCH", "CUSTOM_ANALYZER"]
