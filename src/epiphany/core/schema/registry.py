"""Registry of entity types and intent types for a tokenizer.

A tokenizer owns one :class:`TypeRegistry`. Definitions come from three
places:

- the Epiphany library (``lib/epiphany/{entity_types,intent_types}/*.json``),
  via :meth:`TypeRegistry.default_entity_types` and
  :meth:`TypeRegistry.default_intent_types`;
- custom JSON files anywhere on disk, via :meth:`TypeRegistry.custom_entity`
  and :meth:`TypeRegistry.custom_intent`;
- code, via :meth:`TypeRegistry.custom_entity_type_and_analyzer` and
  :meth:`TypeRegistry.custom_intent_type_by_callback`.

Example:

```python
registry = TypeRegistry()
registry.default_intent_types("track_exercise")
registry.default_entity_types("exercise", "metric", "weighted_lift")
registry.custom_intent(name="search_twitter", conf_filepath="custom_intents/search_twitter.json")
registry.custom_entity_type_and_analyzer(entity_name="hashtag", custom_analyzer=HashtagAnalyzer)

for entity in registry.text_match_entity_types():
    ...
```

Every collection is computed on first access and cached for the lifetime
of the registry. Registrations are expected to finish before the first
query; a later one is stored but logs a warning, since views already
computed keep their contents. Nothing here is locked.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config.domains import ENTITY_TYPES, INTENT_TYPES, SchemaConfig
from ..config.shared import EpiphanyConfig, get_config
from .loader import TypeFileLoader
from .models import TEXT_MATCH, EntityType, IntentType
from .parsing import unwrap_intent
from .validation import (
    build_custom_entity,
    build_custom_intent,
    build_entity_type_and_analyzer,
    build_intent_type_by_callback,
)

logger = logging.getLogger(__name__)

# Derived views computed from each collection; cached once read.
_ENTITY_VIEWS = ("_all_entity_types", "_text_match_entity_types", "_custom_analyzer_entity_types")
_INTENT_VIEWS = ("_intent_types",)


class TypeRegistry:
    """Entity and intent types available to one tokenizer.

    Args:
        project_root: Project root holding ``lib/epiphany``. Defaults to
            ``EPIPHANY_PROJECT_ROOT`` or the working directory.
        config: Shared runtime config receiving ``custom_entity``
            registrations. Defaults to the process-wide instance.
        settings: Schema settings; loaded for ``project_root`` when omitted.
    """

    def __init__(
        self,
        project_root: Optional[Path] = None,
        *,
        config: Optional[EpiphanyConfig] = None,
        settings: Optional[SchemaConfig] = None,
    ) -> None:
        self.settings = settings or SchemaConfig(repo_root=project_root)
        self.loader = TypeFileLoader(self.settings)
        self.config = config if config is not None else get_config()

        self._default_entity_types: Optional[List[EntityType]] = None
        self._default_intent_types: Optional[List[IntentType]] = None
        self._custom_entity_types: Dict[str, EntityType] = {}
        self._custom_intents: Dict[str, IntentType] = {}
        self._phrase_tokenizer_dictionary: Dict[str, Any] = {}

        self._all_entity_types: Optional[List[EntityType]] = None
        self._text_match_entity_types: Optional[List[EntityType]] = None
        self._custom_analyzer_entity_types: Optional[List[EntityType]] = None
        self._intent_types: Optional[List[IntentType]] = None

    @property
    def project_root(self) -> Path:
        return self.settings.repo_root

    # =========================================================================
    # Library definitions
    # =========================================================================

    def default_entity_types(self, *names: Any) -> List[EntityType]:
        """Load entity types from the library.

        With no names (or a single name) every entity file is loaded;
        with several names only ``<name>.json`` for each. The first call
        decides: later calls return the cached list whatever their
        arguments.
        """
        if self._default_entity_types is not None:
            if names:
                logger.debug("default_entity_types already loaded; ignoring %r", names)
            return self._default_entity_types

        entities = [
            EntityType.from_raw(data, source=path)
            for path, data in self.loader.load(ENTITY_TYPES, names)
        ]
        logger.info("Loaded %d default entity type(s) from %s", len(entities), self.loader.category_dir(ENTITY_TYPES))
        self._default_entity_types = entities
        return entities

    def default_intent_types(self, *names: Any) -> List[IntentType]:
        """Load intent types from the library.

        Intent files wrap their fields under a single key naming the intent;
        that key becomes the intent's ``type``. Name filtering and caching
        behave as in :meth:`default_entity_types`.
        """
        if self._default_intent_types is not None:
            if names:
                logger.debug("default_intent_types already loaded; ignoring %r", names)
            return self._default_intent_types

        intents: List[IntentType] = []
        for path, data in self.loader.load(INTENT_TYPES, names):
            if isinstance(data, dict) and len(data) > 1:
                logger.warning(
                    "Intent file %s has %d top-level keys; using the first (%s)",
                    path,
                    len(data),
                    next(iter(data)),
                )
            intents.append(IntentType.from_raw(unwrap_intent(data, source=path), source=path))
        logger.info("Loaded %d default intent type(s) from %s", len(intents), self.loader.category_dir(INTENT_TYPES))
        self._default_intent_types = intents
        return intents

    # =========================================================================
    # Custom definitions from files
    # =========================================================================

    def custom_entity(self, **args: Any) -> EntityType:
        """Register an entity type from a custom JSON file.

        Keyword Args:
            name: Entity type name (overrides any ``type`` in the file).
            conf_filepath: Path of the definition (``conf_file_path`` also accepted).

        The entity type is appended to the shared ``custom_analyzers`` list of
        the runtime config, not to this registry's custom entity types.

        Raises:
            SchemaArgumentError: ``name`` or ``conf_filepath`` missing.
            SchemaFileNotFoundError: ``conf_filepath`` does not exist.
        """
        entity = build_custom_entity(encoding=self.settings.encoding, **args).unwrap()
        self.config.custom_analyzers.append(entity)
        logger.info("Registered custom entity %s from %s", entity.type, entity.source)
        return entity

    def custom_intent(self, **args: Any) -> IntentType:
        """Register an intent type from a custom JSON file.

        Keyword Args:
            name: Intent type name.
            conf_filepath: Path of the wrapped definition (``conf_file_path`` also accepted).

        Raises:
            SchemaArgumentError: ``name`` or ``conf_filepath`` missing.
            SchemaFileNotFoundError: ``conf_filepath`` does not exist.
        """
        intent = build_custom_intent(encoding=self.settings.encoding, **args).unwrap()
        self._store_intent(intent)
        logger.info("Registered custom intent %s from %s", intent.type, intent.source)
        return intent

    # =========================================================================
    # Custom definitions from code
    # =========================================================================

    def custom_entity_type_and_analyzer(self, **args: Any) -> EntityType:
        """Register an entity type matched by a custom analyzer.

        Keyword Args:
            entity_name: Identifier string or enum member naming the entity type.
            custom_analyzer: Class directly subclassing ``CustomAnalyzer``.
            **extra: Further entity fields (``known_phrases``, ``required_entities``).

        Raises:
            SchemaArgumentError: Missing or invalid ``entity_name`` or ``custom_analyzer``.
        """
        entity = build_entity_type_and_analyzer(**args).unwrap()
        if entity.type in self._custom_entity_types:
            logger.warning("Custom entity type %s replaces an earlier registration", entity.type)
        self._custom_entity_types[entity.type] = entity
        self._warn_if_computed(_ENTITY_VIEWS, entity.type)
        logger.info("Registered custom analyzer entity %s", entity.type)
        return entity

    def custom_intent_type_by_callback(self, **args: Any) -> IntentType:
        """Register an intent type defined in code.

        Keyword Args:
            intent_name: Identifier string or enum member naming the intent.
            required_entities: Non-empty list of entity type names.
            **extra: Further intent fields (``optional_entities``, ``keywords_boost``).

        Raises:
            SchemaArgumentError: Missing or invalid ``intent_name``, or no
                ``required_entities``.
        """
        intent = build_intent_type_by_callback(**args).unwrap()
        self._store_intent(intent)
        logger.info("Registered callback intent %s", intent.type)
        return intent

    def _store_intent(self, intent: IntentType) -> None:
        if intent.type in self._custom_intents:
            logger.warning("Custom intent %s replaces an earlier registration", intent.type)
        self._custom_intents[intent.type] = intent
        self._warn_if_computed(_INTENT_VIEWS, intent.type)

    # =========================================================================
    # Collections
    # =========================================================================

    @property
    def custom_entity_types(self) -> Dict[str, EntityType]:
        """Callback-registered entity types by name."""
        return self._custom_entity_types

    @property
    def custom_intents(self) -> Dict[str, IntentType]:
        """Custom intent types (file or callback) by name."""
        return self._custom_intents

    @property
    def phrase_tokenizer_dictionary(self) -> Dict[str, Any]:
        """Scratch dictionary the matching engine keeps per registry."""
        return self._phrase_tokenizer_dictionary

    def all_entity_types(self) -> List[EntityType]:
        """Default entity types followed by callback-registered ones (no dedup)."""
        if self._all_entity_types is None:
            self._all_entity_types = self.default_entity_types() + list(self._custom_entity_types.values())
        return self._all_entity_types

    def text_match_entity_types(self) -> List[EntityType]:
        if self._text_match_entity_types is None:
            self._text_match_entity_types = [
                e for e in self.all_entity_types() if e.validation_type == TEXT_MATCH
            ]
        return self._text_match_entity_types

    def custom_analyzer_entity_types(self) -> List[EntityType]:
        if self._custom_analyzer_entity_types is None:
            self._custom_analyzer_entity_types = list(self._custom_entity_types.values())
        return self._custom_analyzer_entity_types

    def intent_types(self) -> List[IntentType]:
        """Default intent types united with custom ones, equal records collapsed."""
        if self._intent_types is None:
            merged: List[IntentType] = []
            for intent in [*self.default_intent_types(), *self._custom_intents.values()]:
                if intent not in merged:
                    merged.append(intent)
            self._intent_types = merged
        return self._intent_types

    def _warn_if_computed(self, views: tuple[str, ...], name: str) -> None:
        computed = [attr.lstrip("_") for attr in views if getattr(self, attr) is not None]
        if computed:
            logger.warning(
                "%s registered after %s were computed; cached views will not include it",
                name,
                ", ".join(computed),
            )

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_entity_type(self, name: str) -> Optional[EntityType]:
        """Entity type named ``name``; later sources win over earlier ones."""
        found: Optional[EntityType] = None
        for entity in self.all_entity_types():
            if entity.type == name:
                found = entity
        return found

    def get_intent_type(self, name: str) -> Optional[IntentType]:
        """Intent type named ``name``; custom intents win over library ones."""
        found: Optional[IntentType] = None
        for intent in self.intent_types():
            if intent.type == name:
                found = intent
        return found

    def list_entity_names(self) -> List[str]:
        return sorted({e.type for e in self.all_entity_types()})

    def list_intent_names(self) -> List[str]:
        return sorted({i.type for i in self.intent_types()})


__all__ = ["TypeRegistry"]
