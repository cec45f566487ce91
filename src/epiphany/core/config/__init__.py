"""Configuration for Epiphany.

- ConfigManager: layered YAML loading (defaults, project, env)
- SchemaConfig / LoggingConfig: typed section access
- EpiphanyConfig: process-wide runtime state (shared custom analyzers)
"""
from __future__ import annotations

from .manager import ConfigManager
from .base import DomainConfig
from .domains import (
    CATEGORIES,
    ENTITY_TYPES,
    INTENT_TYPES,
    LoggingConfig,
    SchemaConfig,
)
from .shared import EpiphanyConfig, get_config, reset_config

__all__ = [
    "ConfigManager",
    "DomainConfig",
    "SchemaConfig",
    "LoggingConfig",
    "CATEGORIES",
    "ENTITY_TYPES",
    "INTENT_TYPES",
    "EpiphanyConfig",
    "get_config",
    "reset_config",
]
