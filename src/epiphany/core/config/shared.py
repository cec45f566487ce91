"""Process-wide runtime configuration shared by every tokenizer.

``custom_entity`` registrations land in :attr:`EpiphanyConfig.custom_analyzers`
rather than in a registry, so every registry (and the matching engine)
sees them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from epiphany.core.schema.models import EntityType


@dataclass
class EpiphanyConfig:
    """Shared runtime state.

    Attributes:
        custom_analyzers: Entity types registered from custom configuration
            files, in registration order.
    """

    custom_analyzers: List["EntityType"] = field(default_factory=list)


_CONFIG: Optional[EpiphanyConfig] = None


def get_config() -> EpiphanyConfig:
    """Return the process-wide config, creating it on first use."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = EpiphanyConfig()
    return _CONFIG


def reset_config() -> None:
    """Drop the process-wide config (tests)."""
    global _CONFIG
    _CONFIG = None


__all__ = ["EpiphanyConfig", "get_config", "reset_config"]
