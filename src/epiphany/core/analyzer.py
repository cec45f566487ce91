"""Base class for custom analyzers.

Entity types registered with
:meth:`~epiphany.core.schema.registry.TypeRegistry.custom_entity_type_and_analyzer`
delegate matching to a class that directly subclasses :class:`CustomAnalyzer`.
The matching engine instantiates and drives it; this package only checks
the relationship.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List


class CustomAnalyzer(ABC):
    """Matching strategy for entity types that cannot be expressed as phrases."""

    @abstractmethod
    def analyze(self, text: str) -> List[Any]:
        """Return the matches found in ``text``."""


def is_direct_subclass(candidate: Any) -> bool:
    """True when ``candidate`` is a class whose immediate bases include CustomAnalyzer."""
    return isinstance(candidate, type) and CustomAnalyzer in candidate.__bases__


__all__ = ["CustomAnalyzer", "is_direct_subclass"]
