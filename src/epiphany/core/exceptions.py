from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class EpiphanyError(Exception):
    """Base exception for Epiphany."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class SchemaArgumentError(EpiphanyError, ValueError):
    """Raised when a registration call is missing or given an invalid argument."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        reason: Optional[str] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        if reason:
            ctx["reason"] = reason
        EpiphanyError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.field = field
        self.reason = reason


class SchemaFileNotFoundError(SchemaArgumentError, FileNotFoundError):
    """Raised when a registration call points at a configuration file that does not exist."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        SchemaArgumentError.__init__(
            self,
            message,
            field=field,
            reason="not_found",
            context={"path": path} if path else None,
        )
        FileNotFoundError.__init__(self, message)
        self.path = path


class SchemaValidationError(EpiphanyError, ValueError):
    """Raised when raw type data cannot be normalized into a record."""

    def __init__(
        self,
        message: str,
        *,
        source: Optional[str] = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if source:
            ctx["source"] = source
        EpiphanyError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.source = source


class ConfigError(EpiphanyError, RuntimeError):
    """Raised for malformed configuration or environment overrides."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        EpiphanyError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


__all__ = [
    "EpiphanyError",
    "SchemaArgumentError",
    "SchemaFileNotFoundError",
    "SchemaValidationError",
    "ConfigError",
]
