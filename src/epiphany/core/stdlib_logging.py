from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_CONFIGURED_TARGET: str | None = None
_EPIPHANY_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Route the ``epiphany`` logger to ``log_path`` (or stderr when ``None``).

    Idempotent per-process: if already configured for the same target, only
    the level is updated.
    """
    global _CONFIGURED_TARGET, _EPIPHANY_HANDLER

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    logger = logging.getLogger("epiphany")
    logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _EPIPHANY_HANDLER is not None:
        _EPIPHANY_HANDLER.setLevel(_level_from_name(level))
        return

    # Replace the Epiphany-installed handler when switching targets.
    if _EPIPHANY_HANDLER is not None:
        logger.removeHandler(_EPIPHANY_HANDLER)
        _EPIPHANY_HANDLER.close()
        _EPIPHANY_HANDLER = None

    if log_path:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _EPIPHANY_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _CONFIGURED_TARGET, _EPIPHANY_HANDLER
    logger = logging.getLogger("epiphany")
    if _EPIPHANY_HANDLER is not None:
        logger.removeHandler(_EPIPHANY_HANDLER)
        _EPIPHANY_HANDLER.close()
    logger.setLevel(logging.NOTSET)
    _CONFIGURED_TARGET = None
    _EPIPHANY_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests", "LOG_FORMAT"]
