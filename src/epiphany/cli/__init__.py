"""
Epiphany CLI package.

Provides the command-line interface with auto-discovery of commands
from subfolders (schema/, ...).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_repo_root_flag,
    add_log_level_flag,
    add_standard_flags,
)
from ._utils import build_registry, get_repo_root, setup_logging

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_repo_root_flag",
    "add_log_level_flag",
    "add_standard_flags",
    "build_registry",
    "get_repo_root",
    "setup_logging",
]
