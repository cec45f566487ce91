"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag for project root override."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override project root path (directory containing lib/epiphany)",
    )


def add_log_level_flag(parser: argparse.ArgumentParser) -> None:
    """Add --log-level flag overriding ``logging.level`` from configuration."""
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Log level (default: from configuration)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json, --repo-root and --log-level."""
    add_json_flag(parser)
    add_repo_root_flag(parser)
    add_log_level_flag(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_log_level_flag",
    "add_standard_flags",
]
