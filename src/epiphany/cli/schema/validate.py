"""
Epiphany schema validate command.

SUMMARY: Validate every library definition file

Loads all entity and intent type files with JSON Schema checking enabled,
regardless of ``schema.validate_files``. Stops at the first failure.
"""

from __future__ import annotations

import argparse
import sys

import jsonschema

from epiphany.cli import OutputFormatter, add_standard_flags, build_registry
from epiphany.core.exceptions import EpiphanyError

SUMMARY = "Validate every library definition file"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        registry = build_registry(args, validate_files=True)
        entities = registry.default_entity_types()
        intents = registry.default_intent_types()
    except jsonschema.ValidationError as e:
        formatter.error(e, message=f"Schema violation: {e.message}", error_code="schema_violation")
        return 1
    except (EpiphanyError, ValueError, OSError) as e:
        formatter.error(e, error_code="invalid_definition")
        return 1

    formatter.success(
        {"entity_types": len(entities), "intent_types": len(intents)},
        f"OK: {len(entities)} entity type(s), {len(intents)} intent type(s)",
    )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
