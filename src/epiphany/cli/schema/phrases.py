"""
Epiphany schema phrases command.

SUMMARY: Show the validation phrases of an entity type

Known phrases are expanded to their lower-case singular and plural forms,
which is what the matching engine compares against.
"""

from __future__ import annotations

import argparse
import sys

from epiphany.cli import OutputFormatter, add_standard_flags, build_registry
from epiphany.core.exceptions import EpiphanyError

SUMMARY = "Show the validation phrases of an entity type"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("entity", help="Entity type name")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        registry = build_registry(args)
        entity = registry.get_entity_type(args.entity)
        if entity is None:
            raise EpiphanyError(
                f"Unknown entity type: {args.entity}",
                context={"available": registry.list_entity_names()},
            )
        phrases = list(entity.phrases_for_validation())

        if args.json:
            formatter.json_output({"entity_type": entity.type, "phrases": phrases, "count": len(phrases)})
        else:
            formatter.text(f"{entity.type} ({len(phrases)} phrases):")
            for phrase in phrases:
                formatter.text(f"  {phrase}")
        return 0

    except (EpiphanyError, ValueError, OSError) as e:
        formatter.error(e, error_code="phrases_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
