"""
Epiphany schema entities command.

SUMMARY: List entity types
"""

from __future__ import annotations

import argparse
import sys

from epiphany.cli import OutputFormatter, add_standard_flags, build_registry
from epiphany.core.exceptions import EpiphanyError

SUMMARY = "List entity types"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "names",
        nargs="*",
        help="Library entity types to load (default: all; a single name also loads all)",
    )
    parser.add_argument(
        "--text-match",
        action="store_true",
        help="Only list text_match entity types",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """List entity types loaded from the library."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        registry = build_registry(args)
        registry.default_entity_types(*args.names)
        entities = (
            registry.text_match_entity_types()
            if args.text_match
            else registry.all_entity_types()
        )

        if args.json:
            formatter.json_output({
                "entity_types": [e.to_dict() for e in entities],
                "count": len(entities),
            })
        else:
            formatter.text(f"Entity types ({len(entities)}):")
            for entity in entities:
                phrases = len(entity.known_phrases)
                formatter.text(f"  {entity.type} [{entity.validation_type or '-'}] ({phrases} known phrases)")
        return 0

    except (EpiphanyError, ValueError, OSError) as e:
        formatter.error(e, error_code="entity_types_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
