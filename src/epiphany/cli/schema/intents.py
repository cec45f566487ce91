"""
Epiphany schema intents command.

SUMMARY: List intent types
"""

from __future__ import annotations

import argparse
import sys

from epiphany.cli import OutputFormatter, add_standard_flags, build_registry
from epiphany.core.exceptions import EpiphanyError

SUMMARY = "List intent types"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "names",
        nargs="*",
        help="Library intent types to load (default: all; a single name also loads all)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """List intent types loaded from the library."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        registry = build_registry(args)
        registry.default_intent_types(*args.names)
        intents = registry.intent_types()

        if args.json:
            formatter.json_output({
                "intent_types": [i.to_dict() for i in intents],
                "count": len(intents),
            })
        else:
            formatter.text(f"Intent types ({len(intents)}):")
            for intent in intents:
                required = ", ".join(intent.required_entities) or "-"
                formatter.text(f"  {intent.type} (requires: {required})")
                if intent.optional_entities:
                    formatter.text(f"    optional: {', '.join(intent.optional_entities)}")
                if intent.keywords_boost:
                    formatter.text(f"    boost: {', '.join(intent.keywords_boost)}")
        return 0

    except (EpiphanyError, ValueError, OSError) as e:
        formatter.error(e, error_code="intent_types_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
