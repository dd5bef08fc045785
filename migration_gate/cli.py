"""Command-line entry point for checking start-migration payloads offline."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import GateSettings, configure_logging
from .services.validator import MigrationRequestValidator

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Migration gate - validate start-migration requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a payload file
  migration-gate validate request.json

  # Validate from stdin
  echo '{"cloudName": "acme", "apiKey": "k1", "apiSecret": "0123456789"}' | migration-gate validate
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a JSON payload")
    validate_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to JSON payload, or - for stdin (default)",
    )

    args = parser.parse_args(argv)

    settings = GateSettings.from_env()
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    if args.command == "validate":
        return run_validation(args)

    parser.print_help()
    return 2


def run_validation(args) -> int:
    """Validate a payload and print the result as JSON."""
    try:
        if args.input == "-":
            payload = json.load(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as f:
                payload = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Payload is not valid JSON: {e}")
        return 2
    except UnicodeDecodeError as e:
        logger.error(f"Payload is not valid UTF-8: {e}")
        return 2
    except OSError as e:
        logger.error(f"Could not read payload: {e}")
        return 2

    result = MigrationRequestValidator().validate(payload)
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
