"""CLI entry point for locale-subcountry dataset maintenance."""

import argparse
import logging
import sys

from locale_subcountry.dataset import MalformedDatasetError, default_dataset_path, load_dataset
from locale_subcountry.utils.validators import VALIDATION_RULES, validate_dataset

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="locale-subcountry",
        description="Locale SubCountry - ISO 3166-2 / FIPS 10-4 dataset tools",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a subcountry dataset",
    )
    validate_parser.add_argument(
        "--dataset",
        default=None,
        help="Path to dataset XML (defaults to the bundled dataset)",
    )
    validate_parser.add_argument(
        "--rules",
        nargs="+",
        choices=sorted(VALIDATION_RULES),
        default=None,
        help="Only run these validation rules",
    )

    return parser


def _run_validate(args: argparse.Namespace) -> int:
    path = args.dataset or default_dataset_path()
    print(f"Validating dataset: {path}")

    try:
        dataset = load_dataset(path)
    except (FileNotFoundError, MalformedDatasetError) as e:
        logger.error(f"Could not load dataset: {e}")
        return 2

    findings = validate_dataset(dataset, validation_rules=args.rules)
    for finding in findings:
        print(f"[{finding['severity']}] {finding['rule']} ({finding['table']}): {finding['message']}")

    errors = [f for f in findings if f["severity"] == "error"]
    if errors:
        print(f"Found {len(errors)} validation errors")
        return 1
    print("Validation passed")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    if args.command == "validate":
        return _run_validate(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
