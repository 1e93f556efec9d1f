"""
Command-line diagnostics for locale data.

Usage:
    python -m mirage_datagen.schema validate-locale en_US
    python -m mirage_datagen.schema validate-file address de_DE
    python -m mirage_datagen.schema list-locales
    python -m mirage_datagen.schema sample fr_FR --seed 42
    python -m mirage_datagen.schema sample --category address

Usage errors (missing arguments, unknown commands, invalid locale codes)
print a message and the help text and exit with status 0.
"""

import argparse
import sys

from ..config.models import MirageConfig
from ..config.settings import load_config_with_fallback
from ..mirage import Mirage
from ..providers.registry import categories, fields_for
from ..shared.exceptions import MissingDataError, UnsupportedLocaleError
from ..shared.locale import Locale
from ..shared.logging_config import configure_logging
from .validator import SchemaValidator

PROG = "python -m mirage_datagen.schema"


class UsageError(Exception):
    """Raised by the parser instead of exiting on bad arguments."""


class CommandParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> CommandParser:
    """
    Build the argument parser.

    Returns:
        Parser with one subparser per command
    """
    parser = CommandParser(
        prog=PROG,
        description="Validate and sample locale data for the mirage data generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check every document of a locale against the reference locale
  python -m mirage_datagen.schema validate-locale en_US

  # Check a single document
  python -m mirage_datagen.schema validate-file address de_DE

  # Print one value for every field of every category
  python -m mirage_datagen.schema sample ru_RU --seed 7
        """,
    )
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--data-path", help="Directory holding <locale>/<name>.yaml documents")
    parser.add_argument(
        "--no-packaged-data",
        action="store_true",
        help="Do not fall back to the documents shipped with the package",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", parser_class=CommandParser)

    validate_locale_parser = subparsers.add_parser(
        "validate-locale", help="Validate all documents of a locale"
    )
    validate_locale_parser.add_argument("locale", help="Locale code, e.g. en_US")

    validate_file_parser = subparsers.add_parser(
        "validate-file", help="Validate one document of a locale"
    )
    validate_file_parser.add_argument("name", help="Document name without extension, e.g. address")
    validate_file_parser.add_argument("locale", help="Locale code, e.g. en_US")

    subparsers.add_parser("list-locales", help="List supported locales")

    sample_parser = subparsers.add_parser(
        "sample", help="Print one generated value for every registered field"
    )
    sample_parser.add_argument("locale", nargs="?", help="Locale code (default: configured locale)")
    sample_parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    sample_parser.add_argument(
        "--category", choices=categories(), help="Only sample this category"
    )

    subparsers.add_parser("help", help="Show this help message")

    return parser


def build_config(args: argparse.Namespace) -> MirageConfig:
    """Apply command-line overrides on top of the loaded configuration."""
    config = load_config_with_fallback(args.config)

    overrides = {}
    if args.data_path:
        overrides["data_path"] = args.data_path
    if args.no_packaged_data:
        overrides["use_packaged_data"] = False

    if not overrides:
        return config
    return MirageConfig(**{**config.model_dump(), **overrides})


def print_invalid_locale(code: str) -> None:
    print(f"Error: Invalid locale code '{code}'")
    print("Run 'list-locales' to see available locales.")


def cmd_validate_locale(args: argparse.Namespace, config: MirageConfig) -> int:
    try:
        locale = Locale.from_code(args.locale)
    except UnsupportedLocaleError:
        print_invalid_locale(args.locale)
        return 0

    validator = SchemaValidator(config=config)
    print(f"Validating locale {locale.code} against {validator.reference_locale.code}\n")

    results = validator.validate_locale(locale)
    for result in results:
        print(result)

    invalid = [result for result in results if not result.is_valid()]
    print("--- Summary ---")
    print(f"Valid files: {len(results) - len(invalid)} out of {len(results)}")
    if invalid:
        print("Invalid files:")
        for result in invalid:
            print(f"- {result.file_name}.yaml")
        return 1
    return 0


def cmd_validate_file(args: argparse.Namespace, config: MirageConfig) -> int:
    try:
        locale = Locale.from_code(args.locale)
    except UnsupportedLocaleError:
        print_invalid_locale(args.locale)
        return 0

    result = SchemaValidator(config=config).validate_file(args.name, locale)
    print(result)
    return 0 if result.is_valid() else 1


def cmd_list_locales() -> int:
    print("Available locales:")
    for locale in Locale:
        print(f"- {locale.code}: {locale.name}")
    return 0


def cmd_sample(args: argparse.Namespace, config: MirageConfig) -> int:
    """
    Generate one value for every registered field.

    Fields whose data is absent for the locale are reported as unavailable
    instead of aborting the run.
    """
    locale = None
    if args.locale:
        try:
            locale = Locale.from_code(args.locale)
        except UnsupportedLocaleError:
            print_invalid_locale(args.locale)
            return 0

    fake = Mirage(locale, seed=args.seed, config=config)
    selected = [args.category] if args.category else categories()

    print(f"Sample data for locale {fake.locale.code}")
    for category in selected:
        print(f"\n=== {category} ===")
        for field in fields_for(category):
            try:
                value = fake.generate(category, field)
            except MissingDataError as e:
                value = f"unavailable ({e.reason})"
            print(f"  {field}: {value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` if None

    Returns:
        Exit code (0 for success and usage errors, 1 when validation fails)
    """
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}")
        parser.print_help()
        return 0

    if args.command in (None, "help"):
        parser.print_help()
        return 0

    configure_logging(args.log_level)

    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.command == "validate-locale":
        return cmd_validate_locale(args, config)
    elif args.command == "validate-file":
        return cmd_validate_file(args, config)
    elif args.command == "list-locales":
        return cmd_list_locales()
    elif args.command == "sample":
        return cmd_sample(args, config)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
