"""
Main CLI module with argument parsing and command execution.

This module provides the command line host for the catalog:
- Command line argument parsing
- Command routing and execution
- Mapping of domain errors to process exit codes
"""
import argparse
import json
import os
import sys
from typing import Any, Dict, List, Optional

from pattern_catalog._version import __version__
from pattern_catalog.application.catalog import PatternCatalog
from pattern_catalog.application.runner import ExampleRunner
from pattern_catalog.bootstrap import build_default_catalog
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import LogLevel, OutputFormat
from pattern_catalog.domain.catalog.value_objects import PatternCategory
from pattern_catalog.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    ExecutionError,
    PatternNotFoundError,
    ValidationError,
)
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_EXECUTION = 3
EXIT_CONFIGURATION = 4


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalog",
        description="Pattern Catalog - run classic design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                                   # List all patterns
  %(prog)s list --category Creational             # List creational patterns
  %(prog)s show Builder                           # Show one pattern
  %(prog)s run Builder --input '{"patties": 2}'   # Run an example
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Set logging level')
    parser.add_argument('--format', choices=[fmt.value for fmt in OutputFormat],
                        help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List registered patterns')
    list_parser.add_argument('--category', choices=[c.value for c in PatternCategory],
                             help='Only list patterns of this category')

    show_parser = subparsers.add_parser('show', help='Show pattern details')
    show_parser.add_argument('name', help='Pattern name')

    run_parser = subparsers.add_parser('run', help='Run a pattern example')
    run_parser.add_argument('name', help='Pattern name')
    run_parser.add_argument('--input', help='Example options as a JSON object')

    return parser.parse_args(argv)


def _parse_input(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"--input is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError("--input must be a JSON object")
    return data


def execute_command(args: argparse.Namespace, catalog: PatternCatalog) -> Dict[str, Any]:
    """Execute the selected command and return a serializable result."""
    if args.command == 'list':
        return {"patterns": [d.summary() for d in catalog.list(args.category)]}

    if args.command == 'show':
        return {"pattern": catalog.lookup(args.name).summary()}

    if args.command == 'run':
        options = _parse_input(args.input)
        output = ExampleRunner(catalog).run_by_name(args.name, options)
        return {"pattern": args.name, "output": output.to_dict()}

    raise ValidationError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    args = parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        return EXIT_INVALID

    try:
        config_manager = ConfigurationManager(args.config)
        logging_config = config_manager.get_logging_config()
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
        setup_logging(logging_config)
        output_format = args.format or config_manager.get_cli_config().output_format.value
        catalog = build_default_catalog(config_manager.get_catalog_config())
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION

    logger = get_logger(__name__)

    try:
        result = execute_command(args, catalog)
    except PatternNotFoundError as e:
        logger.error(f"Pattern not found: {e.name}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except ExecutionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_EXECUTION
    except DomainException as e:
        logger.error(f"Domain error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    print(format_output(result, output_format))
    return EXIT_OK


def cli() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    cli()
