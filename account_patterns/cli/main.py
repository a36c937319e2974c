"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Routing to pattern demonstrations in the catalog
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from account_patterns._version import __version__
from account_patterns.catalog import PatternCatalog, PatternCategory
from account_patterns.cli.formatters import format_output
from account_patterns.config.manager import ConfigurationManager
from account_patterns.config.schemas import AppConfig, OutputFormat
from account_patterns.domain.base.exceptions import DomainException
from account_patterns.infrastructure.logging.logger import get_logger, setup_logging
from account_patterns.infrastructure.patterns import SingletonRegistry, get_singleton

logger = get_logger(__name__)

FORMAT_CHOICES = [f.value for f in OutputFormat]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]),
        description="Catalog of classic design patterns over a small banking domain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all patterns
  %(prog)s list --category creational        # List creational patterns
  %(prog)s run singleton                     # Run the singleton demo
  %(prog)s run adapter --format yaml         # Run the adapter demo, YAML output
  %(prog)s run-all --format table            # Run every demo
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='action', help='Available actions')
    subparsers.required = True

    list_parser = subparsers.add_parser('list', help='List registered patterns')
    list_parser.add_argument('--category', choices=[c.value for c in PatternCategory],
                             help='Filter by pattern category')

    run_parser = subparsers.add_parser('run', help='Run one pattern demonstration')
    run_parser.add_argument('pattern', help='Pattern name, e.g. singleton or abstract-factory')

    subparsers.add_parser('run-all', help='Run every pattern demonstration')

    return parser.parse_args(argv)


def load_configuration(config_file: Optional[str]) -> AppConfig:
    """Load configuration through the shared configuration manager."""
    if config_file:
        manager = ConfigurationManager(config_file)
        SingletonRegistry.get_instance().register(ConfigurationManager, manager)
    else:
        manager = get_singleton(ConfigurationManager)
    return manager.app_config


def execute_command(args: argparse.Namespace, catalog: PatternCatalog) -> Dict[str, Any]:
    """Route parsed arguments to the catalog."""
    if args.action == 'list':
        category = PatternCategory(args.category) if args.category else None
        return {"patterns": [r.to_dict() for r in catalog.list_patterns(category)]}

    if args.action == 'run':
        return catalog.run(args.pattern)

    return {name: catalog.run(name) for name in catalog.get_registered_names()}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        app_config = load_configuration(args.config)
        logging_config = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)

        output_format = args.format or app_config.cli.output_format.value
        result = execute_command(args, PatternCatalog.get_instance())
    except DomainException as e:
        logger.error("Command failed", action=args.action, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result, output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
