"""
tsmock CLI - Command Line Interface

This module provides the command-line interface for tsmock.
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Optional

import uvicorn
from loguru import logger

from tsmock.analyzers.analyzer_factory import AnalyzerFactory
from tsmock.analyzers.base_analyzer import BaseSchemaAnalyzer
from tsmock.config.config import configs
from tsmock.exceptions import TsMockError
from tsmock.server.mock_service import build_service
from tsmock.server.synthesizer import ValueSynthesizer
from tsmock.utils.common import convert


def setup_logging(verbose: bool = False) -> None:
    """
    Configure loguru sinks for the application.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = "DEBUG" if verbose else "INFO"
    logger.remove()
    logger.add(sys.stderr, level=level)
    if configs.LOG_FILE:
        logger.add(configs.LOG_FILE, level=level)


def validate_environment():
    """Validate required environment configuration."""
    try:
        configs.validate_server_config()
    except ValueError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        print("\nPlease check the values in your .env file or environment.", file=sys.stderr)
        sys.exit(1)


def create_analyzer() -> BaseSchemaAnalyzer:
    return AnalyzerFactory.create_analyzer(
        language="typescript",
        route_marker=configs.ROUTE_MARKER,
        strict_parse=configs.STRICT_PARSE,
        ignore_dirs=configs.ignore_dirs,
    )


def serve_command(args: argparse.Namespace) -> int:
    """
    Execute the serve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    setup_logging(args.verbose)
    validate_environment()
    start_time = time.perf_counter()

    try:
        catalog = create_analyzer().parse_project(Path(args.project_path))
    except TsMockError as e:
        logger.error(f"Cannot build mock catalog: {e}")
        return 1

    for entity in catalog:
        logger.info(f"{entity.route} <- {entity.name} ({entity.file_path})")
    if not catalog:
        logger.warning("No route-annotated declarations found, serving no endpoints")

    def synthesizer_factory() -> ValueSynthesizer:
        return ValueSynthesizer(number_pattern=configs.NUMBER_PATTERN, locale=configs.FAKER_LOCALE)

    service = build_service(catalog, synthesizer_factory)
    elapsed = time.perf_counter() - start_time
    logger.info(f"Catalog built in {elapsed:.2f}s, serving {len(service.routes)} routes")

    host = args.host or configs.APP_HOST
    port = args.port or configs.APP_PORT
    uvicorn.run(service.app, host=host, port=port, log_level="debug" if args.verbose else "info")
    return 0


def scan_command(args: argparse.Namespace) -> int:
    """
    Execute the scan command: build the catalog and export it as JSON.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    setup_logging(args.verbose)

    try:
        analyzer = create_analyzer()
        catalog = analyzer.parse_project(Path(args.project_path))
    except TsMockError as e:
        logger.error(f"Cannot build mock catalog: {e}")
        return 1

    if args.output:
        analyzer.export_catalog(catalog, Path(args.output))
    else:
        print(json.dumps(convert(list(catalog)), indent=2, ensure_ascii=False))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='tsmock',
        description='tsmock - Mock HTTP server generated from route-annotated TypeScript interfaces',
    )

    parser.add_argument(
        '--version',
        action='version',
        version='tsmock 0.1.0'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Serve command
    serve_parser = subparsers.add_parser(
        'serve',
        help='Serve mock endpoints for a TypeScript source tree'
    )
    serve_parser.add_argument(
        'project_path',
        type=str,
        nargs='?',
        default='.',
        help='Root of the TypeScript sources (default: current directory)'
    )
    serve_parser.add_argument(
        '--host',
        type=str,
        help=f'Bind host (default: {configs.APP_HOST})'
    )
    serve_parser.add_argument(
        '--port',
        type=int,
        help=f'Bind port (default: {configs.APP_PORT})'
    )
    serve_parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )
    serve_parser.set_defaults(func=serve_command)

    # Scan command
    scan_parser = subparsers.add_parser(
        'scan',
        help='Print the mock catalog without serving it'
    )
    scan_parser.add_argument(
        'project_path',
        type=str,
        nargs='?',
        default='.',
        help='Root of the TypeScript sources (default: current directory)'
    )
    scan_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output directory for catalog.json (optional, prints to stdout otherwise)'
    )
    scan_parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )
    scan_parser.set_defaults(func=scan_command)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
