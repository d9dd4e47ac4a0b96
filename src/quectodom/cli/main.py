"""Main CLI entry point for the quectodom command-line tool.

Renders JSON row records as an HTML table and fetches JSON documents, using
the same tree and network layers as the library.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from quectodom import __version__
from quectodom.net import FetchError, request_json
from quectodom.shared.config import ConfigError, QuectodomConfig
from quectodom.shared.logging import get_logger
from quectodom.tree import Heading, TableMaker


def parse_heading(value: str) -> Heading:
    """Parse a ``NAME=LABEL`` heading argument; the label defaults to the name."""
    name, sep, label = value.partition("=")
    if not name:
        raise argparse.ArgumentTypeError(f"Invalid heading: {value!r}")
    return Heading(name=name, label=label if sep else name)


def load_config(path: Optional[Path]) -> QuectodomConfig:
    """Load configuration from a JSON file, or return defaults."""
    if path is None:
        return QuectodomConfig()
    return QuectodomConfig.from_json(path.read_text(encoding="utf-8"))


def load_rows(source: str, config: QuectodomConfig) -> List[Any]:
    """Load a list of row records from a JSON file or an http(s) URL."""
    if source.startswith(("http://", "https://")):
        data = asyncio.run(request_json("GET", source, config.fetch))
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise ValueError("Row data must be a JSON list of objects")
    return data


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="quectodom",
        description="Render JSON records as HTML tables and fetch JSON documents"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path (JSON)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render rows as a table")
    render_parser.add_argument(
        "rows",
        help="JSON file or http(s) URL holding a list of row records"
    )
    render_parser.add_argument(
        "--heading", "-H",
        dest="headings",
        action="append",
        type=parse_heading,
        required=True,
        help="Column as NAME=LABEL, repeat in display order"
    )
    render_parser.add_argument("--id", help="Identifier for the table element")
    render_parser.add_argument(
        "--class",
        dest="classes",
        action="append",
        default=[],
        help="Class token for the table element (repeatable)"
    )
    render_parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and print a JSON document")
    fetch_parser.add_argument("uri", help="Resource URI")
    fetch_parser.add_argument(
        "--method", "-X",
        default="GET",
        help="HTTP method (default: GET)"
    )

    return parser


def cmd_render(args: argparse.Namespace, config: QuectodomConfig) -> int:
    """Handle render command."""
    logger = get_logger(__name__, config.correlation_id, "cli_render")
    try:
        rows = load_rows(args.rows, config)
    except (OSError, ValueError, FetchError) as e:
        logger.error("Could not load rows", extra={"source": args.rows}, exc_info=False)
        print(f"Error loading rows: {e}", file=sys.stderr)
        return 1

    table = TableMaker(
        *args.headings,
        config=config.table,
        correlation_id=config.correlation_id,
    )
    table.add_classes(*args.classes).append_rows(*rows)
    if args.id:
        table.set_id(args.id)

    markup = table.to_markup()
    if args.output:
        try:
            args.output.write_text(markup + "\n", encoding="utf-8")
            print(f"Table written to {args.output}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(markup)

    return 0


def cmd_fetch(args: argparse.Namespace, config: QuectodomConfig) -> int:
    """Handle fetch command."""
    try:
        data = asyncio.run(request_json(args.method, args.uri, config.fetch))
    except FetchError as e:
        print(f"Fetch failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(data, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (OSError, ConfigError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)
    else:
        logging.basicConfig(level=config.logging_level)

    # Route to appropriate command handler
    try:
        if args.command == "render":
            return cmd_render(args, config)
        elif args.command == "fetch":
            return cmd_fetch(args, config)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
