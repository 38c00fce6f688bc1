"""Main CLI entry point for scansummary.

Provides commands: summarize
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from scansummary.cli.summarize import summarize_command

logger = logging.getLogger("scansummary.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Scansummary - ScanCode result normalization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    summarize_parser = subparsers.add_parser(
        "summarize",
        help="Convert a raw ScanCode JSON result into a canonical summary",
    )
    summarize_parser.add_argument(
        "result",
        help="ScanCode result file (written with --json or --json-pp)",
    )
    summarize_parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Output JSON file for the summary",
    )
    summarize_parser.add_argument(
        "--no-expressions",
        action="store_true",
        help=(
            "Build license findings from separate license keys instead of the "
            "license expressions of matched rules"
        ),
    )
    summarize_parser.add_argument(
        "--classify",
        action="store_true",
        help=(
            "Compact timeout and unknown error messages and report whether the "
            "scan failed as a whole"
        ),
    )
    summarize_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional processing configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "summarize":
        return summarize_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
