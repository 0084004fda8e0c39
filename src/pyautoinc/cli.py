"""
Command-line entry point for the auto-increment check.
"""

import argparse
import logging
import sys

from . import __version__
from .backend import create_backend
from .config import resolve_config
from .core import AutoIncrementChecker
from .exceptions import AutoIncCheckError
from .models import Status

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits UNKNOWN instead of argparse's status 2."""

    def error(self, message):
        """Print usage and exit with the UNKNOWN status."""
        self.print_usage(sys.stderr)
        self.exit(int(Status.UNKNOWN), f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser; every option defaults to None so unset options fall through."""
    parser = _ArgumentParser(
        prog="pyautoinc",
        description="Report how close MySQL auto-increment columns are to overflowing their integer type.",
    )
    parser.add_argument("--verbosity", type=int, help="0 quiet, 1 unknown types, 2 every column")
    parser.add_argument("--warning", type=float, help="warning fill ratio (default 0.7)")
    parser.add_argument("--critical", type=float, help="critical fill ratio (default 0.85)")
    parser.add_argument("--dbhost", help="database host (default localhost)")
    parser.add_argument("--dbport", type=int, help="database port (default 3306)")
    parser.add_argument("--dbuser", help="database user (default root)")
    parser.add_argument("--dbpass", help="database password")
    parser.add_argument("--configfile", help="key=value config file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    """
    Send log records to stderr.

    Args:
        verbosity: Resolved verbosity; 2 enables INFO, 3 enables DEBUG
    """
    level = logging.WARNING
    if verbosity >= 3:
        level = logging.DEBUG
    elif verbosity >= 2:
        level = logging.INFO
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """
    Run the check and return the process exit code.

    Returns:
        0 OK, 1 warning, 2 critical, 3 setup error
    """
    args = build_parser().parse_args(argv)
    cli_values = {key: value for key, value in vars(args).items() if key != "configfile"}

    try:
        config = resolve_config(cli_values, args.configfile)
        _configure_logging(config.verbosity)
        with create_backend(config) as backend:
            result = AutoIncrementChecker(config).run(backend)
    except AutoIncCheckError as e:
        print(f"UNKNOWN: {e}", file=sys.stderr)
        return int(Status.UNKNOWN)

    return result.exit_code


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())
