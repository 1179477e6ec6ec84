#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Argument parser and exit codes for the md2deck CLI."""

import argparse

from md2deck import __version__
from md2deck.exceptions import FileError, OutputWriteError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Layout and parsing flags default to None so that only values given on the
    command line override the configuration file.
    """
    parser = argparse.ArgumentParser(
        prog="md2deck",
        description="Render a Markdown document as deck XML slides. "
        "A thematic break (---) starts a new slide.",
    )
    parser.add_argument("input", help="Markdown file to convert, or '-' to read from stdin")
    parser.add_argument(
        "-o",
        "--out",
        dest="out",
        metavar="PATH",
        help="Write the deck to PATH instead of stdout",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--config",
        metavar="PATH",
        help="Configuration file (.toml, .yaml, .json or pyproject.toml). "
        "Without it, .md2deck.* or pyproject.toml [tool.md2deck] is searched for "
        "in the current directory and its parents.",
    )
    config_group.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files, including --config",
    )

    layout_group = parser.add_argument_group("deck layout")
    layout_group.add_argument(
        "--include-canvas",
        action="store_true",
        default=None,
        help="Emit a <canvas> element with the canvas size after <deck>",
    )
    layout_group.add_argument("--canvas-width", type=float, metavar="W", help="Logical canvas width (default: 1024)")
    layout_group.add_argument("--canvas-height", type=float, metavar="H", help="Logical canvas height (default: 768)")

    parse_group = parser.add_argument_group("markdown parsing")
    parse_group.add_argument(
        "--plain-list-markers",
        metavar="CHARS",
        help="Bullet characters that produce plain (marker-less) lists (default: '+'). Use '' to disable.",
    )

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING). Overrides --verbose if both are specified.",
    )
    log_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    log_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps, logger names and timing information",
    )

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    return EXIT_ERROR
