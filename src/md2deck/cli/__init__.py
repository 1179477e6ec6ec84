"""Command-line interface for md2deck.

Examples
--------
Render to stdout::

    $ md2deck talk.md

Write to a file with a canvas element::

    $ md2deck talk.md -o talk.xml --include-canvas

Read from stdin::

    $ cat talk.md | md2deck - > talk.xml

Configuration files (``.md2deck.toml``, ``.md2deck.yaml``, ``.md2deck.json``
or ``[tool.md2deck]`` in ``pyproject.toml``) are discovered from the current
directory upwards; command-line flags override them.

"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from md2deck.api import convert
from md2deck.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from md2deck.cli.config import load_config_with_priority, merge_configs, options_from_config
from md2deck.exceptions import Md2DeckError
from md2deck.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _cli_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Collect option values given explicitly on the command line."""
    renderer: Dict[str, Any] = {}
    parser: Dict[str, Any] = {}

    if parsed_args.include_canvas is not None:
        renderer["include_canvas"] = parsed_args.include_canvas
    if parsed_args.canvas_width is not None:
        renderer["canvas_width"] = parsed_args.canvas_width
    if parsed_args.canvas_height is not None:
        renderer["canvas_height"] = parsed_args.canvas_height
    if parsed_args.plain_list_markers is not None:
        parser["plain_list_markers"] = parsed_args.plain_list_markers

    overrides: Dict[str, Any] = {}
    if renderer:
        overrides["renderer"] = renderer
    if parser:
        overrides["parser"] = parser
    return overrides


def main(args: list[str] | None = None) -> int:
    """Execute the md2deck command line.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        config: Dict[str, Any] = {}
        if not parsed_args.no_config:
            config = load_config_with_priority(parsed_args.config)
        config = merge_configs(config, _cli_overrides(parsed_args))
        parser_options, renderer_options = options_from_config(config)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if parsed_args.input == "-":
        source: Any = sys.stdin.buffer.read()
    else:
        input_path = Path(parsed_args.input)
        if not input_path.is_file():
            print(f"Error: Input file does not exist: {input_path}", file=sys.stderr)
            return EXIT_FILE_ERROR
        source = input_path

    try:
        if parsed_args.out:
            convert(source, parsed_args.out, parser_options=parser_options, renderer_options=renderer_options)
            logger.info("Wrote %s", parsed_args.out)
        else:
            deck = convert(source, parser_options=parser_options, renderer_options=renderer_options)
            sys.stdout.write(deck or "")
    except (Md2DeckError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
