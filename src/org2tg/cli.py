#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for org2tg.

Usage::

    org2tg notes.org                  # print MarkdownV2 to stdout
    org2tg notes.org -o notes.md      # write to a file
    cat notes.org | org2tg -          # read from stdin
    org2tg notes/ -o published/       # export every .org file below notes/

Exit codes follow the exception hierarchy: 0 success, 1 unexpected error,
2 missing dependency, 3 invalid arguments or config, 4 file error,
6 parsing error, 7 rendering error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from org2tg import __version__
from org2tg.api import publish_directory, to_telegram
from org2tg.config import load_config_with_priority, options_from_config
from org2tg.constants import DEFAULT_OUTPUT_EXTENSION
from org2tg.exceptions import (
    DependencyError,
    FileError,
    Org2TgError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from org2tg.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


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
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the org2tg command."""
    parser = argparse.ArgumentParser(
        prog="org2tg",
        description="Export Org-Mode documents as Telegram MarkdownV2",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  org2tg notes.org
  org2tg notes.org --out notes.md
  org2tg notes.org --no-escape --todo-keywords TODO,NEXT,DONE
  org2tg notes/ --out published/ --extension .txt
""",
    )
    parser.add_argument("input", help="Org file, directory of Org files, or '-' for stdin")
    parser.add_argument("--out", "-o", help="Output file (or directory when INPUT is a directory)")
    parser.add_argument(
        "--no-escape",
        action="store_true",
        help="Do not backslash-escape reserved MarkdownV2 characters",
    )
    parser.add_argument(
        "--todo-keywords",
        metavar="KEYWORDS",
        help="Comma-separated TODO keywords recognized in headings (default: TODO,DONE)",
    )
    parser.add_argument(
        "--no-parse-tags",
        action="store_true",
        help="Keep heading tags in the title instead of moving them to metadata",
    )
    parser.add_argument(
        "--extension",
        default=DEFAULT_OUTPUT_EXTENSION,
        help=f"Suffix for files exported from a directory (default: {DEFAULT_OUTPUT_EXTENSION})",
    )
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .yml, .json or pyproject.toml)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default=None,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable DEBUG logging with timestamps and logger names",
    )
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(input_arg: str) -> bytes | Path:
    if input_arg == "-":
        return sys.stdin.buffer.read()
    return Path(input_arg)


def main(args: Optional[list[str]] = None) -> int:
    """Execute the org2tg command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        config = load_config_with_priority(parsed_args.config)
        parser_options, renderer_options, config_log_level = options_from_config(config)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    configure_logging(
        parsed_args.log_level or config_log_level or "WARNING",
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
    )

    # Command-line flags override config file values
    if parsed_args.no_escape:
        renderer_options = renderer_options.create_updated(escape=False)
    if parsed_args.todo_keywords:
        keywords = [keyword.strip() for keyword in parsed_args.todo_keywords.split(",") if keyword.strip()]
        parser_options = parser_options.create_updated(todo_keywords=keywords)
    if parsed_args.no_parse_tags:
        parser_options = parser_options.create_updated(parse_tags=False)

    try:
        if parsed_args.input != "-" and Path(parsed_args.input).is_dir():
            if not parsed_args.out:
                print("Error: --out is required when INPUT is a directory", file=sys.stderr)
                return EXIT_VALIDATION_ERROR
            written = publish_directory(
                parsed_args.input,
                parsed_args.out,
                parser_options,
                renderer_options,
                extension=parsed_args.extension,
            )
            logger.info(f"Exported {len(written)} file(s) to {parsed_args.out}")
            return EXIT_SUCCESS

        source = _read_input(parsed_args.input)
        text = to_telegram(source, parser_options, renderer_options, output=parsed_args.out)
        if not parsed_args.out:
            print(text)
        return EXIT_SUCCESS

    except Org2TgError as e:
        logger.debug("Export failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=parsed_args.trace)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
