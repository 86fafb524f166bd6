#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prettydiff/cli.py
"""Command-line interface for prettydiff.

Compares two text files and writes a unified-style line report, an inline
ANSI report, or an inline HTML report.

Examples
--------
Line report with a space after each marker:
    $ prettydiff old.txt new.txt --spacing " "

Inline HTML page:
    $ prettydiff old.txt new.txt --format html --standalone --output diff.html

Read the modified text from stdin:
    $ git show HEAD:README.md | prettydiff README.md -

Use environment variables for defaults:
    $ export PRETTYDIFF_CONTEXT=5
    $ prettydiff old.txt new.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib import metadata
from pathlib import Path
from typing import Optional, TextIO, get_args

from prettydiff.api import render_lines_pretty
from prettydiff.config import load_render_config
from prettydiff.constants import DEFAULT_HTML_TITLE, ColorMode, OutputFormat
from prettydiff.exceptions import FileError, PrettyDiffError, ValidationError
from prettydiff.lines import compute_segments
from prettydiff.logging_utils import configure_logging
from prettydiff.options import RenderConfig
from prettydiff.renderers.ansi import AnsiSegmentRenderer
from prettydiff.renderers.html import HtmlSegmentRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

STDIN_MARKER = "-"


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
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    return EXIT_ERROR


def _validate_context_lines(value: str) -> int:
    """Validate context lines is a non-negative integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def _get_version() -> str:
    try:
        return metadata.version("prettydiff")
    except metadata.PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create the argparse parser for the prettydiff command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="prettydiff",
        description="Compare two text files and render the differences as a unified-style, ANSI or HTML report",
    )

    parser.add_argument("original", help="Original text file (use '-' for stdin)")
    parser.add_argument("modified", help="Modified text file (use '-' for stdin)")

    parser.add_argument(
        "--format",
        "-f",
        choices=list(get_args(OutputFormat)),
        default="unified",
        help="Output format: unified (default, line report with @@ headers), ansi (inline colors), html (inline markup)",
    )
    parser.add_argument("--output", "-o", help="Write the report to a file (default: stdout)")
    parser.add_argument(
        "--color",
        dest="color",
        choices=list(get_args(ColorMode)),
        default=None,
        help="Colorize the unified report: auto (if terminal), always, never (default: from config, else never)",
    )
    parser.add_argument(
        "--context",
        "-C",
        type=_validate_context_lines,
        default=None,
        help="Number of unchanged lines shown around each change (default: 3)",
    )
    parser.add_argument(
        "--spacing",
        default=None,
        help="Text written between the row marker and the line (default: none)",
    )
    parser.add_argument(
        "--semantic-cleanup",
        action="store_true",
        help="Align ansi/html segment boundaries to words where possible",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap html output in a complete HTML document",
    )
    parser.add_argument("--title", default=DEFAULT_HTML_TITLE, help="Document title for --standalone html output")
    parser.add_argument("--config", help="Configuration file (TOML, YAML or JSON); default: discovered")
    parser.add_argument(
        "--no-config",
        dest="discover_config",
        action="store_false",
        help="Do not search for a configuration file",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level written to stderr (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")

    return parser


def read_text_input(source: str, stdin: Optional[TextIO] = None) -> str:
    """Read an input text without translating line terminators.

    Parameters
    ----------
    source : str
        File path, or ``-`` for stdin
    stdin : TextIO, optional
        Stream to use for ``-``; defaults to ``sys.stdin``

    Returns
    -------
    str
        The text, with ``\\r\\n`` and missing final terminators preserved

    Raises
    ------
    FileError
        If the file does not exist, cannot be read, or is not UTF-8

    """
    if source == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            data = buffer.read()
            try:
                return data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise FileError("stdin is not valid UTF-8", file_path=STDIN_MARKER, original_error=e) from e
        return stream.read()

    path = Path(source)
    if not path.is_file():
        raise FileError(f"Source file not found: {source}", file_path=source)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileError(f"Source file is not valid UTF-8: {source}", file_path=source, original_error=e) from e
    except OSError as e:
        raise FileError(f"Cannot read source file {source}: {e}", file_path=source, original_error=e) from e


def resolve_render_config(parsed: argparse.Namespace, stdout: TextIO) -> RenderConfig:
    """Merge config file, environment and command-line settings."""
    config = load_render_config(parsed.config, discover=parsed.discover_config)

    updates: dict[str, object] = {}
    if parsed.context is not None:
        updates["context"] = parsed.context
    if parsed.spacing is not None:
        updates["spacing"] = parsed.spacing
    if parsed.color == "always":
        updates["color"] = True
    elif parsed.color == "never":
        updates["color"] = False
    elif parsed.color == "auto":
        updates["color"] = not parsed.output and stdout.isatty()

    if updates:
        config = config.create_updated(**updates)
    return config


def _render(parsed: argparse.Namespace, config: RenderConfig, original: str, modified: str) -> str:
    if parsed.format == "unified":
        return render_lines_pretty(config, original, modified)

    segments = compute_segments(original, modified, semantic_cleanup=parsed.semantic_cleanup)
    if parsed.format == "html":
        return HtmlSegmentRenderer(standalone=parsed.standalone, title=parsed.title).render(segments)
    return AnsiSegmentRenderer().render(segments)


def main(args: Optional[list[str]] = None, stdout: Optional[TextIO] = None, stdin: Optional[TextIO] = None) -> int:
    """Run the prettydiff command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``
    stdout : TextIO, optional
        Stream receiving the report; defaults to ``sys.stdout``
    stdin : TextIO, optional
        Stream read for ``-`` inputs; defaults to ``sys.stdin``

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    out = stdout if stdout is not None else sys.stdout
    configure_logging(parsed.log_level, log_file=parsed.log_file, trace_mode=parsed.log_level == "DEBUG")

    if parsed.original == STDIN_MARKER and parsed.modified == STDIN_MARKER:
        print("Error: Cannot read both original and modified from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        config = resolve_render_config(parsed, out)
        original = read_text_input(parsed.original, stdin)
        modified = read_text_input(parsed.modified, stdin)

        logger.info("Comparing %s and %s", parsed.original, parsed.modified)
        report = _render(parsed, config, original, modified)

        if parsed.output:
            output_path = Path(parsed.output)
            try:
                with open(output_path, "w", encoding="utf-8", newline="") as f:
                    f.write(report)
            except OSError as e:
                raise FileError(f"Cannot write report to {output_path}: {e}", file_path=str(output_path), original_error=e) from e
            logger.info("Report written to: %s", output_path)
        else:
            # The report's final terminator, or its absence, is part of the output
            out.write(report)
            out.flush()

        if not report:
            logger.info("No differences found.")
        return EXIT_SUCCESS

    except PrettyDiffError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error while comparing inputs", exc_info=True)
        print(f"Error comparing texts: {e}", file=sys.stderr)
        return EXIT_ERROR
