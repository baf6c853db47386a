"""Command-line interface for xmind2md."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from . import read, to_markdown
from .errors import ConversionError, MissingPathError, OutputCreateError
from .writer import output_path_for, write_output

logger = logging.getLogger(__name__)

# Keeps a console opened by double-click on screen long enough to read the error
DEFAULT_PAUSE_SECONDS = 600.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmind2md",
        description="Convert an XMind .xmind file to markdown",
    )
    parser.add_argument("-f", "--file", help="Path to .xmind file (prompted for if omitted)")
    parser.add_argument(
        "-o", "--output",
        help="Output markdown file (default: input path with a .md extension; '-' for stdout)",
    )
    parser.add_argument(
        "--pause-on-error",
        type=float,
        nargs="?",
        const=DEFAULT_PAUSE_SECONDS,
        default=0.0,
        metavar="SECONDS",
        help=f"Wait before exiting on error (default when given: {DEFAULT_PAUSE_SECONDS:g}s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        path = args.file or prompt_for_path()
        out = convert(path, args.output)
    except ConversionError as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        pause(args.pause_on_error)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    if out is not None:
        print(f"Markdown file generated: {out}")
    return 0


def prompt_for_path() -> str:
    """Ask for the input path on stdin."""
    try:
        answer = input("Path to .xmind file: ")
    except EOFError:
        answer = ""
    answer = answer.strip()
    if not answer:
        raise MissingPathError("an .xmind file path is required")
    return answer


def convert(path: str, output: str | None = None):
    """Convert `path` and write the markdown.

    Returns the output path, or None when the markdown went to stdout.
    """
    sheets = read(path)
    md = to_markdown(sheets)

    if output == "-":
        write_stdout(md)
        return None
    dest = output or output_path_for(path)
    return write_output(md, dest)


def write_stdout(text: str) -> None:
    """Write markdown to stdout as UTF-8 whatever the console encoding."""
    buffer = getattr(sys.stdout, "buffer", None)
    try:
        if buffer is None:
            sys.stdout.write(text)
        else:
            sys.stdout.flush()
            buffer.write(text.encode("utf-8"))
            buffer.flush()
    except (OSError, UnicodeEncodeError) as exc:
        raise OutputCreateError(f"Failed to write markdown to stdout: {exc}") from exc


def pause(seconds: float) -> None:
    if seconds > 0:
        logger.debug("Pausing %gs before exit", seconds)
        time.sleep(seconds)


if __name__ == "__main__":
    sys.exit(main())
