"""Command line entry point: colorize markdown from a file or stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from rich.console import Console

from .config import load_config
from .formatter import StreamFormatter
from .sinks import ConsoleSink
from .theme import build_palette

logger = logging.getLogger(__name__)


def iter_chunks(stream: TextIO, size: int) -> Iterator[str]:
    """Yield successive chunks of at most *size* characters from *stream*."""
    return iter(lambda: stream.read(size), "")


def render_stream(chunks, sink) -> StreamFormatter:
    """Feed every chunk to a fresh formatter writing to *sink*, then finish."""
    formatter = StreamFormatter(sink)
    for chunk in chunks:
        formatter.append(chunk)
    formatter.finish()
    return formatter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streamtint",
        description="Colorize markdown with fenced code as it streams in.",
    )
    parser.add_argument(
        "path", nargs="?", default=None, help="File to read (default: stdin)"
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        metavar="N",
        help="Characters to read at a time",
    )
    parser.add_argument(
        "--no-color", action="store_true", default=None, help="Disable colors"
    )
    parser.add_argument(
        "--tui", action="store_true", default=False, help="Show in an inline viewer"
    )
    parser.add_argument(
        "--config", default=None, metavar="PATH", help="Configuration script to load"
    )
    parser.add_argument(
        "--debug", action="store_true", default=False, help="Log debug output to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the streamtint command."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

    config, config_error = load_config(Path(args.config) if args.config else None)
    if config_error:
        logger.warning(config_error)

    # Command-line arguments override config
    if args.chunk_size is not None:
        config.chunk_size = args.chunk_size
    if args.no_color:
        config.color = False
    if config.chunk_size < 1:
        logger.warning("Invalid chunk size %d, using 1", config.chunk_size)
        config.chunk_size = 1

    try:
        stream = open(args.path, "r", encoding="utf-8") if args.path else sys.stdin
    except OSError as e:
        logger.error(f"Failed to open {args.path}: {e}")
        return 1

    try:
        chunks = iter_chunks(stream, config.chunk_size)
        if args.tui:
            from .app import StreamTintApp

            StreamTintApp(chunks, config).run(inline=True, inline_no_clear=True)
        else:
            console = Console(highlight=False, no_color=not config.color)
            render_stream(chunks, ConsoleSink(console, build_palette(config)))
            console.print()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {args.path or 'stdin'}: {e}")
        return 1
    finally:
        if stream is not sys.stdin:
            stream.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
