"""Command line interface for pngme."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
import sys
from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from .api import describe_png, hide_message, reveal_message, strip_message, summarize_png
from .exceptions import PngmeError
from .utils import configure_logging

console = Console(emoji=False, highlight=False)
error_console = Console(stderr=True, emoji=False, highlight=False)

NOT_FOUND_MESSAGE = "Chunk not found."


def _read_bytes(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: str | None, data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(path).write_bytes(data)


def _echo(text: str) -> None:
    console.print(text, markup=False, soft_wrap=True)


def _error(exc: BaseException) -> int:
    error_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
    return 1


def _command_parser(command: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=f"pngme {command}", description=description)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=None,
        help="Log level for this run (defaults to $PNGME_LOG_LEVEL or WARNING)",
    )
    return parser


def _handle_encode(argv: Sequence[str]) -> int:
    parser = _command_parser("encode", "Hide a message in a new chunk appended to a PNG file.")
    parser.add_argument("path", help="PNG file to read ('-' for stdin)")
    parser.add_argument("chunk_type", help="Four-letter chunk type, e.g. ruSt")
    parser.add_argument("message", help="Message to store in the chunk")
    parser.add_argument("output", nargs="?", default=None, help="Output file (defaults to PATH)")

    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    try:
        data = hide_message(_read_bytes(args.path), args.chunk_type, os.fsencode(args.message))
        _write_bytes(args.output or args.path, data)
    except (PngmeError, OSError) as exc:
        return _error(exc)
    return 0


def _handle_decode(argv: Sequence[str]) -> int:
    parser = _command_parser("decode", "Print the first chunk of the given type.")
    parser.add_argument("path", help="PNG file to read ('-' for stdin)")
    parser.add_argument("chunk_type", help="Four-letter chunk type, e.g. ruSt")

    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    try:
        chunk = reveal_message(_read_bytes(args.path), args.chunk_type)
    except (PngmeError, OSError) as exc:
        return _error(exc)

    _echo(str(chunk) if chunk is not None else NOT_FOUND_MESSAGE)
    return 0


def _handle_remove(argv: Sequence[str]) -> int:
    parser = _command_parser("remove", "Remove the first chunk of the given type.")
    parser.add_argument("path", help="PNG file to read ('-' for stdin)")
    parser.add_argument("chunk_type", help="Four-letter chunk type, e.g. ruSt")
    parser.add_argument("output", nargs="?", default=None, help="Output file (defaults to PATH)")

    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    try:
        data = strip_message(_read_bytes(args.path), args.chunk_type)
        _write_bytes(args.output or args.path, data)
    except (PngmeError, OSError) as exc:
        return _error(exc)
    return 0


def _handle_print(argv: Sequence[str]) -> int:
    parser = _command_parser("print", "Print every chunk of a PNG file.")
    parser.add_argument("path", help="PNG file to read ('-' for stdin)")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="List type, length, CRC and property flags per chunk instead of the raw text",
    )

    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    try:
        data = _read_bytes(args.path)
        if args.summary:
            lines = [str(summary) for summary in summarize_png(data)]
        else:
            lines = [describe_png(data)]
    except (PngmeError, OSError) as exc:
        return _error(exc)

    for line in lines:
        _echo(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pngme",
        description="Hide, reveal and remove messages stored in PNG chunks.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("encode", help="append a message chunk")
    subparsers.add_parser("decode", help="print a message chunk")
    subparsers.add_parser("remove", help="remove a message chunk")
    subparsers.add_parser("print", help="print all chunks")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args or args[0] in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]

    if command == "encode":
        return _handle_encode(rest)
    if command == "decode":
        return _handle_decode(rest)
    if command == "remove":
        return _handle_remove(rest)
    if command == "print":
        return _handle_print(rest)

    error_console.print(f"[red]Error:[/red] unknown command '{escape(command)}'")
    build_parser().print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
