"""Command-line inspection of a single HL7 v2 message.

Run directly:
    python -m hl7slice message.hl7 PID.F3 PID.F5.C1 [--decode]
    python -m hl7slice message.hl7 --summary
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from hl7slice.common.config import Hl7SliceConfig
from hl7slice.common.errors import Hl7ParseError
from hl7slice.common.schemas import MessageSummary
from hl7slice.parser.message import Message


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hl7slice",
        description="Query values from an HL7 v2 message by dotted path.",
    )
    parser.add_argument("file", help="Message file, or '-' to read stdin")
    parser.add_argument("paths", nargs="*", help="Paths such as PID.F5.C1")
    parser.add_argument("--decode", action="store_true", help="Decode escape sequences")
    parser.add_argument("--summary", action="store_true", help="Print a JSON header summary")
    parser.add_argument(
        "--keep-trailing-segment",
        action="store_true",
        default=None,
        help="Keep the empty segment after a final CR",
    )
    parser.add_argument(
        "--normalize-line-endings",
        action="store_true",
        default=None,
        help="Treat LF and CRLF as segment separators",
    )
    return parser


def _read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    # newline="" keeps bare CR segment separators intact
    with Path(file).open(encoding="utf-8", newline="") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``hl7slice`` command."""
    args = _build_parser().parse_args(argv)

    try:
        config = Hl7SliceConfig()
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 1

    overrides = {
        "keep_trailing_segment": args.keep_trailing_segment,
        "normalize_line_endings": args.normalize_line_endings,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        source = _read_source(args.file)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        message = Message.parse(source, config)
    except Hl7ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.summary:
        print(MessageSummary.from_message(message).model_dump_json(indent=2))

    for path in args.paths:
        value = message.query(path)
        if args.decode:
            value = message.decoder.decode(value)
        print(f"{path}\t{value}")

    return 0


__all__ = ["main"]
