"""Main CLI entry point for wscodec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..codec import decode, encode
from ..exceptions import WscodecError
from ..utils.log import setup_logger
from .options import CliOptions, Mode

logger = logging.getLogger("wscodec.cli.main")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the wscodec CLI."""
    parser = argparse.ArgumentParser(
        prog="wscodec",
        description="wscodec: Whitespace Binary Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wscodec encode -i secret.bin -o hidden.txt   Hide a file in whitespace
  wscodec decode -i hidden.txt -o secret.bin   Recover the file
  echo -n hi | wscodec encode | wscodec decode Round-trip through pipes
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"wscodec {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    encode_parser = subparsers.add_parser(
        Mode.ENCODE.value, help="Encode binary data as whitespace"
    )
    decode_parser = subparsers.add_parser(
        Mode.DECODE.value, help="Decode whitespace back into binary data"
    )

    for sub in (encode_parser, decode_parser):
        sub.add_argument(
            "-i",
            "--input",
            metavar="FILE",
            type=Path,
            help="Read input from FILE instead of stdin",
        )
        sub.add_argument(
            "-o",
            "--output",
            metavar="FILE",
            type=Path,
            help="Write output to FILE instead of stdout",
        )
        sub.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Log progress to stderr (repeat for debug output)",
        )

    decode_parser.add_argument(
        "--strip",
        action="store_true",
        help="Ignore trailing newlines in the input",
    )

    return parser


def _read_input(path: Path | None) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def _write_output(path: Path | None, data: bytes) -> None:
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        path.write_bytes(data)


def run(options: CliOptions) -> None:
    """Execute one encode or decode run.

    Args:
        options: Validated CLI options

    Raises:
        WscodecError: If the input cannot be decoded
        UnicodeDecodeError: If decode input is not valid UTF-8
        OSError: If reading or writing a file fails
    """
    raw = _read_input(options.input_path)
    logger.debug("Read %d bytes from %s", len(raw), options.input_path or "stdin")

    if options.mode is Mode.ENCODE:
        text = encode(raw)
        logger.info("Encoded %d bytes into %d characters", len(raw), len(text))
        result = text.encode("utf-8")
    else:
        text = raw.decode("utf-8")
        if options.strip:
            text = text.rstrip("\r\n")
        result = decode(text)
        logger.info("Decoded %d characters into %d bytes", len(text), len(result))

    _write_output(options.output_path, result)
    logger.debug("Wrote %d bytes to %s", len(result), options.output_path or "stdout")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the wscodec CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        options = CliOptions(
            mode=args.command,
            input_path=args.input,
            output_path=args.output,
            strip=getattr(args, "strip", False),
            verbose=args.verbose,
        )
    except ValidationError as e:
        for error in e.errors():
            print(f"Error: {error['msg']}", file=sys.stderr)
        return 1

    setup_logger("wscodec", options.log_level)

    try:
        run(options)
    except (WscodecError, UnicodeDecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
