"""
Smaz command-line tool.

Compress short strings and inspect the resulting code streams.

Usage::

    python -m smaz_codec compress "http://google.com" "the end"
    python -m smaz_codec compress --json "Smaz is a simple compression library"
    python -m smaz_codec decompress 433b06063b57fd

Commands:
    compress TEXT...   Print the hex code stream and size change per argument
    decompress HEX     Print the text decoded from a hex code stream

Options:
    --json             Print a JSON report per argument (compress only)
    -v, --verbose      Enable debug logging (overrides SMAZ_LOG_LEVEL)
"""

from __future__ import annotations

import argparse
import logging
import sys

from smaz_codec import config
from smaz_codec.compress import compress
from smaz_codec.decompress import decompress
from smaz_codec.exceptions import TruncatedStreamError
from smaz_codec.report import CompressionReport

logger = logging.getLogger(__name__)

HANDLER_NAME = "smaz_codec.cli"
"""Name of the console handler installed by the command-line tool."""


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the command-line tool."""
    level = logging.DEBUG if verbose else getattr(logging, config.SMAZ_LOG_LEVEL)

    root = logging.getLogger()
    root.setLevel(level)

    # Repeated calls (e.g. from tests) reuse the handler and only update its level.
    handler = next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)
    handler.setLevel(level)


def run_compress(texts: list[str], as_json: bool = False) -> int:
    """
    Compress each text and print one line per input.

    Args:
        texts: Strings to compress (encoded as UTF-8).
        as_json: Print a JSON report instead of the hex stream.

    Returns:
        Process exit status.
    """
    for text in texts:
        data = text.encode("utf-8")
        report = CompressionReport.measure(data)

        if as_json:
            print(report.model_dump_json())
            continue

        print(compress(data).hex())
        if data:
            print(f"{text} {report.describe()}")

    return 0


def run_decompress(hex_stream: str) -> int:
    """
    Decode a hex code stream and print the text.

    Args:
        hex_stream: The code stream as hex digits (whitespace is ignored).

    Returns:
        Process exit status: 0 on success, 1 on malformed input.
    """
    try:
        stream = bytes.fromhex(hex_stream)
    except ValueError as e:
        logger.error("Invalid hex input: %s", e)
        return 1

    try:
        data = decompress(stream)
    except TruncatedStreamError as e:
        logger.error("Cannot decompress: %s", e)
        return 1

    print(data.decode("utf-8", errors="replace"))
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="smaz-codec",
        description="Smaz short string compression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compress_parser = subparsers.add_parser("compress", help="Compress strings")
    compress_parser.add_argument("texts", nargs="+", metavar="TEXT", help="Strings to compress")
    compress_parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print a JSON report per string",
    )

    decompress_parser = subparsers.add_parser("decompress", help="Decompress a hex stream")
    decompress_parser.add_argument("hex_stream", metavar="HEX", help="Code stream as hex")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "compress":
        return run_compress(args.texts, args.as_json)
    return run_decompress(args.hex_stream)


if __name__ == "__main__":
    sys.exit(main())
