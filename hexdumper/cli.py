"""
Command-line interface for hexdumper.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .byte_source import ByteSource
from .dumper import Dumper
from .exceptions import SinkWriteError
from .log import get_logger, setup_logging


def offset_arg(value: str) -> int:
    """Parse a non-negative integer given in decimal, 0x hex or 0o octal."""
    try:
        number = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hexdumper',
        description='Display file contents as a canonical hex+ASCII dump')
    parser.add_argument('file', nargs='?', default='-',
                        help="File to dump (default: stdin, also '-')")
    parser.add_argument('-s', '--skip', type=offset_arg, default=0,
                        help='Skip this many bytes from the beginning (default: 0)')
    parser.add_argument('-n', '--length', type=offset_arg, default=None,
                        help='Number of bytes to dump (default: until end of input)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging on stderr')
    parser.add_argument('--log-file', default=None, help='Also write log messages to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)
    logger = get_logger()

    file_path = None if args.file == '-' else Path(args.file)
    source = ByteSource(file_path, skip=args.skip, length=args.length)
    try:
        with source:
            dumper = Dumper(sys.stdout, start_offset=source.start)
            for chunk in source.chunks():
                dumper.add_bytes(chunk)
            dumper.flush()
    except SinkWriteError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", source.name, e)
        return 1
    return 0
