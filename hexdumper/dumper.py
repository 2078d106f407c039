"""
Canonical hex dump formatting.

Produces the same layout as ``hexdump -C``: 16 bytes per line, split into two
groups of 8, preceded by the offset and followed by the printable characters::

    000000  54 68 69 73 20 69 73 20  61 20 74 65 73 74 20 6d |This is a test m|
    000010  65 73 73 61 67 65 2e                             |essage.|
"""

import io
import logging
import sys
from typing import Iterable, List, TextIO

from .exceptions import SinkWriteError

logger = logging.getLogger(__name__)

BYTES_PER_LINE = 16
GROUP_SIZE = 8
# 16 tokens of " xx" plus the gap between the two groups
HEX_WIDTH = BYTES_PER_LINE * 3 + 1
OFFSET_WIDTH = 6


def printable_char(byte: int) -> str:
    """Character shown in the ASCII column for a byte."""
    return chr(byte) if 0x20 <= byte <= 0x7e else '.'


class Dumper:
    """
    Incremental hex dumper.

    Bytes are fed one at a time with add_byte(). A full line is written to
    the sink when the first byte of the next line arrives, so the caller must
    call flush() once after the last byte to emit the trailing line.
    """

    def __init__(self, sink: TextIO, start_offset: int = 0):
        """
        Initialize dumper.

        Args:
            sink: Text stream receiving one line per write
            start_offset: Offset shown on the first line
        """
        if start_offset < 0:
            raise ValueError(f"start_offset must not be negative, got {start_offset}")
        self.sink = sink
        self.offset = start_offset
        self.hex_tokens: List[str] = []
        self.ascii_chars: List[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.flush()

    @property
    def pending(self) -> int:
        """Number of bytes in the line not yet shipped."""
        return len(self.hex_tokens)

    def add_byte(self, byte: int):
        """Add one byte (0-255) to the dump."""
        if not 0 <= byte <= 0xff:
            raise ValueError(f"byte must be in range 0-255, got {byte}")
        if self.pending == BYTES_PER_LINE:
            self.ship()
        gap = '  ' if self.pending == GROUP_SIZE else ' '
        self.hex_tokens.append(f'{gap}{byte:02x}')
        self.ascii_chars.append(printable_char(byte))

    def add_bytes(self, data: Iterable[int]):
        """Add every byte of a block."""
        for byte in data:
            self.add_byte(byte)

    def render_line(self) -> str:
        """Text of the pending line, without the line terminator."""
        hex_column = ''.join(self.hex_tokens)
        ascii_column = ''.join(self.ascii_chars)
        return f'{self.offset:0{OFFSET_WIDTH}x} {hex_column:<{HEX_WIDTH}} |{ascii_column}|'

    def ship(self):
        """Write the pending line to the sink and start a new one."""
        count = self.pending
        if count == 0:
            return

        line = self.render_line()
        try:
            self.sink.write(line + '\n')
        except (OSError, ValueError) as e:
            raise SinkWriteError(self.offset, e) from e
        logger.debug("Shipped %d bytes at offset %06x", count, self.offset)

        self.hex_tokens.clear()
        self.ascii_chars.clear()
        self.offset += count

    def flush(self):
        """Emit the trailing partial line, if any. Safe to call repeatedly."""
        self.ship()


def dump_to(data: Iterable[int], sink: TextIO, start_offset: int = 0):
    """Dump a block of bytes to the given sink."""
    dumper = Dumper(sink, start_offset)
    dumper.add_bytes(data)
    dumper.flush()


def dump_bytes(data: Iterable[int]):
    """Dump a block of bytes to stdout."""
    dump_to(data, sys.stdout)


def hexdump(data: Iterable[int], start_offset: int = 0) -> str:
    """Return the dump of a block of bytes as a string."""
    out = io.StringIO()
    dump_to(data, out, start_offset)
    return out.getvalue()
