"""
Exception hierarchy for hexdumper.
"""

from __future__ import annotations


class HexdumpError(Exception):
    """Base class for errors raised by hexdumper."""


class SinkWriteError(HexdumpError):
    """The output sink refused a line.

    Raised while shipping a line. The dump is aborted: the dumper's pending
    line and offset are not guaranteed to be consistent afterwards.
    """

    def __init__(self, offset: int, cause: Exception):
        super().__init__(f"Failed to write line at offset {offset:06x}: {cause}")
        self.offset = offset
        self.cause = cause
