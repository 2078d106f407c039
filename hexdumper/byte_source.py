"""
Byte sources feeding the dumper.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096


class ByteSource:
    """Reads the bytes to dump from a file, a binary stream or stdin."""

    def __init__(self, file_path: Optional[Path] = None, stream: Optional[BinaryIO] = None,
                 skip: int = 0, length: Optional[int] = None, chunk_size: int = CHUNK_SIZE):
        """
        Initialize byte source.

        Args:
            file_path: File to read (None = use stream, or stdin)
            stream: Already open binary stream, left open on exit
            skip: Number of leading bytes to discard
            length: Maximum number of bytes to produce (None = until EOF)
            chunk_size: Size of the chunks yielded by chunks()
        """
        if skip < 0:
            raise ValueError(f"skip must not be negative, got {skip}")
        if length is not None and length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.file_path = Path(file_path) if file_path is not None else None
        self.stream = stream
        self.skip = skip
        self.length = length
        self.chunk_size = chunk_size
        self.file: Optional[BinaryIO] = None
        self._owns_file = False

    @property
    def name(self) -> str:
        """Display name of the input."""
        if self.file_path is not None:
            return str(self.file_path)
        if self.stream is not None:
            return getattr(self.stream, 'name', '<stream>')
        return '<stdin>'

    @property
    def start(self) -> int:
        """Offset of the first byte produced."""
        return self.skip

    def __enter__(self):
        """Open the input and position it after the skipped bytes."""
        if self.file_path is not None:
            self.file = open(self.file_path, 'rb')
            self._owns_file = True
        elif self.stream is not None:
            self.file = self.stream
        else:
            self.file = sys.stdin.buffer
        logger.info("Reading %s (skip=%d, length=%s)", self.name, self.skip, self.length)
        if self.skip > 0:
            self._skip()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close the input if it was opened here."""
        if self.file and self._owns_file:
            self.file.close()
        self.file = None
        self._owns_file = False

    def _skip(self):
        if self.file.seekable():
            self.file.seek(self.skip, 1)
            return
        # Pipes can only be skipped by reading
        left = self.skip
        while left > 0:
            data = self.file.read(min(self.chunk_size, left))
            if not data:
                break
            left -= len(data)

    def chunks(self) -> Iterator[bytes]:
        """Yield the input in chunks until EOF or until length bytes were read."""
        if not self.file:
            raise RuntimeError("Input not open. Use as context manager.")
        left = self.length
        while left is None or left > 0:
            size = self.chunk_size if left is None else min(self.chunk_size, left)
            data = self.file.read(size)
            if not data:
                break
            if left is not None:
                left -= len(data)
            yield data

    def tell(self) -> int:
        """Get current input position."""
        if not self.file:
            raise RuntimeError("Input not open.")
        return self.file.tell()

    def remaining_bytes(self) -> int:
        """Get number of bytes between the current position and EOF."""
        if not self.file:
            raise RuntimeError("Input not open.")
        pos = self.file.tell()
        self.file.seek(0, 2)  # Seek to end
        size = self.file.tell()
        self.file.seek(pos)  # Restore position
        return max(size - pos, 0)
