"""
hexdumper: canonical hex+ASCII dumps of byte sequences.
"""

from .dumper import Dumper, dump_bytes, dump_to, hexdump, printable_char
from .exceptions import HexdumpError, SinkWriteError

__version__ = "0.1.0"

__all__ = [
    'Dumper',
    'dump_bytes',
    'dump_to',
    'hexdump',
    'printable_char',
    'HexdumpError',
    'SinkWriteError',
]
