"""
tinycrc — portable table-driven CRC32C (Castagnoli) checksums.

Features:

- One-shot checksums over any bytes-like object via crc32c().
- Incremental checksums via the CRC32C accumulator (update/digest), matching
  the one-shot result for any chunking of the same input.
- Seed chaining: a previous result can be passed as the seed to continue it.
- A small CLI (`tinycrc sum`, `tinycrc verify`) for files and stdin.
"""

from .crc32c import CRC32C, CRC_TABLE, build_table, crc32c
from .errors import ChecksumMismatch, LengthMismatchError, SeedRangeError, TinyCrcError

__version__ = "0.1"

__all__ = [
    "CRC32C",
    "CRC_TABLE",
    "build_table",
    "crc32c",
    "TinyCrcError",
    "SeedRangeError",
    "LengthMismatchError",
    "ChecksumMismatch",
]
