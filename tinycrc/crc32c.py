"""
CRC32C (Castagnoli) implementation with a precomputed table.

The table is built once at import and never mutated, so it can be shared
by any number of threads. Each CRC32C accumulator owns its own register;
callers must serialize access to a single instance themselves.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .constants import DEFAULT_SEED, MASK32, POLY, TABLE_SIZE
from .errors import LengthMismatchError, SeedRangeError


def build_table() -> Tuple[int, ...]:
    tbl = []
    for n in range(TABLE_SIZE):
        c = n
        for _ in range(8):
            if c & 1:
                c = (c >> 1) ^ POLY
            else:
                c >>= 1
        tbl.append(c & MASK32)
    return tuple(tbl)


CRC_TABLE = build_table()


def _check_seed(seed: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"seed must be an int, not {type(seed).__name__}")
    if seed < 0 or seed > MASK32:
        raise SeedRangeError(f"seed out of 32-bit range: {seed}")
    return seed


def _as_view(data, length: Optional[int]) -> memoryview:
    """Return a flat unsigned-byte view over the first `length` bytes of `data`.

    Any object exposing a contiguous buffer is accepted. Text is rejected so
    that the caller picks the encoding.
    """
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, not str (encode it first)")
    view = memoryview(data)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    if length is None:
        return view
    if length < 0 or length > len(view):
        raise LengthMismatchError(f"length {length} outside buffer of {len(view)} byte(s)")
    return view[:length]


def _update(c: int, view: memoryview) -> int:
    # c is the raw (complemented) register
    tbl = CRC_TABLE
    for b in view:
        c = tbl[(c ^ b) & 0xFF] ^ (c >> 8)
    return c


def crc32c(data, seed: int = DEFAULT_SEED, length: Optional[int] = None) -> int:
    """Compute CRC32C over `data`, continuing from `seed`.

    `length` limits the computation to a prefix of the buffer. Passing the
    result of a previous call as `seed` continues that checksum, so
    crc32c(b, seed=crc32c(a)) == crc32c(a + b).
    """
    c = (~_check_seed(seed)) & MASK32
    with _as_view(data, length) as view:
        c = _update(c, view)
    return (~c) & MASK32


class CRC32C:
    """Incremental CRC32C accumulator.

    Feeding a buffer in any number of update() calls yields the same
    digest() as a single crc32c() call over the concatenation.
    """

    __slots__ = ("_crc",)

    name = "crc32c"
    digest_size = 4

    def __init__(self, seed: int = DEFAULT_SEED):
        self._crc = (~_check_seed(seed)) & MASK32

    def update(self, data, length: Optional[int] = None) -> None:
        with _as_view(data, length) as view:
            self._crc = _update(self._crc, view)

    def digest(self) -> int:
        return (~self._crc) & MASK32

    def hexdigest(self) -> str:
        return f"{self.digest():08x}"

    def copy(self) -> "CRC32C":
        other = CRC32C.__new__(CRC32C)
        other._crc = self._crc
        return other

    def __repr__(self) -> str:
        return f"<CRC32C digest=0x{self.digest():08x}>"
