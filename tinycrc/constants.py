from __future__ import annotations

# Reflected Castagnoli polynomial (normal form 0x1EDC6F41)
POLY = 0x82F63B78
MASK32 = 0xFFFFFFFF

DEFAULT_SEED = 0

# CRC32C(b"123456789")
CHECK_VALUE = 0xE3069283

TABLE_SIZE = 256

# Read size used when streaming files through the accumulator
DEFAULT_CHUNK_SIZE = 1 << 20
