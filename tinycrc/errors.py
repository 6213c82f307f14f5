class TinyCrcError(Exception):
    """Base class for tinycrc-specific errors."""


# Input domain
class SeedRangeError(TinyCrcError, ValueError):
    pass


class LengthMismatchError(TinyCrcError, ValueError):
    pass


# Verification
class ChecksumMismatch(TinyCrcError):
    def __init__(self, path: str, expected: int, actual: int):
        super().__init__(f"{path}: expected {expected:08x}, got {actual:08x}")
        self.path = path
        self.expected = expected
        self.actual = actual
