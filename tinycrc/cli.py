from __future__ import annotations

import sys
import argparse
import json as _json

from typing import BinaryIO, Dict, Iterable, List, Optional, Any

from tinycrc.constants import DEFAULT_CHUNK_SIZE, DEFAULT_SEED, MASK32
from tinycrc.crc32c import CRC32C
from tinycrc.errors import ChecksumMismatch, TinyCrcError


STDIN_NAME = "-"


def parse_seed(text: str) -> int:
    """Parse a seed or checksum given on the command line.

    Accepts decimal ("1234") or hex with a 0x prefix ("0x12345678").

    Raises:
        ValueError: when the text is not a number or does not fit in 32 bits.
    """
    s = text.strip()
    try:
        value = int(s, 16) if s.lower().startswith("0x") else int(s, 10)
    except ValueError:
        raise ValueError(f"not a valid 32-bit value: {text!r}")
    if value < 0 or value > MASK32:
        raise ValueError(f"value out of 32-bit range: {text!r}")
    return value


def _parse_expected(text: str) -> int:
    # Bare hex is the usual way checksums are written down
    s = text.strip()
    if not s.lower().startswith("0x"):
        s = "0x" + s
    return parse_seed(s)


def _crc32c_stream(fh: BinaryIO, seed: int, chunk_size: int) -> int:
    ctx = CRC32C(seed)
    while True:
        chunk = fh.read(chunk_size)
        if not chunk:
            break
        ctx.update(chunk)
    return ctx.digest()


def crc32c_file(path: str, seed: int = DEFAULT_SEED, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Checksum a file (or stdin for "-") without reading it into memory at once.

    Args:
        path: File to read, or "-" for standard input.
        seed: Initial CRC32C value to continue from.
        chunk_size: Number of bytes read per update.

    Returns:
        The CRC32C of the file contents.
    """
    if chunk_size <= 0:
        raise ValueError("chunk size must be positive")
    if path == STDIN_NAME:
        return _crc32c_stream(sys.stdin.buffer, seed, chunk_size)
    with open(path, "rb") as fh:
        return _crc32c_stream(fh, seed, chunk_size)


def cmd_sum(
    paths: Iterable[str],
    *,
    seed: int = DEFAULT_SEED,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    as_json: bool = False,
) -> List[Dict[str, Any]]:
    """Print the CRC32C of each path.

    Args:
        paths: Files to checksum; empty means standard input.
        seed: Initial CRC32C value applied to every file.
        chunk_size: Read size for streaming.
        as_json: Emit one JSON document instead of tab-separated lines.
    """
    targets = list(paths) or [STDIN_NAME]
    results: List[Dict[str, Any]] = []
    for p in targets:
        value = crc32c_file(p, seed=seed, chunk_size=chunk_size)
        results.append({"path": p, "crc32c": f"{value:08x}"})
    if as_json:
        print(_json.dumps({"seed": f"{seed:08x}", "results": results}))
    else:
        for r in results:
            print(f"{r['crc32c']}\t{r['path']}")
    return results


def verify_file(path: str, expected: int, *, seed: int = DEFAULT_SEED, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Recompute a file's CRC32C and raise ChecksumMismatch if it differs."""
    actual = crc32c_file(path, seed=seed, chunk_size=chunk_size)
    if actual != expected:
        raise ChecksumMismatch(path, expected, actual)
    return actual


def cmd_verify(path: str, expected: int, *, seed: int = DEFAULT_SEED, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bool:
    """Compare a file's CRC32C with an expected value.

    Prints:
        "OK" on match, "FAIL" on mismatch (details on stderr).
    """
    try:
        verify_file(path, expected, seed=seed, chunk_size=chunk_size)
    except ChecksumMismatch as exc:
        print("FAIL")
        print(f"Mismatch: {exc}", file=sys.stderr)
        return False
    print("OK")
    return True


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="tinycrc", description="CRC32C (Castagnoli) checksums")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_sum = sub.add_parser("sum", help="Print CRC32C of files (stdin when none or '-')")
    ap_sum.add_argument("paths", nargs="*", help="Files to checksum")
    ap_sum.add_argument("--seed", type=parse_seed, default=DEFAULT_SEED, help="Initial value, decimal or 0x hex (default 0)")
    ap_sum.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes read per update (default {DEFAULT_CHUNK_SIZE})",
    )
    ap_sum.add_argument("--json", action="store_true", help="Emit JSON result summary")

    ap_verify = sub.add_parser("verify", help="Check a file against an expected CRC32C")
    ap_verify.add_argument("path", help="File to check ('-' for stdin)")
    ap_verify.add_argument("expected", type=_parse_expected, help="Expected CRC32C in hex (0x prefix optional)")
    ap_verify.add_argument("--seed", type=parse_seed, default=DEFAULT_SEED, help="Initial value, decimal or 0x hex (default 0)")
    ap_verify.add_argument("--chunk-size", type=int, default=DEFAULT_CHUNK_SIZE, help="Bytes read per update")

    args = ap.parse_args(argv)
    try:
        if args.cmd == "sum":
            cmd_sum(args.paths, seed=args.seed, chunk_size=args.chunk_size, as_json=args.json)
        elif args.cmd == "verify":
            ok = cmd_verify(args.path, args.expected, seed=args.seed, chunk_size=args.chunk_size)
            sys.exit(0 if ok else 1)
        else:
            raise RuntimeError("Unknown command")
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except (TinyCrcError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
