from __future__ import annotations

from typing import BinaryIO

from zbit_core.errors import MagicMismatchError, ShortReadError, ShortWriteError
from zbit_core.protocol import WORD_SIZE


def read_exact(inp: BinaryIO, n: int, what: str = "data") -> bytes:
    """Read exactly n bytes or raise ShortReadError."""
    buf = bytearray()
    while len(buf) < n:
        chunk = inp.read(n - len(buf))
        if not chunk:
            raise ShortReadError(what, n, len(buf))
        buf += chunk
    return bytes(buf)


def read_uint(inp: BinaryIO, nbytes: int) -> int:
    """Read an unsigned big-endian integer of nbytes."""
    res = 0
    for b in read_exact(inp, nbytes, what=f"{nbytes} Bytes number"):
        res = (res << 8) | b
    return res


def read_magic_header(inp: BinaryIO, expected: bytes, what: str = "magic header") -> None:
    """Consume len(expected) bytes and require an exact match."""
    got = read_exact(inp, len(expected), what=what)
    if got != expected:
        raise MagicMismatchError(what)


def write_all(out: BinaryIO, data: bytes | bytearray) -> None:
    written = out.write(data)
    if written != len(data):
        raise ShortWriteError("output", len(data), written or 0)


def invert_u32_endianness(buf: bytearray) -> None:
    """Reverse the byte order of every 32-bit word of buf, in place."""
    if len(buf) % WORD_SIZE:
        raise ValueError(
            f"Invalid buffer size {len(buf)} when attempting to invert u32 endianness"
        )
    buf[0::4], buf[3::4] = buf[3::4], buf[0::4]
    buf[1::4], buf[2::4] = buf[2::4], buf[1::4]
