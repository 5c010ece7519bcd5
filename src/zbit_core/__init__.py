"""zbit core - .bit container constants, errors and stream primitives."""
from .errors import (
    BitstreamError,
    FormatError,
    ShortReadError,
    ShortWriteError,
    StreamIOError,
)
from .wire import invert_u32_endianness, read_exact, read_magic_header, read_uint, write_all

__all__ = [
    "BitstreamError",
    "FormatError",
    "ShortReadError",
    "ShortWriteError",
    "StreamIOError",
    "invert_u32_endianness",
    "read_exact",
    "read_magic_header",
    "read_uint",
    "write_all",
]
