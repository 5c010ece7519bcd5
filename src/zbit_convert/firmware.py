from __future__ import annotations

from typing import BinaryIO

from zbit_core.errors import (
    FirmwareMisalignedError,
    FirmwareTooSmallError,
    InvalidSyncWordError,
)
from zbit_core.protocol import (
    DEFAULT_CHUNK_SIZE,
    FIRMWARE_LENGTH_BYTES,
    FIRMWARE_MAGIC_HEADER,
    MIN_FIRMWARE_LENGTH,
    SYNC_WORD,
    SYNC_WORD_INVERTED,
    WORD_SIZE,
)
from zbit_core.wire import (
    invert_u32_endianness,
    read_exact,
    read_magic_header,
    read_uint,
    write_all,
)


class FirmwareExtractor:
    """Copy the firmware field of a .bit file to a naked .bin stream.

    - The length prefix is validated before any payload byte is read.
    - The embedded firmware header is checked and stripped.
    - Byte order is taken from the SYNC word of the first chunk and
      applied to every word of the payload, SYNC word included.
    """

    def __init__(self, inp: BinaryIO, out: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0 or chunk_size % WORD_SIZE:
            raise ValueError(f"chunk_size must be a positive multiple of {WORD_SIZE}, got {chunk_size}")
        self.inp = inp
        self.out = out
        self.chunk_size = chunk_size
        self.invert_endian: bool | None = None
        self.stats = {
            "length": 0,
            "payload_length": 0,
            "chunks": 0,
            "inverted": False,
        }

    def _read_length(self) -> int:
        fw_length = read_uint(self.inp, FIRMWARE_LENGTH_BYTES)
        # Room for the magic header + 1 SYNC word
        if fw_length < MIN_FIRMWARE_LENGTH:
            raise FirmwareTooSmallError(str(fw_length), length=fw_length)
        if fw_length % WORD_SIZE:
            raise FirmwareMisalignedError(str(fw_length), length=fw_length)
        return fw_length

    def _detect_endianness(self, chunk: bytes | bytearray) -> bool:
        word = bytes(chunk[:WORD_SIZE])
        if word == SYNC_WORD_INVERTED:
            return True
        if word == SYNC_WORD:
            return False
        raise InvalidSyncWordError(word)

    def run(self) -> dict:
        fw_length = self._read_length()
        self.stats["length"] = fw_length

        read_magic_header(self.inp, FIRMWARE_MAGIC_HEADER, what="firmware magic header")
        remaining = fw_length - len(FIRMWARE_MAGIC_HEADER)
        self.stats["payload_length"] = remaining

        while remaining > 0:
            chunk_len = min(self.chunk_size, remaining)
            chunk = bytearray(read_exact(self.inp, chunk_len, what="firmware chunk"))

            if self.invert_endian is None:
                self.invert_endian = self._detect_endianness(chunk)
                self.stats["inverted"] = self.invert_endian

            if self.invert_endian:
                invert_u32_endianness(chunk)

            write_all(self.out, chunk)

            remaining -= chunk_len
            self.stats["chunks"] += 1

        return dict(self.stats)
