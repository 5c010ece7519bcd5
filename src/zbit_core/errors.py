"""Error kinds raised while converting a .bit stream.

Every failure is fatal. Components raise, the CLI reports.
"""
from __future__ import annotations

ERRORS = {
    "E_SHORT_READ": "Input ended before the expected number of bytes",
    "E_SHORT_WRITE": "Output accepted fewer bytes than requested",
    "E_MAGIC": "Invalid magic header",
    "E_FIELD_TOO_LARGE": "Meta field length exceeds limit",
    "E_FIRMWARE_TOO_SMALL": "Firmware blob is too small",
    "E_FIRMWARE_MISALIGNED": "Firmware is not 4 Bytes aligned",
    "E_SYNC_WORD": "Invalid SYNC word",
    "E_UNKNOWN_FIELD": "Unknown field type",
    "E_INPUT_MISSING": "Input file missing",
    "E_INPUT_READ": "Input file could not be read",
}


class BitstreamError(Exception):
    """Base class for all conversion failures."""

    code = "E_BITSTREAM"

    def __init__(self, detail: str | None = None, **context):
        self.detail = detail
        self.context = context
        message = ERRORS.get(self.code, "Bitstream error")
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def as_dict(self) -> dict:
        return {"code": self.code, "message": ERRORS.get(self.code, ""), "detail": self.detail}


class StreamIOError(BitstreamError):
    """Fewer bytes were available or accepted than the format requires."""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what}: expected {expected}, got {actual}", expected=expected, actual=actual)


class ShortReadError(StreamIOError):
    code = "E_SHORT_READ"


class ShortWriteError(StreamIOError):
    code = "E_SHORT_WRITE"


class FormatError(BitstreamError, ValueError):
    """Bytes are present but violate a structural invariant."""


class MagicMismatchError(FormatError):
    code = "E_MAGIC"


class FieldTooLargeError(FormatError):
    code = "E_FIELD_TOO_LARGE"


class FirmwareTooSmallError(FormatError):
    code = "E_FIRMWARE_TOO_SMALL"


class FirmwareMisalignedError(FormatError):
    code = "E_FIRMWARE_MISALIGNED"


class InvalidSyncWordError(FormatError):
    code = "E_SYNC_WORD"

    def __init__(self, word: bytes):
        self.word = bytes(word)
        super().__init__(self.word.hex().upper(), word=self.word)


class UnknownFieldError(FormatError):
    code = "E_UNKNOWN_FIELD"

    def __init__(self, tag: int):
        self.tag = tag
        super().__init__(f"{tag:02X}", tag=tag)
