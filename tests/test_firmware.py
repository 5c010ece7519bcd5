import io

import pytest

from conftest import firmware_body, swap_words
from zbit_core.errors import (
    FirmwareMisalignedError,
    FirmwareTooSmallError,
    InvalidSyncWordError,
    MagicMismatchError,
    ShortReadError,
    ShortWriteError,
)
from zbit_core.protocol import FIRMWARE_MAGIC_HEADER, SYNC_WORD, SYNC_WORD_INVERTED
from zbit_convert.firmware import FirmwareExtractor

WORDS = SYNC_WORD + bytes.fromhex("20000000 30020001 00000000 deadbeef")


def extract(raw: bytes, chunk_size: int = 4096) -> tuple[bytes, dict]:
    out = io.BytesIO()
    stats = FirmwareExtractor(io.BytesIO(raw), out, chunk_size=chunk_size).run()
    return out.getvalue(), stats


def test_canonical_sync_only():
    out, stats = extract(firmware_body(SYNC_WORD))
    assert out == SYNC_WORD
    assert stats == {"length": 52, "payload_length": 4, "chunks": 1, "inverted": False}


def test_inverted_sync_only():
    out, stats = extract(firmware_body(SYNC_WORD_INVERTED))
    assert out == bytes.fromhex("665599aa")
    assert stats["inverted"] is True


def test_inverted_payload_is_swapped_word_by_word():
    out, _ = extract(firmware_body(swap_words(WORDS)))
    assert out == WORDS


def test_canonical_payload_is_copied_unchanged():
    out, _ = extract(firmware_body(WORDS))
    assert out == WORDS


def test_mode_holds_across_chunks():
    # Later chunks never re-detect, even if they happen to start with a SYNC word
    payload = swap_words(WORDS + SYNC_WORD_INVERTED + SYNC_WORD)
    out, stats = extract(firmware_body(payload), chunk_size=8)
    assert out == WORDS + SYNC_WORD_INVERTED + SYNC_WORD
    assert stats["chunks"] == 4


def test_default_chunking():
    payload = SYNC_WORD + bytes(4096 + 4)
    out, stats = extract(firmware_body(payload))
    assert out == payload
    assert stats["chunks"] == 2


@pytest.mark.parametrize("length, error", [
    (48, FirmwareTooSmallError),
    (0, FirmwareTooSmallError),
    (54, FirmwareMisalignedError),
    (53, FirmwareMisalignedError),
])
def test_bad_length_rejected_before_payload(length, error):
    inp = io.BytesIO(length.to_bytes(4, "big") + FIRMWARE_MAGIC_HEADER + SYNC_WORD * 4)
    with pytest.raises(error):
        FirmwareExtractor(inp, io.BytesIO()).run()
    assert inp.tell() == 4


def test_bad_embedded_magic():
    body = bytearray(firmware_body(SYNC_WORD))
    body[4 + 35] = 0xBA
    with pytest.raises(MagicMismatchError):
        extract(bytes(body))


def test_invalid_sync_word_writes_nothing():
    out = io.BytesIO()
    with pytest.raises(InvalidSyncWordError) as exc:
        FirmwareExtractor(io.BytesIO(firmware_body(bytes.fromhex("12345678"))), out).run()
    assert exc.value.word == bytes.fromhex("12345678")
    assert "12345678" in str(exc.value)
    assert out.getvalue() == b""


def test_truncated_payload():
    raw = firmware_body(WORDS)[:-6]
    with pytest.raises(ShortReadError):
        extract(raw)


def test_short_write():
    class Stingy:
        def write(self, data):
            return len(data) - 1

    with pytest.raises(ShortWriteError):
        FirmwareExtractor(io.BytesIO(firmware_body(WORDS)), Stingy()).run()


@pytest.mark.parametrize("chunk_size", [0, -4, 6, 4097])
def test_chunk_size_must_be_word_aligned(chunk_size):
    with pytest.raises(ValueError):
        FirmwareExtractor(io.BytesIO(), io.BytesIO(), chunk_size=chunk_size)
