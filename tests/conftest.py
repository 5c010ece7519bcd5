import pytest

from zbit_core.protocol import BIT_MAGIC_HEADER, FIRMWARE_MAGIC_HEADER, TAG_FIRMWARE


def swap_words(data: bytes) -> bytes:
    return b"".join(data[i:i + 4][::-1] for i in range(0, len(data), 4))


def firmware_body(payload: bytes) -> bytes:
    """Firmware field body: 32-bit length, embedded magic, payload."""
    body = FIRMWARE_MAGIC_HEADER + payload
    return len(body).to_bytes(4, "big") + body


@pytest.fixture
def make_bit():
    def build(fields: list[tuple[int, bytes]], payload: bytes) -> bytes:
        out = BIT_MAGIC_HEADER
        for tag, text in fields:
            out += bytes([tag]) + len(text).to_bytes(2, "big") + text
        return out + bytes([TAG_FIRMWARE]) + firmware_body(payload)
    return build
