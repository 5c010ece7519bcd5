from __future__ import annotations

from typing import BinaryIO, Callable

from zbit_core.errors import FieldTooLargeError
from zbit_core.protocol import DEFAULT_MAX_FIELD_LENGTH, META_FIELDS, META_LENGTH_BYTES
from zbit_core.wire import read_exact, read_uint

Emit = Callable[[bytes], None]


def read_meta_field(
    inp: BinaryIO,
    tag: int,
    emit: Emit | None = None,
    max_length: int = DEFAULT_MAX_FIELD_LENGTH,
) -> dict:
    """Read a meta field (design name, part, build date...) and emit it as `* <text>`.

    The text is not decoded; whatever bytes the file holds reach the sink.
    """
    length = read_uint(inp, META_LENGTH_BYTES)
    if length > max_length:
        raise FieldTooLargeError(f"{length} > {max_length}", length=length, limit=max_length)

    text = read_exact(inp, length, what="meta field")

    if emit is not None:
        # Toolchain strings are NUL terminated
        emit(b"* " + text.rstrip(b"\x00"))

    return {
        "tag": tag,
        "name": META_FIELDS.get(tag, f"0x{tag:02x}"),
        "length": length,
        "text": text,
    }
