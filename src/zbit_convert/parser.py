"""Top-level .bit parser: container header, then tagged fields until the firmware."""
from __future__ import annotations

from typing import BinaryIO

import click

from zbit_core.errors import UnknownFieldError
from zbit_core.protocol import (
    BIT_MAGIC_HEADER,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_FIELD_LENGTH,
    META_FIELDS,
    TAG_FIRMWARE,
)
from zbit_core.wire import read_exact, read_magic_header
from zbit_convert.fields import Emit, read_meta_field
from zbit_convert.firmware import FirmwareExtractor


def echo_stderr(line: bytes) -> None:
    click.echo(line, err=True)


def process_bit_file(
    inp: BinaryIO,
    out: BinaryIO,
    emit: Emit | None = echo_stderr,
    max_field_length: int = DEFAULT_MAX_FIELD_LENGTH,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> dict:
    """Convert a .bit stream to .bin.

    Meta fields are reported through `emit`, the firmware goes to `out`.
    Nothing past the firmware field is read.
    """
    # Validated up front so a bad value fails before any input is consumed
    extractor = FirmwareExtractor(inp, out, chunk_size=chunk_size)

    # 1. Container header
    read_magic_header(inp, BIT_MAGIC_HEADER, what="bit magic header")

    # 2. Fields
    fields: list[dict] = []
    while True:
        field_type = read_exact(inp, 1, what="field type")[0]

        if field_type in META_FIELDS:
            fields.append(read_meta_field(inp, field_type, emit=emit, max_length=max_field_length))
        elif field_type == TAG_FIRMWARE:
            firmware = extractor.run()
            break
        else:
            raise UnknownFieldError(field_type)

    return {"fields": fields, "firmware": firmware}
