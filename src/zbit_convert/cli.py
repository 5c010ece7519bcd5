"""zynq-bit2bin - convert Xilinx .bit bitstreams to the naked .bin format.

usage:
    zynq-bit2bin < design.bit > design.bin
"""
from __future__ import annotations

from typing import BinaryIO

import click

from zbit_core.errors import BitstreamError
from zbit_core.protocol import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_FIELD_LENGTH, WORD_SIZE
from zbit_convert.parser import echo_stderr, process_bit_file


def _check_chunk_size(ctx, param, value: int) -> int:
    if value <= 0 or value % WORD_SIZE:
        raise click.BadParameter(f"must be a positive multiple of {WORD_SIZE}")
    return value


@click.command()
@click.argument("bitfile", type=click.File("rb"), default="-")
@click.argument("binfile", type=click.File("wb"), default="-")
@click.option(
    "--max-field-length",
    type=click.IntRange(min=0),
    default=DEFAULT_MAX_FIELD_LENGTH,
    show_default=True,
    help="Largest meta field accepted, in bytes",
)
@click.option(
    "--chunk-size",
    type=int,
    default=DEFAULT_CHUNK_SIZE,
    show_default=True,
    callback=_check_chunk_size,
    help="Firmware copy chunk, in bytes",
)
@click.option("-q", "--quiet", is_flag=True, help="Do not print meta fields")
@click.option("-v", "--verbose", is_flag=True, help="Print a summary line on success")
def main(
    bitfile: BinaryIO,
    binfile: BinaryIO,
    max_field_length: int,
    chunk_size: int,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert BITFILE (default stdin) into BINFILE (default stdout)."""
    try:
        summary = process_bit_file(
            bitfile,
            binfile,
            emit=None if quiet else echo_stderr,
            max_field_length=max_field_length,
            chunk_size=chunk_size,
        )
        binfile.flush()
    except (BitstreamError, OSError) as e:
        # Fail closed with a single-line reason, output is partial
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(1)

    if verbose:
        fw = summary["firmware"]
        order = "inverted" if fw["inverted"] else "canonical"
        click.echo(
            f"PASS: {fw['payload_length']} bytes written ({order} byte order, "
            f"{len(summary['fields'])} meta fields)",
            err=True,
        )


if __name__ == "__main__":
    main()
