import json
from pathlib import Path
import click
from zbit_core.protocol import DEFAULT_MAX_FIELD_LENGTH
from .logic import inspect_bitfile

@click.group()
def main():
    pass

@main.command("bit")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-field-length", type=click.IntRange(min=0), default=DEFAULT_MAX_FIELD_LENGTH, show_default=True)
def bit_cmd(path: Path, max_field_length: int):
    result = inspect_bitfile(path, max_field_length=max_field_length)
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
