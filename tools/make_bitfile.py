import sys
from pathlib import Path

from zbit_core.protocol import (
    BIT_MAGIC_HEADER,
    FIRMWARE_MAGIC_HEADER,
    META_FIELDS,
    SYNC_WORD,
    TAG_FIRMWARE,
)

# --- CONFIGURATION ---
DEFAULT_META = {
    "design": "synthetic_top;UserID=0XFFFFFFFF;Version=2021.2",
    "part": "7z020clg484",
    "date": "2026/01/01",
    "time": "00:00:00",
}
TAGS = {name: tag for tag, name in META_FIELDS.items()}


def meta_field(name: str, text: str) -> bytes:
    """Tag + 16-bit length + NUL terminated text, as the toolchain writes it."""
    body = text.encode("utf-8") + b"\x00"
    return bytes([TAGS[name]]) + len(body).to_bytes(2, "big") + body


def firmware_field(words: int, inverted: bool = False) -> bytes:
    """Firmware record whose payload is the SYNC word followed by words-1 counter words."""
    payload = SYNC_WORD + b"".join(i.to_bytes(4, "big") for i in range(1, words))
    if inverted:
        payload = b"".join(payload[i:i + 4][::-1] for i in range(0, len(payload), 4))
    body = FIRMWARE_MAGIC_HEADER + payload
    return bytes([TAG_FIRMWARE]) + len(body).to_bytes(4, "big") + body


def build_bitfile(meta: dict[str, str], words: int, inverted: bool = False) -> bytes:
    out = BIT_MAGIC_HEADER
    for name, text in meta.items():
        out += meta_field(name, text)
    return out + firmware_field(words, inverted=inverted)


if __name__ == "__main__":
    # usage:
    #   python tools/make_bitfile.py OUT.bit [--words N] [--inverted] [--design-only]

    args = [a for a in sys.argv[1:] if a]

    def pop_flag(arg_list: list[str], flag: str) -> tuple[bool, list[str]]:
        """Remove a boolean flag from an argv-style list."""
        if flag in arg_list:
            return True, [a for a in arg_list if a != flag]
        return False, arg_list

    inverted, args = pop_flag(args, "--inverted")
    design_only, args = pop_flag(args, "--design-only")

    words = 1024
    if "--words" in args:
        i = args.index("--words")
        if i + 1 >= len(args):
            raise SystemExit("--words requires a value")
        words = int(args[i + 1])
        args = args[:i] + args[i + 2:]
    if words < 1:
        raise SystemExit("--words must be at least 1 (the SYNC word)")

    out = Path(args[0] if args else "synthetic.bit")
    meta = {"design": DEFAULT_META["design"]} if design_only else DEFAULT_META
    out.write_bytes(build_bitfile(meta, words, inverted=inverted))
    print(f"GENERATED: {out}")
