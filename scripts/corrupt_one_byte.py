import sys
from pathlib import Path

from zbit_core.protocol import BIT_MAGIC_HEADER

def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_one_byte.py <file.bit>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < len(BIT_MAGIC_HEADER):
        print("File too small to corrupt safely.")
        raise SystemExit(2)

    # Flip the last byte of the 13-byte container header.
    # Conversion must then stop before reading any field.
    idx = len(BIT_MAGIC_HEADER) - 1
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
