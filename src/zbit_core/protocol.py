"""Xilinx .bit container constants.

Single source of truth for magic values, field tags and conversion bounds.
Keep this file stable. Converter and inspector must remain synchronized.
"""

# Container header: [Len(2)=9 | 0FF0 x4 | 00 | Len(2)=1] = 13 bytes
BIT_MAGIC_HEADER = bytes.fromhex("00090ff00ff00ff00ff0000001")

# Embedded firmware header: 32 dummy words, bus width detect, 8 more dummy bytes
FIRMWARE_MAGIC_HEADER = b"\xff" * 32 + bytes.fromhex("000000bb11220044") + b"\xff" * 8

# Configuration SYNC word, as found at the start of the payload
SYNC_WORD = bytes.fromhex("665599aa")
SYNC_WORD_INVERTED = SYNC_WORD[::-1]

WORD_SIZE = 4

# Field type tags
TAG_DESIGN = 0x61
TAG_PART = 0x62
TAG_DATE = 0x63
TAG_TIME = 0x64
TAG_FIRMWARE = 0x65

META_FIELDS = {
    TAG_DESIGN: "design",
    TAG_PART: "part",
    TAG_DATE: "date",
    TAG_TIME: "time",
}

# Length prefix sizes, in bytes
META_LENGTH_BYTES = 2
FIRMWARE_LENGTH_BYTES = 4

# Room for the embedded header plus one SYNC word
MIN_FIRMWARE_LENGTH = len(FIRMWARE_MAGIC_HEADER) + WORD_SIZE

# Default bounds
DEFAULT_MAX_FIELD_LENGTH = 256  # Not a format limit; see --max-field-length
DEFAULT_CHUNK_SIZE = 4096  # Must stay a multiple of WORD_SIZE
