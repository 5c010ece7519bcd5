"""zbit convert - .bit to .bin conversion."""
from .firmware import FirmwareExtractor
from .parser import process_bit_file

__all__ = ["FirmwareExtractor", "process_bit_file"]
