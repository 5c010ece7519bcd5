"""zbit inspect - check a .bit file without writing a .bin."""
from .logic import inspect_bitfile

__all__ = ["inspect_bitfile"]
