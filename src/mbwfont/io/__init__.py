"""Font I/O layer for mbwfont.

This module handles reading and writing MBW1 font data. It keeps the
binary format separate from the domain models.

Key responsibilities:
- Encode and decode the MBW1 layout on any binary stream
- Open and create font files and delegate to the codec
- Report each failure with the file section it happened in

Key functions:
- decode / encode: Stream codec
- decode_bytes / encode_bytes: In-memory codec
- load_font / save_font: File helpers
"""

from mbwfont.io.codec import decode, decode_bytes, encode, encode_bytes
from mbwfont.io.reader import load_font
from mbwfont.io.writer import get_sorted_path, save_font

__all__ = [
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "get_sorted_path",
    "load_font",
    "save_font",
]
