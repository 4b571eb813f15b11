"""mbwfont - Monospaced bitmap fonts in the MBW1 file format.

mbwfont keeps a monospaced black and white font in memory as one fixed-size
pixel grid per character and reads and writes it as a compact, bit-packed
MBW1 file.

Example:
    >>> from mbwfont import create_font, save_font
    >>> font = create_font(8, 14)
    >>> font.letter("A").set(3, 2, True)
    >>> save_font(font, "font.mbw")
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from mbwfont.domain import Font, Letter, create_font
from mbwfont.io import decode, decode_bytes, encode, encode_bytes, load_font, save_font

__all__ = [
    "Font",
    "Letter",
    "__author__",
    "__version__",
    "create_font",
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "load_font",
    "save_font",
]
