"""Domain models for mbwfont.

This module contains the in-memory model of a monospaced bitmap font:

- Letter: A fixed-size boolean pixel grid tagged with a character
- Font: An ordered collection of letters sharing one pixel size

The models are independent of the MBW1 file format; see ``mbwfont.io``.
"""

from mbwfont.domain.font import Font, create_font
from mbwfont.domain.letter import Letter

__all__: list[str] = [
    "Font",
    "Letter",
    "create_font",
]
