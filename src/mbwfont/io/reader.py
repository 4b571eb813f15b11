"""Font reader for loading MBW1 files.

This module opens a font file and hands the stream to the codec. The file
is closed on every exit path, including decode failures.
"""

from pathlib import Path

from mbwfont.domain.font import Font
from mbwfont.exceptions import FontLoadError
from mbwfont.io.codec import decode


def load_font(path: str | Path) -> Font:
    """Read a font from an MBW1 file.

    Args:
        path: Path to the font file

    Returns:
        The decoded font

    Raises:
        FontLoadError: If the file cannot be opened
        FontError: Any decode failure raised by the codec
    """
    try:
        stream = open(path, "rb")
    except OSError as e:
        raise FontLoadError(str(path), e.strerror or str(e)) from e

    with stream:
        return decode(stream)
