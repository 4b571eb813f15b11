"""Font writer for saving MBW1 files.

This module creates a font file and hands the stream to the codec.
"""

from pathlib import Path

from mbwfont.domain.font import Font
from mbwfont.exceptions import FontSaveError
from mbwfont.io.codec import check_encodable, encode


def save_font(font: Font, path: str | Path) -> None:
    """Write a font to an MBW1 file, replacing any existing file.

    Args:
        font: Font to write
        path: Destination path

    Raises:
        FontSaveError: If the file cannot be created
        FontWriteError: If the font does not fit the format, checked before
            the file is touched, or writing a section fails
    """
    check_encodable(font)

    try:
        stream = open(path, "wb")
    except OSError as e:
        raise FontSaveError(str(path), e.strerror or str(e)) from e

    with stream:
        encode(font, stream)


def get_sorted_path(input_path: Path) -> Path:
    """Generate the output path for a sorted copy of a font.

    Converts: font.mbw -> font-sorted.mbw
              gomono10.mbw -> gomono10-sorted.mbw

    Args:
        input_path: Original font file path

    Returns:
        Path with -sorted suffix before the extension
    """
    return input_path.parent / f"{input_path.stem}-sorted{input_path.suffix}"
