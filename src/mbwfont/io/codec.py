"""Binary codec for the MBW1 font format.

An MBW1 file is laid out as follows, all integers little-endian:

    magic           4 bytes   b"MBW1"
    font_width      uint16    pixels per letter, horizontal, non-zero
    font_height     uint16    pixels per letter, vertical, non-zero
    letter_count    uint64
    characters      letter_count x uint32 codepoints
    bitmap          letter_count * width * height // 8 bytes

The bitmap is one bit sequence across all letters, most significant bit
first and without padding between letters. Global bit ``n`` belongs to
letter ``n // (width * height)``; within that letter it is pixel
``(n % (width * height)) % width, (n % (width * height)) // width``.

The bitmap length is floor-divided, so when the total bit count is not a
multiple of eight the last few pixels are neither written nor read.
"""

import io
import logging
import struct
from collections.abc import Iterable
from typing import BinaryIO

from mbwfont.domain.font import Font
from mbwfont.exceptions import (
    BitmapReadError,
    CharacterTableReadError,
    CodecPhase,
    FontFormatError,
    FontReadError,
    FontWriteError,
    HeaderReadError,
)

logger = logging.getLogger(__name__)

MAGIC = b"MBW1"
HEADER = struct.Struct("<4sHHQ")
CODEPOINT = struct.Struct("<I")
MAX_DIMENSION = 0xFFFF
MAX_CODEPOINT = 0x10FFFF

# Upper bound for a single read so a corrupt letter count cannot force a
# huge allocation before the stream runs dry.
READ_CHUNK_SIZE = 1 << 16


def bitmap_size(letter_count: int, width: int, height: int) -> int:
    """Number of bytes of packed bitmap data for a font.

    Args:
        letter_count: Number of letters
        width: Pixels per letter, horizontal
        height: Pixels per letter, vertical

    Returns:
        Byte count, floor-divided
    """
    return letter_count * width * height // 8


def _read_exact(
    stream: BinaryIO, size: int, error: type[FontReadError]
) -> bytes:
    """Read exactly size bytes or raise the given phase error."""
    chunks = []
    remaining = size
    try:
        while remaining > 0:
            chunk = stream.read(min(remaining, READ_CHUNK_SIZE))
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
    except (OSError, ValueError) as e:
        raise error(str(e)) from e
    if remaining > 0:
        raise error(f"unexpected end of data, got {size - remaining} of {size} bytes")
    return b"".join(chunks)


def _write_all(stream: BinaryIO, data: bytes, phase: CodecPhase) -> None:
    """Write data completely or raise a FontWriteError for the phase."""
    try:
        written = stream.write(data)
    except (OSError, ValueError) as e:
        raise FontWriteError(phase, str(e)) from e
    if written is not None and written < len(data):
        raise FontWriteError(phase, f"short write, wrote {written} of {len(data)} bytes")


def decode(stream: BinaryIO) -> Font:
    """Read a font from a binary stream.

    Either returns a fully populated font or raises; no partial font is
    ever returned.

    Args:
        stream: Readable binary stream positioned at the magic bytes

    Returns:
        The decoded font

    Raises:
        HeaderReadError: If the header is truncated or unreadable
        FontFormatError: If the magic is wrong, a dimension is zero or a
            codepoint is not a valid Unicode scalar value
        CharacterTableReadError: If the character table is truncated
        BitmapReadError: If the bitmap data is truncated
    """
    magic, width, height, letter_count = HEADER.unpack(
        _read_exact(stream, HEADER.size, HeaderReadError)
    )
    if magic != MAGIC:
        raise FontFormatError(f"unknown file header {magic!r}")
    if width == 0 or height == 0:
        raise FontFormatError(f"zero letter size {width}x{height}")

    table = _read_exact(stream, letter_count * CODEPOINT.size, CharacterTableReadError)
    codepoints = [codepoint for (codepoint,) in CODEPOINT.iter_unpack(table)]
    for codepoint in codepoints:
        if codepoint > MAX_CODEPOINT:
            raise FontFormatError(f"codepoint {codepoint:#x} is out of the Unicode range")

    bits = _read_exact(
        stream, bitmap_size(letter_count, width, height), BitmapReadError
    )

    font = Font(width, height)
    _unpack_bitmap(font, codepoints, bits)

    logger.debug(
        "Decoded MBW1 font %dx%d with %d letters (%d bitmap bytes)",
        width, height, letter_count, len(bits)
    )
    return font


def _unpack_bitmap(font: Font, codepoints: Iterable[int], bits: bytes) -> None:
    """Set the pixels of each letter from the packed bit sequence."""
    width, height = font.width, font.height
    letter_size = width * height
    bit_count = len(bits) * 8

    for i, codepoint in enumerate(codepoints):
        letter = font.letter(codepoint)
        base = i * letter_size
        for y in range(height):
            for x in range(width):
                n = base + y * width + x
                if n < bit_count and bits[n >> 3] & (0x80 >> (n & 7)):
                    letter.set(x, y, True)


def _pack_bitmap(font: Font) -> bytearray:
    """Pack the pixels of all letters into one bit sequence."""
    width, height = font.width, font.height
    letter_size = width * height
    bits = bytearray(bitmap_size(len(font), width, height))
    bit_count = len(bits) * 8
    dropped = 0

    for i, letter in enumerate(font.letters):
        base = i * letter_size
        for y in range(height):
            for x in range(width):
                if not letter.get(x, y):
                    continue
                n = base + y * width + x
                if n < bit_count:
                    bits[n >> 3] |= 0x80 >> (n & 7)
                else:
                    dropped += 1

    if dropped:
        logger.warning(
            "%d set pixels fall past the last whole bitmap byte and are dropped",
            dropped
        )
    return bits


def check_encodable(font: Font) -> None:
    """Check that a font fits the MBW1 header before anything is written.

    Raises:
        FontWriteError: If the letter size does not fit the 16 bit header fields
    """
    if font.width > MAX_DIMENSION or font.height > MAX_DIMENSION:
        raise FontWriteError(
            CodecPhase.HEADER,
            f"letter size {font.width}x{font.height} exceeds {MAX_DIMENSION}",
        )


def encode(font: Font, stream: BinaryIO) -> None:
    """Write a font to a binary stream.

    The character table and bitmap follow the font's current letter order.

    Args:
        font: Font to write
        stream: Writable binary stream

    Raises:
        FontWriteError: If a section cannot be written, or the letter size
            does not fit the 16 bit header fields
    """
    check_encodable(font)

    letters = font.letters
    header = HEADER.pack(MAGIC, font.width, font.height, len(letters))
    _write_all(stream, header, CodecPhase.HEADER)

    table = b"".join(CODEPOINT.pack(letter.codepoint) for letter in letters)
    _write_all(stream, table, CodecPhase.CHARACTERS)

    bits = _pack_bitmap(font)
    _write_all(stream, bytes(bits), CodecPhase.BITMAP)

    logger.debug(
        "Encoded MBW1 font %dx%d with %d letters (%d bitmap bytes)",
        font.width, font.height, len(letters), len(bits)
    )


def decode_bytes(data: bytes) -> Font:
    """Decode a font from an in-memory MBW1 byte string."""
    return decode(io.BytesIO(data))


def encode_bytes(font: Font) -> bytes:
    """Encode a font to an MBW1 byte string."""
    buffer = io.BytesIO()
    encode(font, buffer)
    return buffer.getvalue()
