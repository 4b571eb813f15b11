"""Letter representation.

This module defines the letter domain model: a single character of a
monospaced font stored as a fixed-size grid of on/off pixels.
"""

from typing import Any


def to_character(character: str | int) -> str:
    """Normalise a character or integer codepoint to a one-character string.

    Args:
        character: Single-character string or Unicode codepoint

    Returns:
        The character as a string of length one

    Raises:
        ValueError: If the value is not a single character or valid codepoint
    """
    if isinstance(character, int):
        return chr(character)
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")
    return character


class Letter:
    """A single letter in a font, rendered as a binary bitmap.

    Pixels are addressed with x going from left to right and y going from
    top to bottom. Coordinates outside the grid read as unset and writes to
    them are ignored, so callers may pass unchecked coordinates.

    Example:
        letter = Letter("A", 8, 14)
        letter.set(3, 2, True)
        assert letter.get(3, 2)
        assert not letter.get(-1, 99)
    """

    __slots__ = ("_character", "_width", "_height", "_pixels")

    def __init__(self, character: str | int, width: int, height: int) -> None:
        """Create a letter with all pixels unset.

        Args:
            character: The character this bitmap represents
            width: Number of pixel columns
            height: Number of pixel rows
        """
        self._character = to_character(character)
        self._width = width
        self._height = height
        self._pixels = [False] * (width * height)

    @property
    def character(self) -> str:
        """Get the character this letter represents."""
        return self._character

    @property
    def codepoint(self) -> int:
        """Get the Unicode codepoint of the character."""
        return ord(self._character)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> bool:
        """Check whether the pixel at x, y is set.

        Args:
            x: Column, 0 is leftmost
            y: Row, 0 is topmost

        Returns:
            True if the pixel is set, False if unset or out of range
        """
        return self._in_range(x, y) and self._pixels[x + y * self._width]

    def set(self, x: int, y: int, value: bool) -> None:
        """Set the pixel at x, y. Out of range coordinates are ignored.

        Args:
            x: Column, 0 is leftmost
            y: Row, 0 is topmost
            value: True to set the pixel, False to clear it
        """
        if self._in_range(x, y):
            self._pixels[x + y * self._width] = bool(value)

    def clear(self) -> None:
        """Unset every pixel."""
        self._pixels = [False] * (self._width * self._height)

    def is_empty(self) -> bool:
        """Check if no pixel is set.

        Empty letters include spaces and letters that were looked up but
        never drawn.
        """
        return not any(self._pixels)

    def pixel_count(self) -> int:
        """Count the set pixels."""
        return sum(self._pixels)

    def rows(self) -> tuple[tuple[bool, ...], ...]:
        """Get the bitmap as a tuple of rows, top row first."""
        return tuple(
            tuple(self._pixels[y * self._width:(y + 1) * self._width])
            for y in range(self._height)
        )

    def to_text(self, ink: str = "#", paper: str = ".") -> str:
        """Draw the bitmap as text, one line per row.

        Args:
            ink: Character for set pixels
            paper: Character for unset pixels

        Returns:
            Multi-line string without a trailing newline
        """
        return "\n".join(
            "".join(ink if pixel else paper for pixel in row)
            for row in self.rows()
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the codepoint, size and text rows
        """
        return {
            "codepoint": self.codepoint,
            "width": self._width,
            "height": self._height,
            "rows": self.to_text().splitlines(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Letter):
            return NotImplemented
        return (
            self._character == other._character
            and self._width == other._width
            and self._height == other._height
            and self._pixels == other._pixels
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Letter({self._character!r}, {self._width}x{self._height}, "
            f"{self.pixel_count()} set)"
        )
