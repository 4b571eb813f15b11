"""Font representation.

This module defines the font domain model, an ordered collection of
letters that all share one pixel size.
"""

from collections.abc import Iterator

from mbwfont.domain.letter import Letter, to_character


class Font:
    """A monospaced black and white font.

    Every letter is ``width`` x ``height`` pixels. Letters are kept in the
    order in which they were first looked up; there is exactly one letter
    per character.

    Example:
        font = Font(8, 14)
        font.letter("A").set(1, 2, True)
        assert font.letter("A").get(1, 2)
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an empty font.

        Args:
            width: Pixels per letter, horizontal
            height: Pixels per letter, vertical

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Font size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._letters: list[Letter] = []
        self._index: dict[str, int] = {}

    @property
    def width(self) -> int:
        """Get the width of a letter in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Get the height of a letter in pixels."""
        return self._height

    @property
    def letters(self) -> tuple[Letter, ...]:
        """Get all letters in their current order.

        The letters themselves are the font's own and may be mutated; the
        returned tuple cannot reorder the font.
        """
        return tuple(self._letters)

    def letter(self, character: str | int) -> Letter:
        """Get the letter for a character, creating a blank one if missing.

        Args:
            character: Single-character string or Unicode codepoint

        Returns:
            The font's letter for the character
        """
        character = to_character(character)
        index = self._index.get(character)
        if index is not None:
            return self._letters[index]

        letter = Letter(character, self._width, self._height)
        self._index[character] = len(self._letters)
        self._letters.append(letter)
        return letter

    def get(self, character: str | int) -> Letter | None:
        """Get the letter for a character without creating it."""
        index = self._index.get(to_character(character))
        return None if index is None else self._letters[index]

    def characters(self) -> list[str]:
        """Get the characters of all letters in their current order."""
        return [letter.character for letter in self._letters]

    def sort(self) -> None:
        """Sort the letters by codepoint, from lowest to highest."""
        self._letters.sort(key=lambda letter: letter.codepoint)
        self._index = {
            letter.character: i for i, letter in enumerate(self._letters)
        }

    def __len__(self) -> int:
        return len(self._letters)

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __contains__(self, character: object) -> bool:
        if isinstance(character, Letter):
            character = character.character
        if isinstance(character, int):
            return 0 <= character <= 0x10FFFF and chr(character) in self._index
        return character in self._index

    def __repr__(self) -> str:
        return f"Font({self._width}x{self._height}, {len(self._letters)} letters)"


def create_font(width: int, height: int) -> Font:
    """Create an empty font whose letters are width by height pixels.

    No letters are contained in a new font; add them with ``Font.letter``.
    """
    return Font(width, height)
