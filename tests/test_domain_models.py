"""Tests for domain models to verify they work correctly."""

import pytest

from mbwfont.domain import Font, Letter, create_font


class TestLetter:
    """Tests for Letter class."""

    def test_letter_creation(self) -> None:
        """Test a new letter has the given size and no pixels set."""
        letter = Letter("A", 8, 14)
        assert letter.character == "A"
        assert letter.codepoint == 65
        assert letter.width == 8
        assert letter.height == 14
        assert letter.is_empty()
        assert letter.pixel_count() == 0

    def test_letter_from_codepoint(self) -> None:
        """Test a letter can be created from an integer codepoint."""
        letter = Letter(0x20AC, 4, 4)
        assert letter.character == "€"

    def test_letter_rejects_strings(self) -> None:
        """Test a letter needs exactly one character."""
        with pytest.raises(ValueError):
            Letter("AB", 4, 4)
        with pytest.raises(ValueError):
            Letter("", 4, 4)

    def test_set_and_get(self) -> None:
        """Test setting and clearing a pixel."""
        letter = Letter("A", 8, 14)
        letter.set(3, 5, True)
        assert letter.get(3, 5)
        assert not letter.get(5, 3)
        letter.set(3, 5, False)
        assert not letter.get(3, 5)

    def test_corners(self) -> None:
        """Test the last row and column are addressable."""
        letter = Letter("A", 5, 7)
        letter.set(0, 0, True)
        letter.set(4, 6, True)
        assert letter.get(0, 0)
        assert letter.get(4, 6)
        assert letter.pixel_count() == 2

    @pytest.mark.parametrize(
        "x,y",
        [(-1, 0), (0, -1), (5, 0), (0, 7), (5, 7), (-100, 100), (1000, 3)],
    )
    def test_out_of_range_get_is_unset(self, x: int, y: int) -> None:
        """Test reading outside the grid returns False."""
        letter = Letter("A", 5, 7)
        for yy in range(7):
            for xx in range(5):
                letter.set(xx, yy, True)
        assert not letter.get(x, y)

    @pytest.mark.parametrize(
        "x,y",
        [(-1, 0), (0, -1), (5, 0), (0, 7), (5, 7), (-100, 100), (1000, 3)],
    )
    def test_out_of_range_set_is_ignored(self, x: int, y: int) -> None:
        """Test writing outside the grid leaves the bitmap unchanged."""
        letter = Letter("A", 5, 7)
        letter.set(2, 2, True)
        before = letter.rows()
        letter.set(x, y, True)
        assert letter.rows() == before

    def test_no_wraparound(self) -> None:
        """Test x past the row end does not spill into the next row."""
        letter = Letter("A", 4, 4)
        letter.set(4, 0, True)
        assert not letter.get(0, 1)
        assert letter.is_empty()

    def test_clear(self) -> None:
        """Test clear unsets every pixel."""
        letter = Letter("A", 3, 3)
        letter.set(1, 1, True)
        letter.clear()
        assert letter.is_empty()

    def test_rows_and_text(self) -> None:
        """Test row and text views of the bitmap."""
        letter = Letter("L", 3, 2)
        letter.set(0, 0, True)
        letter.set(0, 1, True)
        letter.set(2, 1, True)
        assert letter.rows() == ((True, False, False), (True, False, True))
        assert letter.to_text() == "#..\n#.#"
        assert letter.to_text(ink="X", paper=" ") == "X  \nX X"

    def test_to_dict(self) -> None:
        """Test dictionary serialization."""
        letter = Letter("i", 2, 2)
        letter.set(1, 0, True)
        assert letter.to_dict() == {
            "codepoint": ord("i"),
            "width": 2,
            "height": 2,
            "rows": [".#", ".."],
        }

    def test_equality(self) -> None:
        """Test letters compare by character, size and pixels."""
        a = Letter("A", 3, 3)
        b = Letter("A", 3, 3)
        assert a == b
        b.set(1, 1, True)
        assert a != b
        assert Letter("A", 3, 3) != Letter("B", 3, 3)
        assert Letter("A", 3, 3) != Letter("A", 3, 4)


class TestFont:
    """Tests for Font class."""

    def test_font_creation(self) -> None:
        """Test a new font is empty and has the given size."""
        font = create_font(14, 8)
        assert font.width == 14
        assert font.height == 8
        assert len(font) == 0
        assert font.letters == ()

    @pytest.mark.parametrize("width,height", [(0, 8), (8, 0), (-1, 8)])
    def test_font_rejects_bad_size(self, width: int, height: int) -> None:
        """Test non-positive sizes are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            Font(width, height)

    def test_size_is_read_only(self) -> None:
        """Test width and height cannot be reassigned."""
        font = Font(8, 8)
        with pytest.raises(AttributeError):
            font.width = 4  # type: ignore[misc]

    def test_letter_creates_blank_letter(self) -> None:
        """Test lookup of a missing character appends a blank letter."""
        font = Font(8, 14)
        letter = font.letter("A")
        assert letter.character == "A"
        assert letter.width == 8
        assert letter.height == 14
        assert letter.is_empty()
        assert font.letters == (letter,)

    def test_letter_is_idempotent(self) -> None:
        """Test looking up a character twice returns the same letter."""
        font = Font(8, 14)
        first = font.letter("A")
        first.set(1, 2, True)
        second = font.letter("A")
        assert second is first
        assert second.get(1, 2)
        assert len(font) == 1

    def test_letter_by_codepoint(self) -> None:
        """Test str and int lookups address the same letter."""
        font = Font(8, 14)
        assert font.letter(65) is font.letter("A")
        assert len(font) == 1

    def test_insertion_order(self) -> None:
        """Test letters keep the order of first lookup."""
        font = Font(4, 4)
        for c in "zAm":
            font.letter(c)
        font.letter("A")
        assert font.characters() == ["z", "A", "m"]

    def test_letters_view_cannot_reorder(self) -> None:
        """Test the letters view is a copy of the order, not the storage."""
        font = Font(4, 4)
        b = font.letter("b")
        a = font.letter("a")

        view = font.letters
        assert isinstance(view, tuple)
        assert view is not font.letters

        reordered = list(font.letters)
        reordered.sort(key=lambda letter: letter.codepoint)
        reordered.append(Letter("c", 4, 4))

        assert font.letters == (b, a)
        assert font.letters[0] is b
        assert font.characters() == ["b", "a"]
        assert "c" not in font
        assert font.letter("a") is a
        assert len(font) == 2

    def test_letters_view_shares_letters(self) -> None:
        """Test mutating a letter from the view mutates the font."""
        font = Font(4, 4)
        font.letter("a")
        font.letters[0].set(0, 0, True)
        assert font.letter("a").get(0, 0)

    def test_get_does_not_create(self) -> None:
        """Test get returns None for missing characters."""
        font = Font(4, 4)
        assert font.get("A") is None
        assert len(font) == 0
        letter = font.letter("A")
        assert font.get("A") is letter
        assert font.get(65) is letter

    def test_contains(self) -> None:
        """Test membership by character, codepoint and letter."""
        font = Font(4, 4)
        letter = font.letter("A")
        assert "A" in font
        assert 65 in font
        assert letter in font
        assert "B" not in font
        assert -1 not in font
        assert 0x110000 not in font

    def test_iteration(self) -> None:
        """Test iterating a font yields its letters in order."""
        font = Font(4, 4)
        for c in "cab":
            font.letter(c)
        assert [letter.character for letter in font] == ["c", "a", "b"]

    def test_sort(self) -> None:
        """Test sort orders letters by codepoint."""
        font = Font(4, 4)
        for c in "zA€m!":
            font.letter(c)
        font.sort()
        codepoints = [letter.codepoint for letter in font.letters]
        assert codepoints == sorted(codepoints)
        assert font.characters() == ["!", "A", "m", "z", "€"]

    def test_sort_keeps_lookup_working(self) -> None:
        """Test lookups return the same letters after sorting."""
        font = Font(4, 4)
        z = font.letter("z")
        a = font.letter("a")
        font.sort()
        assert font.letter("z") is z
        assert font.letter("a") is a
        assert len(font) == 2
        font.letter("b")
        assert font.characters() == ["a", "z", "b"]

    def test_sort_empty_and_sorted(self) -> None:
        """Test sorting an empty or sorted font changes nothing."""
        empty = Font(4, 4)
        empty.sort()
        assert len(empty) == 0

        font = Font(4, 4)
        letters = [font.letter(c) for c in "abc"]
        font.sort()
        assert list(font.letters) == letters

    def test_repr(self) -> None:
        """Test repr shows the size and letter count."""
        font = Font(8, 14)
        font.letter("A")
        assert repr(font) == "Font(8x14, 1 letters)"
