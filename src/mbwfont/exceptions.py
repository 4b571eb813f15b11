"""Exception hierarchy for mbwfont."""

from enum import Enum


class CodecPhase(str, Enum):
    """Section of an MBW1 file being read or written."""

    HEADER = "header"
    CHARACTERS = "characters"
    BITMAP = "bitmap"


class MbwError(Exception):
    """Base exception for all mbwfont errors."""

    pass


class FontError(MbwError):
    """Errors related to font loading, saving or coding."""

    pass


class FontLoadError(FontError):
    """Error opening a font file for reading."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontError):
    """Error creating a font file for writing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class FontFormatError(FontError):
    """The data is not a valid MBW1 font."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid MBW1 data: {details}")


class FontReadError(FontError):
    """The input stream failed or ended before a section was complete."""

    phase: CodecPhase = CodecPhase.HEADER

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to read {self.phase.value}: {reason}")


class HeaderReadError(FontReadError):
    """The file header could not be read."""

    phase = CodecPhase.HEADER


class CharacterTableReadError(FontReadError):
    """The character table could not be read."""

    phase = CodecPhase.CHARACTERS


class BitmapReadError(FontReadError):
    """The packed bitmap data could not be read."""

    phase = CodecPhase.BITMAP


class FontWriteError(FontError):
    """Error writing a section to the output stream."""

    def __init__(self, phase: CodecPhase, reason: str) -> None:
        self.phase = phase
        self.reason = reason
        super().__init__(f"Failed to write {phase.value}: {reason}")
