"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted font summaries, letter drawings and messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from mbwfont.domain import Letter

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

MAX_LISTED_CHARACTERS = 64


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]mbwfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def format_codepoint(character: str) -> str:
    """Format a character as U+XXXX."""
    return f"U+{ord(character):04X}"


def print_font_info(
    font_path: str,
    width: int,
    height: int,
    letter_count: int,
    file_size: str | None = None,
) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        width: Pixels per letter, horizontal
        height: Pixels per letter, vertical
        letter_count: Number of letters in the font
        file_size: Human-readable file size string
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    if file_size is not None:
        line1.append(f" ({file_size})")
    console.print(line1)
    console.print(f"  {width}x{height} pixels {SYM_DOT} {letter_count:,} letters")


def print_characters(characters: list[str]) -> None:
    """Print the characters of a font on one line.

    Args:
        characters: Characters in font order
    """
    if not characters:
        console.print("  (no letters)")
        return
    shown = "".join(
        c if c.isprintable() and not c.isspace() else f"<{format_codepoint(c)}>"
        for c in characters[:MAX_LISTED_CHARACTERS]
    )
    line = Text("  ")
    line.append(shown)
    if len(characters) > MAX_LISTED_CHARACTERS:
        line.append(
            f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(characters) - MAX_LISTED_CHARACTERS} more)"
        )
    console.print(line)


def print_letter(letter: Letter, ink: str, paper: str) -> None:
    """Draw a letter as text with a caption line.

    Args:
        letter: Letter to draw
        ink: Character for set pixels
        paper: Character for unset pixels
    """
    caption = Text("\n")
    caption.append(repr(letter.character), style="bold")
    caption.append(
        f" {format_codepoint(letter.character)} {SYM_DOT} {letter.pixel_count()} pixels set"
    )
    console.print(caption)
    console.print(Text(letter.to_text(ink=ink, paper=paper)))


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary of what was done
        output_path: Path to the written file, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
