"""CLI application entry point for mbwfont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError

from mbwfont import __version__
from mbwfont.cli.output import (
    console,
    print_characters,
    print_error,
    print_font_info,
    print_header,
    print_letter,
    print_step,
    print_success,
)
from mbwfont.config import DisplayConfig, LoggingConfig, MbwSettings
from mbwfont.domain import Font, create_font
from mbwfont.exceptions import FontError, FontLoadError, FontSaveError
from mbwfont.io import get_sorted_path, load_font, save_font
from mbwfont.utils import configure_logging, log_font_summary

# Create the Typer app
app = typer.Typer(
    name="mbwfont",
    help="Inspect, sort and create MBW1 monospaced bitmap font files.",
    add_completion=False,
    no_args_is_help=True,
)


class CliState:
    """Options shared by all commands."""

    def __init__(
        self,
        settings: MbwSettings,
        logger: structlog.stdlib.BoundLogger,
        quiet: bool,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self.quiet = quiet


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]mbwfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def global_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect, sort and create MBW1 monospaced bitmap font files."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = MbwSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = CliState(settings=settings, logger=logger, quiet=quiet)


def _load(state: CliState, font_file: Path) -> Font:
    """Load a font for a command, exiting with an error message on failure."""
    if not font_file.is_file():
        print_error(
            f"Input file not found: {font_file}",
            details=f"The file '{font_file}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        font = load_font(font_file)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from e
    except FontError as e:
        state.logger.error("Font decode failed", path=str(font_file), error=str(e))
        print_error(f"Could not read font: {e}")
        raise typer.Exit(code=1) from e

    log_font_summary(state.logger, "loaded", font_file, font.width, font.height, len(font))
    return font


def _save(state: CliState, font: Font, output: Path) -> None:
    """Save a font for a command, exiting with an error message on failure."""
    try:
        save_font(font, output)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1) from e
    except FontError as e:
        state.logger.error("Font encode failed", path=str(output), error=str(e))
        print_error(f"Could not write font: {e}")
        raise typer.Exit(code=1) from e

    log_font_summary(state.logger, "saved", output, font.width, font.height, len(font))


@app.command()
def info(
    ctx: typer.Context,
    font_file: Annotated[
        Path,
        typer.Argument(help="Path to an MBW1 font file", show_default=False),
    ],
) -> None:
    """Show the letter size, letter count and characters of a font."""
    state: CliState = ctx.obj
    font = _load(state, font_file)

    if not state.quiet:
        print_header(__version__)
    print_font_info(
        font_path=str(font_file),
        width=font.width,
        height=font.height,
        letter_count=len(font),
        file_size=_format_file_size(font_file),
    )
    print_characters(font.characters())


@app.command()
def show(
    ctx: typer.Context,
    font_file: Annotated[
        Path,
        typer.Argument(help="Path to an MBW1 font file", show_default=False),
    ],
    chars: Annotated[
        list[str] | None,
        typer.Option(
            "--char",
            "-c",
            help="Letters to draw, repeatable (default: all)",
        ),
    ] = None,
    ink: Annotated[
        str | None,
        typer.Option("--ink", help="Character for set pixels"),
    ] = None,
    paper: Annotated[
        str | None,
        typer.Option("--paper", help="Character for unset pixels"),
    ] = None,
) -> None:
    """Draw letters of a font as text."""
    state: CliState = ctx.obj
    defaults = state.settings.display
    try:
        display = DisplayConfig(
            ink=ink if ink is not None else defaults.ink,
            paper=paper if paper is not None else defaults.paper,
        )
    except ValidationError as e:
        print_error("Invalid --ink or --paper", details=str(e))
        raise typer.Exit(code=1) from e

    font = _load(state, font_file)

    if chars:
        wanted = [c for group in chars for c in group]
        missing = [c for c in wanted if c not in font]
        if missing:
            print_error(
                f"Letters not in font: {''.join(missing)}",
                details=f"The font has {len(font)} letters.",
            )
            raise typer.Exit(code=1)
        letters = [font.letter(c) for c in wanted]
    else:
        letters = list(font.letters)

    for letter in letters:
        print_letter(letter, ink=display.ink, paper=display.paper)


@app.command("sort")
def sort_font(
    ctx: typer.Context,
    font_file: Annotated[
        Path,
        typer.Argument(help="Path to an MBW1 font file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-sorted.{ext})",
        ),
    ] = None,
) -> None:
    """Sort the letters of a font by codepoint and save the result."""
    state: CliState = ctx.obj
    if not state.quiet:
        print_header(__version__)
        print_step("Loading font")

    font = _load(state, font_file)
    if not state.quiet:
        print_font_info(str(font_file), font.width, font.height, len(font))

    font.sort()
    output_path = output if output is not None else get_sorted_path(font_file)
    _save(state, font, output_path)

    if not state.quiet:
        print_success(f"Sorted {len(font)} letters", output_path=str(output_path))


@app.command()
def new(
    ctx: typer.Context,
    font_file: Annotated[
        Path,
        typer.Argument(help="Path of the font file to create", show_default=False),
    ],
    width: Annotated[
        int | None,
        typer.Option(
            "--width",
            "-w",
            help="Pixels per letter, horizontal (default: configured size)",
            min=1,
            max=0xFFFF,
        ),
    ] = None,
    height: Annotated[
        int | None,
        typer.Option(
            "--height",
            "-h",
            help="Pixels per letter, vertical (default: configured size)",
            min=1,
            max=0xFFFF,
        ),
    ] = None,
    chars: Annotated[
        str,
        typer.Option("--chars", help="Characters to add as blank letters"),
    ] = "",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create a font file with blank letters."""
    state: CliState = ctx.obj
    if font_file.exists() and not force:
        print_error(
            f"Output file exists: {font_file}",
            details="Use --force to overwrite it.",
        )
        raise typer.Exit(code=1)

    defaults = state.settings.font
    font = create_font(
        width if width is not None else defaults.width,
        height if height is not None else defaults.height,
    )
    for character in chars:
        font.letter(character)

    _save(state, font, font_file)

    if not state.quiet:
        print_success(
            f"Created {font.width}x{font.height} font with {len(font)} letters",
            output_path=str(font_file),
        )


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "2 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
