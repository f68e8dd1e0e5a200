"""Command-line interface for lwdita-bridge."""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax

from lwdita_bridge import __version__
from lwdita_bridge.config import get_settings
from lwdita_bridge.core.transformer import DocumentConverter
from lwdita_bridge.formats import SUPPORTED_EXTENSIONS

app = typer.Typer(
    name="lwdita-bridge",
    help="Convert LwDITA documents to and from ProseMirror editor trees.",
    add_completion=False,
)
console = Console()


class Direction(str, Enum):
    """Conversion direction, also used as the output file suffix."""

    EDITOR = "editor"
    SOURCE = "source"


OUTPUT_SUFFIXES = tuple(f"-{direction.value}" for direction in Direction)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"lwdita-bridge v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route log records through the shared rich console."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def generate_output_path(
    input_path: Path,
    direction: Direction,
    output_dir: Optional[Path] = None,
) -> Path:
    """Generate output path with an -editor or -source suffix."""
    output_name = f"{input_path.stem}-{direction.value}{input_path.suffix}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def find_files(
    folder_path: Path,
    direction: Optional[Direction] = None,
    recursive: bool = True,
) -> list[Path]:
    """Find the tree files a command should read.

    ``to-source`` reads the ``-editor`` files written by ``to-editor``.
    Every other command reads source trees and skips generated outputs.
    """
    files: list[Path] = []
    for ext in SUPPORTED_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    if direction is Direction.SOURCE:
        return sorted(f for f in files if f.stem.endswith(f"-{Direction.EDITOR.value}"))
    return sorted(
        f for f in files
        if not f.stem.endswith(OUTPUT_SUFFIXES)
    )


def process_file(
    converter: DocumentConverter,
    input_path: Path,
    output_path: Optional[Path],
    direction: Direction,
    verbose: bool,
) -> bool:
    """Convert a single file. Returns True on success."""
    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        console.print(
            f"[yellow]Skipping:[/yellow] {input_path.name} "
            f"(unsupported format: {ext})"
        )
        return False

    if output_path is None:
        output_path = generate_output_path(input_path, direction)

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")
        console.print(f"[blue]Direction:[/blue] to {direction.value} tree")

    try:
        if direction is Direction.EDITOR:
            converter.to_editor_file(input_path, output_path)
        else:
            converter.to_source_file(input_path, output_path)
        console.print(f"[green]Success:[/green] {output_path}")
        return True
    except Exception as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False


def check_file(converter: DocumentConverter, input_path: Path, verbose: bool) -> bool:
    """Round-trip check a single source file. Returns True if it matches."""
    try:
        result = converter.verify_file(input_path)
    except Exception as e:
        console.print(f"[red]Error checking {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False

    if result.passed:
        console.print(f"[green]Round-trip OK:[/green] {input_path}")
        return True

    console.print(f"[red]Round-trip mismatch:[/red] {input_path}")
    console.print(Syntax(result.diff_report, "diff", theme="ansi_dark"))
    return False


def process_folder(
    converter: DocumentConverter,
    folder_path: Path,
    direction: Optional[Direction],
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Convert or check all supported files in a folder.

    A ``direction`` of None runs the round-trip check instead of a
    conversion. Returns (success_count, fail_count).
    """
    files = find_files(folder_path, direction, recursive=recursive)

    if not files:
        console.print(
            f"[yellow]No supported files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to process[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Processing files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Processing {file_path.name}...")
            if direction is None:
                ok = check_file(converter, file_path, verbose)
            else:
                ok = process_file(converter, file_path, None, direction, verbose)
            if ok:
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


def run(
    path: Path,
    output: Optional[Path],
    direction: Optional[Direction],
    verbose: bool,
) -> None:
    """Dispatch a command to single file or folder mode and exit."""
    setup_logging(verbose)
    converter = DocumentConverter()

    if path.is_file():
        if direction is None:
            success = check_file(converter, path, verbose)
        else:
            success = process_file(converter, path, output, direction, verbose)
        raise typer.Exit(0 if success else 1)

    if output is not None:
        console.print(
            "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
            "Files will be saved alongside originals."
        )

    success, fail = process_folder(converter, path, direction, verbose)
    console.print(
        f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
    )
    raise typer.Exit(0 if fail == 0 else 1)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Convert LwDITA source trees to and from ProseMirror editor trees.

    Examples:

        lwdita-bridge to-editor topic.json

        lwdita-bridge to-source topic-editor.json -o topic.json

        lwdita-bridge check /path/to/documents
    """


@app.command("to-editor")
def to_editor(
    path: Path = typer.Argument(
        ...,
        help="Source tree file or folder to convert",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Convert source trees into editor trees (<name>-editor.json)."""
    run(path, output, Direction.EDITOR, verbose)


@app.command("to-source")
def to_source(
    path: Path = typer.Argument(
        ...,
        help="Editor tree file or folder to convert",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Convert editor trees back into source trees (<name>-source.json)."""
    run(path, output, Direction.SOURCE, verbose)


@app.command("check")
def check(
    path: Path = typer.Argument(
        ...,
        help="Source tree file or folder to round-trip",
        exists=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Check that source trees survive a forward and reverse round-trip."""
    run(path, None, None, verbose)


if __name__ == "__main__":
    app()
