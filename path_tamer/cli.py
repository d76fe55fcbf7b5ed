"""CLI for path-tamer.

Usage:
    path-tamer normalize "0 0 m 10 0 l 10 5 l h" --size 100
    path-tamer normalize "M0 0 C 10 20 30 20 40 0" --svg --json
    path-tamer bounds "0 0 m 10 0 l 10 5 l h"
    path-tamer length "M0 0 L 30 40" --svg
"""

import logging

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from path_tamer.arc_length import arc_length
from path_tamer.config import settings
from path_tamer.errors import PathTamerError
from path_tamer.logging_config import configure_logging
from path_tamer.path_string import (
    format_command,
    format_path,
    parse_path_string,
    parse_svg_path,
)
from path_tamer.pipeline import measure, tame
from path_tamer.types import Path, path_to_json

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="path-tamer",
    help="Measure and normalize vector paths",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Measure and normalize vector paths."""
    level = "DEBUG" if verbose else settings.log_level.upper()
    configure_logging(json_format=settings.log_json, log_level=level)


def _load(text: str, svg: bool) -> Path:
    """Parse command-line input, exiting with an error message on failure."""
    try:
        if svg:
            return parse_svg_path(text, settings.subdivisions)
        return parse_path_string(text)
    except PathTamerError as e:
        console.print(f"[red]Invalid path: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _size_table(width: float, height: float) -> Table:
    table = Table(title="Size", box=box.ROUNDED)
    table.add_column("Width", style="cyan", justify="right")
    table.add_column("Height", style="cyan", justify="right")
    table.add_row(
        f"{width + settings.stroke_width:.3f}",
        f"{height + settings.stroke_width:.3f}",
    )
    return table


@app.command("normalize")
def normalize_cmd(
    path_text: str = typer.Argument(..., help="Path in command or SVG form"),
    size: float = typer.Option(
        settings.target_size, "--size", "-s", help="Height of the normalized path"
    ),
    svg: bool = typer.Option(False, "--svg", help="Input is an SVG path d attribute"),
    json_output: bool = typer.Option(False, "--json", help="Print normalized commands as JSON"),
) -> None:
    """Normalize a path to a target height, preserving aspect ratio.

    Examples:
        path-tamer normalize "0 0 m 10 0 l 10 5 l h"
        path-tamer normalize "M0 0 Q 5 10 10 0" --svg -s 50
    """
    if size <= 0:
        console.print("[red]Size must be positive[/red]")
        raise typer.Exit(1)

    path = _load(path_text, svg)
    try:
        result = tame(path, target_size=size)
    except PathTamerError as e:
        console.print(f"[red]Cannot normalize path: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if json_output:
        console.print_json(path_to_json(result.path))
        return

    console.print(format_path(result.path, settings.precision), soft_wrap=True)
    console.print(_size_table(result.size.width, result.size.height))
    console.print(f"[yellow]Arc length:[/yellow] {result.arc_length:.3f}")

    commands = Table(title="Path Commands", box=box.ROUNDED)
    commands.add_column("#", style="dim", justify="right")
    commands.add_column("Command", style="green")
    for i, command in enumerate(result.path):
        commands.add_row(str(i), format_command(command, settings.precision))
    console.print(commands)


@app.command("bounds")
def bounds_cmd(
    path_text: str = typer.Argument(..., help="Path in command or SVG form"),
    svg: bool = typer.Option(False, "--svg", help="Input is an SVG path d attribute"),
) -> None:
    """Print the bounding size of a path."""
    path = _load(path_text, svg)
    try:
        extent = measure(path)
    except PathTamerError as e:
        console.print(f"[red]Cannot measure path: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    console.print(_size_table(extent.width, extent.height))


@app.command("length")
def length_cmd(
    path_text: str = typer.Argument(..., help="Path in command or SVG form"),
    svg: bool = typer.Option(False, "--svg", help="Input is an SVG path d attribute"),
) -> None:
    """Print the estimated arc length of a path."""
    path = _load(path_text, svg)
    console.print(f"{arc_length(path, settings.subdivisions):.3f}")


if __name__ == "__main__":
    app()
