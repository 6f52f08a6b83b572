"""Typer CLI application."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from term_paint.cli.core.input import Key
from term_paint.cli.core.shortcuts import create_default_shortcuts
from term_paint.codec.grid_text import ParsedGrid
from term_paint.config import PaintConfig, setup_logging
from term_paint.core.constants import COLOR_NAMES, DEFAULT_SAVE_FILE
from term_paint.errors import FormatError, StartupError
from term_paint.io.reader import read_file
from term_paint.render.terminal import TerminalRenderer
from term_paint.render.text import TextRenderer


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="term-paint",
        help="Paint with characters and colors in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def read_or_exit(path: Path) -> ParsedGrid:
        try:
            return read_file(path)
        except OSError as e:
            err_console.print(f"[red]Cannot read {path}:[/] {e.strerror or e}")
            raise typer.Exit(1)
        except FormatError as e:
            err_console.print(f"[red]Invalid canvas file {path}:[/] {e}")
            raise typer.Exit(1)

    @app.command()
    def paint(
        file: Annotated[Optional[Path], typer.Option("--file", "-f", help=f"Save/load file (default: {DEFAULT_SAVE_FILE})")] = None,
        load: Annotated[bool, typer.Option("--load", "-l", help="Load the file onto the canvas at startup")] = False,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write a debug log to this file")] = None,
        log_level: Annotated[Optional[str], typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")] = None,
    ) -> None:
        """Launch the interactive paint editor.

        Arrows move, Space paints, Enter toggles the pen, B/E/c/0-7 pick
        tools and colors, X clears, S/L save and load, Q or Esc quits.
        """
        from term_paint.cli.studio import run_editor

        config = PaintConfig.from_env().override(
            save_path=file,
            load_on_start=load or None,
            log_file=log_file,
            log_level=log_level.upper() if log_level else None,
        )
        try:
            setup_logging(config)
        except (OSError, ValueError) as e:
            err_console.print(f"[red]Cannot set up logging:[/] {e}")
            raise typer.Exit(1)

        try:
            run_editor(config)
        except StartupError as e:
            err_console.print(f"[red]Error:[/] {e}")
            raise typer.Exit(1)

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="Saved canvas file")] = Path(DEFAULT_SAVE_FILE),
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Print characters only, no colors")] = False,
    ) -> None:
        """Print a saved canvas to the terminal."""
        parsed = read_or_exit(path)
        renderer = TextRenderer() if plain else TerminalRenderer()
        print(renderer.render(parsed.canvas))

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Saved canvas file")] = Path(DEFAULT_SAVE_FILE),
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the size and contents summary of a saved canvas."""
        parsed = read_or_exit(path)
        canvas = parsed.canvas
        painted = [cell for _, _, cell in canvas.cells() if not cell.is_empty()]
        colors = Counter(COLOR_NAMES[cell.color] for cell in painted)

        if json_output:
            data = {
                "width": canvas.width,
                "height": canvas.height,
                "painted_cells": len(painted),
                "coerced_values": parsed.coerced,
                "colors": dict(colors.most_common()),
            }
            print(json.dumps(data, indent=2))
            return

        console.print(f"[bold cyan]{path.name}[/]")
        console.print(f"  [bold]Size:[/]    {canvas.width}x{canvas.height}")
        console.print(f"  [bold]Painted:[/] {len(painted)} cells")
        if parsed.coerced:
            console.print(f"  [yellow]Coerced:[/] {parsed.coerced} out-of-range values")
        for name, count in colors.most_common():
            console.print(f"    {name:<8} {count}")

    @app.command()
    def keys() -> None:
        """List the editor key bindings."""
        current = ""
        for shortcut in create_default_shortcuts().all_shortcuts():
            if shortcut.category != current:
                current = shortcut.category
                console.print(f"[bold cyan]{current}[/]")
            names = ", ".join(_key_name(k) for k in shortcut.keys)
            console.print(f"  {names:<16} {shortcut.description}", highlight=False)

    return app


def _key_name(key: str | Key) -> str:
    if isinstance(key, Key):
        return key.name.title()
    return "Space" if key == " " else key
