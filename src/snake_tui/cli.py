"""
CLI entry point — `snake-tui`.
"""
from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from .config import APP_NAME, GLYPH_SETS, VERSION, WALL_MODES, GameOptions, get_log_path
from .game import Game
from .terminal import TerminalError, create_terminal

app = typer.Typer(
    name=APP_NAME,
    help="Snake in your terminal",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(log_file: str) -> None:
    """Log to a file when asked; never to the screen the game draws on."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger("snake_tui").addHandler(logging.NullHandler())


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


@app.command()
def play(
    rows: Optional[int] = typer.Option(None, "--rows", "-r", help="Interior rows (default 20)"),
    cols: Optional[int] = typer.Option(None, "--cols", "-c", help="Interior columns (default 40)"),
    tick_ms: Optional[int] = typer.Option(None, "--tick-ms", "-t", help="Milliseconds per tick (default 100)"),
    wall_mode: Optional[str] = typer.Option(None, "--walls", help=f"Wall mode: {'/'.join(WALL_MODES)}"),
    glyph_set: Optional[str] = typer.Option(None, "--glyphs", help=f"Glyph set: {'/'.join(GLYPH_SETS)}"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Colour output"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for food placement"),
    no_menu: bool = typer.Option(False, "--no-menu", help="Skip the start menu"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write debug logs to this file"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Play Snake. W/A/S/D or arrow keys steer, Q quits."""
    _setup_logging(log_file or get_log_path())

    try:
        options = GameOptions.from_env().with_overrides(
            rows=rows,
            cols=cols,
            tick_ms=tick_ms,
            wall_mode=wall_mode.lower() if wall_mode else None,
            glyph_set=glyph_set.lower() if glyph_set else None,
            color=color,
            seed=seed,
        ).validate()
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    terminal = create_terminal()
    try:
        with terminal:
            high_score = Game(terminal, options).run(show_menu=not no_menu)
    except TerminalError as e:
        err_console.print(f"[red]Error:[/red] cannot control the terminal: {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        high_score = None

    if high_score:
        console.print(f"High score this session: [bold green]{high_score}[/bold green]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
