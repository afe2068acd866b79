"""CLI interface for the refreshable list."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from refreshable_list import __version__
from refreshable_list.logging_config import configure_logging
from refreshable_list.tui import run_app
from refreshable_list.tui.core.config import Config
from refreshable_list.tui.data_store import DataStore
from refreshable_list.tui.utils.errors import ConfigError, ErrorHandler

app = typer.Typer(
    name="refreshable-list",
    help="Pull-to-refresh list of random strings in the terminal",
    add_completion=False
)
console = Console()
console_err = Console(stderr=True)


@app.command()
def run(
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        help="Number of strings loaded per refresh (default from config: 50)"
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Screen title"
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (defaults to ~/.config/refreshable_list/config.toml)"
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for reproducible strings"
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for the log file"
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path"
    ),
):
    """Open the list TUI.

    Examples:
        refreshable-list run
        refreshable-list run --count 200 --title "Strings"
        refreshable-list run --seed 42 --log-level INFO
    """
    try:
        run_app(
            count=count,
            title=title,
            config_path=config_path,
            seed=seed,
            log_level=log_level,
            log_file=log_file,
        )
    except (ConfigError, ValueError) as e:
        console_err.print(ErrorHandler.create_error_message(
            "Cannot start the list TUI",
            e,
            ["Check the values passed on the command line", "Check the list and logging sections of the config file"],
        ))
        raise typer.Exit(code=1)


@app.command()
def sample(
    count: int = typer.Option(10, "--count", "-n", min=0, help="Number of strings"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible strings"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (defaults to ~/.config/refreshable_list/config.toml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
):
    """Print a batch of generated strings without starting the TUI."""
    configure_logging(level="DEBUG" if verbose else "WARNING", console=True)

    table = Table(title=f"{count} random strings")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Text")
    config = Config.load(config_path)
    store = DataStore(
        min_length=config.list.min_length,
        max_length=config.list.max_length,
        seed=config.list.seed if seed is None else seed,
    )
    for index, text in enumerate(store.data_array(count)):
        table.add_row(str(index), text)
    console.print(table)


@app.command()
def version():
    """Show the installed version."""
    console.print(f"refreshable-list {__version__}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
