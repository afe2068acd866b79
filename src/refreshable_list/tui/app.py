"""Main list TUI application.

Wires configuration, the random string store and the list screen together.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from textual.app import App
from textual.screen import Screen

from refreshable_list.logging_config import configure_logging
from refreshable_list.tui.core.config import Config
from refreshable_list.tui.data_store import DataStore
from refreshable_list.tui.screens.list_screen import Generator, ListScreen


class RefreshableListApp(App):
    """Textual app hosting a single ListScreen."""

    TITLE = "Refreshable List"

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Optional[Config] = None,
        generator: Optional[Generator] = None,
        config_path: Optional[Path] = None,
    ) -> None:
        """Initialize application.

        Args:
            config: Configuration to use (loaded from config_path when None)
            generator: String generator override; defaults to a DataStore
                built from the [list] config section
            config_path: TOML file to load when config is None
        """
        super().__init__()
        self.config = config or Config.load(config_path)

        if generator is None:
            store = DataStore(
                min_length=self.config.list.min_length,
                max_length=self.config.list.max_length,
                seed=self.config.list.seed,
            )
            generator = store.data_array
        self._generator = generator

    def get_default_screen(self) -> Screen:
        return ListScreen(self.config, self._generator)

    def on_mount(self) -> None:
        logger.info("App mounted")

    def on_unmount(self) -> None:
        logger.info("App unmounted")


def run_app(
    count: Optional[int] = None,
    title: Optional[str] = None,
    config_path: Optional[Path] = None,
    seed: Optional[int] = None,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> None:
    """Run the list TUI.

    Command line values override the matching config file values.

    Args:
        count: Number of strings per refresh
        title: Screen title
        config_path: Config file to load (default location when None)
        seed: Seed for reproducible strings
        log_level: Log level for the file sink
        log_file: Log file path
    """
    config = Config.load(config_path)
    if count is not None:
        config.list.item_count = count
    if title is not None:
        config.list.title = title
    if seed is not None:
        config.list.seed = seed
    if log_level is not None:
        config.logging.level = log_level
    if log_file is not None:
        config.logging.file = str(log_file)
    config.validate()

    # The TUI owns the terminal, so logs go to a file only
    configure_logging(
        level=config.logging.level,
        log_file=config.logging.file,
        rotation=config.logging.rotation,
    )

    try:
        app = RefreshableListApp(config=config)
        logger.info(f"Starting list TUI with {config.list.item_count} items per refresh")
        app.run()
    except Exception as e:
        logger.opt(exception=e).error(f"Fatal error in run_app: {e}")
        raise
