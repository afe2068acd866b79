"""List screen: a pull-to-refresh list of random strings.

The screen owns the DisplayList and acts as the data source of its
RecyclingList. Every change to the items goes through set_items(), which
reloads the list widget before returning, so the rendered rows never lag
behind the data.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from loguru import logger
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header

from refreshable_list.tui.core.config import Config
from refreshable_list.tui.core.state import DisplayList, RefreshState
from refreshable_list.tui.data_store import DataStore
from refreshable_list.tui.widgets import ListRow, RecyclingList, RefreshControl

Generator = Callable[[int], Sequence[str]]


class ListScreen(Screen):
    """One-section scrollable list refreshed by a pull gesture."""

    CSS = """
    ListScreen {
        layout: vertical;
    }

    #items {
        height: 1fr;
    }
    """

    BINDINGS = [
        ("r,ctrl+r", "pull_to_refresh", "Refresh"),
    ]

    def __init__(
        self,
        config: Optional[Config] = None,
        generator: Optional[Generator] = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize list screen and load the first batch of items.

        Args:
            config: Application configuration (defaults when None)
            generator: Callable returning ``count`` strings; defaults to the
                shared DataStore
            name: Screen name
            id: Screen ID
            classes: CSS classes

        Raises:
            RegistrationError: If the row template cannot be registered
        """
        super().__init__(name=name, id=id, classes=classes)
        self.config = config or Config()
        self._generator: Generator = generator or DataStore.shared().data_array
        self._display_list = DisplayList()
        self.refresh_state = RefreshState.IDLE
        self.refresh_count = 0

        self.refresh_control = RefreshControl(id="refresh-control")
        self.list_view = RecyclingList(
            zebra_stripes=self.config.ui.zebra_stripes,
            id="items",
        )
        self.initialize()

    def initialize(self) -> None:
        """Title, row template, refresh target, then the initial load."""
        list_config = self.config.list
        self.set_reactive(ListScreen.title, list_config.title)

        self.list_view.register(ListRow, list_config.reuse_key)
        self.list_view.data_source = self
        self.list_view.refresh_control = self.refresh_control
        self.refresh_control.add_target(self.on_refresh_triggered)

        self.on_refresh_triggered()
        logger.info(f"ListScreen initialized with {len(self._display_list)} items")

    def compose(self) -> ComposeResult:
        yield Header()
        yield self.refresh_control
        yield self.list_view
        yield Footer()

    def on_mount(self) -> None:
        self.list_view.focus()
        logger.debug("ListScreen mounted")

    # =========================================================================
    # Data
    # =========================================================================

    @property
    def items(self) -> Tuple[str, ...]:
        return self._display_list.items

    def set_items(self, new_items: Sequence[str]) -> None:
        """Replace all items and reload the list widget."""
        self._display_list.replace(new_items)
        self.list_view.reload_data()

    def on_refresh_triggered(self) -> None:
        """Replace the items with a fresh batch from the generator."""
        self.refresh_state = RefreshState.REFRESHING
        try:
            self.set_items(self._generator(self.config.list.item_count))
        finally:
            self.refresh_control.end_refreshing()
            self.refresh_state = RefreshState.IDLE

        self.refresh_count += 1
        logger.info(f"Refresh #{self.refresh_count}: {len(self._display_list)} items")

    # =========================================================================
    # Data source callbacks
    # =========================================================================

    def section_count(self) -> int:
        return 1

    def row_count(self, section: int) -> int:
        return len(self._display_list)

    def cell_for_row(self, index: int) -> ListRow:
        """Dequeue a row for ``index`` and set its label.

        Raises:
            IndexError: If index is outside 0 <= index < row_count(0)
        """
        text = self._display_list[index]
        row = self.list_view.dequeue_reusable_row(self.config.list.reuse_key, index)
        row.text = text
        return row

    # =========================================================================
    # Actions / events
    # =========================================================================

    def action_pull_to_refresh(self) -> None:
        self.refresh_control.pull()

    def on_refresh_control_pulled(self, event: RefreshControl.Pulled) -> None:
        if self.config.ui.notify_on_refresh:
            self.notify(f"Loaded {len(self._display_list)} items", timeout=2)

    def on_recycling_list_row_selected(self, event: RecyclingList.RowSelected) -> None:
        logger.debug(f"Row {event.index} selected: {event.text}")
        self.notify(event.text, title=f"Row {event.index + 1}", timeout=2)
