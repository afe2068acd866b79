"""RecyclingList widget - single-column list driven by a data source.

Rows are not stored in the widget. On every paint the widget asks its data
source for the rows in the viewport; the data source dequeues a recyclable
ListRow by reuse key, fills in the label and hands it back. Rows that scroll
out of view return to a per-key pool.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Protocol, Type

from loguru import logger
from rich.style import Style
from rich.text import Text
from textual import events
from textual.geometry import Size
from textual.message import Message
from textual.reactive import reactive
from textual.scroll_view import ScrollView
from textual.strip import Strip

from refreshable_list.tui.utils.errors import ErrorHandler, RegistrationError
from refreshable_list.tui.widgets.list_row import ListRow
from refreshable_list.tui.widgets.refresh_control import RefreshControl


class ListDataSource(Protocol):
    """Callbacks the list uses to learn what to draw."""

    def section_count(self) -> int: ...

    def row_count(self, section: int) -> int: ...

    def cell_for_row(self, index: int) -> ListRow: ...


class RecyclingList(ScrollView, can_focus=True):
    """Scrollable list with row templates, row recycling and pull-to-refresh."""

    BINDINGS = [
        ("up,k", "cursor_up", "Up"),
        ("down,j", "cursor_down", "Down"),
        ("home", "cursor_home", "Top"),
        ("end", "cursor_end", "Bottom"),
        ("pageup", "page_up", "Page Up"),
        ("pagedown", "page_down", "Page Down"),
        ("enter", "select", "Select"),
    ]

    DEFAULT_CSS = """
    RecyclingList {
        background: $surface;
        color: $text;
        height: 1fr;
        overflow-y: auto;
        scrollbar-gutter: stable;
    }

    RecyclingList:focus {
        border: tall $accent;
    }
    """

    cursor_row: reactive[int] = reactive(0)

    class RowSelected(Message):
        """Posted when the cursor row is selected with enter."""

        def __init__(self, index: int, text: str) -> None:
            self.index = index
            self.text = text
            super().__init__()

    def __init__(
        self,
        *,
        zebra_stripes: bool = True,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ):
        """Initialize RecyclingList.

        Args:
            zebra_stripes: Alternate row background
            name: Widget name
            id: Widget ID
            classes: CSS classes
            disabled: Whether disabled
        """
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        self.zebra_stripes = zebra_stripes
        self.data_source: Optional[ListDataSource] = None
        self.refresh_control: Optional[RefreshControl] = None
        self._templates: Dict[str, Type[ListRow]] = {}
        self._free_rows: Dict[str, List[ListRow]] = defaultdict(list)
        self._bound_rows: Dict[int, ListRow] = {}
        self._row_total = 0
        self._allocated = 0

    # =========================================================================
    # Row templates and recycling
    # =========================================================================

    def register(self, row_class: Type[ListRow], reuse_key: str) -> None:
        """Register a row template under a reuse key.

        Args:
            row_class: ListRow subclass to instantiate when the pool is empty
            reuse_key: Key used by dequeue_reusable_row()

        Raises:
            RegistrationError: If the key is empty or the class is not a ListRow
        """
        if not reuse_key:
            raise RegistrationError("reuse key must be a non-empty string")
        if not (isinstance(row_class, type) and issubclass(row_class, ListRow)):
            raise RegistrationError(f"{row_class!r} is not a ListRow subclass")

        self._templates[reuse_key] = row_class
        logger.debug(f"Registered row template {row_class.__name__} as '{reuse_key}'")

    def dequeue_reusable_row(self, reuse_key: str, index: int) -> ListRow:
        """Get a row for ``index``, reusing a pooled one when possible.

        Raises:
            RegistrationError: If no template is registered under reuse_key
        """
        row_class = self._templates.get(reuse_key)
        if row_class is None:
            raise RegistrationError(f"no row template registered for '{reuse_key}'")

        row = self._bound_rows.get(index)
        if row is not None:
            if row.reuse_key == reuse_key:
                return row
            self._enqueue(self._bound_rows.pop(index))

        pool = self._free_rows[reuse_key]
        if pool:
            row = pool.pop()
        else:
            row = row_class(reuse_key=reuse_key)
            self._allocated += 1
        row.index = index
        self._bound_rows[index] = row
        return row

    def _enqueue(self, row: ListRow) -> None:
        row.prepare_for_reuse()
        self._free_rows[row.reuse_key].append(row)

    def _recycle_rows(self, keep: Optional[range] = None) -> None:
        """Return bound rows outside ``keep`` (all rows if None) to the pool."""
        for index in list(self._bound_rows):
            if keep is None or index not in keep:
                self._enqueue(self._bound_rows.pop(index))

    @property
    def allocated_rows(self) -> int:
        """Number of row objects ever created."""
        return self._allocated

    @property
    def pooled_rows(self) -> int:
        """Number of rows waiting in the pools."""
        return sum(len(pool) for pool in self._free_rows.values())

    # =========================================================================
    # Data
    # =========================================================================

    @property
    def row_total(self) -> int:
        """Rows known to the widget since the last reload_data()."""
        return self._row_total

    def reload_data(self) -> None:
        """Re-read counts from the data source and repaint everything."""
        self._recycle_rows()
        self._row_total = self._count_rows()
        logger.debug(f"reload_data: {self._row_total} rows")

        if not self.is_mounted:
            return

        self.virtual_size = Size(self.size.width, self._row_total)
        if self.cursor_row >= self._row_total:
            self.cursor_row = max(0, self._row_total - 1)
        self.refresh()

    def _count_rows(self) -> int:
        if self.data_source is None or self.data_source.section_count() < 1:
            return 0
        return self.data_source.row_count(0)

    # =========================================================================
    # Rendering
    # =========================================================================

    def on_mount(self) -> None:
        self.reload_data()

    def on_resize(self, event: events.Resize) -> None:
        self.virtual_size = Size(event.size.width, self._row_total)

    def render_line(self, y: int) -> Strip:
        """Render a single viewport line.

        Args:
            y: Line number in viewport

        Returns:
            Strip containing rendered line
        """
        scroll_y = self.scroll_offset.y
        index = y + scroll_y
        width = self.size.width

        if y == 0:
            self._recycle_rows(keep=range(scroll_y, scroll_y + self.size.height))

        if self.data_source is None or index >= self._row_total:
            return Strip.blank(width)

        style = self._row_style(index)
        try:
            row = self.data_source.cell_for_row(index)
        except Exception as e:
            message = ErrorHandler.handle_render_error(e, f"row {index}")
            text = Text(f" {message}", style=style + Style(color="red"), no_wrap=True)
            text.truncate(width, pad=True)
            return Strip(text.render(self.app.console), width)

        return row.render_strip(width, style, self.app.console)

    def _row_style(self, index: int) -> Style:
        if index == self.cursor_row and self.has_focus:
            return Style(bgcolor="blue", color="white", bold=True)
        if index == self.cursor_row:
            return Style(bgcolor="grey23", bold=True)
        if self.zebra_stripes and index % 2 == 0:
            return Style(bgcolor="grey11")
        return Style()

    def watch_cursor_row(self, old_row: int, new_row: int) -> None:
        self.refresh()

    def on_focus(self) -> None:
        self.refresh()

    def on_blur(self) -> None:
        self.refresh()

    # =========================================================================
    # Actions
    # =========================================================================

    def _move_cursor(self, row: int) -> None:
        if self._row_total == 0:
            return
        self.cursor_row = max(0, min(row, self._row_total - 1))

        height = self.size.height
        if self.cursor_row < self.scroll_offset.y:
            self.scroll_to(y=self.cursor_row, animate=False)
        elif height and self.cursor_row >= self.scroll_offset.y + height:
            self.scroll_to(y=self.cursor_row - height + 1, animate=False)

    def action_cursor_up(self) -> None:
        if self.cursor_row == 0:
            self.action_pull_to_refresh()
            return
        self._move_cursor(self.cursor_row - 1)

    def action_cursor_down(self) -> None:
        self._move_cursor(self.cursor_row + 1)

    def action_cursor_home(self) -> None:
        self._move_cursor(0)

    def action_cursor_end(self) -> None:
        self._move_cursor(self._row_total - 1)

    def action_page_up(self) -> None:
        self._move_cursor(self.cursor_row - max(1, self.size.height))

    def action_page_down(self) -> None:
        self._move_cursor(self.cursor_row + max(1, self.size.height))

    def action_select(self) -> None:
        if self.data_source is None or self._row_total == 0:
            return
        row = self.data_source.cell_for_row(self.cursor_row)
        self.post_message(self.RowSelected(self.cursor_row, row.text))

    def action_pull_to_refresh(self) -> None:
        """Treat the current input as a pull gesture."""
        if self.refresh_control is None:
            return
        self.refresh_control.pull()

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        """Scrolling up while already at the top is a pull gesture."""
        if self.scroll_offset.y > 0:
            return
        event.prevent_default()
        event.stop()
        self.action_pull_to_refresh()
