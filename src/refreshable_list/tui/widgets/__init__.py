"""Custom Textual widgets for the list TUI."""

from refreshable_list.tui.widgets.list_row import ListRow
from refreshable_list.tui.widgets.recycling_list import ListDataSource, RecyclingList
from refreshable_list.tui.widgets.refresh_control import RefreshControl

__all__ = ["ListRow", "ListDataSource", "RecyclingList", "RefreshControl"]
