"""UI screens."""

from refreshable_list.tui.screens.list_screen import ListScreen

__all__ = ["ListScreen"]
