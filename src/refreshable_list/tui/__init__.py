"""Refreshable list TUI.

Features:
- One-section list backed by an in-memory array of strings
- Pull-to-refresh (scroll up at the top, or press r)
- Row recycling by reuse key
- TOML configuration
"""

from refreshable_list.tui.app import RefreshableListApp, run_app

__all__ = ["RefreshableListApp", "run_app"]
