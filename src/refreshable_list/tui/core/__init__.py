"""Core state and configuration."""

from refreshable_list.tui.core.config import Config, ListConfig, LoggingConfig, UIConfig
from refreshable_list.tui.core.state import DisplayList, RefreshState

__all__ = ["Config", "ListConfig", "LoggingConfig", "UIConfig", "DisplayList", "RefreshState"]
