"""Utility helpers for the list TUI."""

from refreshable_list.tui.utils.errors import ConfigError, ErrorHandler, RegistrationError, TUIError

__all__ = ["ConfigError", "ErrorHandler", "RegistrationError", "TUIError"]
