"""Centralized error handling for the list TUI.

Provides the exception hierarchy plus consistent logging and user feedback.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger


class TUIError(Exception):
    """Base exception for TUI errors."""
    pass


class RegistrationError(TUIError):
    """Row template registration or lookup failed."""
    pass


class ConfigError(TUIError):
    """Configuration values are invalid."""
    pass


class ErrorHandler:
    """Centralized error handling."""

    @staticmethod
    def handle_render_error(
        error: Exception,
        context: str,
        graceful: bool = True
    ) -> Optional[str]:
        """Handle rendering errors with graceful degradation.

        Args:
            error: The exception that occurred
            context: Context string (e.g., "render_row 12")
            graceful: Whether to degrade gracefully

        Returns:
            Error message for display, or None if graceful=False
        """
        logger.opt(exception=error).error(f"Render Error in {context}: {error}")

        if graceful:
            return f"Error rendering {context}: {str(error)[:100]}"
        return None

    @staticmethod
    def create_error_message(
        title: str,
        error: Exception,
        suggestions: Optional[list[str]] = None
    ) -> str:
        """Create formatted error message for display.

        Args:
            title: Error title
            error: The exception
            suggestions: Optional list of suggestions

        Returns:
            Formatted error message (Rich markup)
        """
        msg = f"[bold red]{title}[/bold red]\n\n"
        msg += f"[red]{str(error)}[/red]\n"

        if suggestions:
            msg += "\n[bold]Suggestions:[/bold]\n"
            for suggestion in suggestions:
                msg += f"  • {suggestion}\n"

        return msg
