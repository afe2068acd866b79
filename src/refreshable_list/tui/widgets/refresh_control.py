"""Pull-to-refresh control shown above the list."""

from __future__ import annotations

from typing import Callable, List

from loguru import logger
from textual.message import Message
from textual.widgets import Static

RefreshTarget = Callable[[], None]


class RefreshControl(Static):
    """Spinner line plus the targets to run when the user pulls to refresh.

    While refreshing, further pulls are ignored. The owner must call
    ``end_refreshing()`` once its data is in place, otherwise the spinner
    stays visible.
    """

    DEFAULT_CSS = """
    RefreshControl {
        height: 1;
        width: 100%;
        padding: 0 1;
        color: $text-muted;
        background: $panel;
    }

    RefreshControl.-refreshing {
        color: $accent;
        text-style: bold;
    }
    """

    HINT = "↓ Pull down or press r to refresh"
    SPINNER = "↻ Refreshing…"

    class Pulled(Message):
        """Posted when a pull starts a refresh."""

        def __init__(self, control: RefreshControl) -> None:
            self.refresh_control = control
            super().__init__()

        @property
        def control(self) -> RefreshControl:
            return self.refresh_control

    def __init__(
        self,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(self.HINT, name=name, id=id, classes=classes)
        self._targets: List[RefreshTarget] = []
        self._refreshing = False

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    def add_target(self, target: RefreshTarget) -> None:
        """Register a callback run on every accepted pull."""
        self._targets.append(target)

    def begin_refreshing(self) -> None:
        self._refreshing = True
        self._sync_indicator()

    def end_refreshing(self) -> None:
        self._refreshing = False
        self._sync_indicator()

    def on_mount(self) -> None:
        self._sync_indicator()

    def _sync_indicator(self) -> None:
        if not self.is_mounted:
            return
        self.set_class(self._refreshing, "-refreshing")
        self.update(self.SPINNER if self._refreshing else self.HINT)

    def pull(self) -> bool:
        """Handle a pull gesture.

        Returns:
            True if a refresh was started, False if one was already running
        """
        if self._refreshing:
            logger.debug("Pull ignored: refresh already in progress")
            return False

        logger.debug(f"Pull accepted, notifying {len(self._targets)} target(s)")
        self.begin_refreshing()
        if self.is_mounted:
            self.post_message(self.Pulled(self))
        for target in list(self._targets):
            target()
        return True
