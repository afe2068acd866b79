"""Generic row template used by RecyclingList."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text
from textual.strip import Strip


@dataclass
class ListRow:
    """Recyclable row render object with a single text label.

    Attributes:
        reuse_key: Template key the row was created under
        text: Label text
        index: Row index the row is currently bound to (None when pooled)
    """

    reuse_key: str
    text: str = ""
    index: Optional[int] = None

    def prepare_for_reuse(self) -> None:
        """Reset per-row content before the row goes back to the pool."""
        self.text = ""
        self.index = None

    def render_strip(self, width: int, style: Style, console: Console) -> Strip:
        """Render the label as one line.

        Args:
            width: Line width in cells
            style: Row style (cursor / zebra)
            console: Console used for segment rendering

        Returns:
            Strip exactly ``width`` cells wide
        """
        label = Text(f" {self.text}", style=style, no_wrap=True, overflow="ellipsis")
        label.truncate(width, overflow="ellipsis", pad=True)
        return Strip(label.render(console), width)
