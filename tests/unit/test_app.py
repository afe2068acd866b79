"""Interactive tests for RefreshableListApp using Textual's pilot."""

from unittest.mock import Mock

import pytest

from refreshable_list.tui.app import RefreshableListApp
from refreshable_list.tui.core.config import Config
from refreshable_list.tui.core.state import RefreshState
from refreshable_list.tui.screens import ListScreen
from refreshable_list.tui.widgets import RecyclingList


@pytest.mark.asyncio
async def test_app_shows_list_screen(scripted):
    """Test the default screen is the list with the first batch loaded."""
    app = RefreshableListApp(config=Config(), generator=scripted([["a", "b", "c"]]))

    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert isinstance(screen, ListScreen)
        assert screen.row_count(0) == 3
        assert screen.query_one(RecyclingList).row_total == 3


@pytest.mark.asyncio
async def test_refresh_key_replaces_items(scripted):
    """Test pressing r loads a new batch."""
    generator = scripted([["a", "b", "c"], ["x", "y"]])
    app = RefreshableListApp(config=Config(), generator=generator)

    async with app.run_test() as pilot:
        await pilot.press("r")
        await pilot.pause()
        screen = app.screen
        assert screen.items == ("x", "y")
        assert screen.list_view.row_total == 2
        assert screen.refresh_control.is_refreshing is False
        assert screen.refresh_state is RefreshState.IDLE
        assert generator.calls == [50, 50]


@pytest.mark.asyncio
async def test_cursor_clamped_after_shorter_refresh(scripted):
    """Test the cursor stays inside the list when it shrinks."""
    generator = scripted([["a", "b", "c", "d"], ["x"]])
    app = RefreshableListApp(config=Config(), generator=generator)

    async with app.run_test() as pilot:
        await pilot.press("end")
        assert app.screen.list_view.cursor_row == 3

        await pilot.press("r")
        await pilot.pause()
        assert app.screen.list_view.cursor_row == 0


def _line_text(list_view: RecyclingList, y: int) -> str:
    return list_view.render_line(y).text.strip()


@pytest.mark.asyncio
async def test_rendered_lines_match_items(scripted):
    """Test drawn rows equal the items before and after a refresh."""
    generator = scripted([["a", "b", "c"], ["x", "y"]])
    app = RefreshableListApp(config=Config(), generator=generator)

    async with app.run_test() as pilot:
        await pilot.pause()
        list_view = app.screen.list_view
        assert [_line_text(list_view, y) for y in range(3)] == ["a", "b", "c"]
        assert _line_text(list_view, 3) == ""

        await pilot.press("r")
        await pilot.pause()
        assert [_line_text(list_view, y) for y in range(2)] == ["x", "y"]
        assert _line_text(list_view, 2) == ""


@pytest.mark.asyncio
async def test_render_releases_offscreen_rows(scripted):
    """Test rows bound outside the viewport are released on repaint."""
    app = RefreshableListApp(config=Config(), generator=scripted([["a", "b", "c"]]))

    async with app.run_test() as pilot:
        await pilot.pause()
        list_view = app.screen.list_view
        far = list_view.dequeue_reusable_row("REUSE", 500)
        assert far.index == 500

        list_view.render_line(0)

        assert far.index != 500


@pytest.mark.asyncio
async def test_up_on_first_row_pulls(scripted):
    """Test pressing up on the first row refreshes the list."""
    generator = scripted([["a", "b"], ["x", "y", "z"]])
    app = RefreshableListApp(config=Config(), generator=generator)

    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.screen.list_view.cursor_row == 0

        await pilot.press("up")
        await pilot.pause()

        assert app.screen.items == ("x", "y", "z")
        assert app.screen.refresh_control.is_refreshing is False


@pytest.mark.asyncio
async def test_wheel_up_at_top_pulls(scripted):
    """Test scrolling up while at the top refreshes the list."""
    generator = scripted([["a", "b"], ["x"]])
    app = RefreshableListApp(config=Config(), generator=generator)

    async with app.run_test() as pilot:
        await pilot.pause()
        list_view = app.screen.list_view
        event = Mock()

        list_view.on_mouse_scroll_up(event)
        await pilot.pause()

        event.prevent_default.assert_called_once()
        assert app.screen.items == ("x",)


@pytest.mark.asyncio
async def test_wheel_up_below_top_scrolls(scripted):
    """Test scrolling up away from the top does not refresh."""
    items = [f"item{i}" for i in range(100)]
    generator = scripted([items])
    app = RefreshableListApp(config=Config(), generator=generator)

    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("end")
        await pilot.pause()
        list_view = app.screen.list_view
        assert list_view.scroll_offset.y > 0
        event = Mock()

        list_view.on_mouse_scroll_up(event)

        event.prevent_default.assert_not_called()
        assert app.screen.items == tuple(items)
        assert generator.calls == [50]
