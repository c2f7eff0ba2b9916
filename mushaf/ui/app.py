"""
Mushaf TUI application.

Wires keys, resizes and widget messages into BrowserPresenter and renders
each BrowserSnapshot it publishes.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Horizontal, Vertical
from textual.widgets import Button, ContentSwitcher, Footer, Input, LoadingIndicator, Static

from mushaf.config.constants import (
    APP_TITLE,
    BACK_TO_LIST,
    LOADING_TEXT,
    NO_RESULTS_HINT,
    NO_RESULTS_TITLE,
    SEARCH_PLACEHOLDER,
)
from mushaf.config.ui_config import get_breakpoints, get_theme, set_theme
from mushaf.services.provider import DataProvider, close_provider

from .browser_presenter import BrowserPresenter
from .browser_state import BrowserSnapshot
from .entry_grid import EntryCard, EntryGrid
from .entry_reader import EntryReader
from .focus import Direction
from .themes import get_opposite_theme, get_theme_names, register_all_themes

logger = logging.getLogger(__name__)


class MushafApp(App[None]):
    """Browse the corpus with four directions, select and back."""

    TITLE = APP_TITLE

    BINDINGS = [
        Binding("up", "move('up')", "Up", show=False),
        Binding("down", "move('down')", "Down", show=False),
        Binding("escape", "home", "Home"),
        Binding("backspace", "home", "Home", show=False),
        Binding("r", "refresh", "Refresh"),
        Binding("slash", "focus_search", "Search"),
        Binding("t", "toggle_theme", "Theme"),
        Binding("q", "quit", "Quit"),
    ]

    CSS = """
    #title-bar {
        height: 1;
        background: $primary;
        padding: 0 2;
    }

    #title {
        width: 1fr;
        text-style: bold;
    }

    #status-bar {
        width: auto;
    }

    #status-bar.-error {
        color: $error;
        text-style: bold;
    }

    #search {
        margin: 1 2 0 2;
    }

    #browser {
        height: 1fr;
    }

    #loading, #empty {
        align: center middle;
    }

    #loading Static, #empty Static {
        width: 100%;
        text-align: center;
    }

    #empty-title {
        text-style: bold;
    }
    """

    def __init__(
        self,
        provider: DataProvider,
        *,
        theme: Optional[str] = None,
        breakpoints: Optional[tuple[int, int]] = None,
    ):
        super().__init__()
        self._theme_name = theme or get_theme()
        self.presenter = BrowserPresenter(
            provider,
            breakpoints=breakpoints or get_breakpoints(),
        )
        self._was_viewing = False

    def compose(self) -> ComposeResult:
        with Horizontal(id="title-bar"):
            yield Static(APP_TITLE, id="title")
            yield Static("", id="status-bar")
        yield Input(placeholder=SEARCH_PLACEHOLDER, id="search")
        with ContentSwitcher(initial="loading", id="browser"):
            with Vertical(id="loading"):
                yield LoadingIndicator()
                yield Static(LOADING_TEXT)
            yield EntryGrid(id="grid")
            with Vertical(id="empty"):
                yield Static(NO_RESULTS_TITLE, id="empty-title")
                yield Static(NO_RESULTS_HINT)
                with Center():
                    yield Button(BACK_TO_LIST, id="empty-back")
            yield EntryReader(id="reader")
        yield Footer()

    def on_mount(self) -> None:
        register_all_themes(self)
        if self._theme_name in get_theme_names():
            self.theme = self._theme_name
        else:
            logger.warning("Unknown theme %r, using default", self._theme_name)

        self.presenter.on_state_update = self._render_state
        self.presenter.scroll.request_scroll = self._request_scroll
        self.presenter.set_viewport_width(self.size.width)
        self._render_state(self.presenter.state)
        self.query_one(EntryGrid).focus()
        self.run_worker(self.presenter.start(), group="fetch")

    async def on_unmount(self) -> None:
        await close_provider(self.presenter.provider)

    def on_resize(self, event: events.Resize) -> None:
        self.presenter.set_viewport_width(event.size.width)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_move(self, direction: str) -> None:
        self.presenter.navigate(Direction(direction))

    def action_activate(self) -> None:
        self.run_worker(self.presenter.activate(), group="fetch")

    def action_refresh(self) -> None:
        self.run_worker(self.presenter.refresh(), group="fetch")

    def action_home(self) -> None:
        search = self.query_one("#search", Input)
        if search.has_focus and not self.presenter.state.is_viewing:
            self.query_one(EntryGrid).focus()
            return
        self.presenter.return_home()

    def action_focus_search(self) -> None:
        if not self.presenter.state.is_viewing:
            self.query_one("#search", Input).focus()

    def action_toggle_theme(self) -> None:
        self.theme = get_opposite_theme(self.theme)
        set_theme(self.theme)

    # ------------------------------------------------------------------
    # Widget messages
    # ------------------------------------------------------------------

    @on(Input.Changed, "#search")
    def _search_changed(self, event: Input.Changed) -> None:
        self.presenter.set_query(event.value)

    @on(Input.Submitted, "#search")
    def _search_submitted(self, event: Input.Submitted) -> None:
        self.query_one(EntryGrid).focus()

    @on(Button.Pressed, "#empty-back, #reader-back")
    def _back_pressed(self, event: Button.Pressed) -> None:
        self.presenter.return_home()

    @on(EntryCard.Hovered)
    def _card_hovered(self, event: EntryCard.Hovered) -> None:
        self.presenter.set_focus(event.index)

    @on(EntryCard.Clicked)
    def _card_clicked(self, event: EntryCard.Clicked) -> None:
        self.presenter.set_focus(event.index)
        self.run_worker(self.presenter.open_entry(event.entry_id), group="fetch")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_state(self, state: BrowserSnapshot) -> None:
        self._render_status(state)

        search = self.query_one("#search", Input)
        switcher = self.query_one("#browser", ContentSwitcher)
        grid = self.query_one(EntryGrid)

        if state.detail is not None:
            search.display = False
            reader = self.query_one(EntryReader)
            reader.show(state.detail)
            switcher.current = "reader"
            if not self._was_viewing:
                reader.scroll_home(animate=False)
                reader.focus()
            self._was_viewing = True
            return

        search.display = True
        if search.value != state.query:
            search.value = state.query
        grid.show(state.visible, state.focus_index, state.columns)
        if state.visible:
            switcher.current = "grid"
        elif state.is_loading:
            switcher.current = "loading"
        else:
            switcher.current = "empty"

        if self._was_viewing:
            grid.focus()
        self._was_viewing = False

    def _render_status(self, state: BrowserSnapshot) -> None:
        status = self.query_one("#status-bar", Static)
        message = state.error_message
        status.set_class(message is not None, "-error")
        if message is not None:
            status.update(Text(message))
        elif state.is_loading:
            status.update(Text(LOADING_TEXT))
        else:
            status.update(Text(f"{len(state.visible)} / {state.total_count}"))

    def _request_scroll(self, index: int) -> None:
        self.call_after_refresh(self.query_one(EntryGrid).scroll_to_index, index)
