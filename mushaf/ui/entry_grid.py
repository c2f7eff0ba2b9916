"""Grid of entry cards for the browsing view."""

from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import Static

from mushaf.config.constants import SUB_ITEM_UNIT
from mushaf.models.entries import EntrySummary

logger = logging.getLogger(__name__)


def card_text(entry: EntrySummary) -> Text:
    """Three-line card body: number and name, translation, classification and size."""
    text = Text(no_wrap=True, overflow="ellipsis")
    text.append(f"{entry.number:>3}  ", style="bold reverse")
    text.append(entry.name, style="bold")
    text.append("\n")
    text.append(entry.english_name_translation, style="dim")
    text.append("\n")
    text.append(entry.revelation_type.label)
    text.append(f"  ·  {entry.number_of_ayahs} {SUB_ITEM_UNIT}", style="dim")
    return text


class EntryCard(Static):
    """One selectable cell of the grid."""

    DEFAULT_CSS = """
    EntryCard {
        height: 5;
        padding: 0 1;
        background: $surface;
        border: tall $surface;
    }

    EntryCard.-focused {
        border: tall $accent;
        text-style: bold;
    }
    """

    class Hovered(Message):
        """The pointer entered a card."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    class Clicked(Message):
        """A card was clicked."""

        def __init__(self, index: int, entry_id: int) -> None:
            self.index = index
            self.entry_id = entry_id
            super().__init__()

    def __init__(self, entry: EntrySummary, index: int, focused: bool = False) -> None:
        super().__init__(card_text(entry), classes="-focused" if focused else None)
        self.entry = entry
        self.index = index

    def on_enter(self, event: events.Enter) -> None:
        self.post_message(self.Hovered(self.index))

    def on_click(self, event: events.Click) -> None:
        self.post_message(self.Clicked(self.index, self.entry.number))


class EntryGrid(VerticalScroll):
    """Responsive grid of EntryCards driven by BrowserSnapshots.

    Directional keys are forwarded to the app as opaque moves instead of
    scrolling; scrolling follows the focus through scroll_to_index.
    """

    BINDINGS = [
        Binding("up", "app.move('up')", "Up", show=False),
        Binding("down", "app.move('down')", "Down", show=False),
        Binding("left", "app.move('left')", "Left", show=False),
        Binding("right", "app.move('right')", "Right", show=False),
        Binding("k", "app.move('up')", "Up", show=False),
        Binding("j", "app.move('down')", "Down", show=False),
        Binding("h", "app.move('left')", "Left", show=False),
        Binding("l", "app.move('right')", "Right", show=False),
        Binding("enter", "app.activate", "Open"),
    ]

    DEFAULT_CSS = """
    EntryGrid {
        layout: grid;
        grid-size: 3;
        grid-gutter: 1 2;
        grid-rows: 5;
        height: 1fr;
        padding: 1 2;
    }
    """

    def __init__(self, *, id: Optional[str] = None) -> None:
        super().__init__(id=id)
        self.entries: tuple[EntrySummary, ...] = ()
        self.focus_index: Optional[int] = None

    def compose(self) -> ComposeResult:
        for index, entry in enumerate(self.entries):
            yield EntryCard(entry, index, focused=index == self.focus_index)

    def show(self, entries: tuple[EntrySummary, ...], focus_index: Optional[int], columns: int) -> None:
        """Render a visible list, its focus and column count."""
        if self.styles.grid_size_columns != columns:
            self.styles.grid_size_columns = columns

        previous = self.focus_index
        self.focus_index = focus_index
        if entries != self.entries:
            self.entries = entries
            self.refresh(recompose=True)
            return

        if previous == focus_index:
            return
        for card in self.query(EntryCard):
            card.set_class(card.index == focus_index, "-focused")

    def scroll_to_index(self, index: int) -> None:
        """Bring a card into view, smoothly and centered. Ignores cards not yet drawn."""
        cards = list(self.query(EntryCard))
        if not 0 <= index < len(cards):
            logger.debug("Card %d not rendered yet, skipping scroll", index)
            return
        self.scroll_to_center(cards[index], animate=True)
