"""Reader for a single entry's full text."""

from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Center, Vertical, VerticalScroll
from textual.widgets import Button, Static

from mushaf.config.constants import BACK_TO_INDEX, OPENING_FORMULA
from mushaf.models.entries import EntryDetail


def header_meta(detail: EntryDetail) -> str:
    return (
        f"{detail.revelation_type.label}  |  "
        f"عدد الآيات: {detail.number_of_ayahs}  |  "
        f"رقم السورة: {detail.number}"
    )


def body_text(detail: EntryDetail) -> Text:
    """All sub-items as one flowing paragraph, each closed by its number marker."""
    text = Text(justify="center")
    for ayah in detail.ayahs:
        if ayah.display_text:
            text.append(ayah.display_text)
            text.append(" ")
        text.append(f"﴿{ayah.number_in_surah}﴾", style="bold")
        text.append("   ")
    return text


class EntryReader(VerticalScroll):
    """Header, opening formula, body and a way back to the index."""

    DEFAULT_CSS = """
    EntryReader {
        height: 1fr;
        padding: 0 2;
    }

    #reader-header {
        height: auto;
        padding: 1 2;
        background: $primary;
        color: $foreground;
    }

    #reader-title {
        text-align: center;
        text-style: bold;
    }

    #reader-meta {
        text-align: center;
    }

    #reader-formula {
        text-align: center;
        color: $accent;
        padding-top: 1;
    }

    #reader-body {
        padding: 1 2;
    }

    #reader-footer {
        height: auto;
        padding: 1 0;
    }
    """

    def __init__(self, *, id: Optional[str] = None) -> None:
        super().__init__(id=id)
        self.detail: Optional[EntryDetail] = None

    def compose(self) -> ComposeResult:
        with Vertical(id="reader-header"):
            yield Static("", id="reader-title")
            yield Static("", id="reader-meta")
            yield Static(OPENING_FORMULA, id="reader-formula")
        yield Static("", id="reader-body")
        with Center(id="reader-footer"):
            yield Button(BACK_TO_INDEX, id="reader-back")

    def show(self, detail: EntryDetail) -> None:
        """Display *detail*, starting from the top when it changes.

        Re-rendering an equal detail keeps the scroll position; the app
        scrolls home itself each time the reader is entered.
        """
        if detail == self.detail:
            return
        self.detail = detail
        self.query_one("#reader-title", Static).update(Text(detail.name))
        self.query_one("#reader-meta", Static).update(Text(header_meta(detail)))
        self.query_one("#reader-body", Static).update(body_text(detail))
        self.scroll_home(animate=False)

