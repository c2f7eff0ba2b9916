"""
Presenter for the mushaf browser.

Owns the browsing state machine:

    Browsing --activate--> (fetch detail) --ok--> Viewing(detail)
                                          --err-> Browsing + LoadError
    Viewing  --return_home--> Browsing
    any      --refresh--> (fetch list) replaces the source list

Every mutation runs synchronously on the event loop and ends with one
published BrowserSnapshot, so observers never see a focus index outside
the visible list. Fetches suspend, but the state they touch is only
written when they resume; no locks are needed on a single event loop.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from mushaf.config.constants import DETAIL_FETCH_ERROR, LIST_FETCH_ERROR, PIXEL_BREAKPOINTS
from mushaf.exceptions import InvalidSelectionError
from mushaf.models.entries import EntryDetail, EntrySummary
from mushaf.services.provider import DataProvider

from .browser_state import (
    Browsing,
    BrowserSnapshot,
    FetchKind,
    FetchOutcome,
    ViewState,
    Viewing,
)
from .focus import Direction, FocusNavigator, column_count
from .load_coordinator import LoadCoordinator
from .scroll_sync import ScrollSynchronizer
from .search_filter import filter_entries

logger = logging.getLogger(__name__)


class BrowserPresenter:
    """
    Handles browsing logic for the entry grid and the reader.

    - Loads the entry list and entry details through LoadCoordinator
    - Filters the list by the search query
    - Moves the focus over the grid for directional input
    - Requests scrolling whenever the focus moves
    """

    def __init__(
        self,
        provider: DataProvider,
        *,
        width: int = 0,
        breakpoints: tuple[int, int] = PIXEL_BREAKPOINTS,
        on_state_update: Optional[Callable[[BrowserSnapshot], None]] = None,
        on_scroll_request: Optional[Callable[[int], None]] = None,
    ):
        self.provider = provider
        self.on_state_update = on_state_update
        self.breakpoints = breakpoints
        self._width = width
        self._source: tuple[EntrySummary, ...] = ()
        self._visible: tuple[EntrySummary, ...] = ()
        self._query = ""
        self._view: ViewState = Browsing()
        self._focus = FocusNavigator()
        self._scroll = ScrollSynchronizer(on_scroll_request)
        self._loader = LoadCoordinator(on_change=self._publish)
        self._state = self._snapshot()

    @property
    def state(self) -> BrowserSnapshot:
        return self._state

    @property
    def scroll(self) -> ScrollSynchronizer:
        return self._scroll

    @property
    def columns(self) -> int:
        """Column count for the current width, derived fresh on every call."""
        return column_count(self._width, self.breakpoints)

    # ------------------------------------------------------------------
    # Fetches
    # ------------------------------------------------------------------

    async def start(self) -> FetchOutcome:
        """Initial load of the entry list."""
        return await self.refresh()

    async def refresh(self) -> FetchOutcome:
        """Reload the entry list. The view state is left as it is."""
        return await self._loader.run(
            FetchKind.LIST,
            self.provider.list_entries,
            error_message=LIST_FETCH_ERROR,
            on_success=self._replace_source,
        )

    async def activate(self) -> FetchOutcome:
        """Open the focused entry. A no-op while viewing or with an empty list."""
        if isinstance(self._view, Viewing):
            return FetchOutcome.REJECTED
        entry = self._focus.focused(self._visible)
        if entry is None:
            return FetchOutcome.REJECTED
        return await self._open(entry.number)

    async def open_entry(self, entry_id: int) -> FetchOutcome:
        """Open an entry by identifier; it must be in the visible list."""
        if isinstance(self._view, Viewing):
            return FetchOutcome.REJECTED
        try:
            self._require_visible(entry_id)
        except InvalidSelectionError as e:
            logger.warning("Ignoring selection: %s", e)
            return FetchOutcome.REJECTED
        return await self._open(entry_id)

    async def _open(self, entry_id: int) -> FetchOutcome:
        logger.info("Opening entry %d", entry_id)
        return await self._loader.run(
            FetchKind.DETAIL,
            lambda: self.provider.get_entry(entry_id),
            error_message=DETAIL_FETCH_ERROR,
            on_success=self._enter_viewing,
        )

    def _require_visible(self, entry_id: int) -> None:
        if not any(entry.number == entry_id for entry in self._visible):
            raise InvalidSelectionError(entry_id=entry_id)

    # ------------------------------------------------------------------
    # Synchronous input
    # ------------------------------------------------------------------

    def navigate(self, direction: Direction) -> bool:
        """Move the focus one step. Ignored while viewing an entry."""
        if isinstance(self._view, Viewing):
            return False
        moved = self._focus.move(direction, self.columns)
        if moved:
            self._publish()
        return moved

    def set_focus(self, index: int) -> bool:
        """Focus a cell directly, as a pointer hover would."""
        if isinstance(self._view, Viewing):
            return False
        moved = self._focus.set_focus(index)
        if moved:
            self._publish()
        return moved

    def set_query(self, query: str) -> bool:
        """Change the search query and re-derive the visible list."""
        if isinstance(self._view, Viewing):
            return False
        if query == self._query:
            return False
        self._query = query
        self._apply_filter()
        self._publish()
        return True

    def set_viewport_width(self, width: int) -> None:
        """Record a new viewport width; only future vertical moves use it."""
        before = self.columns
        self._width = width
        self._focus.reclamp(len(self._visible))
        if self.columns != before:
            logger.debug("Grid now has %d columns", self.columns)
            self._publish()

    def return_home(self) -> None:
        """Back to the full list: clears the detail, query and error, focus on the first cell."""
        self._view = Browsing()
        self._query = ""
        self._loader.clear_error()
        self._apply_filter()
        self._focus.reset()
        self._publish()

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def _replace_source(self, entries: Sequence[EntrySummary]) -> None:
        self._source = tuple(entries)
        if not self._source:
            logger.info("Provider returned no entries")
        self._apply_filter()

    def _enter_viewing(self, detail: EntryDetail) -> None:
        self._view = Viewing(detail)
        self._query = ""
        self._apply_filter()
        self._focus.reset()

    def _apply_filter(self) -> None:
        self._visible = filter_entries(self._source, self._query)
        self._focus.reclamp(len(self._visible))

    def _snapshot(self) -> BrowserSnapshot:
        return BrowserSnapshot(
            view=self._view,
            visible=self._visible,
            focus_index=self._focus.index if self._focus.active else None,
            load=self._loader.state,
            query=self._query,
            columns=self.columns,
            total_count=len(self._source),
        )

    def _publish(self) -> None:
        self._state = self._snapshot()
        if self.on_state_update is not None:
            self.on_state_update(self._state)
        self._scroll.sync(self._state)
