"""
Browser state types.

View state and load state are small tagged unions: each variant is its own
frozen dataclass, so a detail payload can only exist inside ``Viewing``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from mushaf.models.entries import EntryDetail, EntrySummary


class FetchKind(str, Enum):
    """The two kinds of provider request."""

    LIST = "list"
    DETAIL = "detail"


class FetchOutcome(str, Enum):
    """Result of asking the browser to fetch something."""

    REJECTED = "rejected"  # another fetch in flight, or nothing to fetch
    FAILED = "failed"
    SUCCEEDED = "succeeded"


# =============================================================================
# Load state
# =============================================================================


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    kind: FetchKind


@dataclass(frozen=True)
class LoadError:
    message: str


LoadState = Union[Idle, Loading, LoadError]


# =============================================================================
# View state
# =============================================================================


@dataclass(frozen=True)
class Browsing:
    pass


@dataclass(frozen=True)
class Viewing:
    detail: EntryDetail


ViewState = Union[Browsing, Viewing]


@dataclass(frozen=True)
class BrowserSnapshot:
    """Read-only picture of the browser handed to the rendering layer."""

    view: ViewState
    visible: tuple[EntrySummary, ...]
    focus_index: Optional[int]  # None while the visible list is empty
    load: LoadState
    query: str
    columns: int
    total_count: int

    @property
    def is_viewing(self) -> bool:
        return isinstance(self.view, Viewing)

    @property
    def detail(self) -> Optional[EntryDetail]:
        return self.view.detail if isinstance(self.view, Viewing) else None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.load, Loading)

    @property
    def error_message(self) -> Optional[str]:
        return self.load.message if isinstance(self.load, LoadError) else None
