"""Keep the focused grid cell inside the viewport."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .browser_state import BrowserSnapshot

logger = logging.getLogger(__name__)


class ScrollSynchronizer:
    """Turns focus changes into scroll requests for the rendering layer.

    ``request_scroll`` receives the index to bring into view (smoothly,
    centered). It is fire-and-forget: nothing waits for the scroll, and the
    renderer must ignore an index it has not drawn yet.
    """

    def __init__(self, request_scroll: Optional[Callable[[int], None]] = None):
        self.request_scroll = request_scroll
        self._last_index: Optional[int] = None

    def sync(self, snapshot: BrowserSnapshot) -> bool:
        """Emit one scroll request if the focus moved since the last snapshot."""
        if snapshot.is_viewing:
            # The grid is not on screen; the next browse starts afresh
            self._last_index = None
            return False

        index = snapshot.focus_index
        if index is None:
            self._last_index = None
            return False
        if index >= len(snapshot.visible):
            return False
        if index == self._last_index:
            return False

        self._last_index = index
        if self.request_scroll is not None:
            logger.debug("Scroll focus %d into view", index)
            self.request_scroll(index)
        return True
