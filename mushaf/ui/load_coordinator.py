"""
Single-flight bookkeeping around provider calls.

Only one fetch may be outstanding at a time. A request made while another
is loading is rejected, never queued. On completion the result is applied
and the load state leaves ``Loading`` in the same synchronous step, so no
observer sees a result alongside a ``Loading`` state.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional, TypeVar

import httpx

from mushaf.exceptions import MushafError

from .browser_state import FetchKind, FetchOutcome, Idle, LoadError, Loading, LoadState

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failures that become a user-facing LoadError; anything else is a bug and propagates
FETCH_ERRORS = (MushafError, httpx.HTTPError)


class LoadCoordinator:
    """Owns the load state and runs provider requests one at a time."""

    def __init__(self, on_change: Optional[Callable[[], None]] = None):
        self.state: LoadState = Idle()
        self.on_change = on_change

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    def clear_error(self) -> bool:
        """Drop a previous error. Does nothing while a request is in flight."""
        if isinstance(self.state, LoadError):
            self.state = Idle()
            return True
        return False

    async def run(
        self,
        kind: FetchKind,
        request: Callable[[], Awaitable[T]],
        *,
        error_message: str,
        on_success: Callable[[T], None],
    ) -> FetchOutcome:
        """Run *request* unless another fetch is outstanding.

        Args:
            kind: Which kind of fetch this is, for logging and the Loading state.
            request: Coroutine factory performing the provider call.
            error_message: User-facing message stored when the call fails.
            on_success: Applies the result; runs before observers are notified.
        """
        if self.is_loading:
            logger.info("Ignoring %s fetch: %s fetch already in flight", kind.value, self.state.kind.value)
            return FetchOutcome.REJECTED

        self.state = Loading(kind)
        self._notify()

        outcome = FetchOutcome.FAILED
        try:
            result = await request()
        except FETCH_ERRORS as e:
            logger.warning("%s fetch failed: %s", kind.value, e, exc_info=True)
            self.state = LoadError(error_message)
        else:
            self.state = Idle()
            on_success(result)
            outcome = FetchOutcome.SUCCEEDED
        finally:
            # Cancelled or crashed requests must not leave the browser stuck loading
            if isinstance(self.state, Loading):
                self.state = Idle()
            self._notify()
        return outcome

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
