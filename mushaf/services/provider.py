"""
Data provider for the entry corpus.

The browser only depends on the DataProvider protocol; QuranCloudProvider
implements it against the alquran.cloud v1 REST API using httpx.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

import httpx

from mushaf.config.constants import (
    API_SUCCESS_CODE,
    DEFAULT_API_RETRIES,
    DEFAULT_API_TIMEOUT_SECONDS,
    DEFAULT_API_URL,
    RETRY_MAX_BACKOFF_SECONDS,
    RETRY_MIN_BACKOFF_SECONDS,
)
from mushaf.config.settings import ProviderSettings
from mushaf.exceptions import ApiConnectionError, ApiResponseError, EntryNotFoundError
from mushaf.models.entries import EntryDetail, EntrySummary
from mushaf.utils.retry import async_retry

logger = logging.getLogger(__name__)


class DataProvider(Protocol):
    """Source of entry summaries and details. Both reads are idempotent."""

    async def list_entries(self) -> Sequence[EntrySummary]: ...

    async def get_entry(self, entry_id: int) -> EntryDetail: ...


class QuranCloudProvider:
    """Async client for an alquran.cloud compatible API.

    If *client* is None, the provider creates and owns an AsyncClient;
    use it as an async context manager (or call aclose) to release it.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        retries: int = DEFAULT_API_RETRIES,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = retries
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    async def __aenter__(self) -> QuranCloudProvider:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def list_entries(self) -> list[EntrySummary]:
        data = await self._fetch("/surah")
        if not isinstance(data, list):
            raise ApiResponseError("Entry list is not an array", url=self._url("/surah"))
        entries = [EntrySummary.from_payload(item) for item in data]
        logger.info("Fetched %d entries", len(entries))
        return entries

    async def get_entry(self, entry_id: int) -> EntryDetail:
        try:
            data = await self._fetch(f"/surah/{int(entry_id)}")
        except ApiResponseError as e:
            if e.context.get("status_code") in (400, 404):
                raise EntryNotFoundError(entry_id=entry_id) from e
            raise
        detail = EntryDetail.from_payload(data)
        logger.info("Fetched entry %d with %d sub-items", detail.number, len(detail.ayahs))
        return detail

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _fetch(self, path: str) -> Any:
        fetch = async_retry(
            max_retries=self.retries,
            min_backoff=RETRY_MIN_BACKOFF_SECONDS,
            max_backoff=RETRY_MAX_BACKOFF_SECONDS,
        )(self._get_data)
        return await fetch(path)

    async def _get_data(self, path: str) -> Any:
        """GET one endpoint and unwrap the ``{"code": ..., "data": ...}`` envelope."""
        url = self._url(path)
        logger.debug("GET %s", url)
        try:
            response = await self._client.get(url, timeout=self.timeout)
        except httpx.TransportError as e:
            raise ApiConnectionError(str(e) or type(e).__name__, url=url) from e
        except httpx.HTTPError as e:
            # Redirect loops, undecodable bodies and similar protocol failures
            raise ApiResponseError(str(e) or type(e).__name__, url=url) from e

        if response.status_code >= 500:
            raise ApiResponseError(
                "Provider error", url=url, status_code=response.status_code, retryable=True
            )
        if not response.is_success:
            raise ApiResponseError(
                "Request rejected", url=url, status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ApiResponseError("Response is not JSON", url=url) from e

        if not isinstance(body, dict) or "data" not in body:
            raise ApiResponseError("Response has no data envelope", url=url)
        code = body.get("code")
        if code != API_SUCCESS_CODE:
            raise ApiResponseError(
                f"Provider returned {body.get('status', 'an error')}",
                url=url,
                status_code=code if isinstance(code, int) else None,
            )
        return body["data"]


def build_provider(settings: ProviderSettings) -> DataProvider:
    """Create the configured provider, wrapped in a detail cache when enabled."""
    provider: DataProvider = QuranCloudProvider(
        settings.api_url, timeout=settings.timeout, retries=settings.retries
    )
    if settings.detail_cache_size > 0:
        from mushaf.services.cache import CachingProvider

        provider = CachingProvider(provider, maxsize=settings.detail_cache_size)
    return provider


async def close_provider(provider: DataProvider) -> None:
    """Release any network resources held by *provider*."""
    aclose = getattr(provider, "aclose", None)
    if aclose is not None:
        await aclose()
