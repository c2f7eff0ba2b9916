"""Tests for the HTTP data provider, using httpx.MockTransport."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from factories import surah_payload

from mushaf.config.settings import ProviderSettings
from mushaf.exceptions import ApiConnectionError, ApiResponseError, EntryNotFoundError
from mushaf.models.entries import RevelationType
from mushaf.services.cache import CachingProvider
from mushaf.services.provider import QuranCloudProvider, build_provider, close_provider

BASE_URL = "https://quran.test/v1"


def envelope(data, code=200, status="OK"):
    return {"code": code, "status": status, "data": data}


def detail_data(number=2):
    return surah_payload(
        number=number,
        englishName="Al-Baqara",
        revelationType="Medinan",
        numberOfAyahs=2,
        ayahs=[
            {"number": 8, "text": "الٓمٓ", "numberInSurah": 1},
            {"number": 9, "text": "ذَٰلِكَ ٱلۡكِتَٰبُ", "numberInSurah": 2},
        ],
    )


def make_provider(handler, retries=0):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return QuranCloudProvider(BASE_URL, retries=retries, client=client), client


@pytest.fixture
def no_sleep():
    with patch("mushaf.utils.retry.asyncio.sleep", new=AsyncMock()) as sleep:
        yield sleep


class TestListEntries:
    @pytest.mark.asyncio
    async def test_success(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=envelope([surah_payload(1), surah_payload(2)]))

        provider, client = make_provider(handler)
        async with client:
            entries = await provider.list_entries()

        assert [e.number for e in entries] == [1, 2]
        assert str(requests[0].url) == f"{BASE_URL}/surah"

    @pytest.mark.asyncio
    async def test_empty_list(self):
        provider, client = make_provider(lambda r: httpx.Response(200, json=envelope([])))
        async with client:
            assert await provider.list_entries() == []

    @pytest.mark.asyncio
    async def test_data_not_a_list(self):
        provider, client = make_provider(lambda r: httpx.Response(200, json=envelope({"x": 1})))
        async with client:
            with pytest.raises(ApiResponseError, match="not an array"):
                await provider.list_entries()

    @pytest.mark.asyncio
    async def test_error_envelope(self):
        provider, client = make_provider(
            lambda r: httpx.Response(200, json=envelope("boom", code=429, status="Too Many Requests"))
        )
        async with client:
            with pytest.raises(ApiResponseError) as exc_info:
                await provider.list_entries()
        assert exc_info.value.context["status_code"] == 429

    @pytest.mark.asyncio
    async def test_missing_envelope(self):
        provider, client = make_provider(lambda r: httpx.Response(200, json=[1, 2]))
        async with client:
            with pytest.raises(ApiResponseError, match="no data envelope"):
                await provider.list_entries()

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        provider, client = make_provider(lambda r: httpx.Response(200, text="<html>"))
        async with client:
            with pytest.raises(ApiResponseError, match="not JSON"):
                await provider.list_entries()

    @pytest.mark.asyncio
    async def test_malformed_item(self):
        provider, client = make_provider(
            lambda r: httpx.Response(200, json=envelope([surah_payload(number=0)]))
        )
        async with client:
            with pytest.raises(ApiResponseError):
                await provider.list_entries()


class TestGetEntry:
    @pytest.mark.asyncio
    async def test_success(self):
        provider, client = make_provider(lambda r: httpx.Response(200, json=envelope(detail_data())))
        async with client:
            detail = await provider.get_entry(2)

        assert detail.number == 2
        assert detail.revelation_type is RevelationType.MEDINAN
        assert len(detail.ayahs) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404])
    async def test_unknown_id(self, status):
        provider, client = make_provider(
            lambda r: httpx.Response(status, json=envelope("not found", code=status))
        )
        async with client:
            with pytest.raises(EntryNotFoundError) as exc_info:
                await provider.get_entry(999)
        assert exc_info.value.context["entry_id"] == 999

    @pytest.mark.asyncio
    async def test_error_envelope_with_not_found_code(self):
        provider, client = make_provider(
            lambda r: httpx.Response(200, json=envelope("bad", code=404, status="NOT FOUND"))
        )
        async with client:
            with pytest.raises(EntryNotFoundError):
                await provider.get_entry(200)


class TestRetries:
    @pytest.mark.asyncio
    async def test_transport_error_without_retries(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        provider, client = make_provider(handler, retries=0)
        async with client:
            with pytest.raises(ApiConnectionError) as exc_info:
                await provider.list_entries()
        assert exc_info.value.retryable
        assert exc_info.value.context["url"] == f"{BASE_URL}/surah"

    @pytest.mark.asyncio
    async def test_transient_error_then_success(self, no_sleep):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ReadTimeout("slow", request=request)
            return httpx.Response(200, json=envelope([surah_payload(1)]))

        provider, client = make_provider(handler, retries=2)
        async with client:
            entries = await provider.list_entries()

        assert len(entries) == 1
        assert len(calls) == 2
        assert no_sleep.await_count == 1

    @pytest.mark.asyncio
    async def test_server_error_is_retried_until_exhausted(self, no_sleep):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        provider, client = make_provider(handler, retries=2)
        async with client:
            with pytest.raises(ApiResponseError) as exc_info:
                await provider.list_entries()

        assert len(calls) == 3
        assert exc_info.value.context["status_code"] == 503

    @pytest.mark.asyncio
    async def test_client_error_is_not_retried(self, no_sleep):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(404)

        provider, client = make_provider(handler, retries=2)
        async with client:
            with pytest.raises(EntryNotFoundError):
                await provider.get_entry(5)

        assert len(calls) == 1
        no_sleep.assert_not_awaited()


class TestProtocolErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("exc_class", [httpx.TooManyRedirects, httpx.DecodingError])
    async def test_wrapped_as_response_error(self, exc_class, no_sleep):
        calls = []

        def handler(request):
            calls.append(request)
            raise exc_class("broken", request=request)

        provider, client = make_provider(handler, retries=2)
        async with client:
            with pytest.raises(ApiResponseError) as exc_info:
                await provider.list_entries()

        assert isinstance(exc_info.value.__cause__, exc_class)
        assert exc_info.value.context["url"] == f"{BASE_URL}/surah"
        assert len(calls) == 1


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_borrowed_client_is_not_closed(self):
        provider, client = make_provider(lambda r: httpx.Response(200, json=envelope([])))
        await provider.aclose()
        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        provider = QuranCloudProvider(BASE_URL)
        async with provider:
            pass
        assert provider._client.is_closed

    def test_base_url_trailing_slash(self):
        provider = QuranCloudProvider(f"{BASE_URL}/", client=httpx.AsyncClient())
        assert provider._url("/surah") == f"{BASE_URL}/surah"


class TestBuildProvider:
    @pytest.mark.asyncio
    async def test_plain_provider_by_default(self):
        provider = build_provider(ProviderSettings(api_url=BASE_URL, timeout=3.0, retries=1, detail_cache_size=0))
        assert isinstance(provider, QuranCloudProvider)
        assert provider.base_url == BASE_URL
        assert provider.timeout == 3.0
        assert provider.retries == 1
        await close_provider(provider)

    @pytest.mark.asyncio
    async def test_cached_provider(self):
        provider = build_provider(ProviderSettings(api_url=BASE_URL, timeout=3.0, retries=1, detail_cache_size=5))
        assert isinstance(provider, CachingProvider)
        assert provider.cache.maxsize == 5
        await close_provider(provider)

    @pytest.mark.asyncio
    async def test_close_provider_without_aclose(self):
        await close_provider(object())
