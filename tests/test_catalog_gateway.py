import httpx
import pytest

from pokescroll.exceptions import DecodeError, FetchError
from pokescroll.gateways.catalog import CatalogClient
from tests.helpers import make_items, mock_async_client


def page_handler(request: httpx.Request) -> httpx.Response:
    page = int(request.url.params["page"])
    limit = int(request.url.params["limit"])
    items = make_items((page - 1) * limit + 1, limit)
    return httpx.Response(200, json=[item.to_dict() for item in items])


class TestCatalogClient:
    @pytest.mark.asyncio
    async def test_requests_page_and_limit(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return page_handler(request)

        client = CatalogClient("http://proxy.test/", client=mock_async_client(handler))

        items = await client.fetch_page(2, 20)

        assert seen[0].url.path == "/api/pokemons"
        assert seen[0].url.params["page"] == "2"
        assert seen[0].url.params["limit"] == "20"
        assert [item.name for item in items][:2] == ["item-21", "item-22"]
        assert len(items) == 20

    @pytest.mark.asyncio
    async def test_empty_array_is_empty_page(self):
        client = CatalogClient("http://proxy.test", client=mock_async_client(lambda r: httpx.Response(200, json=[])))
        assert await client.fetch_page(99, 20) == []

    @pytest.mark.asyncio
    async def test_error_status_raises_fetch_error(self):
        client = CatalogClient(
            "http://proxy.test", client=mock_async_client(lambda r: httpx.Response(502, json={"detail": "x"}))
        )

        with pytest.raises(FetchError) as exc_info:
            await client.fetch_page(1, 20)

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_transport_failure_raises_fetch_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = CatalogClient("http://proxy.test", client=mock_async_client(handler))

        with pytest.raises(FetchError):
            await client.fetch_page(1, 20)

    @pytest.mark.asyncio
    async def test_invalid_json_raises_decode_error(self):
        client = CatalogClient(
            "http://proxy.test", client=mock_async_client(lambda r: httpx.Response(200, content=b"<html>"))
        )

        with pytest.raises(DecodeError):
            await client.fetch_page(1, 20)

    @pytest.mark.asyncio
    async def test_object_body_raises_decode_error(self):
        client = CatalogClient(
            "http://proxy.test", client=mock_async_client(lambda r: httpx.Response(200, json={"results": []}))
        )

        with pytest.raises(DecodeError):
            await client.fetch_page(1, 20)

    @pytest.mark.asyncio
    async def test_bad_page_number_rejected(self):
        client = CatalogClient("http://proxy.test", client=mock_async_client(page_handler))

        with pytest.raises(ValueError):
            await client.fetch_page(0, 20)

    @pytest.mark.asyncio
    async def test_aclose_leaves_injected_client_open(self):
        http_client = mock_async_client(page_handler)
        client = CatalogClient("http://proxy.test", client=http_client)

        await client.aclose()

        assert not http_client.is_closed
        await http_client.aclose()
