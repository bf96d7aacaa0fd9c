"""Tests for the CMS client."""

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from andalus.domain.exceptions import FetchError
from andalus.infrastructure.cms_client import (
    PRODUCTS_QUERY,
    CMSClient,
    normalize_products_payload,
    parse_products,
)
from tests.conftest import make_record

ENDPOINT = "https://cms.example.com/graphql"


def json_response(status_code: int, payload) -> httpx.Response:
    """Build an httpx response with a JSON body."""
    return httpx.Response(status_code, json=payload)


class TestNormalizeProductsPayload:
    """Tests for response shape normalization."""

    def test_graphql_envelope(self) -> None:
        """Products are read from data.products."""
        records = [make_record("p-1")]
        assert normalize_products_payload({"data": {"products": records}}) == records

    def test_bare_list(self) -> None:
        """A bare list is accepted as-is."""
        records = [make_record("p-1")]
        assert normalize_products_payload(records) == records

    @pytest.mark.parametrize(
        "payload",
        [{}, {"data": None}, {"data": {}}, {"data": {"products": None}}],
    )
    def test_missing_products_is_empty(self, payload) -> None:
        """Missing products are an empty list, not an error."""
        assert normalize_products_payload(payload) == []

    @pytest.mark.parametrize("payload", ["oops", 42, {"data": {"products": "x"}}, {"data": "x"}])
    def test_unexpected_shape(self, payload) -> None:
        """Unexpected shapes raise FetchError."""
        with pytest.raises(FetchError):
            normalize_products_payload(payload)


class TestParseProducts:
    """Tests for record validation."""

    def test_malformed_records_skipped(self) -> None:
        """Invalid records are dropped, valid ones kept in order."""
        records = [
            make_record("p-1"),
            {"id": "p-2"},
            "not a record",
            make_record("p-3"),
        ]
        assert [p.id for p in parse_products(records)] == ["p-1", "p-3"]


class TestCMSClient:
    """Tests for CMSClient.fetch_products."""

    @pytest.fixture
    def client(self) -> CMSClient:
        """Create a client pointed at a fake endpoint."""
        return CMSClient(ENDPOINT, timeout=5.0)

    def test_client_initialization(self, client: CMSClient) -> None:
        """Client is lazily created."""
        assert client.endpoint == ENDPOINT
        assert client.timeout == 5.0
        assert client._client is None

    @pytest.mark.asyncio
    async def test_fetch_products_success(self, client: CMSClient) -> None:
        """A successful response yields validated products."""
        response = json_response(
            200, {"data": {"products": [make_record("p-1"), make_record("p-2", sale=15)]}}
        )

        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(return_value=response)
            mock_get_client.return_value = mock_http_client

            products = await client.fetch_products()

            assert [p.id for p in products] == ["p-1", "p-2"]
            assert products[1].sale == 15
            mock_http_client.post.assert_awaited_once_with(
                ENDPOINT, json={"query": PRODUCTS_QUERY}, headers=None
            )

    @pytest.mark.asyncio
    async def test_fetch_products_bare_list(self, client: CMSClient) -> None:
        """A bare list response is normalized."""
        response = json_response(200, [make_record("p-1")])

        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(return_value=response)
            mock_get_client.return_value = mock_http_client

            products = await client.fetch_products()
            assert [p.id for p in products] == ["p-1"]

    @pytest.mark.asyncio
    async def test_fetch_products_empty(self, client: CMSClient) -> None:
        """A response without products is an empty catalog."""
        response = json_response(200, {"data": {"products": None}})

        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(return_value=response)
            mock_get_client.return_value = mock_http_client

            assert await client.fetch_products() == []

    @pytest.mark.asyncio
    async def test_fetch_products_http_error(self, client: CMSClient) -> None:
        """Non-success statuses raise FetchError with the status code."""
        response = json_response(502, {"errors": ["bad gateway"]})

        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(return_value=response)
            mock_get_client.return_value = mock_http_client

            with pytest.raises(FetchError) as exc_info:
                await client.fetch_products()

            assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_fetch_products_network_error(self, client: CMSClient) -> None:
        """Network failures raise a generic FetchError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(
                side_effect=httpx.ConnectError("Connection refused")
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(FetchError) as exc_info:
                await client.fetch_products()

            assert exc_info.value.status_code is None
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_fetch_products_timeout(self, client: CMSClient) -> None:
        """Timeouts raise a generic FetchError."""
        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(
                side_effect=httpx.TimeoutException("Connection timeout")
            )
            mock_get_client.return_value = mock_http_client

            with pytest.raises(FetchError):
                await client.fetch_products()

    @pytest.mark.asyncio
    async def test_fetch_products_invalid_json(self, client: CMSClient) -> None:
        """A non-JSON body raises a generic FetchError."""
        response = httpx.Response(200, content=b"<html>oops</html>")

        with patch.object(client, "_get_client", new_callable=AsyncMock) as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.post = AsyncMock(return_value=response)
            mock_get_client.return_value = mock_http_client

            with pytest.raises(FetchError) as exc_info:
                await client.fetch_products()
            assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_fetch_products_without_endpoint(self) -> None:
        """An unset endpoint fails without a request."""
        client = CMSClient(None)
        with pytest.raises(FetchError):
            await client.fetch_products()
        assert client._client is None

    @pytest.mark.asyncio
    async def test_fetch_products_malformed_endpoint(self) -> None:
        """A malformed endpoint URL raises a generic FetchError."""
        client = CMSClient("http://[::1")
        try:
            with pytest.raises(FetchError) as exc_info:
                await client.fetch_products()
        finally:
            await client.close()

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    @pytest.mark.asyncio
    async def test_request_id_forwarded(self) -> None:
        """The fixed GraphQL document is POSTed with the request ID header."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": {"products": [make_record("p-9")]}})

        client = CMSClient(ENDPOINT)
        client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        try:
            products = await client.fetch_products(request_id="req-1")
        finally:
            await client.close()

        assert [p.id for p in products] == ["p-9"]
        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"query": PRODUCTS_QUERY}
        assert seen[0].headers["X-Request-ID"] == "req-1"
        assert client._client is None

    @pytest.mark.asyncio
    async def test_close(self, client: CMSClient) -> None:
        """Closing releases the HTTP client."""
        await client._get_client()
        assert client._client is not None
        await client.close()
        assert client._client is None
