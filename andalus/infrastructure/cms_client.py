"""CMS HTTP client for fetching the product catalog.

Issues the fixed GraphQL query against the configured CMS endpoint and
turns the response into validated ``Product`` models.
"""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from andalus.catalog.models import Product
from andalus.domain.exceptions import FetchError
from andalus.infrastructure.config import settings

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

PRODUCTS_QUERY = """query {
  products {
    id
    name
    images {
      id
      url
      fileName
      width
      height
    }
    price
    sale
    createdAt
    inStock
    description{
      text
    }
  }
}"""


# ============================================================================
# Response Normalization
# ============================================================================


def normalize_products_payload(payload: Any) -> list[dict[str, Any]]:
    """Extract raw product records from a CMS response.

    Accepts both ``{"data": {"products": [...]}}`` and a bare list. Missing
    or null ``data``/``products`` yield an empty list.

    Args:
        payload: Decoded JSON response.

    Returns:
        Raw product records.

    Raises:
        FetchError: If the payload has an unexpected shape.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        raise FetchError("Unexpected CMS response shape")

    data = payload.get("data") or {}
    if not isinstance(data, dict):
        raise FetchError("Unexpected CMS response shape")

    products = data.get("products") or []
    if not isinstance(products, list):
        raise FetchError("Unexpected CMS response shape")
    return products


def parse_products(records: list[Any]) -> list[Product]:
    """Validate raw records, dropping malformed ones.

    Args:
        records: Raw product records.

    Returns:
        Valid products in their original order.
    """
    products: list[Product] = []
    for record in records:
        try:
            products.append(Product.model_validate(record))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed product record",
                product_id=record.get("id") if isinstance(record, dict) else None,
                error_count=e.error_count(),
            )
    return products


# ============================================================================
# CMS Client
# ============================================================================


class CMSClient:
    """HTTP client for the headless CMS GraphQL endpoint.

    Every call re-fetches the whole catalog; there is no caching and no
    retry policy. One client is shared by all requests, so the caller's
    request ID is sent per call rather than as a default header.
    """

    def __init__(self, endpoint: str | None, timeout: float = 10.0) -> None:
        """Initialize CMS client.

        Args:
            endpoint: GraphQL endpoint URL.
            timeout: Request timeout in seconds.
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_products(self, request_id: str | None = None) -> list[Product]:
        """Fetch the full product catalog.

        Args:
            request_id: Correlation ID forwarded as ``X-Request-ID``.

        Returns:
            Validated products, in CMS order.

        Raises:
            FetchError: On non-success status, network or parsing failure,
                or a malformed endpoint URL.
        """
        if not self.endpoint:
            logger.warning("CMS endpoint is not configured")
            raise FetchError("Failed to fetch products: CMS endpoint is not configured")

        headers = {REQUEST_ID_HEADER: request_id} if request_id else None
        try:
            client = await self._get_client()
            response = await client.post(
                self.endpoint, json={"query": PRODUCTS_QUERY}, headers=headers
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(
                "CMS request failed",
                endpoint=self.endpoint,
                error=str(e),
            )
            raise FetchError("Failed to fetch products") from e

        if not response.is_success:
            logger.error(
                "CMS returned an error status",
                endpoint=self.endpoint,
                status_code=response.status_code,
            )
            raise FetchError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("CMS response is not valid JSON", endpoint=self.endpoint)
            raise FetchError("Failed to fetch products") from e

        products = parse_products(normalize_products_payload(payload))
        logger.debug("Fetched product catalog", product_count=len(products))
        return products


# Global client instance
_cms_client: CMSClient | None = None


def get_cms_client() -> CMSClient:
    """Get the CMS client singleton.

    Returns:
        CMSClient instance.
    """
    global _cms_client
    if _cms_client is None:
        _cms_client = CMSClient(settings.cms_url, timeout=settings.cms_timeout)
    return _cms_client


async def close_cms_client() -> None:
    """Close and drop the CMS client singleton."""
    global _cms_client
    if _cms_client is not None:
        await _cms_client.close()
        _cms_client = None
