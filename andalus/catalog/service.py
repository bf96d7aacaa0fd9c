"""Catalog service for product operations.

Combines the CMS client with the lookups the pages need. Fetch failures are
absorbed here: pages render an empty catalog instead of an error.
"""

from typing import Sequence

import structlog
from fastapi import Request

from andalus.catalog.models import Product
from andalus.domain.exceptions import FetchError, NotFoundError
from andalus.infrastructure.cms_client import CMSClient, get_cms_client

logger = structlog.get_logger()

RELATED_PRODUCTS_LIMIT = 4
FEATURED_PRODUCTS_LIMIT = 6


def find_product(products: Sequence[Product], product_id: str) -> Product:
    """Find a product by ID.

    Args:
        products: Catalog to search.
        product_id: Product ID.

    Returns:
        Matching product.

    Raises:
        NotFoundError: If no product has that ID.
    """
    for product in products:
        if product.id == product_id:
            return product
    raise NotFoundError("product", product_id)


class CatalogService:
    """Service for catalog operations.

    Example usage:
        service = CatalogService(get_cms_client())
        products = await service.list_products()
        product = service.find_product(products, "prod-1")
    """

    def __init__(self, client: CMSClient, request_id: str | None = None) -> None:
        """Initialize service with a CMS client.

        Args:
            client: CMS client used to fetch the catalog.
            request_id: Correlation ID of the request being served.
        """
        self.client = client
        self.request_id = request_id

    async def load_products(self) -> list[Product]:
        """Fetch the catalog, propagating fetch failures.

        Returns:
            Full product list.

        Raises:
            FetchError: If the catalog cannot be fetched.
        """
        return await self.client.fetch_products(request_id=self.request_id)

    async def list_products(self) -> list[Product]:
        """Fetch the catalog, returning an empty list on failure.

        Returns:
            Full product list, or an empty list if the fetch failed.
        """
        try:
            return await self.load_products()
        except FetchError as e:
            logger.error(
                "Error fetching products",
                status_code=e.status_code,
                error=e.message,
            )
            return []

    def find_product(self, products: Sequence[Product], product_id: str) -> Product:
        """Find a product by ID.

        Raises:
            NotFoundError: If no product has that ID.
        """
        return find_product(products, product_id)

    def related_products(
        self,
        products: Sequence[Product],
        product_id: str,
        limit: int = RELATED_PRODUCTS_LIMIT,
    ) -> list[Product]:
        """Other products to show under a product, in catalog order.

        Args:
            products: Catalog.
            product_id: Product being viewed.
            limit: Maximum number of products.

        Returns:
            Up to ``limit`` products, excluding ``product_id``.
        """
        return [p for p in products if p.id != product_id][:limit]

    def featured_products(
        self,
        products: Sequence[Product],
        limit: int = FEATURED_PRODUCTS_LIMIT,
    ) -> list[Product]:
        """Newest products for the homepage showcase.

        Args:
            products: Catalog.
            limit: Maximum number of products.

        Returns:
            Up to ``limit`` products, newest first.
        """
        return sorted(products, key=lambda p: p.id, reverse=True)[:limit]


def get_catalog_service(request: Request) -> CatalogService:
    """Create a catalog service bound to the shared CMS client.

    The request's correlation ID is forwarded on every CMS call.
    """
    return CatalogService(
        get_cms_client(),
        request_id=getattr(request.state, "request_id", None),
    )
