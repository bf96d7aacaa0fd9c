"""Shared fixtures for catalog site tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from andalus.catalog.models import Product
from andalus.catalog.service import CatalogService, get_catalog_service
from andalus.infrastructure.cms_client import CMSClient
from andalus.main import app


def make_record(
    id: str,
    name: str = "Notebook",
    price: float = 100,
    sale: float | None = None,
    in_stock: bool = True,
    created_at: str = "2024-01-01T00:00:00.000Z",
    images: list[dict[str, Any]] | None = None,
    description: str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw CMS product record."""
    record: dict[str, Any] = {
        "id": id,
        "name": name,
        "price": price,
        "sale": sale,
        "inStock": in_stock,
        "createdAt": created_at,
        "images": images or [],
        "description": {"text": description} if description is not None else None,
    }
    record.update(extra)
    return record


def make_product(id: str, **kwargs: Any) -> Product:
    """Build a validated Product."""
    return Product.model_validate(make_record(id, **kwargs))


@pytest.fixture
def sample_products() -> list[Product]:
    """Small catalog with a discounted and an out-of-stock product."""
    return [
        make_product(
            "p-001",
            name="Blue Pen",
            price=5,
            images=[
                {"id": "img-1", "url": "https://cdn.example.com/pen.jpg", "fileName": "pen.jpg", "width": 800, "height": 600},
                {"id": "img-2", "url": "https://cdn.example.com/pen-2.jpg", "fileName": "pen-2.jpg", "width": 800, "height": 600},
            ],
            description="Smooth ballpoint pen",
        ),
        make_product("p-002", name="School Bag", price=500, sale=10),
        make_product("p-003", name="Geometry Set", price=45, in_stock=False),
        make_product("p-004", name="Notebook A4", price=20),
        make_product("p-005", name="Pencil Case", price=30),
    ]


@pytest.fixture
def many_products() -> list[Product]:
    """Catalog spanning several listing pages."""
    return [make_product(f"p-{i:03d}", name=f"Item {i:03d}", price=i) for i in range(1, 31)]


def mock_cms_client(
    products: list[Product] | None = None,
    error: Exception | None = None,
) -> MagicMock:
    """Create a mock CMS client returning ``products`` or raising ``error``."""
    client = MagicMock(spec=CMSClient)
    client.fetch_products = AsyncMock(return_value=products or [], side_effect=error)
    client.close = AsyncMock()
    return client


@pytest.fixture
def catalog_client():
    """Factory for a test client whose catalog is served by a mock CMS client."""

    def _make(products: list[Product] | None = None, error: Exception | None = None) -> TestClient:
        service = CatalogService(mock_cms_client(products, error))
        app.dependency_overrides[get_catalog_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
