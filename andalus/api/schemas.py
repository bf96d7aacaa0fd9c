"""API schemas for the catalog site.

Pydantic models for page payloads. Each page payload carries the data a
renderer needs plus the page metadata and JSON-LD documents.
"""

from typing import Any

from pydantic import BaseModel, Field

from andalus.catalog.models import Product
from andalus.infrastructure.config import settings


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[Any] = Field(default_factory=list, description="Additional error details")
    request_id: str | None = Field(default=None, description="Request ID for correlation")


class PageSchema(BaseModel):
    """Fields shared by every page payload."""

    locale: str = Field(..., description="Page locale")
    dir: str = Field(..., description="Text direction (rtl/ltr)")
    metadata: dict[str, Any] = Field(..., description="Page metadata")
    structured_data: list[dict[str, Any]] = Field(
        default_factory=list, description="JSON-LD documents"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ImageSchema(BaseModel):
    """Product gallery image."""

    id: str
    url: str
    file_name: str | None = None
    width: int | None = None
    height: int | None = None


class ProductSchema(BaseModel):
    """Product as shown on cards and the detail page."""

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Base price")
    sale: float | None = Field(None, description="Discount percentage")
    has_discount: bool = Field(..., description="Whether a discount applies")
    effective_price: float = Field(..., description="Price after discount")
    savings: float = Field(..., description="Amount saved against the base price")
    currency: str = Field(default="SAR", description="Currency code")
    in_stock: bool = Field(..., description="Availability")
    images: list[ImageSchema] = Field(default_factory=list, description="Gallery images")
    description: str | None = Field(None, description="Plain-text description")
    created_at: str = Field(..., description="Creation timestamp")
    url: str = Field(..., description="Detail page path")


def product_to_schema(product: Product, locale: str) -> ProductSchema:
    """Convert a Product model to its page representation."""
    return ProductSchema(
        id=product.id,
        name=product.name,
        price=product.price,
        sale=product.sale,
        has_discount=product.has_discount,
        effective_price=product.effective_price,
        savings=product.savings,
        in_stock=product.in_stock,
        images=[
            ImageSchema(
                id=image.id,
                url=image.url,
                file_name=image.file_name,
                width=image.width,
                height=image.height,
            )
            for image in product.images
        ],
        description=product.description_text,
        created_at=product.created_at,
        url=f"/{locale}/products/{product.id}",
    )


# ============================================================================
# Page Schemas
# ============================================================================


class HomePageResponse(PageSchema):
    """Homepage payload."""

    featured_products: list[ProductSchema] = Field(default_factory=list)
    whatsapp_url: str = Field(..., description="General enquiry WhatsApp link")


class PagerSchema(BaseModel):
    """Page buttons."""

    pages: list[int]
    show_last_page_link: bool
    last_page: int


class ListingStateSchema(BaseModel):
    """Effective listing state after applying the request."""

    search_query: str
    sort_key: str
    page: int


class ProductListingResponse(PageSchema):
    """Product listing payload."""

    state: ListingStateSchema
    items: list[ProductSchema]
    total_items: int
    total_pages: int
    page_size: int
    start_index: int
    end_index: int
    is_empty: bool = Field(..., description="No product matched the search")
    has_next: bool
    has_previous: bool
    pager: PagerSchema
    message: str | None = Field(None, description="Localized no-results message")
    whatsapp_url: str | None = Field(None, description="Help-choosing WhatsApp link")


class ProductPageResponse(PageSchema):
    """Product detail payload."""

    found: bool = Field(..., description="Whether the product exists")
    message: str | None = Field(None, description="Localized not-found message")
    product: ProductSchema | None = None
    quantity: int = 1
    related_products: list[ProductSchema] = Field(default_factory=list)
    whatsapp_buy_url: str | None = None
    whatsapp_info_url: str | None = None
    share_url: str | None = None


def share_url(locale: str, product_id: str) -> str:
    """Absolute product URL used for sharing and QR codes."""
    return f"{settings.site_url}/{locale}/products/{product_id}"
