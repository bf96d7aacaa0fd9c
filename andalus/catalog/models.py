"""Pydantic models for the product catalog.

Products are owned by the CMS and are read-only here. Field aliases follow
the GraphQL field names so raw CMS records validate directly.
"""

from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Base model accepting both camelCase aliases and snake_case names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ProductImage(CatalogModel):
    """Gallery image attached to a product."""

    id: str = Field(..., description="Image asset ID")
    url: str = Field(..., description="Public image URL")
    file_name: str | None = Field(None, alias="fileName", description="Original file name")
    width: int | None = Field(None, description="Width in pixels")
    height: int | None = Field(None, description="Height in pixels")


class ProductDescription(CatalogModel):
    """Rich-text description; only the plain text is requested."""

    text: str | None = None


class Product(CatalogModel):
    """Product record as served by the CMS.

    Attributes:
        id: Opaque stable identifier, used for routing and as the sort key
            of the newest/oldest orderings.
        name: Display name.
        price: Base price.
        sale: Optional discount percentage (0-100) off ``price``.
        images: Gallery images in display order.
        in_stock: Availability flag.
        created_at: Creation timestamp string.
        updated_at: Optional update timestamp string.
        description: Optional description.
    """

    id: str
    name: str
    price: float
    sale: float | None = Field(None, ge=0, le=100)
    images: list[ProductImage] = Field(default_factory=list)
    in_stock: bool = Field(False, alias="inStock")
    created_at: str = Field(..., alias="createdAt")
    updated_at: str | None = Field(None, alias="updatedAt")
    description: ProductDescription | None = None

    @property
    def has_discount(self) -> bool:
        """Whether a positive discount percentage is set."""
        return bool(self.sale) and self.sale > 0

    @property
    def effective_price(self) -> float:
        """Price after applying the discount percentage."""
        if not self.has_discount:
            return self.price
        return self.price * (100 - self.sale) / 100

    @property
    def savings(self) -> float:
        """Amount saved against the base price."""
        return self.price - self.effective_price

    @property
    def price_sort_key(self) -> float:
        """Key used by the price orderings: raw ``sale`` when set, else ``price``."""
        return self.sale or self.price

    @property
    def description_text(self) -> str | None:
        """Plain-text description, if any."""
        return self.description.text if self.description else None

    @property
    def primary_image(self) -> ProductImage | None:
        """First gallery image, if any."""
        return self.images[0] if self.images else None

    @property
    def last_modified(self) -> str:
        """Update timestamp, falling back to the creation timestamp."""
        return self.updated_at or self.created_at

    def to_dict(self) -> dict:
        """Convert to dictionary using the CMS field names.

        Returns:
            Dictionary representation.
        """
        return self.model_dump(by_alias=True)
