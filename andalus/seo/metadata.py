"""Page metadata generation.

Builds the title, keywords, canonical and alternate-language URLs, Open
Graph and Twitter card data for every page. Product facts are not put in
Open Graph; they travel in the Product JSON-LD instead.
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Sequence

import structlog

from andalus.catalog.models import Product
from andalus.catalog.service import CatalogService, find_product
from andalus.domain.exceptions import FetchError, NotFoundError
from andalus.i18n import LocalizedRoute, supported_locales, translate
from andalus.infrastructure.config import settings

logger = structlog.get_logger()

PageType = Literal["website", "article", "product"]
Availability = Literal["in_stock", "out_of_stock"]

DEFAULT_IMAGE = "/og-image.jpg"
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630

DEFAULT_KEYWORDS: dict[str, list[str]] = {
    "ar": [
        "مكتبة الأندلس",
        "أدوات مكتبية",
        "قرطاسية",
        "لوازم مدرسية",
        "أقلام",
        "دفاتر",
        "مستلزمات تعليمية",
        "أدوات الكتابة",
        "حقائب مدرسية",
        "السعودية",
    ],
    "en": [
        "Al-Andalus Library",
        "office supplies",
        "stationery",
        "school supplies",
        "pens",
        "notebooks",
        "educational materials",
        "writing tools",
        "school bags",
        "Saudi Arabia",
    ],
}

SECTION_KEYWORDS: dict[str, list[str]] = {
    "ar": [
        "منتجات مكتبية",
        "أدوات الكتابة",
        "قرطاسية",
        "دفاتر",
        "أقلام",
        "لوازم مدرسية",
        "حقائب",
        "أدوات هندسة",
        "مستلزمات تعليمية",
        "أدوات مكتب",
    ],
    "en": [
        "office products",
        "writing tools",
        "stationery",
        "notebooks",
        "pens",
        "school supplies",
        "bags",
        "engineering tools",
        "educational supplies",
        "office tools",
    ],
}

PRODUCT_KEYWORDS: dict[str, list[str]] = {
    "ar": ["أدوات مكتبية", "قرطاسية", "لوازم مدرسية", "مكتبة الأندلس"],
    "en": ["office supplies", "stationery", "school supplies", "Al-Andalus Library"],
}

ROBOTS_DIRECTIVES: dict[str, Any] = {
    "index": True,
    "follow": True,
    "googleBot": {
        "index": True,
        "follow": True,
        "max-video-preview": -1,
        "max-image-preview": "large",
        "max-snippet": -1,
    },
}


def site_name(locale: str) -> str:
    """Site name shown in titles for a locale."""
    return "مكتبة الأندلس" if locale == "ar" else "Al-Andalus Library"


def og_locale(locale: str) -> str:
    """Open Graph locale tag."""
    return "ar_SA" if locale == "ar" else "en_US"


def format_amount(amount: float) -> str:
    """Render a price without a trailing ``.0`` for whole amounts."""
    return str(int(amount)) if float(amount).is_integer() else str(amount)


# ============================================================================
# Metadata Containers
# ============================================================================


@dataclass
class OpenGraph:
    """Open Graph block."""

    title: str
    description: str | None
    url: str
    site_name: str
    locale: str
    type: str
    images: list[dict[str, Any]]
    published_time: str | None = None
    modified_time: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with Open Graph key names."""
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "siteName": self.site_name,
            "locale": self.locale,
            "type": self.type,
            "images": [dict(image) for image in self.images],
        }
        if self.published_time:
            data["publishedTime"] = self.published_time
        if self.modified_time:
            data["modifiedTime"] = self.modified_time
        return data


@dataclass
class TwitterCard:
    """Twitter card block."""

    title: str
    description: str | None
    images: list[str]
    card: str = "summary_large_image"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "card": self.card,
            "title": self.title,
            "description": self.description,
            "images": list(self.images),
        }


@dataclass
class PageMetadata:
    """Metadata for one page."""

    title: str
    description: str | None
    keywords: list[str]
    authors: list[str]
    creator: str
    publisher: str
    metadata_base: str
    canonical: str
    languages: dict[str, str]
    open_graph: OpenGraph
    twitter: TwitterCard
    robots: dict[str, Any] = field(default_factory=lambda: dict(ROBOTS_DIRECTIVES))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the camelCase metadata key names."""
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
            "authors": [{"name": name} for name in self.authors],
            "creator": self.creator,
            "publisher": self.publisher,
            "metadataBase": self.metadata_base,
            "alternates": {
                "canonical": self.canonical,
                "languages": dict(self.languages),
            },
            "openGraph": self.open_graph.to_dict(),
            "twitter": self.twitter.to_dict(),
            "robots": self.robots,
        }


# ============================================================================
# Generator
# ============================================================================


def alternate_urls(canonical: str, base_url: str) -> dict[str, str]:
    """Same-path URLs for every supported locale.

    The locale is swapped in the leading path segment. A URL whose path has
    no leading locale segment is returned unchanged for every locale.

    Args:
        canonical: Canonical page URL.
        base_url: Site base URL the canonical URL starts with.

    Returns:
        Mapping of locale to URL.
    """
    if not canonical.startswith(base_url):
        return {loc: canonical for loc in supported_locales()}

    route = LocalizedRoute.parse(canonical[len(base_url):] or "/")
    if route.locale is None:
        return {loc: canonical for loc in supported_locales()}
    return {loc: f"{base_url}{route.with_locale(loc).path}" for loc in supported_locales()}


def generate_page_metadata(
    locale: str = "ar",
    title: str | None = None,
    description: str | None = None,
    keywords: Sequence[str] = (),
    image: str | None = DEFAULT_IMAGE,
    url: str | None = None,
    type: PageType = "website",
    price: float | None = None,
    currency: str = "SAR",
    availability: Availability = "in_stock",
    published_time: str | None = None,
    modified_time: str | None = None,
    author: str | None = None,
) -> PageMetadata:
    """Generate metadata for a page.

    ``price``, ``currency`` and ``availability`` are accepted for product
    pages but do not change the output: Open Graph stays of type
    ``website`` and product facts go into structured data.

    Args:
        locale: Page locale.
        title: Page title, without the site name.
        description: Page description.
        keywords: Extra keywords appended to the locale defaults.
        image: Share image URL.
        url: Site-relative page path (e.g. ``/en/products``).
        type: Logical page type.
        price: Product price (product pages).
        currency: Price currency (product pages).
        availability: Stock status (product pages).
        published_time: Publication timestamp.
        modified_time: Modification timestamp.
        author: Author name; defaults to the site name.

    Returns:
        Page metadata.
    """
    name = site_name(locale)
    base_url = settings.site_url
    full_url = f"{base_url}{url}" if url else base_url
    image = image or DEFAULT_IMAGE
    display_title = title or name

    all_keywords = [*DEFAULT_KEYWORDS["ar" if locale == "ar" else "en"], *keywords]

    return PageMetadata(
        title=f"{title} | {name}" if title else name,
        description=description,
        keywords=all_keywords,
        authors=[author] if author else [name],
        creator=name,
        publisher=name,
        metadata_base=base_url,
        canonical=full_url,
        languages=alternate_urls(full_url, base_url),
        open_graph=OpenGraph(
            title=display_title,
            description=description,
            url=full_url,
            site_name=name,
            locale=og_locale(locale),
            type="website" if type == "product" else type,
            images=[
                {
                    "url": image,
                    "width": OG_IMAGE_WIDTH,
                    "height": OG_IMAGE_HEIGHT,
                    "alt": display_title,
                }
            ],
            published_time=published_time,
            modified_time=modified_time,
        ),
        twitter=TwitterCard(
            title=display_title,
            description=description,
            images=[image],
        ),
    )


# ============================================================================
# Page Builders
# ============================================================================


def home_metadata(locale: str) -> PageMetadata:
    """Metadata for the locale homepage."""
    return generate_page_metadata(
        locale=locale,
        title=translate(locale, "site_name"),
        description=translate(locale, "home.description"),
        keywords=SECTION_KEYWORDS["ar" if locale == "ar" else "en"],
        url=f"/{locale}",
        type="website",
    )


def products_metadata(locale: str) -> PageMetadata:
    """Metadata for the product listing."""
    return generate_page_metadata(
        locale=locale,
        title=translate(locale, "products.title"),
        description=translate(locale, "products.description"),
        keywords=SECTION_KEYWORDS["ar" if locale == "ar" else "en"],
        url=f"/{locale}/products",
        type="website",
    )


def error_metadata(locale: str, product_id: str) -> PageMetadata:
    """Generic metadata used when a product page cannot be described."""
    return generate_page_metadata(
        locale=locale,
        title=translate(locale, "product.error.title"),
        description=translate(locale, "product.error.description"),
        url=f"/{locale}/products/{product_id}",
    )


def build_product_metadata(
    locale: str, product_id: str, products: Sequence[Product] | None
) -> PageMetadata:
    """Metadata for a product detail page from an already loaded catalog.

    Never raises: an unknown product yields "not found" metadata, and a
    missing catalog (``None``) or malformed product data yields generic
    localized error metadata.

    Args:
        locale: Page locale.
        product_id: Product being viewed.
        products: Loaded catalog, or ``None`` if loading failed.

    Returns:
        Page metadata.
    """
    if products is None:
        return error_metadata(locale, product_id)

    url = f"/{locale}/products/{product_id}"
    try:
        product = find_product(products, product_id)

        price = product.price_sort_key
        image = product.primary_image
        return generate_page_metadata(
            locale=locale,
            title=product.name,
            description=product.description_text
            or translate(locale, "product.discover", name=product.name, price=format_amount(price)),
            keywords=[product.name, *PRODUCT_KEYWORDS["ar" if locale == "ar" else "en"]],
            image=image.url if image else None,
            url=url,
            type="product",
            price=price,
            availability="in_stock" if product.in_stock else "out_of_stock",
            modified_time=product.created_at,
        )
    except NotFoundError:
        return generate_page_metadata(
            locale=locale,
            title=translate(locale, "product.not_found.title"),
            description=translate(locale, "product.not_found.description"),
            url=url,
        )
    except Exception as e:
        logger.warning(
            "Error generating product metadata",
            product_id=product_id,
            locale=locale,
            error=str(e),
        )
        return error_metadata(locale, product_id)


async def product_metadata(
    locale: str, product_id: str, service: CatalogService
) -> PageMetadata:
    """Load the catalog and build product page metadata.

    Args:
        locale: Page locale.
        product_id: Product being viewed.
        service: Catalog service used to load the catalog.

    Returns:
        Page metadata; error metadata if the catalog cannot be fetched.
    """
    try:
        products = await service.load_products()
    except FetchError as e:
        logger.error(
            "Error generating product metadata",
            product_id=product_id,
            status_code=e.status_code,
            error=e.message,
        )
        return error_metadata(locale, product_id)
    return build_product_metadata(locale, product_id, products)
