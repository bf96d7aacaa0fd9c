"""Sitemap generation.

Lists the locale roots, the listing pages and one URL per product and
locale. A failed catalog fetch leaves only the static pages.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable
from xml.sax.saxutils import escape

import structlog

from andalus.catalog.models import Product
from andalus.domain.exceptions import FetchError
from andalus.i18n import supported_locales

logger = structlog.get_logger()

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class SitemapEntry:
    """One ``<url>`` element."""

    url: str
    last_modified: str
    change_frequency: str
    priority: float

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "url": self.url,
            "lastModified": self.last_modified,
            "changeFrequency": self.change_frequency,
            "priority": self.priority,
        }


def static_entries(base_url: str, now: datetime) -> list[SitemapEntry]:
    """Locale roots and listing pages."""
    timestamp = now.isoformat()
    locales = supported_locales()
    roots = [SitemapEntry(f"{base_url}/{loc}", timestamp, "daily", 1.0) for loc in locales]
    listings = [
        SitemapEntry(f"{base_url}/{loc}/products", timestamp, "daily", 0.8) for loc in locales
    ]
    return roots + listings


def product_entries(base_url: str, products: list[Product]) -> list[SitemapEntry]:
    """One entry per product and locale."""
    return [
        SitemapEntry(
            f"{base_url}/{loc}/products/{product.id}",
            product.last_modified,
            "weekly",
            0.6,
        )
        for product in products
        for loc in supported_locales()
    ]


async def build_sitemap(
    load_products: Callable[[], Awaitable[list[Product]]],
    base_url: str | None,
    now: datetime | None = None,
) -> list[SitemapEntry]:
    """Build sitemap entries.

    Args:
        load_products: Coroutine function returning the catalog; may raise
            ``FetchError``.
        base_url: Public site base URL.
        now: Timestamp used for the static pages.

    Returns:
        Static entries followed by product entries.
    """
    # An unset base URL degrades to the literal "None" rather than failing.
    base = f"{base_url}"
    now = now or datetime.now(timezone.utc)

    entries = static_entries(base, now)
    try:
        products = await load_products()
    except FetchError as e:
        logger.error(
            "Error generating sitemap for products",
            status_code=e.status_code,
            error=e.message,
        )
        return entries

    return entries + product_entries(base, products)


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    """Render entries as a sitemaps.org ``urlset`` document."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
    ]
    for entry in entries:
        lines.extend(
            [
                "<url>",
                f"<loc>{escape(entry.url)}</loc>",
                f"<lastmod>{escape(entry.last_modified)}</lastmod>",
                f"<changefreq>{entry.change_frequency}</changefreq>",
                f"<priority>{entry.priority}</priority>",
                "</url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
