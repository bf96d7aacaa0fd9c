"""SEO outputs: page metadata, JSON-LD, sitemap and robots policy."""

from andalus.seo.metadata import (
    PageMetadata,
    build_product_metadata,
    generate_page_metadata,
    home_metadata,
    product_metadata,
    products_metadata,
)
from andalus.seo.robots import render_robots_txt
from andalus.seo.sitemap import SitemapEntry, build_sitemap, render_sitemap_xml
from andalus.seo.structured_data import generate_structured_data

__all__ = [
    "PageMetadata",
    "SitemapEntry",
    "build_product_metadata",
    "build_sitemap",
    "generate_page_metadata",
    "generate_structured_data",
    "home_metadata",
    "product_metadata",
    "products_metadata",
    "render_robots_txt",
    "render_sitemap_xml",
]
