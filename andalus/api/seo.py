"""robots.txt and sitemap.xml endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from andalus.catalog.service import CatalogService, get_catalog_service
from andalus.infrastructure.config import settings
from andalus.seo.robots import render_robots_txt
from andalus.seo.sitemap import build_sitemap, render_sitemap_xml

router = APIRouter(tags=["SEO"])


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt() -> str:
    """Crawl policy with the sitemap location."""
    return render_robots_txt(settings.base_url or settings.fallback_base_url)


@router.get("/sitemap.xml")
async def sitemap_xml(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> Response:
    """Sitemap of locale roots, listings and product pages."""
    entries = await build_sitemap(service.load_products, settings.base_url)
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")
