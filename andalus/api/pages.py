"""Page endpoints.

Serves the homepage, product listing and product detail payloads under a
leading locale segment. Catalog fetch failures never surface as errors:
pages render with an empty catalog instead.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query

from andalus.api.schemas import (
    ErrorResponse,
    HomePageResponse,
    ListingStateSchema,
    PagerSchema,
    ProductListingResponse,
    ProductPageResponse,
    product_to_schema,
    share_url,
)
from andalus.catalog.contact import (
    buy_product_link,
    general_enquiry_link,
    help_choosing_link,
    product_info_link,
)
from andalus.catalog.service import CatalogService, get_catalog_service
from andalus.catalog.view_model import (
    CatalogViewState,
    GoToPage,
    SetSearch,
    SetSort,
    SortKey,
    derive_view,
    reduce,
)
from andalus.domain.exceptions import FetchError, NotFoundError
from andalus.i18n import require_locale, text_direction, translate
from andalus.seo.metadata import build_product_metadata, home_metadata, products_metadata
from andalus.seo.structured_data import generate_structured_data

logger = structlog.get_logger()

router = APIRouter(tags=["Pages"])


# ============================================================================
# Dependencies
# ============================================================================


def get_locale(locale: str) -> str:
    """Validate the locale path segment."""
    return require_locale(locale)


def site_structured_data() -> list[dict]:
    """Organization and WebSite JSON-LD included on every locale page."""
    return [
        generate_structured_data("organization"),
        generate_structured_data("website"),
    ]


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "/{locale}",
    response_model=HomePageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Homepage",
)
async def home_page(
    locale: Annotated[str, Depends(get_locale)],
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> HomePageResponse:
    """Homepage with the newest products and a WhatsApp call to action."""
    products = await service.list_products()

    return HomePageResponse(
        locale=locale,
        dir=text_direction(locale),
        metadata=home_metadata(locale).to_dict(),
        structured_data=site_structured_data(),
        featured_products=[
            product_to_schema(p, locale) for p in service.featured_products(products)
        ],
        whatsapp_url=general_enquiry_link(locale),
    )


@router.get(
    "/{locale}/products",
    response_model=ProductListingResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Product listing",
)
async def products_page(
    locale: Annotated[str, Depends(get_locale)],
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    search: Annotated[str, Query(max_length=200)] = "",
    sort: SortKey = SortKey.NEWEST,
    page: Annotated[int, Query(ge=1)] = 1,
) -> ProductListingResponse:
    """Searchable, sortable, paginated product listing.

    Args:
        locale: Page locale.
        service: Catalog service.
        search: Case-insensitive name filter.
        sort: Ordering.
        page: Page number (1-based).

    Returns:
        Listing payload for the requested page.
    """
    products = await service.list_products()

    state = CatalogViewState()
    state = reduce(state, SetSearch(search))
    state = reduce(state, SetSort(sort))
    state = reduce(state, GoToPage(page))
    view = derive_view(products, state)

    return ProductListingResponse(
        locale=locale,
        dir=text_direction(locale),
        metadata=products_metadata(locale).to_dict(),
        structured_data=site_structured_data(),
        state=ListingStateSchema(**state.to_dict()),
        items=[product_to_schema(p, locale) for p in view.items],
        total_items=view.total_items,
        total_pages=view.total_pages,
        page_size=view.page_size,
        start_index=view.start_index,
        end_index=view.end_index,
        is_empty=view.is_empty,
        has_next=view.has_next,
        has_previous=view.has_previous,
        pager=PagerSchema(**view.pager.to_dict()),
        message=translate(locale, "products.no_results") if view.is_empty else None,
        whatsapp_url=help_choosing_link(locale) if view.items else None,
    )


@router.get(
    "/{locale}/products/{product_id}",
    response_model=ProductPageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Product detail",
)
async def product_page(
    locale: Annotated[str, Depends(get_locale)],
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    quantity: Annotated[int, Query(ge=1)] = 1,
) -> ProductPageResponse:
    """Product detail with related products and WhatsApp purchase links.

    An unknown product renders a localized not-found view rather than an
    HTTP error.

    Args:
        locale: Page locale.
        product_id: Product ID.
        service: Catalog service.
        quantity: Quantity put in the purchase message.

    Returns:
        Product page payload.
    """
    try:
        products = await service.load_products()
    except FetchError as e:
        logger.error(
            "Error fetching product",
            product_id=product_id,
            status_code=e.status_code,
            error=e.message,
        )
        products = None

    metadata = build_product_metadata(locale, product_id, products).to_dict()

    try:
        product = service.find_product(products or [], product_id)
    except NotFoundError:
        return ProductPageResponse(
            locale=locale,
            dir=text_direction(locale),
            metadata=metadata,
            structured_data=site_structured_data(),
            found=False,
            message=translate(locale, "product.not_found.description"),
        )

    return ProductPageResponse(
        locale=locale,
        dir=text_direction(locale),
        metadata=metadata,
        structured_data=[*site_structured_data(), generate_structured_data("product", product)],
        found=True,
        product=product_to_schema(product, locale),
        quantity=quantity,
        related_products=[
            product_to_schema(p, locale) for p in service.related_products(products, product_id)
        ],
        whatsapp_buy_url=buy_product_link(locale, product, quantity),
        whatsapp_info_url=product_info_link(locale, product),
        share_url=share_url(locale, product.id),
    )
