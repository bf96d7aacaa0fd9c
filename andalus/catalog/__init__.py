"""Product Catalog.

Provides the product schema, the listing view-model, catalog lookups
(``andalus.catalog.service``) and WhatsApp contact links
(``andalus.catalog.contact``).
"""

from andalus.catalog.models import Product, ProductDescription, ProductImage
from andalus.catalog.view_model import (
    ITEMS_PER_PAGE,
    CatalogView,
    CatalogViewState,
    PagerWindow,
    SortKey,
    derive_view,
    page_window,
    reduce,
)

__all__ = [
    # Models
    "Product",
    "ProductDescription",
    "ProductImage",
    # View-model
    "ITEMS_PER_PAGE",
    "CatalogView",
    "CatalogViewState",
    "PagerWindow",
    "SortKey",
    "derive_view",
    "page_window",
    "reduce",
]
