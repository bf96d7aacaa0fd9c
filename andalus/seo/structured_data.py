"""Schema.org JSON-LD documents."""

from typing import Any, Literal

from andalus.catalog.models import Product
from andalus.infrastructure.config import settings

StructuredDataKind = Literal["organization", "product", "website"]

SCHEMA_CONTEXT = "https://schema.org"
ORGANIZATION_NAME = "مكتبة الأندلس"
ORGANIZATION_ALTERNATE_NAME = "Al-Andalus Library"
PRICE_CURRENCY = "SAR"


def _organization() -> dict[str, Any]:
    base_url = settings.site_url
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": ORGANIZATION_NAME,
        "alternateName": ORGANIZATION_ALTERNATE_NAME,
        "url": base_url,
        "logo": f"{base_url}/logo.png",
        "sameAs": [],
        "contactPoint": {
            "@type": "ContactPoint",
            "contactType": "customer service",
            "availableLanguage": ["Arabic", "English"],
        },
        "address": {
            "@type": "PostalAddress",
            "addressCountry": "SA",
        },
    }


def _product(data: Product | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, Product):
        data = data.to_dict()

    description = data.get("description")
    if isinstance(description, dict):
        description = description.get("text")

    document: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Product",
        "name": data.get("name"),
        "description": description,
        "image": [image["url"] for image in data.get("images") or []],
        "brand": {
            "@type": "Brand",
            "name": ORGANIZATION_NAME,
        },
        "offers": {
            "@type": "Offer",
            "price": data.get("price"),
            "priceCurrency": PRICE_CURRENCY,
            "availability": (
                "https://schema.org/InStock"
                if data.get("inStock")
                else "https://schema.org/OutOfStock"
            ),
            "seller": {
                "@type": "Organization",
                "name": ORGANIZATION_NAME,
            },
        },
    }

    rating = data.get("rating")
    if rating:
        document["aggregateRating"] = {
            "@type": "AggregateRating",
            "ratingValue": rating.get("average"),
            "reviewCount": rating.get("count"),
        }
    return document


def _website() -> dict[str, Any]:
    base_url = settings.site_url
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": ORGANIZATION_NAME,
        "alternateName": ORGANIZATION_ALTERNATE_NAME,
        "url": base_url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": f"{base_url}/products?search={{search_term_string}}",
            },
            "query-input": "required name=search_term_string",
        },
        "inLanguage": ["ar", "en"],
    }


def generate_structured_data(
    kind: StructuredDataKind | str,
    data: Product | dict[str, Any] | None = None,
) -> dict[str, Any] | None:
    """Build a JSON-LD document.

    Args:
        kind: "organization", "product" or "website".
        data: Product (model or CMS record) for the "product" kind. A
            ``rating`` entry with ``average`` and ``count`` adds an
            aggregate rating.

    Returns:
        JSON-LD document, or ``None`` for an unknown kind.
    """
    if kind == "organization":
        return _organization()
    if kind == "product":
        return _product(data or {})
    if kind == "website":
        return _website()
    return None
