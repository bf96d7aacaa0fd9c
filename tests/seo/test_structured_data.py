"""Tests for JSON-LD documents."""

from andalus.seo.structured_data import generate_structured_data
from tests.conftest import make_product, make_record


class TestStructuredData:
    """Tests for generate_structured_data."""

    def test_organization(self) -> None:
        """Organization document names the library in both languages."""
        document = generate_structured_data("organization")
        assert document["@type"] == "Organization"
        assert document["name"] == "مكتبة الأندلس"
        assert document["alternateName"] == "Al-Andalus Library"
        assert document["logo"] == "https://alandalus-library.com/logo.png"
        assert document["address"]["addressCountry"] == "SA"

    def test_website_search_action(self) -> None:
        """Website document declares the search entry point."""
        document = generate_structured_data("website")
        target = document["potentialAction"]["target"]["urlTemplate"]
        assert target == "https://alandalus-library.com/products?search={search_term_string}"
        assert document["inLanguage"] == ["ar", "en"]

    def test_product_in_stock(self, sample_products) -> None:
        """In-stock products advertise InStock availability."""
        document = generate_structured_data("product", sample_products[0])
        assert document["@type"] == "Product"
        assert document["name"] == "Blue Pen"
        assert document["description"] == "Smooth ballpoint pen"
        assert document["image"] == [
            "https://cdn.example.com/pen.jpg",
            "https://cdn.example.com/pen-2.jpg",
        ]
        assert document["offers"]["availability"] == "https://schema.org/InStock"
        assert document["offers"]["priceCurrency"] == "SAR"
        assert "aggregateRating" not in document

    def test_product_out_of_stock(self) -> None:
        """Out-of-stock products advertise OutOfStock availability."""
        document = generate_structured_data("product", make_product("p-1", in_stock=False))
        assert document["offers"]["availability"] == "https://schema.org/OutOfStock"

    def test_product_with_rating(self) -> None:
        """A rating adds an aggregate rating."""
        record = make_record("p-1", rating={"average": 4.5, "count": 12})
        document = generate_structured_data("product", record)
        assert document["aggregateRating"] == {
            "@type": "AggregateRating",
            "ratingValue": 4.5,
            "reviewCount": 12,
        }

    def test_unknown_kind(self) -> None:
        """Unknown kinds produce nothing."""
        assert generate_structured_data("breadcrumbs") is None

