"""Tests for WhatsApp contact links."""

from urllib.parse import parse_qs, unquote, urlparse

from andalus.catalog.contact import (
    buy_product_link,
    help_choosing_link,
    product_info_link,
    whatsapp_link,
)
from andalus.infrastructure.config import settings
from tests.conftest import make_product


def message_of(url: str) -> str:
    """Decode the prefilled message of a WhatsApp link."""
    return parse_qs(urlparse(url).query)["text"][0]


class TestWhatsappLink:
    """Tests for whatsapp_link."""

    def test_uses_configured_number(self) -> None:
        """Default destination is the configured phone number."""
        url = whatsapp_link("hi")
        assert url == f"https://wa.me/{settings.whatsapp_phone}?text=hi"

    def test_explicit_number(self) -> None:
        """A phone number can be passed explicitly."""
        assert whatsapp_link("hi", phone_number="123").startswith("https://wa.me/123?")

    def test_encodes_like_uri_component(self) -> None:
        """Spaces and reserved characters are percent-encoded."""
        url = whatsapp_link("a b&c=d/e?(ok)!")
        assert url.endswith("?text=a%20b%26c%3Dd%2Fe%3F(ok)!")

    def test_encodes_arabic(self) -> None:
        """Arabic text survives a round trip through the URL."""
        url = whatsapp_link("مرحباً")
        assert "مرحباً" not in url
        assert unquote(url.split("text=")[1]) == "مرحباً"


class TestLocalizedLinks:
    """Tests for the prefilled messages."""

    def test_buy_message_includes_quantity(self) -> None:
        """The buy message names the product and quantity."""
        product = make_product("p-1", name="دفتر")
        assert message_of(buy_product_link("ar", product, 3)) == "مرحباً! أنا مهتم بشراء دفتر (الكمية: 3)"

    def test_info_message_english(self) -> None:
        """English locale gets English messages."""
        product = make_product("p-1", name="Ruler")
        assert message_of(product_info_link("en", product)) == (
            "Hello! I would like more information about Ruler"
        )

    def test_help_choosing(self) -> None:
        """Help message is localized."""
        assert message_of(help_choosing_link("ar")) == (
            "مرحباً! أحتاج مساعدة في اختيار المنتجات من مكتبتكم."
        )
