"""WhatsApp contact links.

All purchase intent is routed to a WhatsApp chat with a prefilled message.
"""

from urllib.parse import quote

from andalus.catalog.models import Product
from andalus.i18n import translate
from andalus.infrastructure.config import settings

WHATSAPP_BASE_URL = "https://wa.me"

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def whatsapp_link(message: str, phone_number: str | None = None) -> str:
    """Build a WhatsApp deep link with a prefilled message.

    Args:
        message: Message text.
        phone_number: Destination number; defaults to the configured one.

    Returns:
        ``https://wa.me/{phone}?text={message}`` with the message URL-encoded.
    """
    phone = phone_number or settings.whatsapp_phone
    return f"{WHATSAPP_BASE_URL}/{phone}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"


def general_enquiry_link(locale: str) -> str:
    """Link for a general enquiry."""
    return whatsapp_link(translate(locale, "whatsapp.general"))


def help_choosing_link(locale: str) -> str:
    """Link asking for help choosing products."""
    return whatsapp_link(translate(locale, "whatsapp.help_choosing"))


def buy_product_link(locale: str, product: Product, quantity: int = 1) -> str:
    """Link expressing intent to buy a quantity of a product."""
    return whatsapp_link(
        translate(locale, "whatsapp.buy", name=product.name, quantity=quantity)
    )


def product_info_link(locale: str, product: Product) -> str:
    """Link asking for more information about a product."""
    return whatsapp_link(translate(locale, "whatsapp.more_info", name=product.name))
