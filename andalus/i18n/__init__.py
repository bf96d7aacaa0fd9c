"""Locale routing and localized messages."""

from andalus.i18n.messages import MESSAGES, translate
from andalus.i18n.routing import LocalizedRoute, require_locale, supported_locales, text_direction

__all__ = [
    "MESSAGES",
    "LocalizedRoute",
    "require_locale",
    "supported_locales",
    "text_direction",
    "translate",
]
