"""Locale routing.

Every page lives under a leading locale segment: ``/{locale}``,
``/{locale}/products`` and ``/{locale}/products/{id}``.
"""

from dataclasses import dataclass

from andalus.domain.exceptions import NotFoundError
from andalus.infrastructure.config import settings


def supported_locales() -> list[str]:
    """Locales the site is published in."""
    return list(settings.supported_locales)


def require_locale(locale: str) -> str:
    """Validate a locale path segment.

    Args:
        locale: Locale taken from the request path.

    Returns:
        The locale, unchanged.

    Raises:
        NotFoundError: If the locale is not supported.
    """
    if locale not in settings.supported_locales:
        raise NotFoundError("locale", locale)
    return locale


def text_direction(locale: str) -> str:
    """Writing direction for a locale."""
    return "rtl" if locale == "ar" else "ltr"


@dataclass(frozen=True)
class LocalizedRoute:
    """A site path split into its locale segment and the remainder.

    Attributes:
        locale: Leading locale segment, or ``None`` when the path has none.
        rest: Path after the locale segment, without a leading slash.
        trailing_slash: Whether the original path ended with a slash.
    """

    locale: str | None
    rest: str
    trailing_slash: bool = False

    @classmethod
    def parse(cls, path: str) -> "LocalizedRoute":
        """Split a path such as ``/en/products/42``.

        Args:
            path: Absolute site path.

        Returns:
            Parsed route.
        """
        trailing = path.endswith("/") and path != "/"
        segments = [s for s in path.split("/") if s]
        if segments and segments[0] in settings.supported_locales:
            return cls(segments[0], "/".join(segments[1:]), trailing)
        return cls(None, "/".join(segments), trailing)

    def with_locale(self, locale: str) -> "LocalizedRoute":
        """Same route under another locale."""
        return LocalizedRoute(locale, self.rest, self.trailing_slash)

    @property
    def path(self) -> str:
        """Rebuild the path string."""
        segments = [s for s in (self.locale, self.rest) if s]
        path = "/" + "/".join(segments)
        if self.trailing_slash and path != "/":
            path += "/"
        return path
