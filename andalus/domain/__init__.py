"""Domain layer: error taxonomy shared by the catalog and page handlers."""

from andalus.domain.exceptions import DomainError, FetchError, NotFoundError

__all__ = [
    "DomainError",
    "FetchError",
    "NotFoundError",
]
