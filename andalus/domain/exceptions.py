"""Domain exceptions.

Errors raised while loading the catalog or resolving pages. Page handlers
catch these at the boundary and turn them into fail-soft views.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class FetchError(DomainError):
    """Raised when the product catalog cannot be fetched from the CMS.

    Carries the HTTP status code when the CMS answered with a non-success
    status, and ``None`` for network or parsing failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize fetch error.

        Args:
            message: Human-readable error message.
            status_code: HTTP status returned by the CMS, if any.
        """
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code


class NotFoundError(DomainError):
    """Raised when a locale or product does not exist."""

    def __init__(self, resource: str, identifier: str) -> None:
        """Initialize not found error.

        Args:
            resource: Kind of resource (e.g. "locale", "product").
            identifier: The identifier that was looked up.
        """
        super().__init__(
            f"{resource.capitalize()} not found: {identifier}",
            details={"resource": resource, "identifier": identifier},
        )
        self.resource = resource
        self.identifier = identifier
