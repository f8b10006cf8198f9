"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, identifier: str | int, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id '{identifier}' not found"
        super().__init__(msg, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class CatalogError(DomainError):
    """Base class for failures talking to the upstream music catalog."""


class AuthenticationError(CatalogError):
    """Raised when the client-credentials token exchange fails."""

    def __init__(self, status_text: str, message: str | None = None) -> None:
        msg = message or f"Catalog authentication failed: {status_text}"
        super().__init__(msg, code="CATALOG_AUTH_FAILED")
        self.status_text = status_text


class UpstreamRequestError(CatalogError):
    """Raised when a catalog API call returns a non-2xx status or cannot be sent."""

    def __init__(
        self,
        endpoint: str,
        status_code: int | None = None,
        status_text: str = "",
        message: str | None = None,
    ) -> None:
        if message is None:
            if status_code is None:
                message = f"Catalog request to {endpoint} failed: {status_text}"
            else:
                message = f"Catalog request to {endpoint} failed: {status_code} {status_text}"
        super().__init__(message, code="CATALOG_REQUEST_FAILED")
        self.endpoint = endpoint
        self.status_code = status_code
        self.status_text = status_text
