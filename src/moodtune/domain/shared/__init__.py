"""
Shared Domain Kernel

Contains types, messages and exceptions shared across all bounded contexts.
"""

from moodtune.domain.shared.exceptions import (
    AuthenticationError,
    CatalogError,
    DomainError,
    EntityNotFoundError,
    UpstreamRequestError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "CatalogError",
    "AuthenticationError",
    "UpstreamRequestError",
]
