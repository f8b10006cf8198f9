"""FastAPI dependency providers backed by the DI container."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from moodtune.application.interfaces.catalog_client import CatalogClient
    from moodtune.application.services.journal_service import MoodJournalService
    from moodtune.config.container import Container
    from moodtune.infrastructure.persistence.database import Database


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_journal_service(request: Request) -> MoodJournalService:
    return get_container(request).journal_service


def get_catalog_client(request: Request) -> CatalogClient:
    return get_container(request).catalog_client


def get_database(request: Request) -> Database:
    return get_container(request).database
