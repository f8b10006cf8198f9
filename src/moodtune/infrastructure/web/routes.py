"""HTTP routes under ``/api``."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from moodtune.application.interfaces.catalog_client import CatalogClient
from moodtune.application.services.journal_service import MoodJournalService
from moodtune.domain.shared.datetime_utils import utcnow
from moodtune.infrastructure.persistence.database import Database
from moodtune.infrastructure.web.dependencies import (
    get_catalog_client,
    get_database,
    get_journal_service,
)
from moodtune.infrastructure.web.schemas import (
    AffirmationResponse,
    GenresResponse,
    HealthResponse,
    MoodEntryCreate,
    MoodEntryResponse,
    MoodEntryWithReflectionResponse,
    PlaylistCreate,
    PlaylistResponse,
    RecommendationResponse,
    ReflectionResponse,
)

router = APIRouter(prefix="/api")

JournalDep = Annotated[MoodJournalService, Depends(get_journal_service)]


@router.post("/mood-entries", response_model=MoodEntryWithReflectionResponse)
async def create_mood_entry(body: MoodEntryCreate, journal: JournalDep):
    """Log a mood, reflect on it and pick music for it."""
    created = await journal.create_entry(
        text=body.text,
        emoji=body.emoji,
        quick_mood=body.quick_mood,
        energy=body.energy,
        valence=body.valence,
    )
    return MoodEntryWithReflectionResponse.from_domain(created)


@router.get("/mood-entries", response_model=list[MoodEntryResponse])
async def list_mood_entries(journal: JournalDep):
    return [MoodEntryResponse.from_domain(e) for e in await journal.list_entries()]


# Declared before "/mood-entries/{entry_id}" so "recent" is not taken for an id.
@router.get("/mood-entries/recent", response_model=list[MoodEntryResponse])
async def recent_mood_entries(
    journal: JournalDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
):
    return [MoodEntryResponse.from_domain(e) for e in await journal.recent_entries(limit)]


@router.get("/mood-entries/{entry_id}", response_model=MoodEntryResponse)
async def get_mood_entry(entry_id: str, journal: JournalDep):
    return MoodEntryResponse.from_domain(await journal.get_entry(entry_id))


@router.get("/mood-entries/{entry_id}/reflection", response_model=ReflectionResponse)
async def get_mood_entry_reflection(entry_id: str, journal: JournalDep):
    return ReflectionResponse.from_domain(await journal.get_reflection(entry_id))


@router.get(
    "/mood-entries/{entry_id}/recommendations",
    response_model=list[RecommendationResponse],
)
async def get_mood_entry_recommendations(entry_id: str, journal: JournalDep):
    recommendations = await journal.recommendations_for(entry_id)
    return [RecommendationResponse.from_domain(r) for r in recommendations]


@router.get("/affirmation", response_model=AffirmationResponse)
async def daily_affirmation(journal: JournalDep):
    return AffirmationResponse(affirmation=await journal.daily_affirmation())


@router.post("/playlists", response_model=PlaylistResponse)
async def create_playlist(body: PlaylistCreate, journal: JournalDep):
    playlist = await journal.create_playlist(
        name=body.name,
        description=body.description,
        mood_entry_ids=body.mood_entry_ids,
    )
    return PlaylistResponse.from_domain(playlist)


@router.get("/playlists", response_model=list[PlaylistResponse])
async def list_playlists(journal: JournalDep):
    return [PlaylistResponse.from_domain(p) for p in await journal.list_playlists()]


@router.get("/genres", response_model=GenresResponse)
async def available_genres(catalog: Annotated[CatalogClient, Depends(get_catalog_client)]):
    return GenresResponse(genres=await catalog.get_available_genres())


@router.get("/health", response_model=HealthResponse)
async def health_check(database: Annotated[Database, Depends(get_database)]):
    """Liveness plus a database round-trip."""
    connected = database.is_initialized and await database.ping()
    return HealthResponse(
        status="OK",
        timestamp=utcnow(),
        database="connected" if connected else "disconnected",
    )
