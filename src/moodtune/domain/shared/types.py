"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across the domain is defined here once,
so models can simply annotate their fields::

    from moodtune.domain.shared.types import MoodScale, NonEmptyStr

    class MyModel(BaseModel):
        energy: MoodScale
        text: NonEmptyStr
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

# ── Numeric constraints ─────────────────────────────────────────────

UnitInterval = Annotated[float, Field(ge=0.0, le=1.0)]
"""Float in [0.0, 1.0]: catalog-scale energy and valence."""

MoodScale = Annotated[float, Field(ge=1.0, le=10.0)]
"""Float in [1.0, 10.0]: user-facing energy and valence."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""

EntityIdStr = Annotated[str, Field(pattern=r"^[0-9a-f]{32}$")]
"""Journal record id: 32 lowercase hex characters (uuid4 hex)."""

MarketCode = Annotated[str, Field(pattern=r"^[A-Z]{2}$")]
"""ISO 3166-1 alpha-2 market code used by the catalog API."""


# ── Settings-specific constraints ──────────────────────────────────

BusyTimeoutMs = Annotated[int, Field(ge=1000, le=30000)]
"""Database busy timeout in milliseconds: 1 000 … 30 000."""

ConnectionTimeoutS = Annotated[int, Field(ge=1, le=60)]
"""Database connection timeout in seconds: 1 … 60."""

RequestTimeoutS = Annotated[float, Field(ge=1.0, le=30.0)]
"""Upstream HTTP request timeout in seconds: 1 … 30."""

MaxTokens = Annotated[int, Field(ge=1, le=4096)]
"""AI max tokens: 1 … 4 096."""

TemperatureFloat = Annotated[float, Field(ge=0.0, le=2.0)]
"""AI temperature: 0.0 … 2.0."""

PortInt = Annotated[int, Field(ge=1, le=65535)]
"""TCP port."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if v.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
