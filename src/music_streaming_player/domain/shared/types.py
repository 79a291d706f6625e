"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across bounded contexts is defined here once,
so models can simply annotate their fields::

    from music_streaming_player.domain.shared.types import DurationSeconds, NonEmptyStr

    class MyModel(BaseModel):
        duration_seconds: DurationSeconds
        name: NonEmptyStr
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

from music_streaming_player.domain.shared.messages import ErrorMessages

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

IdentifierStr = Annotated[str, Field(min_length=1, max_length=128, pattern=r"^[A-Za-z0-9_.:-]+$")]
"""Catalog identifier: 1-128 URL-safe characters."""

TrackTitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Track title: 1-500 characters."""

ShuffleSeedStr = Annotated[str, Field(min_length=1, max_length=256)]
"""Opaque shuffle seed: 1-256 characters."""


# ── Domain-specific numeric constraints ─────────────────────────────

DurationSeconds = Annotated[int, Field(ge=0, le=86_400)]
"""Track duration in seconds: 0 … 86 400 (24 hours)."""

QueuePositionInt = Annotated[int, Field(ge=0)]
"""Zero-based position in a playback context."""

HistoryLimit = Annotated[int, Field(ge=1, le=500)]
"""Number of history entries returned by one query: 1 … 500."""


# ── Settings-specific constraints ──────────────────────────────────

BusyTimeoutMs = Annotated[int, Field(ge=1000, le=30000)]
"""Database busy timeout in milliseconds: 1 000 … 30 000."""

ConnectionTimeoutS = Annotated[int, Field(ge=1, le=60)]
"""Database connection timeout in seconds: 1 … 60."""

PortInt = Annotated[int, Field(ge=1, le=65535)]
"""TCP port: 1 … 65 535."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: object) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if isinstance(v, str):
        v = datetime.fromisoformat(v.replace("Z", "+00:00"))
    if not isinstance(v, datetime):
        raise ValueError(ErrorMessages.DATETIME_REQUIRED)
    if v.tzinfo is None:
        raise ValueError(ErrorMessages.TIMEZONE_REQUIRED_UTC_DATETIME)
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
