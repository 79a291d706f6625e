"""Liveness endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from music_streaming_player.infrastructure.http.dependencies import ContainerDep

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(container: ContainerDep) -> dict[str, Any]:
    """Report liveness and database table counts. Unauthenticated."""
    stats = await container.database.get_stats()
    return {
        "status": "ok" if stats.get("initialized") and "error" not in stats else "degraded",
        "database": stats,
    }
