"""Player endpoints: next/previous resolution and play history."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from music_streaming_player.application.commands.record_play import RecordPlayCommand
from music_streaming_player.application.queries.get_history import (
    GetHistoryQuery,
    GetMostPlayedQuery,
    GetPlayCountQuery,
)
from music_streaming_player.domain.access.roles import Capability, Principal
from music_streaming_player.domain.music.value_objects import Direction
from music_streaming_player.infrastructure.http.dependencies import ContainerDep, require
from music_streaming_player.infrastructure.http.errors import client_input
from music_streaming_player.infrastructure.http.schemas import (
    AdvanceResponse,
    ErrorResponse,
    HistoryEntryResponse,
    HistoryResponse,
    MostPlayedResponse,
    PlayCountResponse,
    PlayerStateRequest,
    RecordPlayRequest,
)

router = APIRouter(prefix="/player", tags=["player"])

_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def _history_limit(container: ContainerDep, limit: int | None) -> int:
    player_settings = container.settings.player
    requested = limit or player_settings.history_default_limit
    return min(requested, player_settings.history_max_limit)


async def _advance(
    container: ContainerDep, principal: Principal, body: PlayerStateRequest, direction: Direction
) -> AdvanceResponse | Response:
    with client_input():
        command = body.to_command(principal.user_id, direction)
    result = await container.advance_track_handler.handle(command)
    if not result.has_track:
        # Boundaries are an empty success, not an error.
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return AdvanceResponse.from_result(result)


@router.post(
    "/next",
    response_model=AdvanceResponse,
    responses={204: {"description": "End of queue"}, **_ERRORS},
)
async def next_track(
    body: PlayerStateRequest,
    container: ContainerDep,
    principal: Annotated[Principal, Depends(require(Capability.PLAYBACK))],
) -> AdvanceResponse | Response:
    return await _advance(container, principal, body, Direction.NEXT)


@router.post(
    "/previous",
    response_model=AdvanceResponse,
    responses={204: {"description": "Start of queue"}, **_ERRORS},
)
async def previous_track(
    body: PlayerStateRequest,
    container: ContainerDep,
    principal: Annotated[Principal, Depends(require(Capability.PLAYBACK))],
) -> AdvanceResponse | Response:
    return await _advance(container, principal, body, Direction.PREVIOUS)


@router.post(
    "/history",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERRORS,
)
async def record_play(
    body: RecordPlayRequest,
    container: ContainerDep,
    principal: Annotated[Principal, Depends(require(Capability.HISTORY_WRITE))],
) -> Response:
    with client_input():
        command = RecordPlayCommand(
            user_id=principal.user_id,
            track_id=body.track_id,
            played_at=body.played_at,
            context_type=body.context_type,
            context_id=body.context_id,
        )
    await container.record_play_handler.handle(command)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/history", response_model=HistoryResponse, responses=_ERRORS)
async def recent_history(
    container: ContainerDep,
    principal: Annotated[Principal, Depends(require(Capability.HISTORY_READ))],
    limit: Annotated[int | None, Query(ge=1)] = None,
) -> HistoryResponse:
    with client_input():
        query = GetHistoryQuery(user_id=principal.user_id, limit=_history_limit(container, limit))
    info = await container.get_history_handler.handle(query)
    return HistoryResponse(
        user_id=info.user_id,
        entries=[HistoryEntryResponse.from_entry(e) for e in info.entries],
    )


@router.get("/history/top", response_model=MostPlayedResponse, responses=_ERRORS)
async def most_played(
    container: ContainerDep,
    principal: Annotated[Principal, Depends(require(Capability.HISTORY_READ))],
    limit: Annotated[int | None, Query(ge=1)] = None,
) -> MostPlayedResponse:
    with client_input():
        query = GetMostPlayedQuery(
            user_id=principal.user_id, limit=_history_limit(container, limit)
        )
    info = await container.get_history_handler.most_played(query)
    return MostPlayedResponse(
        user_id=info.user_id,
        tracks=[PlayCountResponse.from_count(c) for c in info.tracks],
    )


@router.get(
    "/history/tracks/{track_id}/count", response_model=PlayCountResponse, responses=_ERRORS
)
async def play_count(
    track_id: Annotated[str, Path(min_length=1)],
    container: ContainerDep,
    principal: Annotated[Principal, Depends(require(Capability.HISTORY_READ))],
) -> PlayCountResponse:
    with client_input():
        query = GetPlayCountQuery(user_id=principal.user_id, track_id=track_id)
    count = await container.get_history_handler.play_count(query)
    return PlayCountResponse.from_count(count)
