"""Catalog endpoints: tracks and the contexts that order them."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from music_streaming_player.application.commands.publish_catalog import (
    DeleteContextCommand,
    DeleteStatus,
    PublishTrackCommand,
    SaveContextCommand,
)
from music_streaming_player.application.queries.get_catalog import (
    GetContextQuery,
    GetTrackQuery,
)
from music_streaming_player.domain.access.roles import (
    Capability,
    Principal,
    capability_for_context_edit,
)
from music_streaming_player.domain.music.value_objects import ContextType
from music_streaming_player.domain.shared.exceptions import EntityNotFoundError
from music_streaming_player.infrastructure.http.dependencies import (
    ContainerDep,
    PrincipalDep,
    check_capability,
    require,
)
from music_streaming_player.infrastructure.http.errors import client_input
from music_streaming_player.infrastructure.http.schemas import (
    ContextPayload,
    ContextResponse,
    ErrorResponse,
    TrackPayload,
    TrackResponse,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])

_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}

ContextId = Annotated[str, Path(min_length=1, max_length=128)]
TrackIdParam = Annotated[str, Path(min_length=1)]


@router.get("/tracks/{track_id}", response_model=TrackResponse, responses=_ERRORS)
async def get_track(
    track_id: TrackIdParam,
    container: ContainerDep,
    _principal: Annotated[Principal, Depends(require(Capability.CATALOG_READ))],
) -> TrackResponse:
    with client_input():
        query = GetTrackQuery(track_id=track_id)
    track = await container.get_catalog_handler.get_track(query)
    return TrackResponse.from_track(track)


@router.put("/tracks/{track_id}", response_model=TrackResponse, responses=_ERRORS)
async def put_track(
    track_id: TrackIdParam,
    body: TrackPayload,
    container: ContainerDep,
    _principal: Annotated[Principal, Depends(require(Capability.CATALOG_PUBLISH))],
) -> TrackResponse:
    with client_input():
        command = PublishTrackCommand(track_id=track_id, **body.model_dump())
    track = await container.catalog_handler.publish_track(command)
    return TrackResponse.from_track(track)


@router.get(
    "/contexts/{context_type}/{context_id}", response_model=ContextResponse, responses=_ERRORS
)
async def get_context(
    context_type: ContextType,
    context_id: ContextId,
    container: ContainerDep,
    _principal: Annotated[Principal, Depends(require(Capability.CATALOG_READ))],
) -> ContextResponse:
    with client_input():
        query = GetContextQuery(context_type=context_type, context_id=context_id)
    info = await container.get_catalog_handler.get_context(query)
    return ContextResponse.from_info(info)


@router.put(
    "/contexts/{context_type}/{context_id}", response_model=ContextResponse, responses=_ERRORS
)
async def put_context(
    context_type: ContextType,
    context_id: ContextId,
    body: ContextPayload,
    container: ContainerDep,
    principal: PrincipalDep,
) -> ContextResponse:
    """Replace the full track list of a context, creating it if needed."""
    check_capability(principal, capability_for_context_edit(context_type))

    with client_input():
        command = SaveContextCommand(
            context_type=context_type,
            context_id=context_id,
            track_ids=tuple(body.track_ids),
        )
    await container.catalog_handler.save_context(command)

    info = await container.get_catalog_handler.get_context(
        GetContextQuery(context_type=context_type, context_id=context_id)
    )
    return ContextResponse.from_info(info)


@router.delete(
    "/contexts/{context_type}/{context_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERRORS,
)
async def delete_context(
    context_type: ContextType,
    context_id: ContextId,
    container: ContainerDep,
    principal: PrincipalDep,
) -> Response:
    check_capability(principal, capability_for_context_edit(context_type))

    with client_input():
        command = DeleteContextCommand(context_type=context_type, context_id=context_id)
    outcome = await container.catalog_handler.delete_context(command)
    if outcome == DeleteStatus.NOT_FOUND:
        raise EntityNotFoundError("PlaybackContext", f"{context_type.value}/{context_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
