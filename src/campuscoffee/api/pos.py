"""Routes for managing coffee points of sale."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Request, Response, status

from campuscoffee.domain.model import CampusType

from .dependencies import PosServiceDep
from .dtos import ErrorResponse, PosDto

router = APIRouter(prefix="/api/pos", tags=["Points of Sale (POS)"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}


def _created(request: Request, response: Response, dto: PosDto) -> PosDto:
    response.headers["Location"] = str(request.url_for("get_pos", pos_id=dto.id))
    return dto


@router.get("", response_model=list[PosDto], summary="Get all POS.")
def list_pos(pos_service: PosServiceDep) -> list[PosDto]:
    return [PosDto.from_domain(pos) for pos in pos_service.get_all()]


@router.get("/filter", response_model=PosDto, responses=_NOT_FOUND, summary="Get POS by name.")
def filter_pos(name: str, pos_service: PosServiceDep) -> PosDto:
    return PosDto.from_domain(pos_service.get_by_name(name))


@router.get("/{pos_id}", response_model=PosDto, responses=_NOT_FOUND, summary="Get POS by ID.")
def get_pos(pos_id: int, pos_service: PosServiceDep) -> PosDto:
    return PosDto.from_domain(pos_service.get_by_id(pos_id))


@router.post(
    "",
    response_model=PosDto,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_CONFLICT, **_NOT_FOUND},
    summary="Create a new POS.",
)
def create_pos(
    dto: PosDto,
    request: Request,
    response: Response,
    pos_service: PosServiceDep,
) -> PosDto:
    created = PosDto.from_domain(pos_service.upsert(dto.to_domain()))
    return _created(request, response, created)


@router.post(
    "/import/osm/{node_id}",
    response_model=PosDto,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_CONFLICT, **_NOT_FOUND},
    summary="Import a new POS from an OpenStreetMap node.",
)
def import_pos_from_osm(
    node_id: int,
    campus: Annotated[CampusType, Body()],
    request: Request,
    response: Response,
    pos_service: PosServiceDep,
) -> PosDto:
    created = PosDto.from_domain(pos_service.import_from_osm_node(node_id, campus))
    return _created(request, response, created)


@router.put(
    "/{pos_id}",
    response_model=PosDto,
    responses={**_BAD_REQUEST, **_CONFLICT, **_NOT_FOUND},
    summary="Update an existing POS by ID.",
)
def update_pos(pos_id: int, dto: PosDto, pos_service: PosServiceDep) -> PosDto:
    return PosDto.from_domain(pos_service.update(pos_id, dto.to_domain()))


@router.delete(
    "/{pos_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
    summary="Delete a POS by ID.",
)
def delete_pos(pos_id: int, pos_service: PosServiceDep) -> Response:
    pos_service.delete(pos_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
