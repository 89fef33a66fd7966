"""Routes for managing users."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from .dependencies import UserServiceDep
from .dtos import ErrorResponse, UserDto

router = APIRouter(prefix="/api/users", tags=["Users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_WRITE_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
}


@router.get("", response_model=list[UserDto], summary="Get all users.")
def list_users(user_service: UserServiceDep) -> list[UserDto]:
    return [UserDto.from_domain(user) for user in user_service.get_all()]


@router.get(
    "/filter",
    response_model=UserDto,
    responses=_NOT_FOUND,
    summary="Get user by login name.",
)
def filter_users(login_name: str, user_service: UserServiceDep) -> UserDto:
    return UserDto.from_domain(user_service.get_by_login_name(login_name))


@router.get("/{user_id}", response_model=UserDto, responses=_NOT_FOUND, summary="Get user by ID.")
def get_user(user_id: int, user_service: UserServiceDep) -> UserDto:
    return UserDto.from_domain(user_service.get_by_id(user_id))


@router.post(
    "",
    response_model=UserDto,
    status_code=status.HTTP_201_CREATED,
    responses=_WRITE_ERRORS,
    summary="Create a new user.",
)
def create_user(
    dto: UserDto,
    request: Request,
    response: Response,
    user_service: UserServiceDep,
) -> UserDto:
    created = UserDto.from_domain(user_service.upsert(dto.to_domain()))
    response.headers["Location"] = str(request.url_for("get_user", user_id=created.id))
    return created


@router.put(
    "/{user_id}",
    response_model=UserDto,
    responses=_WRITE_ERRORS,
    summary="Update an existing user by ID.",
)
def update_user(user_id: int, dto: UserDto, user_service: UserServiceDep) -> UserDto:
    return UserDto.from_domain(user_service.update(user_id, dto.to_domain()))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user by ID (currently disabled; always succeeds).",
)
def delete_user(user_id: int, user_service: UserServiceDep) -> Response:
    user_service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
