"""Request-scoped access to the services held by the application."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Request

from campuscoffee.domain.services import PosService, UserService

if TYPE_CHECKING:
    from campuscoffee.app import Services


def _services(request: Request) -> Services:
    return request.app.state.services


def get_pos_service(request: Request) -> PosService:
    return _services(request).pos


def get_user_service(request: Request) -> UserService:
    return _services(request).users


PosServiceDep = Annotated[PosService, Depends(get_pos_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
