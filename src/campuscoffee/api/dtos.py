"""Request/response schemas and their mapping to the domain model."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from campuscoffee.domain.model import CampusType, GeoPosition, Pos, PosType, User


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PosDto(CamelModel):
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    type: PosType = PosType.CAFE
    campus: CampusType
    street: str | None = Field(default=None, max_length=255)
    house_number: str | None = Field(default=None, max_length=32)
    postal_code: str | None = Field(default=None, max_length=32)
    city: str | None = Field(default=None, max_length=255)
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    @classmethod
    def from_domain(cls, pos: Pos) -> PosDto:
        return cls(
            id=pos.id,
            created_at=pos.created_at,
            updated_at=pos.updated_at,
            name=pos.name,
            description=pos.description,
            type=pos.pos_type,
            campus=pos.campus,
            street=pos.street,
            house_number=pos.house_number,
            postal_code=pos.postal_code,
            city=pos.city,
            latitude=pos.position.latitude,
            longitude=pos.position.longitude,
        )

    def to_domain(self) -> Pos:
        # timestamps are owned by the store and ignored on input
        return Pos(
            id=self.id,
            name=self.name,
            position=GeoPosition(latitude=self.latitude, longitude=self.longitude),
            campus=self.campus,
            pos_type=self.type,
            description=self.description,
            street=self.street,
            house_number=self.house_number,
            postal_code=self.postal_code,
            city=self.city,
        )


class UserDto(CamelModel):
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    login_name: str = Field(..., min_length=1, max_length=64, pattern=r"^\w+$")
    email_address: str = Field(default="", max_length=255)
    first_name: str = Field(default="", max_length=255)
    last_name: str = Field(default="", max_length=255)

    @classmethod
    def from_domain(cls, user: User) -> UserDto:
        return cls(
            id=user.id,
            created_at=user.created_at,
            updated_at=user.updated_at,
            login_name=user.login_name,
            email_address=user.email_address,
            first_name=user.first_name,
            last_name=user.last_name,
        )

    def to_domain(self) -> User:
        return User(
            id=self.id,
            login_name=self.login_name,
            email_address=self.email_address,
            first_name=self.first_name,
            last_name=self.last_name,
        )


class ErrorResponse(CamelModel):
    error_code: str
    message: str
    status_code: int
    status_message: str
    timestamp: datetime
    path: str
