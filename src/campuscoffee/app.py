"""Application wiring and orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from campuscoffee.adapters.osm import HttpOsmDataService
from campuscoffee.adapters.sqlalchemy import (
    SqlAlchemyPosDataService,
    SqlAlchemyUserDataService,
    is_started,
    startup,
)
from campuscoffee.domain.model import User
from campuscoffee.domain.services import PosService, UserService

if TYPE_CHECKING:
    from collections.abc import Sequence

    from campuscoffee.domain.model import CampusType, OsmNodeId, Pos
    from campuscoffee.domain.ports import OsmDataService, PosDataService, UserDataService


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Services:
    pos: PosService
    users: UserService


def build_services(
    *,
    pos_data_service: PosDataService | None = None,
    user_data_service: UserDataService | None = None,
    osm_data_service: OsmDataService | None = None,
) -> Services:
    """Construct the services; missing collaborators fall back to the default adapters."""

    if (pos_data_service is None or user_data_service is None) and not is_started():
        startup()
    pos_data = pos_data_service or SqlAlchemyPosDataService()
    user_data = user_data_service or SqlAlchemyUserDataService()
    osm = osm_data_service or HttpOsmDataService()
    return Services(
        pos=PosService(pos_data, osm),
        users=UserService(user_data),
    )


def import_pos_from_osm(
    node_id: OsmNodeId,
    campus: CampusType,
    *,
    services: Services | None = None,
) -> Pos:
    """Import one OSM node as a new POS."""

    effective = services or build_services()
    pos = effective.pos.import_from_osm_node(node_id, campus)
    log.info("Imported OSM node %s as POS %s (%s)", node_id, pos.id, pos.name)
    return pos


def list_pos(*, services: Services | None = None) -> Sequence[Pos]:
    effective = services or build_services()
    return effective.pos.get_all()


def create_user(
    *,
    login_name: str,
    email_address: str = "",
    first_name: str = "",
    last_name: str = "",
    services: Services | None = None,
) -> User:
    effective = services or build_services()
    return effective.users.upsert(
        User(
            login_name=login_name,
            email_address=email_address,
            first_name=first_name,
            last_name=last_name,
        )
    )
