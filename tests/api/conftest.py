from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from campuscoffee.api import create_app
from campuscoffee.app import build_services
from tests.helpers.entities import make_osm_node
from tests.helpers.fakes import FakeOsmDataService

if TYPE_CHECKING:
    from collections.abc import Iterator

    from campuscoffee.adapters.sqlalchemy import (
        SqlAlchemyPosDataService,
        SqlAlchemyUserDataService,
    )


@pytest.fixture
def api_client(
    pos_data_service: SqlAlchemyPosDataService,
    user_data_service: SqlAlchemyUserDataService,
) -> Iterator[TestClient]:
    services = build_services(
        pos_data_service=pos_data_service,
        user_data_service=user_data_service,
        osm_data_service=FakeOsmDataService([make_osm_node(555), make_osm_node(7, name=None)]),
    )
    with TestClient(create_app(services)) as client:
        yield client


@pytest.fixture
def pos_payload() -> dict[str, object]:
    return {
        "name": "Cafe Botanik",
        "description": "Coffee next to the greenhouse",
        "type": "CAFE",
        "campus": "NORTH",
        "street": "Im Neuenheimer Feld",
        "houseNumber": "304",
        "postalCode": "69120",
        "city": "Heidelberg",
        "latitude": 49.4163,
        "longitude": 8.6704,
    }
