"""Application services for points of sale and users.

Both services delegate every write to a :class:`Reconciler` built around their
data service; collaborators are passed in explicitly.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from campuscoffee.domain.errors import InvalidArgumentError
from campuscoffee.domain.reconciliation import OsmImportAdapter, Reconciler

if TYPE_CHECKING:
    from collections.abc import Sequence

    from campuscoffee.domain.model import CampusType, EntityId, OsmNodeId, Pos, User
    from campuscoffee.domain.ports import OsmDataService, PosDataService, UserDataService

log = getLogger(__name__)


def _require_matching_id(entity_type: str, path_id: EntityId, body_id: EntityId | None) -> None:
    if body_id != path_id:
        raise InvalidArgumentError(f"{entity_type} ID in path and body do not match.")


class PosService:
    def __init__(self, pos_data_service: PosDataService, osm_data_service: OsmDataService) -> None:
        self._pos_data = pos_data_service
        self._reconciler = Reconciler(pos_data_service)
        self._importer = OsmImportAdapter(osm=osm_data_service, reconciler=self._reconciler)

    def clear(self) -> None:
        log.warning("Clearing all POS data")
        self._pos_data.clear()

    def get_all(self) -> Sequence[Pos]:
        log.debug("Retrieving all POS")
        return self._pos_data.get_all()

    def get_by_id(self, pos_id: EntityId) -> Pos:
        log.debug("Retrieving POS with ID: %s", pos_id)
        return self._pos_data.get_by_id(pos_id)

    def get_by_name(self, name: str) -> Pos:
        log.debug("Retrieving POS with name: %s", name)
        return self._pos_data.get_by_name(name)

    def upsert(self, pos: Pos) -> Pos:
        return self._reconciler.upsert(pos)

    def update(self, pos_id: EntityId, pos: Pos) -> Pos:
        """Update ``pos_id``; the body must carry the same identifier."""
        _require_matching_id("POS", pos_id, pos.id)
        return self._reconciler.upsert(pos)

    def delete(self, pos_id: EntityId) -> None:
        log.info("Deleting POS with ID: %s", pos_id)
        self._pos_data.delete(pos_id)

    def import_from_osm_node(self, node_id: OsmNodeId, campus: CampusType) -> Pos:
        return self._importer.import_node(node_id, campus)


class UserService:
    def __init__(self, user_data_service: UserDataService) -> None:
        self._user_data = user_data_service
        self._reconciler = Reconciler(user_data_service)

    def clear(self) -> None:
        log.warning("Clearing all User data")
        self._user_data.clear()

    def get_all(self) -> Sequence[User]:
        log.debug("Retrieving all User")
        return self._user_data.get_all()

    def get_by_id(self, user_id: EntityId) -> User:
        log.debug("Retrieving User with ID: %s", user_id)
        return self._user_data.get_by_id(user_id)

    def get_by_login_name(self, login_name: str) -> User:
        log.debug("Retrieving User with login name: %s", login_name)
        return self._user_data.get_by_login_name(login_name)

    def upsert(self, user: User) -> User:
        return self._reconciler.upsert(user)

    def update(self, user_id: EntityId, user: User) -> User:
        _require_matching_id("User", user_id, user.id)
        return self._reconciler.upsert(user)

    def delete(self, user_id: EntityId) -> None:
        # User deletion is disabled; the store is left untouched.
        log.warning("Ignoring request to delete User with ID: %s", user_id)
