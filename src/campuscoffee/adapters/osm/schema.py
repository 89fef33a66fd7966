"""OSM API 0.6 response schemas for node lookups."""

from __future__ import annotations

import logging
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class OsmBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow")
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "OSM %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class OsmElement(OsmBaseModel):
    type: Literal["node", "way", "relation"]
    id: int
    lat: float | None = None
    lon: float | None = None
    timestamp: str | None = None
    version: int | None = None
    changeset: int | None = None
    user: str | None = None
    uid: int | None = None
    visible: bool | None = None
    tags: dict[str, str] = Field(default_factory=dict)


class OsmNodeResponse(OsmBaseModel):
    version: str | None = None
    generator: str | None = None
    copyright: str | None = None
    attribution: str | None = None
    license: str | None = None
    elements: list[OsmElement] = Field(default_factory=list["OsmElement"])
