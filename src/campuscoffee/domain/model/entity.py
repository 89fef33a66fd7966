"""
Base building blocks:
store-assigned identity and audit timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from datetime import datetime

    from campuscoffee.domain.model.enums import EntityType
    from campuscoffee.domain.model.primitives import EntityId


@dataclass(eq=False, kw_only=True)
class Entity:
    """Identity is absent until the owning store persists the entity."""

    id: EntityId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # class-level discriminator; subclasses must override
    ENTITY_TYPE: ClassVar[EntityType]

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
