"""Reconciliation core: the shared create-or-update decision procedure.

Flow for both aggregates:
1) identity resolution decides CREATE (no id) or UPDATE (id must exist)
2) the coordinator performs the single write and reports duplicate conflicts

The OSM import maps an external node to a new POS and enters at step 1.
"""

from __future__ import annotations

from .contracts import Reconcilable, ReconciliationStore, UpsertIntent, UpsertOutcome
from .identity import IdentityResolver, Resolution
from .osm_import import IncompleteOsmNodeError, OsmImportAdapter, translate_osm_node
from .reconciler import Reconciler
from .upsert import MissingIdentifierError, UpsertCoordinator

__all__ = [
    "IdentityResolver",
    "IncompleteOsmNodeError",
    "MissingIdentifierError",
    "OsmImportAdapter",
    "Reconcilable",
    "ReconciliationStore",
    "Reconciler",
    "Resolution",
    "UpsertCoordinator",
    "UpsertIntent",
    "UpsertOutcome",
    "translate_osm_node",
]
