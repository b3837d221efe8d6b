"""
Domain models for the shipyard registry.

These are pure Python/domain classes, separate from ORM mappings.
"""

from shipyard_app.models.ship import RATING_FIELDS, Ship, ShipType, ShipUpdate
from shipyard_app.models.query import ShipFilter, ShipOrder, instant_from_millis

__all__ = [
    "RATING_FIELDS",
    "Ship",
    "ShipType",
    "ShipUpdate",
    "ShipFilter",
    "ShipOrder",
    "instant_from_millis",
]
