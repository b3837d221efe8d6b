from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from enum import Enum

from shipyard_app.services.rating import calculate_rating


class ShipType(Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


@dataclass(slots=True)
class Ship:
    """
    A registered starship. ``rating`` is not stored on the record: it is derived
    from speed, is_used and the production year each time it is read, so it
    cannot go out of step with those fields or be assigned by a caller.
    """
    id: int | None = None
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: date | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None

    @property
    def rating(self) -> float | None:
        if self.speed is None or self.prod_date is None:
            return None
        return calculate_rating(self.speed, bool(self.is_used), self.prod_date)


# Fields whose change moves the rating
RATING_FIELDS = ("prod_date", "is_used", "speed")


@dataclass(slots=True)
class ShipUpdate:
    """Partial update for a ship. ``None`` leaves the field as it is."""
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: date | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None

    def supplied(self) -> dict:
        """Return the fields that carry a value, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
