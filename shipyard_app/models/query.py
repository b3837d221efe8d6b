"""
Criteria and ordering keys for ship listings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum

from shipyard_app.models.ship import ShipType


class ShipOrder(Enum):
    """Sort key; the value is the Ship attribute compared."""
    ID = "id"
    SPEED = "speed"
    DATE = "prod_date"
    RATING = "rating"
@dataclass(slots=True)
class ShipFilter:
    """
    Optional listing criteria; every criterion left as ``None`` matches all ships.

    name/planet match as substrings and the min/max pairs are inclusive ranges.
    after/before bound the production date, both inclusive. A plain ``date``
    bound compares calendar dates; a ``datetime`` bound is an instant, compared
    against the start of the production day in UTC (naive values are UTC).
    """
    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    after: date | datetime | None = None
    before: date | datetime | None = None
    is_used: bool | None = None
    min_speed: float | None = None
    max_speed: float | None = None
    min_crew_size: int | None = None
    max_crew_size: int | None = None
    min_rating: float | None = None
    max_rating: float | None = None

    @classmethod
    def from_millis(
        cls, after: int | None = None, before: int | None = None, **criteria
    ) -> "ShipFilter":
        """Build criteria with after/before given as epoch milliseconds."""
        return cls(
            after=instant_from_millis(after),
            before=instant_from_millis(before),
            **criteria,
        )


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def instant_from_millis(millis: int | None) -> datetime | None:
    """Convert epoch milliseconds to an aware UTC datetime, keeping the time of day."""
    if millis is None:
        return None
    return _EPOCH + timedelta(milliseconds=millis)
