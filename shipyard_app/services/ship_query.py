"""
In-memory listing pipeline: filter the full collection, sort it, cut a page.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from operator import attrgetter
from typing import Iterable, List

from shipyard_app.config.limits import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from shipyard_app.models import Ship, ShipFilter, ShipOrder

_LOG = logging.getLogger(__name__)


class PageOutOfRangeError(IndexError):
    """Requested page starts past the end of the list, or paging values are invalid."""

    def __init__(self, message: str, page_number: int, page_size: int) -> None:
        self.message = message
        self.page_number = page_number
        self.page_size = page_size
        super().__init__(message)


def _date_keys(prod_date: date, bound: date | datetime) -> tuple:
    """
    Return (production, bound) in comparable form. An instant bound is compared
    against the start of the production day in UTC; naive instants are UTC.
    """
    if isinstance(bound, datetime):
        if bound.tzinfo is None:
            bound = bound.replace(tzinfo=timezone.utc)
        return datetime.combine(prod_date, time.min, tzinfo=timezone.utc), bound
    return prod_date, bound


def _matches(ship: Ship, criteria: ShipFilter) -> bool:
    if criteria.name is not None and criteria.name not in ship.name:
        return False
    if criteria.planet is not None and criteria.planet not in ship.planet:
        return False
    if criteria.ship_type is not None and ship.ship_type != criteria.ship_type:
        return False
    if criteria.after is not None:
        produced, after = _date_keys(ship.prod_date, criteria.after)
        if produced < after:
            return False
    if criteria.before is not None:
        produced, before = _date_keys(ship.prod_date, criteria.before)
        if produced > before:
            return False
    if criteria.is_used is not None and bool(ship.is_used) != criteria.is_used:
        return False
    if criteria.min_speed is not None and ship.speed < criteria.min_speed:
        return False
    if criteria.max_speed is not None and ship.speed > criteria.max_speed:
        return False
    if criteria.min_crew_size is not None and ship.crew_size < criteria.min_crew_size:
        return False
    if criteria.max_crew_size is not None and ship.crew_size > criteria.max_crew_size:
        return False
    if criteria.min_rating is not None or criteria.max_rating is not None:
        rating = ship.rating
        if criteria.min_rating is not None and rating < criteria.min_rating:
            return False
        if criteria.max_rating is not None and rating > criteria.max_rating:
            return False
    return True


def filter_ships(ships: Iterable[Ship], criteria: ShipFilter | None = None) -> List[Ship]:
    """
    Keep the ships that pass every supplied criterion, in input order.

    Records are read, never modified. ``criteria=None`` keeps every ship.
    """
    if criteria is None:
        return list(ships)
    return [ship for ship in ships if _matches(ship, criteria)]


def sort_ships(ships: List[Ship], order: ShipOrder | None = None) -> List[Ship]:
    """
    Sort ``ships`` in place, ascending by the ``order`` key, and return it.

    Without an order the list comes back untouched. The sort is stable, so
    ships with equal keys keep their relative order.
    """
    if order is not None:
        ships.sort(key=attrgetter(order.value))
    return ships


def get_page(
    ships: List[Ship],
    page_number: int | None = None,
    page_size: int | None = None,
) -> List[Ship]:
    """
    Return ships ``[page_number * page_size, +page_size)``, clipped to the list end.

    A page starting exactly at the end is empty; one starting beyond it raises
    PageOutOfRangeError, as do a negative page number and a page size below 1.
    """
    page = DEFAULT_PAGE_NUMBER if page_number is None else page_number
    size = DEFAULT_PAGE_SIZE if page_size is None else page_size

    if page < 0 or size < 1:
        raise PageOutOfRangeError(
            f"Invalid paging: page {page}, size {size}.", page, size
        )

    start = page * size
    if start > len(ships):
        raise PageOutOfRangeError(
            f"Page {page} (size {size}) starts past the last of {len(ships)} ships.",
            page,
            size,
        )
    end = min(start + size, len(ships))
    _LOG.debug("Page %d/%d: ships %d..%d of %d", page, size, start, end, len(ships))
    return ships[start:end]
