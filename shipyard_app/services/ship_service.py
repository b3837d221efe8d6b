"""
Business logic for ships: listing, creation, partial update and removal.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Sequence

from sqlalchemy.orm import Session

from shipyard_app.models import RATING_FIELDS, Ship, ShipFilter, ShipOrder, ShipUpdate
from shipyard_app.repositories.ship_repository import ShipRepository
from shipyard_app.services import rating, ship_query, validation
from shipyard_app.services.validation import ValidationIssue

_LOG = logging.getLogger(__name__)


class ShipValidationError(Exception):
    """A write was rejected because one or more fields are out of range."""

    def __init__(self, message: str, fields: Sequence[str] = ()) -> None:
        self.message = message
        self.fields = list(fields)
        super().__init__(message)

    @classmethod
    def from_issues(cls, issues: List[ValidationIssue]) -> "ShipValidationError":
        return cls(" ".join(i.message for i in issues), [i.field for i in issues])


class ShipNotFoundError(LookupError):
    def __init__(self, ship_id: int) -> None:
        self.ship_id = ship_id
        super().__init__(f"Ship with id {ship_id} not found")


class ShipService:
    """Encapsulates ship-related rules and operations."""

    def __init__(self, db: Session) -> None:
        self._repo = ShipRepository(db)

    # Queries

    def get_ships(self, criteria: ShipFilter | None = None) -> List[Ship]:
        ships = ship_query.filter_ships(self._repo.list(), criteria)
        _LOG.debug("Filter kept %d ships", len(ships))
        return ships

    def count_ships(self, criteria: ShipFilter | None = None) -> int:
        if criteria is None:
            return self._repo.count()
        return len(self.get_ships(criteria))

    def list_ships(
        self,
        criteria: ShipFilter | None = None,
        order: ShipOrder | None = None,
        page_number: int | None = None,
        page_size: int | None = None,
    ) -> List[Ship]:
        """Filter, sort, then page the registry."""
        ships = self.sort_ships(self.get_ships(criteria), order)
        return self.get_page(ships, page_number, page_size)

    def sort_ships(self, ships: List[Ship], order: ShipOrder | None) -> List[Ship]:
        return ship_query.sort_ships(ships, order)

    def get_page(
        self, ships: List[Ship], page_number: int | None, page_size: int | None
    ) -> List[Ship]:
        return ship_query.get_page(ships, page_number, page_size)

    def calculate_rating(self, speed: float, is_used: bool, prod_date: date) -> float:
        return rating.calculate_rating(speed, is_used, prod_date)

    def is_ship_valid(self, ship: Ship | None) -> bool:
        return validation.is_ship_valid(ship)

    def get_ship(self, ship_id: int) -> Ship | None:
        return self._repo.get(ship_id)

    def require_ship(self, ship_id: int) -> Ship:
        if ship_id is None or ship_id <= 0:
            raise ShipValidationError(f"Invalid ship id: {ship_id!r}.", ["id"])
        ship = self._repo.get(ship_id)
        if ship is None:
            raise ShipNotFoundError(ship_id)
        return ship

    # Writes

    def create_ship(self, ship: Ship) -> Ship:
        if ship.id is not None:
            raise ShipValidationError("A new ship must not carry an id.", ["id"])

        result = validation.validate_ship(ship)
        if not result.valid:
            _LOG.warning("Rejected new ship %r: %s", ship.name, ", ".join(result.fields))
            raise ShipValidationError.from_issues(result.issues)

        if ship.is_used is None:
            ship.is_used = False

        created = self._repo.create(ship)
        _LOG.info("Created ship %d '%s' (rating %.2f)", created.id, created.name, created.rating)
        return created

    def update_ship(self, old_ship: Ship, changes: ShipUpdate) -> Ship:
        """
        Apply the supplied fields of ``changes`` onto ``old_ship`` and save it.

        Every supplied field is checked before any is written, so a rejected
        update leaves ``old_ship`` exactly as it was and saves nothing.
        ship_type and is_used have no range and are applied as given.
        """
        supplied = changes.supplied()

        issues: List[ValidationIssue] = []
        for name, value in supplied.items():
            issue = validation.check_field(name, value)
            if issue is not None:
                issues.append(issue)
        if issues:
            _LOG.warning(
                "Rejected update of ship %s: %s", old_ship.id, ", ".join(i.field for i in issues)
            )
            raise ShipValidationError.from_issues(issues)

        old_rating = old_ship.rating
        for name, value in supplied.items():
            setattr(old_ship, name, value)

        if any(name in supplied for name in RATING_FIELDS):
            _LOG.info(
                "Ship %s rating recomputed: %s -> %s", old_ship.id, old_rating, old_ship.rating
            )

        self._repo.update(old_ship)
        _LOG.info("Updated ship %s fields: %s", old_ship.id, ", ".join(supplied) or "none")
        return old_ship

    def delete_ship(self, ship_id: int) -> None:
        ship = self.require_ship(ship_id)
        self._repo.delete(ship.id)
        _LOG.info("Deleted ship %d '%s'", ship.id, ship.name)
