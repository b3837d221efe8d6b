"""
Validation rules for ship records.

The ``is_*`` predicates are plain checks with no side effects. ``validate_ship``
runs the same checks and lists every failing field so a caller can report
them together.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List

from shipyard_app.config.limits import (
    MAX_CREW_SIZE,
    MAX_PROD_YEAR,
    MAX_SPEED,
    MAX_STRING_LENGTH,
    MIN_CREW_SIZE,
    MIN_PROD_YEAR,
    MIN_SPEED,
)
from shipyard_app.models import Ship


def is_string_valid(value: str | None) -> bool:
    return value is not None and 1 <= len(value) <= MAX_STRING_LENGTH


def is_prod_date_valid(prod_date: date | None) -> bool:
    return prod_date is not None and MIN_PROD_YEAR < prod_date.year < MAX_PROD_YEAR


def is_speed_valid(speed: float | None) -> bool:
    return speed is not None and MIN_SPEED <= speed <= MAX_SPEED


def is_crew_size_valid(crew_size: int | None) -> bool:
    return crew_size is not None and MIN_CREW_SIZE <= crew_size <= MAX_CREW_SIZE


# Range-checked fields: field name -> (predicate, message)
FIELD_RULES = {
    "name": (is_string_valid, f"Name must be 1 to {MAX_STRING_LENGTH} characters."),
    "planet": (is_string_valid, f"Planet must be 1 to {MAX_STRING_LENGTH} characters."),
    "prod_date": (
        is_prod_date_valid,
        f"Production year must be after {MIN_PROD_YEAR} and before {MAX_PROD_YEAR}.",
    ),
    "speed": (is_speed_valid, f"Speed must be between {MIN_SPEED} and {MAX_SPEED}."),
    "crew_size": (
        is_crew_size_valid,
        f"Crew size must be between {MIN_CREW_SIZE} and {MAX_CREW_SIZE}.",
    ),
}


@dataclass(slots=True)
class ValidationIssue:
    field: str
    message: str
    value: Any = None


@dataclass(slots=True)
class ValidationResult:
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def fields(self) -> List[str]:
        return [i.field for i in self.issues]


def check_field(name: str, value: Any) -> ValidationIssue | None:
    """Check one range-checked field; fields without a rule always pass."""
    rule = FIELD_RULES.get(name)
    if rule is None:
        return None
    predicate, message = rule
    if predicate(value):
        return None
    return ValidationIssue(field=name, message=message, value=value)


def is_ship_valid(ship: Ship | None) -> bool:
    """True when name, planet, prod_date, speed and crew_size are all in range."""
    return (
        ship is not None
        and is_string_valid(ship.name)
        and is_string_valid(ship.planet)
        and is_prod_date_valid(ship.prod_date)
        and is_speed_valid(ship.speed)
        and is_crew_size_valid(ship.crew_size)
    )


def validate_ship(ship: Ship) -> ValidationResult:
    """
    Run every check for a new record, including the required ship type.
    """
    result = ValidationResult()
    for name in FIELD_RULES:
        issue = check_field(name, getattr(ship, name))
        if issue is not None:
            result.issues.append(issue)
    if ship.ship_type is None:
        result.issues.append(
            ValidationIssue(field="ship_type", message="Ship type is required.")
        )
    return result
