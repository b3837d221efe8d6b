"""
Ship rating: how fast a ship is for its age.

    k = 0.5 for a used ship, 1.0 otherwise
    rating = 80 * speed * k / (CURRENT_YEAR - prod_year + 1)

rounded half-up to two decimals. CURRENT_YEAR is the registry's fixed epoch
(3019), so ratings do not drift with the wall clock.
"""

from __future__ import annotations

import math
from datetime import date

from shipyard_app.config.limits import CURRENT_YEAR, USED_SHIP_FACTOR


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals with halves going up (not banker's rounding)."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def calculate_rating(speed: float, is_used: bool, prod_date: date) -> float:
    """Return the rating for validated inputs; the year gap is always >= 1."""
    k = USED_SHIP_FACTOR if is_used else 1.0
    age = CURRENT_YEAR - prod_date.year + 1
    return round_half_up((80 * speed * k) / age)
