"""
Field limits for ship records and defaults for paged listings.

Bounds follow the registry rules: names up to 50 characters, production year
strictly inside (2800, 3019), speed in [0.01, 0.99] and crew in [1, 9999].
"""

from __future__ import annotations

# Name and planet length (characters)
MAX_STRING_LENGTH = 50

# Production year, exclusive on both ends
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019

# Speed (fraction of light speed), inclusive
MIN_SPEED = 0.01
MAX_SPEED = 0.99

# Crew size, inclusive
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999

# Reference year for rating. Fixed epoch of the registry timeline, not wall-clock.
CURRENT_YEAR = 3019

# Rating multiplier for used ships
USED_SHIP_FACTOR = 0.5

# Paging defaults when the caller leaves them out
DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3
