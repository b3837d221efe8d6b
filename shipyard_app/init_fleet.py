from __future__ import annotations

"""
One-time initializer for a small demo fleet.

Run from the project root with:

    python -m shipyard_app.init_fleet

This will:
- create the database and tables if they do not exist,
- add the demo ships when the registry is empty,
- log the first page of the registry, best rated first.
"""

import logging
from datetime import date
from typing import List

from shipyard_app.config.settings import Settings, init_logging
from shipyard_app.models import Ship, ShipOrder, ShipType
from shipyard_app.repositories import database
from shipyard_app.services.ship_service import ShipService

_LOG = logging.getLogger(__name__)


DEMO_FLEET: List[Ship] = [
    Ship(name="Orion III", planet="Mars", ship_type=ShipType.MERCHANT,
         prod_date=date(2995, 3, 14), is_used=True, speed=0.82, crew_size=617),
    Ship(name="Daedalus", planet="Jupiter", ship_type=ShipType.TRANSPORT,
         prod_date=date(3017, 6, 1), is_used=False, speed=0.94, crew_size=1619),
    Ship(name="Eagle Transporter", planet="Earth", ship_type=ShipType.TRANSPORT,
         prod_date=date(2988, 11, 23), is_used=True, speed=0.79, crew_size=4527),
    Ship(name="Nostromo", planet="Saturn", ship_type=ShipType.MERCHANT,
         prod_date=date(3003, 1, 9), is_used=True, speed=0.17, crew_size=7),
    Ship(name="Nebuchadnezzar", planet="Venus", ship_type=ShipType.MILITARY,
         prod_date=date(2999, 8, 30), is_used=False, speed=0.62, crew_size=9),
    Ship(name="Serenity", planet="Neptune", ship_type=ShipType.TRANSPORT,
         prod_date=date(3018, 2, 2), is_used=False, speed=0.31, crew_size=9),
]


def init_fleet() -> None:
    # Ensure the database/session are initialized on first use.
    session_factory = database.SessionLocal
    if session_factory is None:
        settings = Settings.default()
        init_logging(settings)
        session_factory = database.init_database(settings.db_path)

    with session_factory() as db:
        service = ShipService(db)
        if service.count_ships() == 0:
            for ship in DEMO_FLEET:
                service.create_ship(
                    Ship(
                        name=ship.name,
                        planet=ship.planet,
                        ship_type=ship.ship_type,
                        prod_date=ship.prod_date,
                        is_used=ship.is_used,
                        speed=ship.speed,
                        crew_size=ship.crew_size,
                    )
                )

        ships = service.sort_ships(service.get_ships(), ShipOrder.RATING)
        ships.reverse()
        for ship in service.get_page(ships, 0, 3):
            _LOG.info("%-20s %-8s %.2f", ship.name, ship.planet, ship.rating)

    _LOG.info("Demo fleet initialized.")


if __name__ == "__main__":
    init_fleet()
