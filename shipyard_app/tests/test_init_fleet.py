"""Tests for the demo fleet initializer."""

from __future__ import annotations

from shipyard_app.init_fleet import DEMO_FLEET, init_fleet
from shipyard_app.repositories import database
from shipyard_app.services.ship_service import ShipService
from shipyard_app.services.validation import is_ship_valid


def test_demo_fleet_is_valid():
    assert all(is_ship_valid(s) for s in DEMO_FLEET)


def test_init_fleet_seeds_once(temp_db, monkeypatch):
    monkeypatch.setattr(database, "SessionLocal", None)
    session_factory = database.init_database(temp_db)

    init_fleet()
    init_fleet()

    with session_factory() as db:
        ships = ShipService(db).get_ships()
    assert len(ships) == len(DEMO_FLEET)
    assert all(s.id is not None for s in ships)
    # templates are copied, never saved themselves
    assert all(s.id is None for s in DEMO_FLEET)


def test_init_logging_with_explicit_settings(tmp_path):
    from shipyard_app.config.settings import Settings, init_logging

    settings = Settings(project_root=tmp_path, data_dir=tmp_path, db_path=tmp_path / "fleet.db")
    init_logging(settings)
    assert settings.db_path.parent == tmp_path
