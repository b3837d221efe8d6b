"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
import tempfile
from datetime import date
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from shipyard_app.models import Ship, ShipType


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database and return its path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    try:
        path.unlink(missing_ok=True)
    except OSError:
        pass  # Windows may hold file; ignore cleanup failure


@pytest.fixture
def db_session(temp_db):
    """Provide a database session with initialized schema."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from shipyard_app.repositories.database import Base
    from shipyard_app.repositories.ship_repository import ShipORM  # noqa: F401

    engine = create_engine(f"sqlite:///{temp_db}", future=True)
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def sample_ship():
    """Create a valid, unsaved Ship domain object."""
    return Ship(
        id=None,
        name="Test Vessel",
        planet="Mars",
        ship_type=ShipType.TRANSPORT,
        prod_date=date(3018, 5, 1),
        is_used=False,
        speed=0.5,
        crew_size=100,
    )


@pytest.fixture
def make_ship():
    """Factory for valid ships; keyword arguments override the defaults."""

    def _make(**overrides) -> Ship:
        values = dict(
            name="Ship",
            planet="Earth",
            ship_type=ShipType.MERCHANT,
            prod_date=date(3000, 1, 1),
            is_used=False,
            speed=0.5,
            crew_size=10,
        )
        values.update(overrides)
        return Ship(**values)

    return _make
