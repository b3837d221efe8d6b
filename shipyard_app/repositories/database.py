"""
SQLAlchemy database setup for the shipyard registry.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase


class Base(DeclarativeBase):
    """Base declarative class for ORM models."""

    pass


# Will be assigned a sessionmaker instance by init_database at startup
SessionLocal: sessionmaker | None = None


def init_database(db_path: Path) -> sessionmaker:
    """
    Initialize the SQLite database, create tables, and configure SessionLocal.

    This must be called once at startup (done in init_fleet.py).
    """
    # Import ORM models so their metadata is registered on Base
    from .ship_repository import ShipORM  # noqa: F401

    engine = create_engine(f"sqlite:///{db_path}", future=True, echo=False)
    Base.metadata.create_all(bind=engine)

    global SessionLocal
    SessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )
    return SessionLocal
