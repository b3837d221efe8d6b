"""
Repository layer for persistence (SQLite via SQLAlchemy).
"""

from .database import SessionLocal, Base, init_database
from .ship_repository import ShipRepository

__all__ = [
    "SessionLocal",
    "Base",
    "init_database",
    "ShipRepository",
]
