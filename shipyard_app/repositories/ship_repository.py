from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import Boolean, Date, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, Session

from shipyard_app.config.limits import MAX_STRING_LENGTH
from .database import Base
from ..models import Ship, ShipType


class ShipORM(Base):
    __tablename__ = "ships"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_STRING_LENGTH), nullable=False)
    planet: Mapped[str] = mapped_column(String(MAX_STRING_LENGTH), nullable=False)
    ship_type: Mapped[ShipType] = mapped_column(Enum(ShipType, name="ship_type"), nullable=False)
    prod_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_used: Mapped[bool] = mapped_column(Boolean, default=False)
    speed: Mapped[float] = mapped_column(Float, nullable=False)
    crew_size: Mapped[int] = mapped_column(Integer, nullable=False)
    # Copy of the derived rating, rewritten on every save
    rating: Mapped[float] = mapped_column(Float, nullable=False)


class ShipRepository:
    """Repository for CRUD operations on ships."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def _to_model(self, obj: ShipORM) -> Ship:
        return Ship(
            id=obj.id,
            name=obj.name,
            planet=obj.planet,
            ship_type=obj.ship_type,
            prod_date=obj.prod_date,
            is_used=obj.is_used,
            speed=obj.speed,
            crew_size=obj.crew_size,
        )

    def _copy_fields(self, obj: ShipORM, ship: Ship) -> None:
        obj.name = ship.name
        obj.planet = ship.planet
        obj.ship_type = ship.ship_type
        obj.prod_date = ship.prod_date
        obj.is_used = bool(ship.is_used)
        obj.speed = ship.speed
        obj.crew_size = ship.crew_size
        obj.rating = ship.rating

    def create(self, ship: Ship) -> Ship:
        obj = ShipORM()
        self._copy_fields(obj, ship)
        self._db.add(obj)
        self._db.commit()
        self._db.refresh(obj)
        ship.id = obj.id
        return ship

    def get(self, ship_id: int) -> Optional[Ship]:
        obj = self._db.get(ShipORM, ship_id)
        if not obj:
            return None
        return self._to_model(obj)

    def list(self) -> List[Ship]:
        """All ships in id order."""
        return [
            self._to_model(obj)
            for obj in self._db.query(ShipORM).order_by(ShipORM.id).all()
        ]

    def count(self) -> int:
        return self._db.query(ShipORM).count()

    def update(self, ship: Ship) -> Ship:
        if ship.id is None:
            raise ValueError("Ship.id must be set for update")
        obj = self._db.get(ShipORM, ship.id)
        if obj is None:
            raise ValueError(f"Ship with id {ship.id} not found")

        self._copy_fields(obj, ship)

        self._db.commit()
        self._db.refresh(obj)
        return ship

    def delete(self, ship_id: int) -> None:
        obj = self._db.get(ShipORM, ship_id)
        if obj is None:
            return
        self._db.delete(obj)
        self._db.commit()
