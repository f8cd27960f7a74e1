"""Route ORM — persisted route records and their single latest-update row.

Invariants:
    - routes.id is assigned by the store (no autoincrement): ids stay dense from 0
    - route_updates.route_id is both PK and FK: at most one update row per route
    - routes.hash is indexed but NOT unique: update may duplicate a hash

Design Decisions:
    - Geolocation and boundaries flattened into columns: no JSON column, queryable
"""

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from route_registry.db.base import Base


class RouteRow(Base):
    __tablename__ = "routes"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    hash: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    safety_level: Mapped[int] = mapped_column(Integer, nullable=False)
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lon: Mapped[float] = mapped_column(Float, nullable=False)
    min_lat: Mapped[float] = mapped_column(Float, nullable=False)
    max_lat: Mapped[float] = mapped_column(Float, nullable=False)
    min_lon: Mapped[float] = mapped_column(Float, nullable=False)
    max_lon: Mapped[float] = mapped_column(Float, nullable=False)
    route_type: Mapped[str] = mapped_column(String(16), nullable=False)
    distance: Mapped[float] = mapped_column(Float, nullable=False)
    elevation: Mapped[float] = mapped_column(Float, nullable=False)
    weather_condition: Mapped[str] = mapped_column(String(16), nullable=False)
    traffic_status: Mapped[str] = mapped_column(String(16), nullable=False)
    emergency_status: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    timestamp: Mapped[int] = mapped_column(Integer, nullable=False)
    creator: Mapped[str] = mapped_column(String(255), nullable=False)


class RouteUpdateRow(Base):
    __tablename__ = "route_updates"

    route_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("routes.id"), primary_key=True,
    )
    update_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    update_description: Mapped[str] = mapped_column(String(500), nullable=False)
    update_safety_level: Mapped[int] = mapped_column(Integer, nullable=False)
    update_timestamp: Mapped[int] = mapped_column(Integer, nullable=False)
    updater: Mapped[str] = mapped_column(String(255), nullable=False)
