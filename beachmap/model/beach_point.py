"""BeachPoint - A named beach location tagged swimmable or not.

A BeachPoint is the single entity of the application. It exists in two
flavors along its lifecycle:

- NewBeachPoint: entered by the user, not yet persisted (no id)
- BeachPoint: persisted on the server, always carries the server id

Wire format (the REST backend speaks Portuguese field names):
    {"id": 42, "nome": "Jatiúca", "status": "proprio",
     "coordenadas": [lon, lat], "latitude": lat, "longitude": lon}

Coordinates arrive either as a combined "coordenadas" pair in [lon, lat]
order or as separate "latitude"/"longitude" fields. resolve_coordinates()
decides which one to trust.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from beachmap.constants import ListConfig, StatusConfig

logger = logging.getLogger(__name__)

# Server ids are opaque; the reference backend uses integers
PointId = int | str


class BeachStatus(Enum):
    """Swimmability of a beach."""

    PROPRIO = StatusConfig.PROPRIO  # Fit for swimming
    IMPROPRIO = StatusConfig.IMPROPRIO  # Unfit for swimming

    @property
    def label(self) -> str:
        """Uppercase display label (e.g. "PRÓPRIO")."""
        return StatusConfig.LABELS[self.value]

    @classmethod
    def from_confirmation(cls, is_proprio: bool) -> "BeachStatus":
        """Map the yes/no swimmability question to a status."""
        return cls.PROPRIO if is_proprio else cls.IMPROPRIO


def _is_valid_component(value: Any) -> bool:
    """True for a finite, non-zero number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value != 0


def resolve_coordinates(record: dict[str, Any]) -> tuple[float, float] | None:
    """Resolve (lon, lat) for a raw server record.

    Policy:
        1. "coordenadas" pair [lon, lat] when both components are non-zero
        2. separate "longitude"/"latitude" fields when both are non-zero
        3. None otherwise (caller skips the record)

    Args:
        record: Raw point record as returned by the API

    Returns:
        (lon, lat) tuple in WGS84 degrees, or None if unresolvable.
    """
    pair = record.get("coordenadas")
    if isinstance(pair, (list, tuple)) and len(pair) == 2:
        lon, lat = pair
        if _is_valid_component(lon) and _is_valid_component(lat):
            return float(lon), float(lat)

    lon = record.get("longitude")
    lat = record.get("latitude")
    if _is_valid_component(lon) and _is_valid_component(lat):
        return float(lon), float(lat)

    return None


@dataclass(frozen=True)
class NewBeachPoint:
    """A beach entered by the user and not yet persisted.

    Attributes:
        name: Beach name (non-empty)
        status: Swimmability status
        lon: Longitude in decimal degrees (WGS84)
        lat: Latitude in decimal degrees (WGS84)
    """

    name: str
    status: BeachStatus
    lon: float
    lat: float

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Beach name must not be empty")

    def to_payload(self) -> dict[str, Any]:
        """Request body for POST, coordinates in [lon, lat] order."""
        return {
            "nome": self.name,
            "status": self.status.value,
            "coordenadas": [self.lon, self.lat],
        }


@dataclass
class BeachPoint:
    """A persisted beach point.

    Attributes:
        id: Server-assigned identifier
        name: Beach name
        status: Swimmability status
        lon: Longitude in decimal degrees (WGS84)
        lat: Latitude in decimal degrees (WGS84)
    """

    id: PointId
    name: str
    status: BeachStatus
    lon: float
    lat: float

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - GeoJSON/Pydeck order."""
        return (self.lon, self.lat)

    @property
    def coordinates_text(self) -> str:
        """Coordinates formatted for the point list."""
        p = ListConfig.COORD_PRECISION
        return f"Lat: {self.lat:.{p}f}, Lon: {self.lon:.{p}f}"

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "BeachPoint | None":
        """Build a BeachPoint from a raw record of the server's list.

        Returns:
            BeachPoint, or None if the record has no id, no name, an unknown
            status or no resolvable coordinates.
        """
        point_id = record.get("id")
        if point_id is None:
            logger.warning(f"Praia sem id: {record}")
            return None

        name = _echoed_name(record)
        if name is None:
            logger.warning(f"Praia sem nome: {record}")
            return None

        status = _echoed_status(record)
        if status is None:
            logger.warning(f"Praia com status inválido: {record}")
            return None

        lon_lat = resolve_coordinates(record)
        if lon_lat is None:
            logger.warning(f"Praia sem coordenadas válidas: {record}")
            return None

        return cls(id=point_id, name=name, status=status, lon=lon_lat[0], lat=lon_lat[1])

    @classmethod
    def from_created(cls, record: dict[str, Any], submitted: NewBeachPoint) -> "BeachPoint | None":
        """Build the stored point from the POST echo of a submitted point.

        Only the server id is required. Name, status and coordinates are
        taken from the echo when present and valid, otherwise from what was
        submitted.

        Returns:
            BeachPoint, or None if the echo carries no id.
        """
        point_id = record.get("id")
        if point_id is None:
            return None

        lon, lat = resolve_coordinates(record) or (submitted.lon, submitted.lat)
        return cls(
            id=point_id,
            name=_echoed_name(record) or submitted.name,
            status=_echoed_status(record) or submitted.status,
            lon=lon,
            lat=lat,
        )

    def __repr__(self) -> str:
        return f"BeachPoint({self.id}, {self.name!r}, {self.status.value}, lon={self.lon:.6f}, lat={self.lat:.6f})"


def _echoed_name(record: dict[str, Any]) -> str | None:
    name = record.get("nome")
    if isinstance(name, str) and name.strip():
        return name
    return None


def _echoed_status(record: dict[str, Any]) -> BeachStatus | None:
    try:
        return BeachStatus(record.get("status"))
    except ValueError:
        return None
