"""Map projection helpers.

The map works in Web Mercator (EPSG:3857), the projection of the tile grid.
Storage and the REST API use geographic WGS84 degrees (EPSG:4326).

Conversions go through pyproj with always_xy=True so that every tuple in
this module is (x, y) = (lon, lat) order.
"""

from dataclasses import dataclass
from functools import lru_cache

import pyproj

from beachmap.constants import MapConfig


@dataclass(frozen=True)
class MapCoordinate:
    """A position in the map projection (EPSG:3857 meters)."""

    x: float
    y: float


@lru_cache(maxsize=None)
def _transformer(source: str, target: str) -> pyproj.Transformer:
    return pyproj.Transformer.from_crs(pyproj.CRS(source), pyproj.CRS(target), always_xy=True)


class MapProjection:
    """Static conversions between map coordinates and lon/lat."""

    @staticmethod
    def to_lon_lat(coordinate: MapCoordinate) -> tuple[float, float]:
        """Convert a map coordinate to (lon, lat) in decimal degrees."""
        to_geo = _transformer(MapConfig.MAP_CRS, MapConfig.GEO_CRS)
        lon, lat = to_geo.transform(coordinate.x, coordinate.y)
        return float(lon), float(lat)

    @staticmethod
    def from_lon_lat(lon: float, lat: float) -> MapCoordinate:
        """Convert (lon, lat) in decimal degrees to a map coordinate."""
        to_map = _transformer(MapConfig.GEO_CRS, MapConfig.MAP_CRS)
        x, y = to_map.transform(lon, lat)
        return MapCoordinate(x=float(x), y=float(y))
