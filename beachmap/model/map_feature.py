"""MapFeature and FeatureSource - the vector layer behind the point markers.

A MapFeature is one rendered marker. Its geometry is kept in the map
projection while its coordinates are kept in (lon, lat) order for the
renderer.

FeatureSource is an ordered collection of features, mirrored from the
PointStore. It has no knowledge of the server.
"""

import logging
from dataclasses import dataclass, field

from beachmap.core.projection import MapCoordinate, MapProjection
from beachmap.model.beach_point import BeachPoint, BeachStatus, PointId

logger = logging.getLogger(__name__)


@dataclass
class MapFeature:
    """A point marker on the map.

    Attributes:
        id: Id of the BeachPoint this feature represents
        geometry: Position in the map projection
        name: Beach name (used by the tooltip)
        status: Drives marker style
        coordinates: (lon, lat) in decimal degrees
    """

    id: PointId
    geometry: MapCoordinate
    name: str
    status: BeachStatus
    coordinates: tuple[float, float]

    @classmethod
    def from_point(cls, point: BeachPoint) -> "MapFeature":
        """Create the feature for a persisted point."""
        return cls(
            id=point.id,
            geometry=MapProjection.from_lon_lat(lon=point.lon, lat=point.lat),
            name=point.name,
            status=point.status,
            coordinates=point.lon_lat,
        )


@dataclass
class FeatureSource:
    """Ordered collection of map features."""

    _features: list[MapFeature] = field(default_factory=list)

    def add_feature(self, feature: MapFeature) -> None:
        self._features.append(feature)

    def remove_feature(self, feature: MapFeature) -> None:
        self._features.remove(feature)

    def get_features(self) -> list[MapFeature]:
        """Return a copy of the features (safe to iterate while removing)."""
        return list(self._features)

    def find_by_id(self, point_id: PointId) -> MapFeature | None:
        return next((f for f in self._features if f.id == point_id), None)

    def clear(self) -> None:
        self._features.clear()

    def __len__(self) -> int:
        return len(self._features)
