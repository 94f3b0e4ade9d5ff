"""Data model classes for beach points.

- BeachPoint: Persisted beach (server id, name, status, lon/lat)
- NewBeachPoint: Beach entered by the user, not yet persisted
- BeachStatus: PROPRIO / IMPROPRIO
- MapFeature / FeatureSource: Point markers mirrored from the store
- PointStore: Ordered list of points owning its FeatureSource
"""

from beachmap.model.beach_point import (
    BeachPoint,
    BeachStatus,
    NewBeachPoint,
    PointId,
    resolve_coordinates,
)
from beachmap.model.map_feature import FeatureSource, MapFeature
from beachmap.model.point_store import PointStore

__all__ = [
    "BeachPoint",
    "BeachStatus",
    "NewBeachPoint",
    "PointId",
    "resolve_coordinates",
    "FeatureSource",
    "MapFeature",
    "PointStore",
]
