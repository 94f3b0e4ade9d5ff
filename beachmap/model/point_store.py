"""PointStore - In-memory ordered list of persisted beach points.

The store owns the list of BeachPoints and the FeatureSource that mirrors
them on the map. Every mutation keeps both in step:

- append(): adds the point and exactly one feature carrying its id
- remove(): removes the point and its feature (at most one of each)
- replace_all(): discards everything and repopulates from a list
- clear(): empties both

The store is a plain container. It never talks to the server; the
PointSynchronizer decides when a mutation is allowed.
"""

import logging
from collections.abc import Iterator

from beachmap.model.beach_point import BeachPoint, BeachStatus, PointId
from beachmap.model.map_feature import FeatureSource, MapFeature

logger = logging.getLogger(__name__)


class PointStore:
    """Ordered beach points mirrored onto a feature source.

    Example:
        store = PointStore()
        store.append(point=BeachPoint(id=1, name="Pajuçara", status=BeachStatus.PROPRIO, lon=-35.72, lat=-9.67))
        len(store)  # 1
        len(store.features)  # 1
    """

    def __init__(self, features: FeatureSource | None = None) -> None:
        self._points: list[BeachPoint] = []
        self.features = features if features is not None else FeatureSource()

    @property
    def points(self) -> list[BeachPoint]:
        """Snapshot of stored points in insertion order."""
        return list(self._points)

    def get(self, point_id: PointId) -> BeachPoint | None:
        return next((p for p in self._points if p.id == point_id), None)

    def append(self, point: BeachPoint) -> None:
        """Add a persisted point and its map feature."""
        self._points.append(point)
        self.features.add_feature(MapFeature.from_point(point))

    def remove(self, point_id: PointId) -> bool:
        """Remove the point with the given id and its feature.

        Returns:
            True if a point was removed.
        """
        point = self.get(point_id)
        if point is not None:
            self._points.remove(point)

        feature = self.features.find_by_id(point_id)
        if feature is not None:
            self.features.remove_feature(feature)

        return point is not None

    def replace_all(self, points: list[BeachPoint]) -> None:
        """Discard current points and features, then load the given points."""
        self.clear()
        for point in points:
            self.append(point)

    def clear(self) -> None:
        self._points.clear()
        self.features.clear()

    def count_by_status(self) -> dict[BeachStatus, int]:
        """Number of points per status (every status present, possibly 0)."""
        counts = {status: 0 for status in BeachStatus}
        for point in self._points:
            counts[point.status] += 1
        return counts

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[BeachPoint]:
        return iter(self.points)

    def __repr__(self) -> str:
        return f"PointStore(points={len(self._points)}, features={len(self.features)})"
