"""Click detector - turns Pydeck click data into map clicks.

Every click adds a point, whether it lands on empty map space or on an
existing marker; marker clicks are only logged with the picked point id.

The map component reports its last click again on every rerun, so clicks
are deduplicated by rounded coordinate.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from beachmap.constants import ClickConfig
from beachmap.core.projection import MapCoordinate, MapProjection

if TYPE_CHECKING:
    from beachmap.ui.context import ClickDeduplicationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapClick:
    """A new click on the map.

    Attributes:
        lon: Longitude of the click (WGS84)
        lat: Latitude of the click (WGS84)
        point_id: Id of the marker under the click, if any
    """

    lon: float
    lat: float
    point_id: Any = None

    @property
    def coordinate(self) -> MapCoordinate:
        """Click position in the map projection."""
        return MapProjection.from_lon_lat(lon=self.lon, lat=self.lat)


@dataclass
class ClickDetector:
    """Detects new clicks from Pydeck event data.

    Attributes:
        dedup: ClickDeduplicationContext for tracking the last-seen click
    """

    dedup: "ClickDeduplicationContext"

    def detect(
        self,
        clicked_object: dict[str, Any] | None,
        clicked_coordinate: list[float] | None,
    ) -> MapClick | None:
        """Detect click from Pydeck event data.

        Args:
            clicked_object: The picked deck.gl object data (dict) or None
            clicked_coordinate: [lon, lat] of click location or None

        Returns:
            MapClick for new clicks, None otherwise
        """
        lon_lat = self._get_lon_lat(obj=clicked_object, coord=clicked_coordinate)
        if lon_lat is None:
            return None

        lon, lat = lon_lat
        p = ClickConfig.DEDUP_PRECISION
        click_id = f"{lon:.{p}f}_{lat:.{p}f}"
        if not self.dedup.is_new_click(click_id=click_id):
            return None

        point_id = None
        if clicked_object is not None and clicked_object.get("type") == ClickConfig.TYPE_BEACH:
            point_id = clicked_object.get("id")
            logger.debug(f"Click on marker of point {point_id}")

        logger.debug(f"Map click at ({lat:.6f}, {lon:.6f})")
        return MapClick(lon=lon, lat=lat, point_id=point_id)

    @staticmethod
    def _get_lon_lat(obj: dict[str, Any] | None, coord: list[float] | None) -> tuple[float, float] | None:
        """Prefer the event coordinate; fall back to the picked object's position."""
        if coord is not None and len(coord) >= 2:
            return float(coord[0]), float(coord[1])
        if obj is not None:
            position = obj.get("position")
            if isinstance(position, (list, tuple)) and len(position) >= 2:
                return float(position[0]), float(position[1])
        return None
