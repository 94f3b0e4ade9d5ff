"""MapRenderer - Pydeck map rendering for beach points.

Renders the point layer over an OpenStreetMap basemap:
- One ScatterplotLayer marker per MapFeature
- Fill/stroke color by status (green = proprio, red = improprio)
- pickable=True so clicks on markers report the point id

Pydeck conventions:
- Uses [lon, lat] coordinate order (GeoJSON standard)
- Colors as RGBA lists [R, G, B, A] (0-255)
- Data prepared as list[dict]
"""

import logging
from typing import Any

import pydeck as pdk

from beachmap.constants import ClickConfig, MapConfig, MarkerConfig, StatusConfig
from beachmap.model.map_feature import MapFeature
from beachmap.ui.basemap import OSM_STYLE

logger = logging.getLogger(__name__)


class MapRenderer:
    """Renders map features on a Pydeck map.

    Example:
        renderer = MapRenderer()
        deck = renderer.render(features=store.features.get_features())
    """

    def __init__(
        self,
        center_lat: float = MapConfig.START_CENTER_LAT,
        center_lon: float = MapConfig.START_CENTER_LON,
        zoom: int = MapConfig.DEFAULT_ZOOM,
    ) -> None:
        self.center_lat = center_lat
        self.center_lon = center_lon
        self.zoom = zoom

    def get_view_state(self) -> pdk.ViewState:
        """Create Pydeck ViewState from current settings."""
        return pdk.ViewState(
            latitude=self.center_lat,
            longitude=self.center_lon,
            zoom=self.zoom,
            pitch=MapConfig.DEFAULT_PITCH,
            bearing=MapConfig.DEFAULT_BEARING,
        )

    def update_view(self, lat: float | None = None, lon: float | None = None, zoom: int | None = None) -> None:
        """Update view state parameters."""
        if lat is not None:
            self.center_lat = lat
        if lon is not None:
            self.center_lon = lon
        if zoom is not None:
            self.zoom = zoom

    def render(self, features: list[MapFeature]) -> pdk.Deck:
        """Render the basemap plus one marker per feature."""
        return pdk.Deck(
            map_style=OSM_STYLE,
            map_provider="mapbox",  # Required when map_style is a dict
            initial_view_state=self.get_view_state(),
            layers=[self.create_point_layer(features=features)],
            tooltip=self._create_tooltip_config(),
            parameters={"pickingRadius": ClickConfig.PICKING_RADIUS_PX},
        )

    @staticmethod
    def feature_to_datum(feature: MapFeature) -> dict[str, Any]:
        """Layer datum for one feature; "type" and "id" drive click detection."""
        status = feature.status.value
        return {
            "type": ClickConfig.TYPE_BEACH,
            "id": feature.id,
            "name": feature.name,
            "status": status,
            "status_label": StatusConfig.LABELS[status],
            "position": list(feature.coordinates),
            "fill_color": StatusConfig.FILL_COLORS[status],
            "line_color": StatusConfig.STROKE_COLORS[status],
        }

    def create_point_layer(self, features: list[MapFeature]) -> pdk.Layer:
        """Create the ScatterplotLayer with one marker per feature."""
        data = [self.feature_to_datum(feature) for feature in features]
        logger.debug(f"[MAP] Rendering {len(data)} markers")

        return pdk.Layer(
            "ScatterplotLayer",
            data,
            get_position="position",
            get_fill_color="fill_color",
            get_line_color="line_color",
            get_radius=MarkerConfig.RADIUS_PX,
            radius_units="pixels",
            stroked=True,
            line_width_units="pixels",
            get_line_width=MarkerConfig.STROKE_WIDTH_PX,
            pickable=True,
            auto_highlight=True,
            highlight_color=MarkerConfig.HIGHLIGHT_COLOR,
            id="praias",
        )

    def _create_tooltip_config(self) -> dict[str, str | dict[str, str]]:
        """Tooltip with name and status label."""
        return {
            "html": "<b>{name}</b><br/>{status_label}",
            "style": {
                "backgroundColor": "rgba(255, 255, 255, 0.95)",
                "color": "#333",
                "padding": "6px 10px",
                "borderRadius": "4px",
            },
        }
