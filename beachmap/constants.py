"""Configuration constants for Beach Map.

All configurable parameters are centralized here for easy tuning.

Classes:
    AppConfig: UI application settings
    ApiConfig: REST backend location and request settings
    MapConfig: Default map view parameters
    StatusConfig: Status values, labels and colors
    MarkerConfig: Map marker styling
    ListConfig: Point list formatting
    ClickConfig: Click detection settings
"""

import os


def _env_float(name: str) -> float | None:
    """Read an optional float from the environment."""
    value = os.environ.get(name)
    return float(value) if value else None


class AppConfig:
    """UI application settings."""

    TITLE = "Sistema de Balneabilidade"
    ICON = "🏖️"
    LAYOUT = "wide"


class ApiConfig:
    """REST backend settings.

    BASE_URL and TIMEOUT_S can be overridden through the environment
    (BEACHMAP_API_URL, BEACHMAP_API_TIMEOUT).
    """

    DEFAULT_BASE_URL = "http://localhost:8080/api/praias"
    BASE_URL = os.environ.get("BEACHMAP_API_URL", DEFAULT_BASE_URL).rstrip("/")

    # None = wait indefinitely (single attempt, no retries)
    TIMEOUT_S: float | None = _env_float("BEACHMAP_API_TIMEOUT")

    JSON_HEADERS = {"Content-Type": "application/json"}


class MapConfig:
    """Default map view parameters."""

    # Initial center: Praia de Jatiúca, Maceió/AL
    START_CENTER_LON = -35.7089
    START_CENTER_LAT = -9.6658
    DEFAULT_ZOOM = 13

    # Flat top-down view
    DEFAULT_PITCH = 0.0
    DEFAULT_BEARING = 0.0

    MAP_HEIGHT = 600

    # Map projection (Web Mercator) and geographic CRS
    MAP_CRS = "EPSG:3857"
    GEO_CRS = "EPSG:4326"


class StatusConfig:
    """Beach status values and their presentation."""

    PROPRIO = "proprio"
    IMPROPRIO = "improprio"
    VALUES = (PROPRIO, IMPROPRIO)

    LABELS = {
        PROPRIO: "PRÓPRIO",
        IMPROPRIO: "IMPRÓPRIO",
    }
    # Streamlit markdown color names used in the list panel
    LIST_COLORS = {
        PROPRIO: "green",
        IMPROPRIO: "red",
    }
    ICONS = {
        PROPRIO: "🟢",
        IMPROPRIO: "🔴",
    }

    # Marker colors as RGBA lists [R, G, B, A]
    FILL_COLORS = {
        PROPRIO: [0, 128, 0, 255],  # green
        IMPROPRIO: [255, 0, 0, 255],  # red
    }
    STROKE_COLORS = {
        PROPRIO: [0, 100, 0, 255],  # darkgreen
        IMPROPRIO: [139, 0, 0, 255],  # darkred
    }
    assert set(LABELS) == set(VALUES)
    assert set(FILL_COLORS) == set(VALUES)
    assert set(STROKE_COLORS) == set(VALUES)


class MarkerConfig:
    """Map marker styling."""

    RADIUS_PX = 8
    STROKE_WIDTH_PX = 2
    HIGHLIGHT_COLOR = [255, 255, 0, 180]


class ListConfig:
    """Point list formatting."""

    COORD_PRECISION = 6
    EMPTY_TEXT = "Nenhuma praia cadastrada"


class ClickConfig:
    """Click detection configuration."""

    # Type tag carried by every beach marker in the point layer
    TYPE_BEACH = "beach"

    # Pixel tolerance for picking markers
    PICKING_RADIUS_PX = 6

    # Decimal places used when comparing click coordinates for deduplication
    DEDUP_PRECISION = 6
