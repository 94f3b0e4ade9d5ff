"""Pydeck click handler using streamlit-deckgl for map click support.

Uses st_deckgl from streamlit-deckgl to capture ALL click events including
clicks on empty map space, not just object selections.

The key difference from st.pydeck_chart:
- st.pydeck_chart: Only returns object selections (pickable=True objects)
- st_deckgl: Returns full deck.gl onClick event with coordinate field for ALL clicks
"""

import logging
from dataclasses import dataclass
from typing import Any

import pydeck as pdk
from streamlit_deckgl import st_deckgl  # type: ignore[import-untyped]

from beachmap.constants import MapConfig

logger = logging.getLogger(__name__)


@dataclass
class PydeckClickResult:
    """Result from Pydeck click detection.

    Attributes:
        clicked_object: The picked deck.gl object data (dict) or None for a map click
        clicked_coordinate: [lon, lat] of click location
    """

    clicked_object: dict[str, Any] | None
    clicked_coordinate: list[float] | None

    @staticmethod
    def empty() -> "PydeckClickResult":
        """Return empty result (no click detected)."""
        return PydeckClickResult(clicked_object=None, clicked_coordinate=None)


def parse_click_event(event: dict[str, Any] | None) -> PydeckClickResult:
    """Convert a raw st_deckgl event into a PydeckClickResult.

    st_deckgl SPREADS object properties into the event dict (no "object" key):
    - Map click: {coordinate: [lon, lat], eventType: "click"}
    - Object click: {type: "beach", id: ..., position: [...], coordinate: [lon, lat], eventType: "click"}
    """
    if not event or not isinstance(event, dict):
        return PydeckClickResult.empty()

    clicked_object: dict[str, Any] | None = None
    clicked_coordinate: list[float] | None = None

    coord = event.get("coordinate")
    if isinstance(coord, (list, tuple)) and len(coord) >= 2:
        clicked_coordinate = [float(coord[0]), float(coord[1])]

    # Object properties are spread into the event; our layers set "type"
    if event.get("type") and event["type"] != "click":
        clicked_object = {k: v for k, v in event.items() if k not in ("coordinate", "eventType")}

    return PydeckClickResult(clicked_object=clicked_object, clicked_coordinate=clicked_coordinate)


def render_pydeck_map(
    deck: pdk.Deck,
    key: str,
    height: int = MapConfig.MAP_HEIGHT,
) -> PydeckClickResult:
    """Render Pydeck map with full click support.

    Args:
        deck: Configured pydeck.Deck object
        key: Unique key for this component instance
        height: Height in pixels

    Returns:
        PydeckClickResult with click info (object and/or coordinate)
    """
    # MUST pass events=['click'] to enable click detection
    event = st_deckgl(deck, key=key, height=height, events=["click"])
    logger.debug(f"st_deckgl event: {event}")
    return parse_click_event(event)
