"""List panel - the "lista-praias" view of stored points.

The list is regenerated from scratch on every run:
- build_list_rows(): pure row construction (testable without Streamlit)
- render_point_list(): draws the rows with a remove button per row
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import streamlit as st

from beachmap.constants import ListConfig, StatusConfig
from beachmap.model.beach_point import BeachPoint, BeachStatus, PointId
from beachmap.model.point_store import PointStore

logger = logging.getLogger(__name__)

LIST_KEY = "lista-praias"


@dataclass(frozen=True)
class ListRow:
    """One rendered row of the point list.

    Attributes:
        point_id: Id passed to the remove handler
        title: Beach name, uppercased
        status_label: "PRÓPRIO" / "IMPRÓPRIO"
        status_class: Style class per status ("proprio" / "improprio")
        coordinates_text: "Lat: ..., Lon: ..." with fixed precision
    """

    point_id: PointId
    title: str
    status_label: str
    status_class: str
    coordinates_text: str

    @property
    def color(self) -> str:
        return StatusConfig.LIST_COLORS[self.status_class]

    @property
    def icon(self) -> str:
        return StatusConfig.ICONS[self.status_class]


def build_list_rows(points: list[BeachPoint]) -> list[ListRow]:
    """Build one row per point, in store order."""
    return [
        ListRow(
            point_id=point.id,
            title=point.name.upper(),
            status_label=point.status.label,
            status_class=point.status.value,
            coordinates_text=point.coordinates_text,
        )
        for point in points
    ]


def _render_summary(store: PointStore) -> None:
    counts = store.count_by_status()
    proprio = counts[BeachStatus.PROPRIO]
    improprio = counts[BeachStatus.IMPROPRIO]
    st.markdown(
        f"**{len(store)} praias** • "
        f"{StatusConfig.ICONS[StatusConfig.PROPRIO]} {proprio} • "
        f"{StatusConfig.ICONS[StatusConfig.IMPROPRIO]} {improprio}"
    )


def render_point_list(store: PointStore, on_remove: Callable[[PointId], None]) -> None:
    """Render the point list with a "Remover" button per row.

    Args:
        store: Point store (rows follow its order)
        on_remove: Called with the point id when a remove button is clicked
    """
    rows = build_list_rows(store.points)

    with st.container(key=LIST_KEY):
        if not rows:
            st.caption(ListConfig.EMPTY_TEXT)
            return

        _render_summary(store)
        for row in rows:
            with st.container(border=True):
                col_info, col_btn = st.columns([3, 1])
                with col_info:
                    st.markdown(f"**{row.title}**  \n{row.icon} :{row.color}[**{row.status_label}**]")
                    st.caption(row.coordinates_text)
                with col_btn:
                    if st.button("Remover", key=f"remover_{row.point_id}", help="Remover esta praia"):
                        logger.info(f"Remove clicked for point {row.point_id}")
                        on_remove(row.point_id)
