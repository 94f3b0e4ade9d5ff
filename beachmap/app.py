"""Beach Map - Interactive beach swimmability map.

Click the map to register a beach as fit (PRÓPRIO) or unfit (IMPRÓPRIO)
for swimming. Points are persisted through a REST backend and listed
beside the map.

Run: streamlit run beachmap/app.py
"""

import logging
import traceback

import streamlit as st

from beachmap.constants import AppConfig, MapConfig
from beachmap.core.api_client import BeachApiClient
from beachmap.core.sync import PointSynchronizer
from beachmap.model.message import ClickToAddMessage
from beachmap.model.point_store import PointStore
from beachmap.ui import (
    BeachContext,
    BeachController,
    BeachStateMachine,
    ClickDetector,
    MapRenderer,
    render_pending_dialog,
    render_point_list,
)
from beachmap.ui import infra
from beachmap.ui.pydeck_click_handler import render_pydeck_map

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# SESSION STATE
# =============================================================================


def _build_controller(sm: BeachStateMachine, ctx: BeachContext) -> BeachController:
    """Wire a synchronizer for the session store to the given state machine."""
    sync = PointSynchronizer(
        api=st.session_state.api,
        store=st.session_state.store,
        notify=ctx.messages.push,
    )
    return BeachController(sm=sm, sync=sync)


def init_session_state() -> None:
    """Initialize session state with store, API client and UI components."""
    if "store" not in st.session_state:
        st.session_state.store = PointStore()

    if "api" not in st.session_state:
        st.session_state.api = BeachApiClient()

    if "state_machine" not in st.session_state:
        sm, ctx = BeachStateMachine.create()
        st.session_state.state_machine = sm
        st.session_state.context = ctx
        st.session_state.controller = _build_controller(sm=sm, ctx=ctx)

    if "map_renderer" not in st.session_state:
        st.session_state.map_renderer = MapRenderer(
            center_lon=MapConfig.START_CENTER_LON,
            center_lat=MapConfig.START_CENTER_LAT,
            zoom=MapConfig.DEFAULT_ZOOM,
        )

    if "map_version" not in st.session_state:
        st.session_state.map_version = 0


def reset_ui_state() -> None:
    """Reset UI state to initial while preserving the point store.

    Called when an error occurs to recover gracefully. Resets:
    - State machine to Idle state
    - Context to fresh instance (startup load runs again)
    - Map version (to clear any stale click)

    Preserves:
    - Point store and its map features
    - API client
    """
    logger.info("Resetting UI state due to error recovery")

    sm, ctx = BeachStateMachine.create()
    st.session_state.state_machine = sm
    st.session_state.context = ctx
    st.session_state.controller = _build_controller(sm=sm, ctx=ctx)

    infra.bump_map_version()

    logger.info("UI state reset complete - store preserved")


# =============================================================================
# MAP RENDERING
# =============================================================================


def _render_map(controller: BeachController) -> None:
    """Render the map and turn new clicks into pending points."""
    ctx: BeachContext = controller.ctx
    renderer: MapRenderer = st.session_state.map_renderer
    store: PointStore = controller.sync.store

    renderer.update_view(lat=ctx.map.lat, lon=ctx.map.lon, zoom=ctx.map.zoom)
    deck = renderer.render(features=store.features.get_features())
    click_result = render_pydeck_map(deck=deck, key=f"mapa_{st.session_state.map_version}")

    detector = ClickDetector(dedup=ctx.click_dedup)
    click = detector.detect(
        clicked_object=click_result.clicked_object,
        clicked_coordinate=click_result.clicked_coordinate,
    )
    if click is None:
        return

    logger.info(f"[CLICK] lat={click.lat:.6f}, lon={click.lon:.6f}, on_point={click.point_id}")
    controller.on_map_click(coordinate=click.coordinate)


# =============================================================================
# LIST PANEL
# =============================================================================


def _render_list_panel(controller: BeachController) -> None:
    """Point list plus the clear-all and reload buttons."""
    st.subheader("Praias cadastradas")

    col_clear, col_reload = st.columns(2)
    with col_clear:
        if st.button("🗑️ Limpar todos", key="btn-limpar", use_container_width=True):
            controller.on_clear_request()
    with col_reload:
        if st.button("🔄 Recarregar", key="btn-recarregar", use_container_width=True):
            count = controller.reload()
            logger.info(f"[MAIN] Manual reload: {count} praias")
            infra.trigger_rerun()

    render_point_list(store=controller.sync.store, on_remove=controller.on_remove_request)


# =============================================================================
# MAIN
# =============================================================================


def main() -> None:
    """Application entry point."""
    st.set_page_config(page_title=AppConfig.TITLE, page_icon=AppConfig.ICON, layout=AppConfig.LAYOUT)
    init_session_state()

    st.title(AppConfig.TITLE)

    try:
        _run_app_ui()
    except Exception as e:
        error_msg = f"{type(e).__name__}: {e}"
        full_traceback = traceback.format_exc()
        logger.error(f"[UI] UI error caught: {error_msg}\n{full_traceback}")

        st.error(f"⚠️ [UI] Algo deu errado: {error_msg}")

        # Reset UI state while preserving the store
        reset_ui_state()

        if st.button("🔄 Reiniciar e continuar", type="primary"):
            st.rerun()


def _run_app_ui() -> None:
    """Run the main application UI. Separated for error handling wrapper."""
    sm: BeachStateMachine = st.session_state.state_machine
    ctx: BeachContext = st.session_state.context
    controller: BeachController = st.session_state.controller

    map_version = st.session_state.get("map_version", 0)
    logger.info(f"[MAIN] Render cycle starting: state={sm.get_state_name()}, map_version={map_version}")

    controller.start()
    infra.show_toasts(ctx.messages.pop_all())
    infra.show_alerts(ctx.messages)

    ClickToAddMessage().display()

    col_map, col_list = st.columns([3, 1])

    with col_map:
        _render_map(controller=controller)

    with col_list:
        _render_list_panel(controller=controller)

    render_pending_dialog(controller=controller)


if __name__ == "__main__":
    main()
