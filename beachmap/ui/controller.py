"""BeachController - the UI-event interface of the application.

The presentation layer (map, list, buttons, dialogs) only ever calls these
methods:

    on_map_click(coordinate)   -> opens the name/status prompt
    on_remove_request(id)      -> opens the removal confirmation
    on_clear_request()         -> opens the clear-all confirmation
    start()                    -> initial load, once per session

plus the answers to the prompts (submit_point, confirm_removal, ...).

Each answer runs the server work through the PointSynchronizer first and
then fires the closing transition. With the Streamlit listener attached the
transition triggers st.rerun(), so it must be the last statement.
"""

import logging

from beachmap.core.projection import MapCoordinate
from beachmap.core.sync import ClearReport, PointSynchronizer
from beachmap.model.beach_point import BeachPoint, BeachStatus, PointId
from beachmap.ui.state_machine import BeachStateMachine

logger = logging.getLogger(__name__)


class BeachController:
    """Wires user events to the state machine and the synchronizer.

    Example:
        sm, ctx = BeachStateMachine.create()
        controller = BeachController(sm=sm, sync=sync)
        controller.on_map_click(coordinate=MapCoordinate(x=-3975000.0, y=-1081000.0))
        controller.submit_point(name="Jatiúca", is_proprio=True)
    """

    def __init__(self, sm: BeachStateMachine, sync: PointSynchronizer) -> None:
        self.sm = sm
        self.ctx = sm.context
        self.sync = sync

    # =========================================================================
    # STARTUP
    # =========================================================================

    def start(self) -> None:
        """Load points from the server once per session."""
        if self.ctx.session.loaded:
            return
        self.ctx.session.loaded = True
        count = self.sync.load_all()
        logger.info(f"[MAIN] Initial load: {count} praias")

    def reload(self) -> int:
        """Reload points from the server on demand."""
        return self.sync.load_all()

    # =========================================================================
    # ADD POINT
    # =========================================================================

    def on_map_click(self, coordinate: MapCoordinate) -> bool:
        """Start adding a point at the clicked map coordinate.

        Returns:
            True if the name prompt was opened, False if another prompt is open.
        """
        return self.sm.try_transition("click_map", coordinate=coordinate)

    def submit_point(self, name: str | None, is_proprio: bool) -> BeachPoint | None:
        """Answer the name/status prompt.

        An empty or missing name abandons the action.

        Args:
            name: Entered beach name
            is_proprio: Answer to "is the beach fit for swimming?"

        Returns:
            The stored point, or None if abandoned or not accepted by the server.
        """
        coordinate = self.ctx.pending.coordinate
        if coordinate is None:
            raise ValueError("submit_point called without a pending map click")

        name = (name or "").strip()
        if not name:
            logger.info("Empty beach name - abandoning new point")
            self.sm.cancel_point()
            return None

        point = self.sync.add_point(
            coordinate=coordinate,
            name=name,
            status=BeachStatus.from_confirmation(is_proprio),
        )
        self.sm.submit_point()
        return point

    def cancel_point(self) -> None:
        self.sm.cancel_point()

    # =========================================================================
    # REMOVE POINT
    # =========================================================================

    def on_remove_request(self, point_id: PointId) -> bool:
        """Ask for confirmation before removing a point."""
        if self.sync.store.get(point_id) is None:
            logger.warning(f"Remove requested for unknown point {point_id}")
            return False
        return self.sm.try_transition("request_removal", point_id=point_id)

    def confirm_removal(self) -> bool:
        """User confirmed: delete on server, then locally.

        Returns:
            True if the point was removed.
        """
        point_id = self.ctx.removal.point_id
        if point_id is None:
            raise ValueError("confirm_removal called without a point selected")
        removed = self.sync.remove_point(point_id)
        self.sm.confirm_removal()
        return removed

    def cancel_removal(self) -> None:
        self.sm.cancel_removal()

    # =========================================================================
    # CLEAR ALL
    # =========================================================================

    def on_clear_request(self) -> bool:
        """Ask for confirmation before clearing every point."""
        return self.sm.try_transition("request_clear")

    def confirm_clear(self) -> ClearReport:
        """User confirmed: delete every point on server, then clear locally."""
        report = self.sync.clear_all()
        self.sm.confirm_clear()
        return report

    def cancel_clear(self) -> None:
        self.sm.cancel_clear()
