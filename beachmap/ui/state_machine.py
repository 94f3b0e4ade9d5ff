"""State machine for the beach map UI.

Uses python-statemachine for the interactive flows that need user input
before anything reaches the server.

States:
    IDLE: Nothing pending (initial)
    NAMING: Map clicked, name/status prompt open (the point is Pending)
    CONFIRMING_REMOVAL: Remove clicked, confirmation open
    CONFIRMING_CLEAR: Clear clicked, confirmation open

Transitions:
    IDLE -> NAMING: click_map
    NAMING -> IDLE: submit_point, cancel_point
    IDLE -> CONFIRMING_REMOVAL: request_removal
    CONFIRMING_REMOVAL -> IDLE: confirm_removal, cancel_removal
    IDLE -> CONFIRMING_CLEAR: request_clear
    CONFIRMING_CLEAR -> IDLE: confirm_clear, cancel_clear

Server calls run in the controller BEFORE the closing transition, because
StreamlitUIListener.after_transition() triggers a rerun, which never returns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from statemachine import State, StateMachine
from statemachine.exceptions import TransitionNotAllowed

from beachmap.ui.context import BeachContext
from beachmap.ui.infra import trigger_rerun

if TYPE_CHECKING:
    from beachmap.core.projection import MapCoordinate
    from beachmap.model.beach_point import PointId

logger = logging.getLogger(__name__)


class StreamlitUIListener:
    """Triggers st.rerun() after every state transition.

    Usage:
        sm = BeachStateMachine(context=context)
        sm.add_listener(StreamlitUIListener())
    """

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[STATE] {source.name} --({event})--> {target.name}")
        trigger_rerun()


class BeachStateMachine(StateMachine):
    """State machine for the beach map workflow. See module docstring."""

    idle = State("Idle", initial=True)
    naming = State("Naming")
    confirming_removal = State("ConfirmingRemoval")
    confirming_clear = State("ConfirmingClear")

    # Adding a point
    click_map = idle.to(naming)
    submit_point = naming.to(idle)
    cancel_point = naming.to(idle)

    # Removing one point
    request_removal = idle.to(confirming_removal)
    confirm_removal = confirming_removal.to(idle)
    cancel_removal = confirming_removal.to(idle)

    # Clearing all points
    request_clear = idle.to(confirming_clear)
    confirm_clear = confirming_clear.to(idle)
    cancel_clear = confirming_clear.to(idle)

    def __init__(self, context: BeachContext | None = None, start_value: str | None = None) -> None:
        """Initialize state machine with model pattern.

        Args:
            context: Shared context/model (creates new if None)
            start_value: Optional initial state value (for restoring state)
        """
        model = context or BeachContext()
        super().__init__(model=model, start_value=start_value)

    @property
    def context(self) -> BeachContext:
        """Alias for model."""
        return self.model

    # ==========================================================================
    # State Check Properties
    # ==========================================================================

    @property
    def is_idle(self) -> bool:
        return self.idle.is_active

    @property
    def is_naming(self) -> bool:
        return self.naming.is_active

    @property
    def is_confirming_removal(self) -> bool:
        return self.confirming_removal.is_active

    @property
    def is_confirming_clear(self) -> bool:
        return self.confirming_clear.is_active

    # ==========================================================================
    # Hooks
    # ==========================================================================

    def on_enter_idle(self) -> None:
        self.context.pending.clear()
        self.context.removal.clear()

    def before_click_map(self, coordinate: MapCoordinate) -> None:
        self.context.pending.coordinate = coordinate

    def before_request_removal(self, point_id: PointId) -> None:
        self.context.removal.point_id = point_id

    # ==========================================================================
    # Utility Methods
    # ==========================================================================

    def get_state_name(self) -> str:
        return self.current_state.name

    def try_transition(self, event: str, **kwargs: Any) -> bool:
        """Attempt a transition, returning success/failure."""
        try:
            self.send(event, **kwargs)
            return True
        except TransitionNotAllowed:
            logger.warning(f"Transition '{event}' not allowed from {self.get_state_name()}")
            return False

    def __repr__(self) -> str:
        return f"BeachStateMachine(state={self.get_state_name()}, model={self.context!r})"

    @staticmethod
    def create(add_ui_listener: bool = True) -> tuple[BeachStateMachine, BeachContext]:
        """Create state machine with context and optional UI listener.

        Args:
            add_ui_listener: If True, adds StreamlitUIListener for auto st.rerun().
                             Set to False for testing.
        """
        context = BeachContext()
        sm = BeachStateMachine(context=context)
        if add_ui_listener:
            sm.add_listener(StreamlitUIListener())
            logger.info("Created BeachStateMachine with StreamlitUIListener")
        else:
            logger.info("Created BeachStateMachine without UI listener")
        return sm, context
