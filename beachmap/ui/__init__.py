"""User interface components for the beach map.

File Structure (layout-based naming):
- center_map.py: Pydeck map with beach markers
- list_panel.py: Right-side list of stored points
- dialogs.py: Name/status prompt and confirmations

Core Components:
- state_machine.py: BeachStateMachine (4 states) + StreamlitUIListener
- context.py: BeachContext and its sub-contexts
- controller.py: BeachController (the UI-event interface)
- click_detector.py: Map click detection and deduplication
"""

from beachmap.ui.center_map import MapRenderer
from beachmap.ui.click_detector import ClickDetector, MapClick
from beachmap.ui.context import BeachContext
from beachmap.ui.controller import BeachController
from beachmap.ui.dialogs import render_pending_dialog
from beachmap.ui.list_panel import ListRow, build_list_rows, render_point_list
from beachmap.ui.state_machine import BeachStateMachine, StreamlitUIListener

__all__ = [
    "BeachContext",
    "BeachController",
    "BeachStateMachine",
    "StreamlitUIListener",
    "MapRenderer",
    "ClickDetector",
    "MapClick",
    "ListRow",
    "build_list_rows",
    "render_point_list",
    "render_pending_dialog",
]
