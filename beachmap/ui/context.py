"""Context classes for the beach map state machine.

Contexts are pure data holders for UI state that persists across
Streamlit reruns. The state machine owns the context, the UI reads it.

Sub-contexts:
    PendingPointContext: Map click awaiting name/status (Pending point)
    RemovalContext: Point awaiting removal confirmation
    MapContext: Map center and zoom
    ClickDeduplicationContext: Last processed click
    MessagesContext: Toasts and alerts queued for the next run
    SessionContext: One-time startup flags
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from beachmap.constants import MapConfig
from beachmap.model.message import Message, Notification, ToastMessage

if TYPE_CHECKING:
    from beachmap.core.projection import MapCoordinate
    from beachmap.model.beach_point import PointId


class BaseContext(ABC):
    """All contexts can be reset to their initial state."""

    @abstractmethod
    def clear(self) -> None:
        """Reset context to initial state."""
        ...


@dataclass
class PendingPointContext(BaseContext):
    """Clicked map position of a point the user is naming."""

    coordinate: MapCoordinate | None = None

    def clear(self) -> None:
        self.coordinate = None


@dataclass
class RemovalContext(BaseContext):
    """Point selected for removal, awaiting confirmation."""

    point_id: PointId | None = None

    def clear(self) -> None:
        self.point_id = None


@dataclass
class MapContext(BaseContext):
    """Map view state."""

    lon: float = MapConfig.START_CENTER_LON
    lat: float = MapConfig.START_CENTER_LAT
    zoom: int = MapConfig.DEFAULT_ZOOM

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - Pydeck order."""
        return (self.lon, self.lat)

    def clear(self) -> None:
        self.lon = MapConfig.START_CENTER_LON
        self.lat = MapConfig.START_CENTER_LAT
        self.zoom = MapConfig.DEFAULT_ZOOM


@dataclass
class ClickDeduplicationContext(BaseContext):
    """Remembers the last processed click.

    The map component reports its last click on every rerun, so the same
    click id must only be handled once.
    """

    last_click_id: str | None = None

    def is_new_click(self, click_id: str) -> bool:
        """Return True (and remember it) if click_id differs from the last one."""
        if click_id == self.last_click_id:
            return False
        self.last_click_id = click_id
        return True

    def clear(self) -> None:
        self.last_click_id = None


@dataclass
class MessagesContext(BaseContext):
    """Messages raised during an action, shown on the next run.

    Toasts are shown once. Alerts (inline error messages) stay on screen
    until acknowledged.
    """

    toasts: list[ToastMessage] = field(default_factory=list)
    alerts: list[Message] = field(default_factory=list)

    def push(self, message: Notification) -> None:
        if isinstance(message, ToastMessage):
            self.toasts.append(message)
        else:
            self.alerts.append(message)

    def pop_all(self) -> list[ToastMessage]:
        """Take the queued toasts (alerts stay)."""
        toasts, self.toasts = self.toasts, []
        return toasts

    def acknowledge_alerts(self) -> None:
        self.alerts = []

    def clear(self) -> None:
        self.toasts = []
        self.alerts = []


@dataclass
class SessionContext(BaseContext):
    """Per-session startup flags."""

    loaded: bool = False

    def clear(self) -> None:
        self.loaded = False


@dataclass
class BeachContext:
    """Shared context/model for the state machine.

    Note: The 'state' field is managed by python-statemachine when this
    object is passed as the model.
    """

    state: str | None = None

    pending: PendingPointContext = field(default_factory=PendingPointContext)
    removal: RemovalContext = field(default_factory=RemovalContext)
    map: MapContext = field(default_factory=MapContext)
    click_dedup: ClickDeduplicationContext = field(default_factory=ClickDeduplicationContext)
    messages: MessagesContext = field(default_factory=MessagesContext)
    session: SessionContext = field(default_factory=SessionContext)

    def __repr__(self) -> str:
        return (
            f"BeachContext(state={self.state}, "
            f"pending={self.pending.coordinate}, "
            f"removal={self.removal.point_id}, "
            f"toasts={len(self.messages.toasts)}, "
            f"alerts={len(self.messages.alerts)})"
        )
