"""Message - User-facing messages for the beach map UI.

Architecture:
- Inline messages (Message): persistent info/warning/error blocks
- Toast messages (ToastMessage): transient popups for action outcomes

Both kinds raised while handling an action are queued on the UI context and
displayed on the next run, because the action usually ends with a rerun.
Inline error alerts (failed create/delete) stay until acknowledged.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - context/status
    WARNING = "warning"  # Yellow - action instructions
    ERROR = "error"  # Red - failures


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for user-facing messages displayed inline."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ToastMessage(ABC):
    """Abstract base class for transient popup notifications."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for the toast notification."""
        raise NotImplementedError

    @property
    @abstractmethod
    def icon(self) -> str:
        """Icon to show in toast. Override in subclasses."""
        raise NotImplementedError

    def display(self) -> None:
        """Show this message as a toast notification and log it."""
        import streamlit as st

        logger = logging.getLogger(__name__)
        logger.info(f"[TOAST] {self.icon} {self.message}")
        st.toast(f"{self.icon} {self.message}")


# =============================================================================
# TOAST MESSAGES
# =============================================================================


@dataclass(frozen=True)
class LoadPointsFailedMessage(ToastMessage):
    """Initial (or manual) load of points failed."""

    @property
    def icon(self) -> str:
        return "⚠️"

    @property
    def message(self) -> str:
        return "Erro ao carregar praias da API"


@dataclass(frozen=True)
class PointSavedMessage(ToastMessage):
    """Point created on the server and added to the map."""

    name: str

    @property
    def icon(self) -> str:
        return "✅"

    @property
    def message(self) -> str:
        return f"Praia '{self.name}' salva na API"


@dataclass(frozen=True)
class PointRemovedMessage(ToastMessage):
    """Point deleted from the server and the map."""

    name: str

    @property
    def icon(self) -> str:
        return "✅"

    @property
    def message(self) -> str:
        return f"Praia '{self.name}' removida da API e do mapa"


@dataclass(frozen=True)
class PointsClearedMessage(ToastMessage):
    """All points cleared, with the count of server deletions that failed."""

    total: int
    failed: int

    @property
    def icon(self) -> str:
        return "✅" if self.failed == 0 else "⚠️"

    @property
    def message(self) -> str:
        if self.failed == 0:
            return f"Todas as praias foram removidas ({self.total})"
        return f"Praias removidas localmente; {self.failed} de {self.total} não foram removidas da API"


# =============================================================================
# INLINE MESSAGES
# =============================================================================


@dataclass(frozen=True)
class ClickToAddMessage(Message):
    """Instruction shown above the map."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "Clique no mapa para adicionar pontos de praia"



@dataclass(frozen=True)
class SavePointFailedMessage(Message):
    """Server refused or could not be reached while creating a point.

    Stays on screen until the user acknowledges it.
    """

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return "❌ Erro ao salvar na API. Praia não foi adicionada."


@dataclass(frozen=True)
class RemovePointFailedMessage(Message):
    """Server refused or could not be reached while deleting a point.

    Stays on screen until the user acknowledges it.
    """

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return "❌ Erro ao remover praia da API"


# Anything the synchronizer can report to the user
Notification = Message | ToastMessage
