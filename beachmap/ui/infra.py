"""Infrastructure utilities for Streamlit UI operations.

Abstracts Streamlit-specific infrastructure (st.rerun, st.session_state,
st.toast) so tests can patch these functions instead of Streamlit itself.
"""

import logging

import streamlit as st

from beachmap.model.message import ToastMessage
from beachmap.ui.context import MessagesContext

logger = logging.getLogger(__name__)

ALERT_ACK_KEY = "btn-ok-alerta"


def trigger_rerun() -> None:
    """Mockable wrapper around st.rerun() (raises StopExecution)."""
    st.rerun()


def bump_map_version() -> None:
    """Increment map_version to create a fresh Pydeck component.

    A fresh component has no memory of previous click events.
    """
    old_version = st.session_state.get("map_version", 0)
    new_version = old_version + 1
    st.session_state.map_version = new_version
    logger.info(f"[MAP] Bumped map_version: {old_version} -> {new_version}")


def show_toasts(toasts: list[ToastMessage]) -> None:
    """Display queued toasts."""
    for toast in toasts:
        toast.display()


def show_alerts(messages: MessagesContext) -> None:
    """Display pending error alerts with an "OK" button that dismisses them."""
    if not messages.alerts:
        return

    for alert in messages.alerts:
        alert.display()
    if st.button("OK", key=ALERT_ACK_KEY, type="primary"):
        logger.info(f"[ALERT] Acknowledged {len(messages.alerts)} alert(s)")
        messages.acknowledge_alerts()
        trigger_rerun()
