"""Modal dialogs for the beach map.

One dialog per waiting state of the state machine:
- NAMING: name input + "is it fit for swimming?" choice
- CONFIRMING_REMOVAL: confirm removing one point
- CONFIRMING_CLEAR: confirm removing every point

Buttons call the controller, whose closing transition triggers st.rerun()
via the listener, which also closes the dialog. The dialogs cannot be
dismissed with X, Esc or an outside click: leaving a waiting state always
goes through one of the buttons.
"""

import logging

import streamlit as st

from beachmap.ui.controller import BeachController

logger = logging.getLogger(__name__)


@st.dialog("Nova praia", dismissible=False)
def point_entry_dialog(controller: BeachController) -> None:
    """Ask for the beach name and swimmability of the clicked point."""
    name = st.text_input("Nome da praia:", key="nova_praia_nome")
    st.write("A praia é **PRÓPRIA** para banho?")

    col_yes, col_no, col_cancel = st.columns(3)
    with col_yes:
        if st.button("✅ Própria", type="primary", use_container_width=True):
            controller.submit_point(name=name, is_proprio=True)
    with col_no:
        if st.button("❌ Imprópria", use_container_width=True):
            controller.submit_point(name=name, is_proprio=False)
    with col_cancel:
        if st.button("Cancelar", use_container_width=True):
            controller.cancel_point()


@st.dialog("Remover praia", dismissible=False)
def confirm_removal_dialog(controller: BeachController) -> None:
    """Confirm removing the selected point."""
    point_id = controller.ctx.removal.point_id
    point = controller.sync.store.get(point_id) if point_id is not None else None
    label = point.name if point is not None else str(point_id)

    st.write(f"Deseja realmente remover **{label}**?")
    col_yes, col_no = st.columns(2)
    with col_yes:
        if st.button("🗑️ Remover", type="primary", use_container_width=True):
            controller.confirm_removal()
    with col_no:
        if st.button("✖️ Cancelar", use_container_width=True):
            controller.cancel_removal()


@st.dialog("Limpar todos os pontos", dismissible=False)
def confirm_clear_dialog(controller: BeachController) -> None:
    """Confirm clearing every point, locally and on the server."""
    count = len(controller.sync.store)
    st.write(f"Deseja limpar todos os pontos ({count})?")
    st.caption("Isso também removerá da API!")
    col_yes, col_no = st.columns(2)
    with col_yes:
        if st.button("🗑️ Limpar", type="primary", use_container_width=True):
            controller.confirm_clear()
    with col_no:
        if st.button("✖️ Cancelar", use_container_width=True):
            controller.cancel_clear()


def render_pending_dialog(controller: BeachController) -> None:
    """Open the dialog matching the current state, if any."""
    sm = controller.sm
    if sm.is_naming:
        point_entry_dialog(controller)
    elif sm.is_confirming_removal:
        confirm_removal_dialog(controller)
    elif sm.is_confirming_clear:
        confirm_clear_dialog(controller)
