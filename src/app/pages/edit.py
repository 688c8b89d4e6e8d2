"""Edit page for updating or deleting a player."""

from typing import Any, Callable, MutableMapping, Optional

import streamlit as st

from ...config import Settings
from ...db import DatabaseError, PlayerRepository
from ...models import NavigationState, PlayerForm, Route
from ..actions import load_player, submit_delete, submit_update
from ..components import render_message, render_player_form, set_flash
from .detail import render_not_found

# Session key prefix for a pending delete confirmation
CONFIRM_PREFIX = "confirm_delete_"


def clear_delete_confirmations(state: MutableMapping[str, Any]) -> None:
    """Drop pending delete confirmations so they do not outlive the page."""
    for key in [k for k in state.keys() if str(k).startswith(CONFIRM_PREFIX)]:
        del state[key]


def render(
    nav: NavigationState,
    repository: PlayerRepository,
    settings: Settings,
    navigate: Callable[[Route, Optional[str]], None],
) -> None:
    """Render the edit player page."""
    try:
        with st.spinner("Loading player..."):
            player = load_player(repository, nav.player_id)
    except DatabaseError as e:
        st.error(f"Error loading player: {e}")
        return

    if player is None:
        render_not_found(navigate)
        return

    st.button("← Back", on_click=navigate, args=(Route.DETAIL, player.id))
    st.title("Edit Player")

    form = render_player_form(PlayerForm.from_player(player), key=f"edit_{player.id}")

    confirm_key = f"{CONFIRM_PREFIX}{player.id}"
    col1, col2 = st.columns(2)
    with col1:
        update_clicked = st.button("Update Player", type="primary", use_container_width=True)
    with col2:
        if st.button("Delete Player", use_container_width=True):
            st.session_state[confirm_key] = True

    if update_clicked:
        with st.spinner("Saving..."):
            outcome = submit_update(repository, player.id, form)
        render_message(outcome.message, is_error=not outcome.success)

    if st.session_state.get(confirm_key):
        st.warning("Are you sure you want to delete this player?")
        yes_col, no_col = st.columns(2)
        with yes_col:
            confirmed = st.button("Yes, delete", type="primary", key=f"{confirm_key}_yes")
        with no_col:
            if st.button("Cancel", key=f"{confirm_key}_no"):
                st.session_state.pop(confirm_key, None)
                st.rerun()

        if confirmed:
            st.session_state.pop(confirm_key, None)
            outcome = submit_delete(repository, player.id)
            if outcome.success:
                set_flash(outcome.message)
                navigate(Route.GALLERY)
                st.rerun()
            else:
                render_message(outcome.message, is_error=True)
