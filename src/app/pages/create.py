"""Create page for adding a player to the squad."""

from typing import Callable, Optional

import streamlit as st

from ...config import Settings
from ...db import PlayerRepository
from ...models import NavigationState, PlayerForm, Route
from ..actions import submit_create
from ..components import render_message, render_player_form, set_flash


def render(
    nav: NavigationState,
    repository: PlayerRepository,
    settings: Settings,
    navigate: Callable[[Route, Optional[str]], None],
) -> None:
    """Render the create player page."""
    st.title("Create New Player")

    form = render_player_form(PlayerForm(), key="create")

    if st.button("Create Player", type="primary", use_container_width=True):
        with st.spinner("Creating..."):
            outcome = submit_create(repository, form)

        if outcome.success:
            set_flash(outcome.message)
            navigate(Route.GALLERY)
            st.rerun()
        else:
            render_message(outcome.message, is_error=True)
