"""Gallery page showing the squad and its statistics."""

from typing import Callable, Optional

import streamlit as st

from ...config import Settings
from ...db import DatabaseError, PlayerRepository
from ...models import NavigationState, Route
from ..actions import load_gallery
from ..components import render_flash, render_player_card, render_squad_stats

# Cards per row
GRID_COLUMNS = 3


def render(
    nav: NavigationState,
    repository: PlayerRepository,
    settings: Settings,
    navigate: Callable[[Route, Optional[str]], None],
) -> None:
    """Render the squad gallery."""
    render_flash()

    try:
        with st.spinner("Loading squad..."):
            players, stats = load_gallery(repository)
    except DatabaseError as e:
        st.error(f"Error loading squad: {e}")
        return

    title_col, rating_col = st.columns([3, 1])
    with title_col:
        st.title("My Squad")
    with rating_col:
        if players:
            st.subheader(stats.team_rating.badge)

    if not players:
        st.markdown("## ⚽")
        st.subheader("No Players Yet")
        st.markdown("Start building your dream team by adding your first player")
        st.button("Add First Player", type="primary", on_click=navigate, args=(Route.CREATE,))
        return

    render_squad_stats(stats)
    st.divider()

    for start in range(0, len(players), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, player in zip(cols, players[start:start + GRID_COLUMNS]):
            with col:
                render_player_card(player, settings.avatar_base_url, navigate)
