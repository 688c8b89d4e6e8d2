"""Detail page for a single player."""

from typing import Callable, Optional

import streamlit as st

from ...analysis import avatar_url, get_country_flag, position_emoji, skill_level
from ...config import Settings
from ...db import DatabaseError, PlayerRepository
from ...models import NavigationState, Player, Route
from ..actions import load_player
from ..components import render_skill_bar


def render_not_found(navigate: Callable[[Route, Optional[str]], None]) -> None:
    """Render the empty state for a missing player."""
    st.subheader("Player not found")
    st.button("Back to Squad", type="primary", on_click=navigate, args=(Route.GALLERY,))


def format_added(player: Player) -> str:
    """Format the creation date for display."""
    if player.created_at is None:
        return "Unknown"
    return player.created_at.strftime("%d %b %Y")


def render(
    nav: NavigationState,
    repository: PlayerRepository,
    settings: Settings,
    navigate: Callable[[Route, Optional[str]], None],
) -> None:
    """Render the player detail page."""
    try:
        with st.spinner("Loading player..."):
            player = load_player(repository, nav.player_id)
    except DatabaseError as e:
        st.error(f"Error loading player: {e}")
        return

    if player is None:
        render_not_found(navigate)
        return

    col1, col2 = st.columns([3, 1])
    with col1:
        st.button("← Back to Squad", on_click=navigate, args=(Route.GALLERY,))
    with col2:
        st.button("Edit Player", on_click=navigate, args=(Route.EDIT, player.id))

    flag = get_country_flag(player.nationality)

    st.image(avatar_url(player.name, player.position, settings.avatar_base_url), width=200)
    st.title(player.name)
    st.markdown(
        f"`{position_emoji(player.position)} {player.position.value}` "
        f"`{flag} {player.nationality}`"
    )

    st.metric(label="Skill Rating", value=f"{player.skill}/100", delta=skill_level(player.skill), delta_color="off")
    render_skill_bar(player.skill)

    st.divider()
    st.markdown(f"**Position:** {player.position.value}")
    st.markdown(f"**Nationality:** {flag} {player.nationality}")
    st.markdown(f"**Added:** {format_added(player)}")
