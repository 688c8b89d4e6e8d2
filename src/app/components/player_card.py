"""Player card component for the squad gallery."""

from typing import Callable, Optional

import streamlit as st

from ...analysis import avatar_url, get_country_flag, position_emoji, skill_color
from ...models import Player, Route


def render_player_card(
    player: Player,
    avatar_base_url: str,
    navigate: Callable[[Route, Optional[str]], None],
) -> None:
    """
    Render a player card with view and edit buttons.

    Args:
        player: The player to display.
        avatar_base_url: Root URL of the avatar service.
        navigate: Callback to switch views.
    """
    with st.container(border=True):
        st.image(avatar_url(player.name, player.position, avatar_base_url), width=120)

        cols = st.columns([3, 1])
        with cols[0]:
            st.caption(f"{position_emoji(player.position)} {player.position.value}")
        with cols[1]:
            st.button(
                "✏️",
                key=f"edit_{player.id}",
                on_click=navigate,
                args=(Route.EDIT, player.id),
                help="Edit player",
            )

        st.markdown(f"### {player.name}")
        st.markdown(f"{get_country_flag(player.nationality)} {player.nationality}")
        render_skill_bar(player.skill)

        st.button(
            "View",
            key=f"view_{player.id}",
            on_click=navigate,
            args=(Route.DETAIL, player.id),
            use_container_width=True,
        )


def render_skill_bar(skill: int) -> None:
    """Render a coloured skill bar with its rating."""
    st.markdown(
        f'<div style="background:#2d1b4e;border-radius:4px;height:8px;">'
        f'<div style="width:{skill}%;background:{skill_color(skill)};'
        f'height:8px;border-radius:4px;"></div></div>',
        unsafe_allow_html=True,
    )
    st.caption(f"Skill: {skill}/100")
