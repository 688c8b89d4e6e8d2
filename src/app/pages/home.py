"""Home page with headline squad numbers."""

from typing import Callable, Optional

import streamlit as st

from ...config import Settings
from ...db import DatabaseError, PlayerRepository
from ...models import NavigationState, Route
from ..actions import load_home_stats


def render(
    nav: NavigationState,
    repository: PlayerRepository,
    settings: Settings,
    navigate: Callable[[Route, Optional[str]], None],
) -> None:
    """Render the home page."""
    st.title("Build Your Dream Soccer Team")
    st.markdown("Create, manage, and showcase your ultimate football squad")

    col1, col2 = st.columns(2)
    with col1:
        st.button("Add New Player", type="primary", on_click=navigate, args=(Route.CREATE,))
    with col2:
        st.button("View Squad", on_click=navigate, args=(Route.GALLERY,))

    st.divider()

    try:
        stats = load_home_stats(repository)
    except DatabaseError as e:
        st.error(f"Error loading stats: {e}")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.metric(label="Total Players", value=stats.total)
    with col2:
        st.metric(label="Average Skill", value=stats.avg_skill)
