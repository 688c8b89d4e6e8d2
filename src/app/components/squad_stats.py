"""Squad statistics component for the gallery header."""

import streamlit as st

from ...analysis import RosterStats


def render_squad_stats(stats: RosterStats) -> None:
    """
    Render squad totals and the position breakdown.

    Args:
        stats: Statistics for the displayed roster.
    """
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(label="Total Players", value=stats.total)
    with col2:
        st.metric(label="Average Skill", value=stats.avg_skill)
    with col3:
        if stats.top_player is not None:
            st.metric(
                label="Top Player",
                value=stats.top_player.name,
                delta=f"{stats.top_player.skill}/100",
                delta_color="off",
            )

    percentages = stats.position_percentages
    if stats.positions:
        cols = st.columns(len(stats.positions))
        for col, (position, count) in zip(cols, stats.positions.items()):
            with col:
                st.progress(
                    percentages[position] / 100,
                    text=f"{position.value}s: {count} ({percentages[position]}%)",
                )
