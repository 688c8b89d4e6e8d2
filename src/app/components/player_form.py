"""Player form fields shared by the create and edit pages."""

import streamlit as st

from ...analysis import country_names, get_country_flag, is_valid_country, suggest_countries
from ...models import SKILL_MAX, SKILL_MIN, PlayerForm, Position


def render_player_form(initial: PlayerForm, key: str) -> PlayerForm:
    """
    Render the player input fields.

    Args:
        initial: Values to pre-fill.
        key: Widget key prefix, unique per page and player.

    Returns:
        A form holding the current input values.
    """
    name = st.text_input(
        "Player Name *",
        value=initial.name,
        placeholder="Enter player name",
        key=f"{key}_name",
    )

    positions = list(Position)
    position = st.radio(
        "Position *",
        positions,
        index=positions.index(initial.position),
        format_func=lambda p: p.value,
        horizontal=True,
        key=f"{key}_position",
    )

    skill = st.slider(
        "Skill Level",
        min_value=SKILL_MIN,
        max_value=SKILL_MAX,
        value=initial.skill,
        key=f"{key}_skill",
    )
    st.caption("Beginner · Professional · World Class")

    nationality = st.text_input(
        "Nationality *",
        value=initial.nationality,
        placeholder="Enter nationality (e.g., Brazil, Spain, USA)",
        help=(
            f"{len(country_names())} countries are recognised, "
            "plus common short forms like USA or UK."
        ),
        key=f"{key}_nationality",
    )
    if nationality:
        preview = f"{get_country_flag(nationality)} {nationality}"
        if not is_valid_country(nationality):
            preview += " - Invalid country"
            suggestions = suggest_countries(nationality)
            if suggestions:
                preview += f". Did you mean: {', '.join(suggestions)}?"
        st.caption(preview)

    return PlayerForm(name=name, position=position, skill=skill, nationality=nationality)
