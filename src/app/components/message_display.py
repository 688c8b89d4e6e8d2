"""Message display for action results."""

from typing import Optional

import streamlit as st


FLASH_KEY = "flash"


def render_message(message: str, is_error: bool = False) -> None:
    """Render a status message, styled as an error or success."""
    if not message:
        return
    if is_error:
        st.error(f"❌ {message}")
    else:
        st.success(message)


def set_flash(message: str, is_error: bool = False) -> None:
    """Keep a message to show after the next view switch."""
    st.session_state[FLASH_KEY] = (message, is_error)


def render_flash() -> Optional[str]:
    """Render and clear a pending flash message."""
    flash = st.session_state.pop(FLASH_KEY, None)
    if flash is None:
        return None
    message, is_error = flash
    render_message(message, is_error)
    return message
