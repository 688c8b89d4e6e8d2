"""Main Streamlit application entry point."""

import sys
from pathlib import Path
from typing import Optional

# Add project root to path for direct execution
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from src.app.pages import create, detail, edit, gallery, home
from src.config import Settings, configure_logging, load_settings
from src.db import ConfigurationError, PlayerRepository
from src.db.client import create_supabase_client
from src.models import NavigationState, Route

# Route -> page module
PAGES = {
    Route.HOME: home,
    Route.CREATE: create,
    Route.GALLERY: gallery,
    Route.DETAIL: detail,
    Route.EDIT: edit,
}

# Sidebar entries
NAV_ITEMS = {
    "Home": Route.HOME,
    "Create Player": Route.CREATE,
    "My Squad": Route.GALLERY,
}


@st.cache_resource
def _get_repository(_settings: Settings) -> PlayerRepository:
    """Create the repository once per server process."""
    client = create_supabase_client(_settings)
    return PlayerRepository(client, table=_settings.players_table)


def navigate(route: Route, player_id: Optional[str] = None) -> None:
    """Switch to another view."""
    edit.clear_delete_confirmations(st.session_state)
    st.session_state.nav = st.session_state.nav.navigate(route, player_id)


def _render_sidebar(nav: NavigationState) -> None:
    """Render the navigation sidebar."""
    st.sidebar.title("⚽ Dream FC")
    st.sidebar.markdown("*Build Your Ultimate Soccer Team*")
    st.sidebar.divider()

    for label, route in NAV_ITEMS.items():
        st.sidebar.button(
            label,
            key=f"nav_{route.value}",
            on_click=navigate,
            args=(route,),
            type="primary" if nav.route == route else "secondary",
            use_container_width=True,
        )


def main() -> None:
    """Run the main application."""
    st.set_page_config(
        page_title="Dream FC",
        page_icon="⚽",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    settings = load_settings()
    configure_logging(settings.log_level)

    if "nav" not in st.session_state:
        st.session_state.nav = NavigationState()

    try:
        repository = _get_repository(settings)
    except ConfigurationError as e:
        st.error(f"Database is not configured: {e}")
        st.stop()

    nav = st.session_state.nav
    _render_sidebar(nav)

    # Run selected page
    page = PAGES[nav.route]
    page.render(nav, repository, settings, navigate)

    st.divider()
    st.caption("Dream FC - Build Your Ultimate Soccer Team")


if __name__ == "__main__":
    main()
