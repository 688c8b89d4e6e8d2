"""Navigation state passed between views."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Route(Enum):
    """Views of the application."""

    HOME = "home"
    CREATE = "create"
    GALLERY = "gallery"
    DETAIL = "detail"
    EDIT = "edit"


# Routes that show a single player
PLAYER_ROUTES = {Route.DETAIL, Route.EDIT}


@dataclass(frozen=True)
class NavigationState:
    """
    Current view and the player it is showing, if any.

    Attributes:
        route: The active view.
        player_id: Selected player for detail/edit views.
    """

    route: Route = Route.HOME
    player_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.route in PLAYER_ROUTES and self.player_id is None:
            raise ValueError(f"Route {self.route.value} requires a player_id")

    def navigate(self, route: Route, player_id: Optional[str] = None) -> "NavigationState":
        """Return the state for a new view; the selection is reset unless given."""
        return replace(self, route=route, player_id=player_id)
