"""Data models for Dream FC."""

from .navigation import NavigationState, Route
from .player import (
    DEFAULT_SKILL,
    SKILL_MAX,
    SKILL_MIN,
    Player,
    PlayerForm,
    Position,
    clamp_skill,
)

__all__ = [
    # Player
    "DEFAULT_SKILL",
    "SKILL_MAX",
    "SKILL_MIN",
    "Player",
    "PlayerForm",
    "Position",
    "clamp_skill",
    # Navigation
    "NavigationState",
    "Route",
]
