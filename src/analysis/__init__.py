"""Analysis modules for nationality checks, squad statistics and validation."""

from .countries import (
    FALLBACK_FLAG,
    country_names,
    get_country_flag,
    is_valid_country,
    resolve_country,
    suggest_countries,
)
from .display import avatar_url, position_emoji, skill_color, skill_level
from .roster import (
    RosterStats,
    TeamRating,
    average_skill,
    position_counts,
    position_percentages,
    summarize_roster,
    team_rating,
    top_player,
)
from .validator import PlayerValidationError, ValidationResult, validate_player_form

__all__ = [
    # Countries
    "FALLBACK_FLAG",
    "country_names",
    "get_country_flag",
    "is_valid_country",
    "resolve_country",
    "suggest_countries",
    # Display
    "avatar_url",
    "position_emoji",
    "skill_color",
    "skill_level",
    # Roster
    "RosterStats",
    "TeamRating",
    "average_skill",
    "position_counts",
    "position_percentages",
    "summarize_roster",
    "team_rating",
    "top_player",
    # Validator
    "PlayerValidationError",
    "ValidationResult",
    "validate_player_form",
]
