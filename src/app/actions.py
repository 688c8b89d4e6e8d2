"""Form submission and data loading flows behind the pages.

Kept free of Streamlit so the flows can be exercised without a UI.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..analysis import RosterStats, average_skill, summarize_roster, team_rating, validate_player_form
from ..db import DatabaseError, PlayerRepository
from ..models import Player, PlayerForm


logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Player created successfully!"
UPDATED_MESSAGE = "Player updated successfully!"
DELETED_MESSAGE = "Player deleted."


@dataclass
class ActionOutcome:
    """
    Result of a user action.

    Attributes:
        success: Whether the action completed.
        message: Text to show the user.
        player: The affected player, when the action returns one.
    """

    success: bool
    message: str
    player: Optional[Player] = None


def submit_create(repository: PlayerRepository, form: PlayerForm) -> ActionOutcome:
    """Validate and insert a new player."""
    validation = validate_player_form(form)
    if not validation.is_valid:
        logger.info("Create rejected: %s", validation.errors[0].code)
        return ActionOutcome(success=False, message=validation.message)

    try:
        player = repository.create(form)
    except DatabaseError as e:
        return ActionOutcome(success=False, message=f"Error creating player: {e}")

    return ActionOutcome(success=True, message=CREATED_MESSAGE, player=player)


def submit_update(repository: PlayerRepository, player_id: str, form: PlayerForm) -> ActionOutcome:
    """Validate and save changes to an existing player."""
    validation = validate_player_form(form)
    if not validation.is_valid:
        logger.info("Update of %s rejected: %s", player_id, validation.errors[0].code)
        return ActionOutcome(success=False, message=validation.message)

    try:
        repository.update(player_id, form)
    except DatabaseError as e:
        return ActionOutcome(success=False, message=f"Error updating player: {e}")

    return ActionOutcome(success=True, message=UPDATED_MESSAGE)


def submit_delete(repository: PlayerRepository, player_id: str) -> ActionOutcome:
    """Delete a player."""
    try:
        repository.delete(player_id)
    except DatabaseError as e:
        return ActionOutcome(success=False, message=f"Error deleting player: {e}")

    return ActionOutcome(success=True, message=DELETED_MESSAGE)


def load_home_stats(repository: PlayerRepository) -> RosterStats:
    """
    Load the headline numbers for the home page.

    Only skills are fetched, so no positions or top player are filled in.

    Raises:
        DatabaseError: If the query fails.
    """
    skills = repository.list_skills()
    avg = average_skill(skills)
    return RosterStats(total=len(skills), avg_skill=avg, team_rating=team_rating(avg))


def load_gallery(repository: PlayerRepository) -> tuple[list[Player], RosterStats]:
    """
    Load the squad, newest first, with its statistics.

    Raises:
        DatabaseError: If the query fails.
    """
    players = repository.list_players()
    return players, summarize_roster(players)


def load_player(repository: PlayerRepository, player_id: Optional[str]) -> Optional[Player]:
    """
    Load a single player for the detail and edit pages.

    Returns:
        The player, or None if it does not exist or no id was selected.

    Raises:
        DatabaseError: If the query fails.
    """
    if player_id is None:
        return None
    return repository.get(player_id)
