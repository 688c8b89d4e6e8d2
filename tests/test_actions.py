"""Tests for page actions."""

from unittest.mock import MagicMock

import pytest

from src.analysis import TeamRating
from src.analysis.validator import INVALID_COUNTRY_MESSAGE, MISSING_FIELDS_MESSAGE
from src.app.actions import (
    CREATED_MESSAGE,
    UPDATED_MESSAGE,
    load_gallery,
    load_home_stats,
    load_player,
    submit_create,
    submit_delete,
    submit_update,
)
from src.db import DatabaseError, PlayerRepository
from src.models import Player, PlayerForm, Position


def make_player(id: str, skill: int, position: Position = Position.FORWARD) -> Player:
    """Helper to create test players."""
    return Player(id=id, name=f"Player {id}", position=position, skill=skill, nationality="Italy")


@pytest.fixture
def repository() -> MagicMock:
    """Mock repository."""
    return MagicMock(spec=PlayerRepository)


@pytest.fixture
def valid_form() -> PlayerForm:
    """A form that passes validation."""
    return PlayerForm(name="Buffon", position=Position.GOALKEEPER, skill=92, nationality="italy")


class TestSubmitCreate:
    """Tests for submit_create."""

    def test_success(self, repository, valid_form) -> None:
        """Test a valid form is inserted."""
        created = make_player("new", 92, Position.GOALKEEPER)
        repository.create.return_value = created

        outcome = submit_create(repository, valid_form)

        repository.create.assert_called_once_with(valid_form)
        assert outcome.success is True
        assert outcome.message == CREATED_MESSAGE
        assert outcome.player is created

    def test_missing_fields_block_insert(self, repository) -> None:
        """Test validation failures make no remote call."""
        outcome = submit_create(repository, PlayerForm(name="Buffon"))

        repository.create.assert_not_called()
        assert outcome.success is False
        assert outcome.message == MISSING_FIELDS_MESSAGE

    def test_invalid_country_blocks_insert(self, repository) -> None:
        """Test unknown countries make no remote call."""
        outcome = submit_create(repository, PlayerForm(name="Buffon", nationality="Narnia"))

        repository.create.assert_not_called()
        assert outcome.message == INVALID_COUNTRY_MESSAGE

    def test_remote_error(self, repository, valid_form) -> None:
        """Test remote failures become a user message."""
        repository.create.side_effect = DatabaseError("timeout")

        outcome = submit_create(repository, valid_form)

        assert outcome.success is False
        assert outcome.message == "Error creating player: timeout"


class TestSubmitUpdate:
    """Tests for submit_update."""

    def test_success(self, repository, valid_form) -> None:
        """Test a valid form is saved to the player."""
        outcome = submit_update(repository, "p1", valid_form)

        repository.update.assert_called_once_with("p1", valid_form)
        assert outcome.success is True
        assert outcome.message == UPDATED_MESSAGE

    def test_validation_blocks_update(self, repository) -> None:
        """Test invalid forms are not saved."""
        outcome = submit_update(repository, "p1", PlayerForm(name="", nationality="Italy"))

        repository.update.assert_not_called()
        assert outcome.success is False

    def test_remote_error(self, repository, valid_form) -> None:
        """Test remote failures become a user message."""
        repository.update.side_effect = DatabaseError("row locked")

        outcome = submit_update(repository, "p1", valid_form)

        assert outcome.message == "Error updating player: row locked"


class TestSubmitDelete:
    """Tests for submit_delete."""

    def test_success(self, repository) -> None:
        """Test deleting a player."""
        outcome = submit_delete(repository, "p1")

        repository.delete.assert_called_once_with("p1")
        assert outcome.success is True

    def test_remote_error(self, repository) -> None:
        """Test remote failures become a user message."""
        repository.delete.side_effect = DatabaseError("forbidden")

        outcome = submit_delete(repository, "p1")

        assert outcome.success is False
        assert outcome.message == "Error deleting player: forbidden"


class TestLoaders:
    """Tests for page data loaders."""

    def test_home_stats(self, repository) -> None:
        """Test home numbers from skills only."""
        repository.list_skills.return_value = [60, 61]

        stats = load_home_stats(repository)

        assert stats.total == 2
        assert stats.avg_skill == 61
        assert stats.team_rating == TeamRating.STRONG_TEAM
        repository.list_players.assert_not_called()

    def test_home_stats_empty(self, repository) -> None:
        """Test home numbers for an empty squad."""
        repository.list_skills.return_value = []

        stats = load_home_stats(repository)

        assert stats.total == 0
        assert stats.avg_skill == 0

    def test_home_stats_error_propagates(self, repository) -> None:
        """Test remote errors reach the page."""
        repository.list_skills.side_effect = DatabaseError("down")

        with pytest.raises(DatabaseError):
            load_home_stats(repository)

    def test_gallery(self, repository) -> None:
        """Test the squad is returned with its statistics."""
        players = [make_player("a", 80), make_player("b", 80, Position.DEFENDER)]
        repository.list_players.return_value = players

        loaded, stats = load_gallery(repository)

        assert loaded == players
        assert stats.top_player.id == "a"
        assert stats.team_rating == TeamRating.ELITE_SQUAD

    def test_load_player(self, repository) -> None:
        """Test loading the selected player."""
        player = make_player("a", 70)
        repository.get.return_value = player

        assert load_player(repository, "a") is player

    def test_load_player_not_found(self, repository) -> None:
        """Test a deleted player loads as None."""
        repository.get.return_value = None
        assert load_player(repository, "gone") is None

    def test_load_player_without_selection(self, repository) -> None:
        """Test no selection makes no remote call."""
        assert load_player(repository, None) is None
        repository.get.assert_not_called()
