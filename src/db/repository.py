"""Player persistence on the hosted database."""

import logging
from typing import Any, Callable, Optional

import httpx
from supabase import Client, PostgrestAPIError

from ..models.player import Player, PlayerForm
from .errors import DatabaseError


logger = logging.getLogger(__name__)


def _error_message(exc: Exception) -> str:
    """Extract a readable message from a client error."""
    message = getattr(exc, "message", None)
    return str(message) if message else str(exc)


class PlayerRepository:
    """
    CRUD access to the players table.

    Every method makes exactly one call to the database service. Service and
    transport failures are raised as DatabaseError.
    """

    def __init__(self, client: Client, table: str = "players") -> None:
        """
        Initialize the repository.

        Args:
            client: Supabase client.
            table: Name of the players table.
        """
        self._client = client
        self.table = table

    def _execute(self, action: str, query: Callable[[], Any]) -> Any:
        """Run a query and return its response rows."""
        try:
            response = query()
        except (PostgrestAPIError, httpx.HTTPError) as e:
            logger.error("Failed to %s: %s", action, _error_message(e))
            raise DatabaseError(_error_message(e)) from e
        return response.data

    def _to_players(self, rows: list[dict[str, Any]]) -> list[Player]:
        """Parse database rows."""
        try:
            return [Player.from_record(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed player record: %s", e)
            raise DatabaseError(f"Malformed player record: {e}") from e

    def create(self, form: PlayerForm) -> Player:
        """
        Insert a new player.

        Args:
            form: The validated form.

        Returns:
            The stored player, with its id and creation time.
        """
        rows = self._execute(
            "create player",
            lambda: self._client.table(self.table).insert([form.to_record()]).execute(),
        )
        if not rows:
            raise DatabaseError("Insert returned no record")
        player = self._to_players(rows)[0]
        logger.info("Created player %s (%s)", player.id, player.name)
        return player

    def list_players(self) -> list[Player]:
        """List all players, newest first."""
        rows = self._execute(
            "list players",
            lambda: self._client.table(self.table)
            .select("*")
            .order("created_at", desc=True)
            .execute(),
        )
        return self._to_players(rows or [])

    def list_skills(self) -> list[int]:
        """List the skill rating of every player."""
        rows = self._execute(
            "load skills",
            lambda: self._client.table(self.table).select("skill").execute(),
        )
        try:
            return [int(row["skill"]) for row in rows or []]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed skill value: %s", e)
            raise DatabaseError(f"Malformed player record: {e}") from e

    def get(self, player_id: str) -> Optional[Player]:
        """
        Get a player by id.

        Returns:
            The player, or None if no such record exists.
        """
        rows = self._execute(
            "load player",
            lambda: self._client.table(self.table)
            .select("*")
            .eq("id", player_id)
            .limit(1)
            .execute(),
        )
        if not rows:
            return None
        return self._to_players(rows)[0]

    def update(self, player_id: str, form: PlayerForm) -> None:
        """Replace a player's editable fields."""
        self._execute(
            "update player",
            lambda: self._client.table(self.table)
            .update(form.to_record())
            .eq("id", player_id)
            .execute(),
        )
        logger.info("Updated player %s", player_id)

    def delete(self, player_id: str) -> None:
        """Delete a player."""
        self._execute(
            "delete player",
            lambda: self._client.table(self.table).delete().eq("id", player_id).execute(),
        )
        logger.info("Deleted player %s", player_id)
