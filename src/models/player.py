"""Player data model for Dream FC."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional


SKILL_MIN = 1
SKILL_MAX = 100
DEFAULT_SKILL = 50


class Position(Enum):
    """Pitch position of a player."""

    FORWARD = "Forward"
    MIDFIELDER = "Midfielder"
    DEFENDER = "Defender"
    GOALKEEPER = "Goalkeeper"

    @classmethod
    def parse(cls, value: Any) -> "Position":
        """
        Parse a position label, as stored in the database.

        Args:
            value: Position label or Position member.

        Returns:
            The matching Position.

        Raises:
            ValueError: If the label is not a known position.
        """
        if isinstance(value, cls):
            return value
        label = str(value).strip().lower()
        for position in cls:
            if position.value.lower() == label:
                return position
        raise ValueError(f"Unknown position: {value}")


def clamp_skill(value: Any) -> int:
    """Clamp a skill input to the slider range, truncating to an integer."""
    return max(SKILL_MIN, min(SKILL_MAX, int(float(value))))


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a server timestamp.

    Args:
        value: ISO format timestamp, e.g. "2025-03-01T10:15:00Z".

    Returns:
        datetime object, or None if no timestamp was given.
    """
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass
class Player:
    """
    Represents a persisted roster entry.

    Attributes:
        id: Database-assigned identifier.
        name: Player's name.
        position: Pitch position.
        skill: Skill rating (1-100).
        nationality: Country name as entered.
        created_at: Server-assigned creation time.
    """

    id: str
    name: str
    position: Position
    skill: int
    nationality: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Player":
        """
        Build a player from a database row.

        Raises:
            ValueError: If the row has an unknown position.
            KeyError: If a required column is missing.
        """
        return cls(
            id=str(record["id"]),
            name=record["name"],
            position=Position.parse(record["position"]),
            skill=int(record["skill"]),
            nationality=record["nationality"],
            created_at=parse_timestamp(record.get("created_at")),
        )


@dataclass
class PlayerForm:
    """
    Editable player fields, as held by the create and edit forms.

    Skill is clamped to 1-100 on every assignment.
    """

    name: str = ""
    position: Position = Position.FORWARD
    skill: int = DEFAULT_SKILL
    nationality: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "skill":
            value = clamp_skill(value)
        super().__setattr__(name, value)

    @classmethod
    def from_player(cls, player: Player) -> "PlayerForm":
        """Pre-fill a form from an existing player."""
        return cls(
            name=player.name,
            position=player.position,
            skill=player.skill,
            nationality=player.nationality,
        )

    def to_record(self) -> dict[str, Any]:
        """Return the insert/update payload."""
        return {
            "name": self.name,
            "position": self.position.value,
            "skill": self.skill,
            "nationality": self.nationality,
        }
