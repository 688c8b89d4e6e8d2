"""Squad statistics: average skill, position mix, top player and team rating."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from ..models.player import Player, Position


# Team rating thresholds on rounded average skill
ELITE_THRESHOLD = 80
STRONG_THRESHOLD = 60


class TeamRating(Enum):
    """Qualitative squad tier derived from average skill."""

    BUILDING = "Building"
    RISING_STARS = "Rising Stars"
    STRONG_TEAM = "Strong Team"
    ELITE_SQUAD = "Elite Squad"

    @property
    def stars(self) -> int:
        """Number of stars shown next to the rating."""
        return {
            TeamRating.BUILDING: 0,
            TeamRating.RISING_STARS: 1,
            TeamRating.STRONG_TEAM: 2,
            TeamRating.ELITE_SQUAD: 3,
        }[self]

    @property
    def badge(self) -> str:
        """Rating label with its stars, e.g. "⭐⭐ Strong Team"."""
        if self.stars == 0:
            return self.value
        return f"{'⭐' * self.stars} {self.value}"


@dataclass
class RosterStats:
    """
    Aggregate statistics for a roster.

    Attributes:
        total: Number of players.
        avg_skill: Mean skill rounded to the nearest integer (0 if empty).
        positions: Player count per position, in first-seen order.
        top_player: Highest-skilled player (first one on ties).
        team_rating: Tier derived from avg_skill.
    """

    total: int = 0
    avg_skill: int = 0
    positions: dict[Position, int] = field(default_factory=dict)
    top_player: Optional[Player] = None
    team_rating: TeamRating = TeamRating.BUILDING

    @property
    def position_percentages(self) -> dict[Position, int]:
        """Share of the squad per position, as whole percentages."""
        return position_percentages(self.positions, self.total)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return int(math.floor(value + 0.5))


def average_skill(skills: Iterable[int]) -> int:
    """
    Calculate the rounded mean skill.

    Args:
        skills: Skill ratings.

    Returns:
        Rounded mean, or 0 for no ratings.
    """
    total = 0
    count = 0
    for skill in skills:
        total += skill
        count += 1
    if count == 0:
        return 0
    return round_half_up(total / count)


def _count_position(counts: dict[Position, int], player: Player) -> None:
    counts[player.position] = counts.get(player.position, 0) + 1


def _better_player(best: Optional[Player], player: Player) -> Player:
    # Strictly greater, so earlier players win ties
    if best is None or player.skill > best.skill:
        return player
    return best


def position_counts(players: Iterable[Player]) -> dict[Position, int]:
    """Count players per position, keeping first-seen order."""
    counts: dict[Position, int] = {}
    for player in players:
        _count_position(counts, player)
    return counts


def position_percentages(counts: dict[Position, int], total: int) -> dict[Position, int]:
    """
    Convert position counts to whole percentages of the squad.

    Args:
        counts: Player count per position.
        total: Squad size.

    Returns:
        Percentage per position (empty for an empty squad).
    """
    if total <= 0:
        return {}
    return {position: round_half_up(count / total * 100) for position, count in counts.items()}


def top_player(players: Iterable[Player]) -> Optional[Player]:
    """Find the highest-skilled player; ties go to the first encountered."""
    best: Optional[Player] = None
    for player in players:
        best = _better_player(best, player)
    return best


def team_rating(avg_skill: int) -> TeamRating:
    """
    Derive the team rating tier from average skill.

    Args:
        avg_skill: Rounded average skill (0 for an empty roster).

    Returns:
        The matching TeamRating.
    """
    if avg_skill <= 0:
        return TeamRating.BUILDING
    if avg_skill >= ELITE_THRESHOLD:
        return TeamRating.ELITE_SQUAD
    if avg_skill >= STRONG_THRESHOLD:
        return TeamRating.STRONG_TEAM
    return TeamRating.RISING_STARS


def summarize_roster(players: Iterable[Player]) -> RosterStats:
    """
    Compute all roster statistics in a single pass.

    Args:
        players: The roster.

    Returns:
        RosterStats for the roster.
    """
    total = 0
    skill_sum = 0
    counts: dict[Position, int] = {}
    best: Optional[Player] = None

    for player in players:
        total += 1
        skill_sum += player.skill
        _count_position(counts, player)
        best = _better_player(best, player)

    avg = round_half_up(skill_sum / total) if total else 0
    return RosterStats(
        total=total,
        avg_skill=avg,
        positions=counts,
        top_player=best,
        team_rating=team_rating(avg),
    )
