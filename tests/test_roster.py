"""Tests for squad statistics."""

import pytest

from src.analysis.roster import (
    RosterStats,
    TeamRating,
    average_skill,
    position_counts,
    position_percentages,
    round_half_up,
    summarize_roster,
    team_rating,
    top_player,
)
from src.models import Player, Position


def make_player(
    name: str,
    skill: int = 50,
    position: Position = Position.FORWARD,
) -> Player:
    """Helper to create test players."""
    return Player(
        id=f"id-{name}",
        name=name,
        position=position,
        skill=skill,
        nationality="Spain",
    )


def make_squad() -> list[Player]:
    """Create a small mixed squad."""
    return [
        make_player("Keeper", 70, Position.GOALKEEPER),
        make_player("Back", 65, Position.DEFENDER),
        make_player("Mid1", 82, Position.MIDFIELDER),
        make_player("Mid2", 90, Position.MIDFIELDER),
        make_player("Striker", 90, Position.FORWARD),
        make_player("Winger", 60, Position.FORWARD),
    ]


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_halves_round_up(self) -> None:
        """Test .5 always rounds up, unlike round()."""
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(62.5) == 63

    def test_other_values(self) -> None:
        """Test ordinary rounding."""
        assert round_half_up(2.4) == 2
        assert round_half_up(2.6) == 3
        assert round_half_up(0) == 0


class TestAverageSkill:
    """Tests for average_skill."""

    def test_empty_is_zero(self) -> None:
        """Test no players gives 0."""
        assert average_skill([]) == 0

    def test_rounded_mean(self) -> None:
        """Test mean is rounded to nearest integer."""
        assert average_skill([80, 81]) == 81
        assert average_skill([70, 71, 71]) == 71
        assert average_skill([50]) == 50

    def test_accepts_generator(self) -> None:
        """Test a single pass over an iterator."""
        assert average_skill(s for s in [10, 20, 30]) == 20


class TestPositionCounts:
    """Tests for position_counts and position_percentages."""

    def test_counts_in_first_seen_order(self) -> None:
        """Test counts keep the order positions first appear."""
        counts = position_counts(make_squad())
        assert list(counts.items()) == [
            (Position.GOALKEEPER, 1),
            (Position.DEFENDER, 1),
            (Position.MIDFIELDER, 2),
            (Position.FORWARD, 2),
        ]

    def test_missing_positions_absent(self) -> None:
        """Test positions without players are not listed."""
        counts = position_counts([make_player("A"), make_player("B")])
        assert counts == {Position.FORWARD: 2}

    def test_percentages(self) -> None:
        """Test percentages are rounded shares of the squad."""
        counts = {Position.FORWARD: 1, Position.DEFENDER: 2}
        assert position_percentages(counts, 3) == {Position.FORWARD: 33, Position.DEFENDER: 67}

    def test_percentages_empty(self) -> None:
        """Test an empty squad has no percentages."""
        assert position_percentages({}, 0) == {}

    @pytest.mark.parametrize("size", [1, 3, 6, 7, 11, 13])
    def test_percentages_sum_near_100(self, size: int) -> None:
        """Test percentages sum to roughly 100 for any squad."""
        positions = list(Position)
        players = [make_player(f"p{i}", position=positions[i % 4]) for i in range(size)]
        counts = position_counts(players)
        total = sum(position_percentages(counts, size).values())
        assert abs(total - 100) <= len(counts)


class TestTopPlayer:
    """Tests for top_player."""

    def test_empty_is_none(self) -> None:
        """Test no players gives None."""
        assert top_player([]) is None

    def test_highest_skill(self) -> None:
        """Test the highest-skilled player is found."""
        players = [make_player("A", 70), make_player("B", 91), make_player("C", 85)]
        assert top_player(players).name == "B"

    def test_tie_goes_to_first(self) -> None:
        """Test ties resolve to the first player in input order."""
        players = [make_player("A", 80), make_player("B", 80)]
        assert top_player(players).name == "A"

    def test_tie_after_lower(self) -> None:
        """Test a later equal skill does not replace the leader."""
        players = [make_player("Low", 40), make_player("A", 90), make_player("B", 90)]
        assert top_player(players).name == "A"


class TestTeamRating:
    """Tests for team_rating."""

    @pytest.mark.parametrize(
        "avg,expected",
        [
            (0, TeamRating.BUILDING),
            (1, TeamRating.RISING_STARS),
            (59, TeamRating.RISING_STARS),
            (60, TeamRating.STRONG_TEAM),
            (79, TeamRating.STRONG_TEAM),
            (80, TeamRating.ELITE_SQUAD),
            (100, TeamRating.ELITE_SQUAD),
        ],
    )
    def test_thresholds(self, avg: int, expected: TeamRating) -> None:
        """Test tier boundaries."""
        assert team_rating(avg) == expected

    def test_labels(self) -> None:
        """Test rating labels."""
        assert team_rating(79).value == "Strong Team"
        assert team_rating(80).value == "Elite Squad"
        assert team_rating(59).value == "Rising Stars"
        assert team_rating(0).value == "Building"

    def test_badges(self) -> None:
        """Test star badges shown in the gallery."""
        assert TeamRating.ELITE_SQUAD.badge == "⭐⭐⭐ Elite Squad"
        assert TeamRating.STRONG_TEAM.badge == "⭐⭐ Strong Team"
        assert TeamRating.RISING_STARS.badge == "⭐ Rising Stars"
        assert TeamRating.BUILDING.badge == "Building"


class TestSummarizeRoster:
    """Tests for summarize_roster."""

    def test_empty_roster(self) -> None:
        """Test statistics for an empty roster."""
        stats = summarize_roster([])
        assert stats == RosterStats()
        assert stats.total == 0
        assert stats.avg_skill == 0
        assert stats.positions == {}
        assert stats.top_player is None
        assert stats.team_rating == TeamRating.BUILDING
        assert stats.position_percentages == {}

    def test_full_summary(self) -> None:
        """Test all statistics for a mixed squad."""
        squad = make_squad()
        stats = summarize_roster(squad)

        assert stats.total == 6
        assert stats.avg_skill == 76  # 457 / 6 = 76.17
        assert stats.positions == position_counts(squad)
        assert stats.top_player.name == "Mid2"
        assert stats.team_rating == TeamRating.STRONG_TEAM
        assert stats.position_percentages == {
            Position.GOALKEEPER: 17,
            Position.DEFENDER: 17,
            Position.MIDFIELDER: 33,
            Position.FORWARD: 33,
        }

    def test_matches_individual_functions(self) -> None:
        """Test the single-pass summary agrees with each helper."""
        squad = make_squad()
        stats = summarize_roster(squad)

        assert stats.avg_skill == average_skill(p.skill for p in squad)
        assert stats.top_player is top_player(squad)
        assert stats.team_rating == team_rating(stats.avg_skill)

    def test_tie_keeps_first_player(self) -> None:
        """Test the summary and top_player agree on ties."""
        squad = [make_player("A", 90), make_player("B", 90)]
        assert summarize_roster(squad).top_player.name == "A"
        assert top_player(squad).name == "A"

    def test_consumes_iterator_once(self) -> None:
        """Test a one-shot iterator is fully summarized."""
        stats = summarize_roster(iter(make_squad()))
        assert stats.total == 6
        assert stats.top_player is not None

    def test_elite_squad(self) -> None:
        """Test a high-rated squad."""
        stats = summarize_roster([make_player("A", 80), make_player("B", 81)])
        assert stats.avg_skill == 81
        assert stats.team_rating == TeamRating.ELITE_SQUAD
