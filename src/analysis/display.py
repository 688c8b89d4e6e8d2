"""Presentation lookups for player cards and detail views."""

from typing import Optional
from urllib.parse import quote

from ..models.player import Position


DEFAULT_AVATAR_BASE_URL = "https://api.dicebear.com/7.x"
AVATAR_BACKGROUND = "8a2be2,ff00ff,2d1b4e"
AVATAR_SCALE = 80

DEFAULT_EMOJI = "⚽"
DEFAULT_AVATAR_STYLE = "avataaars"

POSITION_EMOJIS: dict[Position, str] = {
    Position.FORWARD: "⚡",
    Position.MIDFIELDER: "🎯",
    Position.DEFENDER: "🛡️",
    Position.GOALKEEPER: "🧤",
}

# DiceBear avatar style per position
AVATAR_STYLES: dict[Position, str] = {
    Position.FORWARD: "adventurer",
    Position.MIDFIELDER: "avataaars",
    Position.DEFENDER: "bottts",
    Position.GOALKEEPER: "micah",
}

# (minimum skill, label), highest first
SKILL_LEVELS: list[tuple[int, str]] = [
    (90, "World Class"),
    (80, "Elite"),
    (70, "Professional"),
    (60, "Semi-Pro"),
    (40, "Amateur"),
]

SKILL_COLORS: list[tuple[int, str]] = [
    (80, "#10b981"),
    (60, "#3b82f6"),
    (40, "#f59e0b"),
]
LOW_SKILL_COLOR = "#ef4444"


def position_emoji(position: Optional[Position]) -> str:
    """Get the badge emoji for a position."""
    return POSITION_EMOJIS.get(position, DEFAULT_EMOJI)


def skill_level(skill: int) -> str:
    """Describe a skill rating, from "Beginner" to "World Class"."""
    for threshold, label in SKILL_LEVELS:
        if skill >= threshold:
            return label
    return "Beginner"


def skill_color(skill: int) -> str:
    """Get the skill bar colour for a rating."""
    for threshold, color in SKILL_COLORS:
        if skill >= threshold:
            return color
    return LOW_SKILL_COLOR


def avatar_url(
    name: str,
    position: Position,
    base_url: str = DEFAULT_AVATAR_BASE_URL,
) -> str:
    """
    Build the avatar image URL for a player.

    The image is seeded by name and position, so a player keeps the same
    avatar until either changes.

    Args:
        name: Player name.
        position: Player position, which selects the avatar style.
        base_url: Avatar service root.

    Returns:
        Image URL.
    """
    style = AVATAR_STYLES.get(position, DEFAULT_AVATAR_STYLE)
    seed = quote(name + position.value, safe="-_.!~*'()")
    return (
        f"{base_url.rstrip('/')}/{style}/svg?seed={seed}"
        f"&backgroundColor={AVATAR_BACKGROUND}&scale={AVATAR_SCALE}"
    )
