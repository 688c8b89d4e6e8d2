"""Reusable UI components for the Dream FC application."""

from .message_display import render_flash, render_message, set_flash
from .player_card import render_player_card, render_skill_bar
from .player_form import render_player_form
from .squad_stats import render_squad_stats

__all__ = [
    "render_flash",
    "render_message",
    "render_player_card",
    "render_player_form",
    "render_skill_bar",
    "render_squad_stats",
    "set_flash",
]
