"""Shared TUI screens for equipment refinement."""

from .actor_select import ActorSelectScreen
from .rank_table import RankTableScreen

__all__ = [
    "ActorSelectScreen",
    "RankTableScreen",
]
