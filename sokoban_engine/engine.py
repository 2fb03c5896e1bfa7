"""Entry points used by a front end.

A front end keeps a reference to the current PuzzleState, replaces it with
whatever these functions return and redraws from its public fields
(walls, targets, crates, player, width, height).
"""
from __future__ import annotations

from .goal_check import crates_on_targets, is_complete
from .levels.catalog import LEVEL_COUNT
from .levels.navigator import load, next_level, previous_level, reload
from .moves import apply_direction
from .state import Direction, Position, PuzzleState

__all__ = [
    "Direction",
    "LEVEL_COUNT",
    "Position",
    "PuzzleState",
    "apply_direction",
    "crates_on_targets",
    "current_level_index",
    "init",
    "is_complete",
    "next_level",
    "previous_level",
    "reload",
]


def init(level_index: int = 0) -> PuzzleState:
    return load(level_index)


def current_level_index(state: PuzzleState) -> int:
    return state.level_index
