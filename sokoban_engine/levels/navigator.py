# --- file: sokoban_engine/levels/navigator.py
from __future__ import annotations
import logging

from ..parser import parse_rows
from ..state import PuzzleState
from .catalog import clamp_index, get_level_rows

logger = logging.getLogger(__name__)


def load(level_index: int) -> PuzzleState:
    """Fresh state for a catalog level. The index is clamped, never rejected."""
    idx = clamp_index(level_index)
    if idx != level_index:
        logger.debug("Level index %d clamped to %d", level_index, idx)
    return parse_rows(get_level_rows(idx), idx)


def next_level(state: PuzzleState) -> PuzzleState:
    """Level after the current one; the last level reloads itself."""
    return load(state.level_index + 1)


def previous_level(state: PuzzleState) -> PuzzleState:
    """Level before the current one; the first level reloads itself."""
    return load(state.level_index - 1)


def reload(state: PuzzleState) -> PuzzleState:
    """Discards every move made on the current level."""
    return load(state.level_index)
