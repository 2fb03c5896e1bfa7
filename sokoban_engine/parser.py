import logging
from typing import List, Optional, Sequence, Set

from .state import Position, PuzzleState

logger = logging.getLogger(__name__)

TOK_WALL = "#"
TOK_TARGET = "."
TOK_CRATE = "$"
TOK_CRATE_ON_TARGET = "*"
TOK_PLAYER = "@"
TOK_FLOOR = " "

DEFAULT_PLAYER = Position(0, 0)


class LevelFormatError(ValueError):
    """Level text that cannot be turned into a playable state."""


def level_rows(level_str: str) -> List[str]:
    """Splits level text into rows, dropping blank lines around the grid."""
    lines = [line.rstrip("\r\n") for line in level_str.splitlines()]
    while lines and lines[0].strip() == "":
        lines.pop(0)
    while lines and lines[-1].strip() == "":
        lines.pop()
    return lines


def parse_rows(rows: Sequence[str], level_index: int = 0, *, strict: bool = False) -> PuzzleState:
    """Parses a grid given as rows of text into a PuzzleState.

    Supported characters:
      '#': wall
      '.': target
      '$': crate
      '*': crate on target (recorded as both)
      '@': player
    Other characters (space included) are floor. Short rows are treated as
    padded with floor up to the longest row.

    A grid without '@' puts the player at (0, 0) and logs a warning; a
    second '@' wins over the first, also with a warning. With strict=True
    either case, or a crate/target count mismatch, raises LevelFormatError.
    """
    if not rows:
        raise LevelFormatError("Empty level")
    height = len(rows)
    width = max(len(row) for row in rows)
    if width == 0:
        raise LevelFormatError("Empty level")

    walls: Set[Position] = set()
    targets: Set[Position] = set()
    crates: Set[Position] = set()
    player: Optional[Position] = None

    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            pos = Position(c, r)
            if ch == TOK_WALL:
                walls.add(pos)
            elif ch == TOK_TARGET:
                targets.add(pos)
            elif ch == TOK_CRATE:
                crates.add(pos)
            elif ch == TOK_CRATE_ON_TARGET:
                crates.add(pos)
                targets.add(pos)
            elif ch == TOK_PLAYER:
                if player is not None:
                    if strict:
                        raise LevelFormatError(
                            f"Level {level_index}: second player at {pos.as_tuple()}, first at {player.as_tuple()}")
                    logger.warning("Level %d has a second player '%s' at %s; it replaces the one at %s",
                                   level_index, TOK_PLAYER, pos.as_tuple(), player.as_tuple())
                player = pos

    if strict and len(crates) != len(targets):
        raise LevelFormatError(
            f"Level {level_index}: {len(crates)} crates but {len(targets)} targets")

    if player is None:
        if strict:
            raise LevelFormatError(f"Level {level_index}: no player '{TOK_PLAYER}' found")
        logger.warning("Level %d has no player '%s'; placing player at %s",
                       level_index, TOK_PLAYER, DEFAULT_PLAYER.as_tuple())
        player = DEFAULT_PLAYER

    return PuzzleState(width=width, height=height,
                       walls=frozenset(walls), targets=frozenset(targets),
                       crates=frozenset(crates), player=player,
                       level_index=level_index)


def parse_level_str(level_str: str, level_index: int = 0, *, strict: bool = False) -> PuzzleState:
    return parse_rows(level_rows(level_str), level_index, strict=strict)
