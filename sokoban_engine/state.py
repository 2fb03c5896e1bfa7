from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple

__all__ = [
    "Direction",
    "Position",
    "PuzzleState",
]


class Direction(Enum):
    """Movement intent. Each member carries its unit vector (dcol, drow)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    IGNORE = (0, 0)

    @property
    def dcol(self) -> int:
        return self.value[0]

    @property
    def drow(self) -> int:
        return self.value[1]


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Grid cell (col, row); col grows rightward, row grows downward."""

    col: int
    row: int

    def step(self, direction: Direction) -> Position:
        return Position(self.col + direction.dcol, self.row + direction.drow)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.col, self.row)


@dataclass(frozen=True, slots=True)
class PuzzleState:
    """
    Immutable snapshot of one level being played.

    walls/targets are fixed at parse time; a move produces a new state with
    a different player and, for a push, a different crates set.
    level_index: catalog entry this state was parsed from.
    """

    width: int
    height: int
    walls: FrozenSet[Position]
    targets: FrozenSet[Position]
    crates: FrozenSet[Position]
    player: Position
    level_index: int = 0


    # ---- convenient checks
    def is_wall(self, pos: Position) -> bool:
        return pos in self.walls


    def is_target(self, pos: Position) -> bool:
        return pos in self.targets


    def has_crate(self, pos: Position) -> bool:
        return pos in self.crates


    def is_free(self, pos: Position) -> bool:
        """Not a wall, not a crate. Targets count as free."""
        return pos not in self.walls and pos not in self.crates
