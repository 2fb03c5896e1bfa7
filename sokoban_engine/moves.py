from typing import Iterable

from .state import Direction, PuzzleState


def apply_direction(state: PuzzleState, direction: Direction) -> PuzzleState:
    """Returns the state after one step of the player.

    Rules:
      1) IGNORE, or a wall in front of the player → nothing happens,
      2) a crate in front is pushed one cell further if that cell holds
         neither a wall nor another crate; otherwise nothing happens
         (the player stays too),
      3) otherwise the player steps forward.
    A blocked move returns the very same state object.
    """
    if direction is Direction.IGNORE:
        return state

    dest = state.player.step(direction)
    if state.is_wall(dest):
        return state

    crates = state.crates
    if state.has_crate(dest):
        beyond = dest.step(direction)
        if not state.is_free(beyond):
            return state
        crates = (crates - {dest}) | {beyond}

    return PuzzleState(
        width=state.width,
        height=state.height,
        walls=state.walls,
        targets=state.targets,
        crates=crates,
        player=dest,
        level_index=state.level_index,
    )


def apply_directions(state: PuzzleState, directions: Iterable[Direction]) -> PuzzleState:
    """Applies directions one after another."""
    for d in directions:
        state = apply_direction(state, d)
    return state
