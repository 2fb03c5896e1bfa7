from .state import PuzzleState


def is_complete(state: PuzzleState) -> bool:
    """Solved iff the crate positions are exactly the target positions."""
    return state.crates == state.targets


def crates_on_targets(state: PuzzleState) -> int:
    return len(state.crates & state.targets)
