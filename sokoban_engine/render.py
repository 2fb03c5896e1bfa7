from .state import Position, PuzzleState


def render_ascii(state: PuzzleState) -> str:
    """ASCII visualization of the state, in the level notation.

    The player standing on a target is drawn as '+'.
    """
    out_lines = []
    for r in range(state.height):
        row_chars = []
        for c in range(state.width):
            pos = Position(c, r)
            if state.is_wall(pos):
                row_chars.append('#')
                continue
            has_target = state.is_target(pos)
            if pos == state.player:
                row_chars.append('+' if has_target else '@')
            elif state.has_crate(pos):
                row_chars.append('*' if has_target else '$')
            else:
                row_chars.append('.' if has_target else ' ')
        out_lines.append(''.join(row_chars).rstrip())
    return "\n".join(out_lines)
