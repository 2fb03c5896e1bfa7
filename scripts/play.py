"""Terminal front end. Each input line is a sequence of keys; every key is
translated through the keymap and applied in order.

  python -m scripts.play --config configs/play.yaml --level 3
"""
from __future__ import annotations
import argparse
import logging
import os
from typing import Dict, Union

import yaml

from sokoban_engine.engine import (
    LEVEL_COUNT,
    Direction,
    PuzzleState,
    apply_direction,
    crates_on_targets,
    current_level_index,
    init,
    is_complete,
    next_level,
    previous_level,
    reload,
)
from sokoban_engine.render import render_ascii

logger = logging.getLogger(__name__)

CMD_NEXT = "next"
CMD_PREVIOUS = "previous"
CMD_RELOAD = "reload"
CMD_QUIT = "quit"
COMMANDS = (CMD_NEXT, CMD_PREVIOUS, CMD_RELOAD, CMD_QUIT)

Action = Union[Direction, str]

_DIRECTION_NAMES = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_config(path: str) -> dict:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return cfg


def build_keymap(raw: Dict[str, str]) -> Dict[str, Action]:
    """Turns {'w': 'up', 'n': 'next', ...} into key → Direction/command."""
    keymap: Dict[str, Action] = {}
    for key, name in raw.items():
        name = str(name).strip().lower()
        if name in _DIRECTION_NAMES:
            keymap[str(key)] = _DIRECTION_NAMES[name]
        elif name in COMMANDS:
            keymap[str(key)] = name
        else:
            raise ValueError(f"keymap: unknown action {name!r} for key {key!r}")
    return keymap


def translate_key(key: str, keymap: Dict[str, Action]) -> Action:
    """Unknown keys become Direction.IGNORE so they never reach the engine as errors."""
    return keymap.get(key, Direction.IGNORE)


def apply_action(state: PuzzleState, action: Action) -> PuzzleState:
    if isinstance(action, Direction):
        return apply_direction(state, action)
    if action == CMD_NEXT:
        return next_level(state)
    if action == CMD_PREVIOUS:
        return previous_level(state)
    if action == CMD_RELOAD:
        return reload(state)
    return state


def status_line(state: PuzzleState) -> str:
    idx = current_level_index(state)
    line = f"Level {idx + 1}/{LEVEL_COUNT} | crates on targets: {crates_on_targets(state)}/{len(state.targets)}"
    if is_complete(state):
        line += " | SOLVED! press 'n' for the next level"
    return line


def main():
    p = argparse.ArgumentParser(description="Play the level catalog in the terminal")
    p.add_argument("--config", type=str, default="configs/play.yaml")
    p.add_argument("--level", type=int, default=None, help="zero-based level index (overrides config)")
    args = p.parse_args()

    cfg = load_config(args.config)
    configure_logging(cfg.get("log_level", "INFO"))
    keymap = build_keymap(cfg.get("keymap", {}))
    start = args.level if args.level is not None else int(cfg.get("start_level", 0))

    state = init(start)
    logger.info("Starting at level %d", current_level_index(state))
    while True:
        print(render_ascii(state))
        print(status_line(state))
        try:
            line = input("> ")
        except EOFError:
            break
        quit_requested = False
        for key in line.strip():
            action = translate_key(key, keymap)
            if action == CMD_QUIT:
                quit_requested = True
                break
            before = current_level_index(state)
            state = apply_action(state, action)
            if isinstance(action, str):
                logger.info("%s: level %d -> %d", action, before, current_level_index(state))
        if quit_requested:
            break
    print("bye")


if __name__ == "__main__":
    main()
