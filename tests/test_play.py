import pytest
from scripts.play import (
    CMD_NEXT,
    CMD_QUIT,
    apply_action,
    build_keymap,
    load_config,
    status_line,
    translate_key,
)
from sokoban_engine.engine import Direction, init


@pytest.fixture
def keymap():
    return build_keymap({"w": "up", "d": "right", "n": "next", "r": "reload", "q": "quit"})


def test_build_keymap(keymap):
    assert keymap["w"] is Direction.UP
    assert keymap["n"] == CMD_NEXT
    assert keymap["q"] == CMD_QUIT


def test_build_keymap_rejects_unknown_action():
    with pytest.raises(ValueError):
        build_keymap({"x": "jump"})


def test_unknown_key_maps_to_ignore(keymap):
    assert translate_key("z", keymap) is Direction.IGNORE
    s = init(0)
    assert apply_action(s, translate_key("z", keymap)) is s


def test_actions_drive_the_engine(keymap):
    s = init(0)
    s = apply_action(s, translate_key("d", keymap))
    assert "SOLVED" in status_line(s)
    s = apply_action(s, translate_key("n", keymap))
    assert s.level_index == 1
    assert status_line(s).startswith("Level 2/50")


def test_load_config(tmp_path):
    cfg_file = tmp_path / "play.yaml"
    cfg_file.write_text("start_level: 4\nkeymap:\n  w: up\n", encoding="utf-8")
    cfg = load_config(str(cfg_file))
    assert cfg["start_level"] == 4
    assert build_keymap(cfg["keymap"]) == {"w": Direction.UP}


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))
