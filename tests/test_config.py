import json

import pytest

from pixel_motion.config import EditorConfig
from pixel_motion.config_manager import editor_config_from, load_config
from pixel_motion.logic.errors import ConfigError


def test_packaged_config_loads():
    data = load_config()
    assert data["app_settings"]["title"] == "Pixel Motion"
    config = editor_config_from(data)
    assert config == EditorConfig()


def test_missing_file_returns_none(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) is None


def test_bad_json_returns_none(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{ not json", encoding="utf-8")
    assert load_config(str(path)) is None


def test_partial_editor_section_keeps_defaults():
    config = editor_config_from({"editor": {"width": 16, "max_frames": 8}})
    assert (config.width, config.height, config.max_frames) == (16, 32, 8)
    assert config.onion_skin_opacity == 0.3


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"editor": {"zoom": 10, "brush_size": 5}}), encoding="utf-8")
    config = editor_config_from(load_config(str(path)))
    assert config.zoom == 10


def test_no_editor_section():
    assert editor_config_from({}) == EditorConfig()
    assert editor_config_from(None) == EditorConfig()


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -4},
    {"max_frames": 0},
    {"onion_skin_opacity": 1.5},
    {"onion_skin_opacity": -0.1},
    {"playback_fps": 0},
    {"playback_fps": 1001},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        EditorConfig(**kwargs)


def test_fastest_playback_allowed():
    assert EditorConfig(playback_fps=1000).playback_fps == 1000
