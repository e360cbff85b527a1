import json

import pytest

import main
from settings import SpawnMode


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.config is None
    assert args.frames is None
    assert args.log_level == "INFO"


def test_load_settings_applies_overrides(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"width": 64, "height": 48, "num_agents": 10}))
    args = main.parse_args(["--config", str(path), "--agents", "25", "--mode", "point", "--seed", "3"])
    settings = main.load_settings(args)
    assert (settings.width, settings.height) == (64, 48)
    assert settings.num_agents == 25
    assert settings.spawn_mode is SpawnMode.POINT
    assert settings.seed == 3


def test_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main.parse_args(["--mode", "line"])


def test_runs_a_few_frames_headless(tmp_path):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps({"width": 32, "height": 24, "window_width": 64, "window_height": 48,
                                "num_agents": 50, "spawn_mode": "random", "seed": 1}))
    assert main.main(["--config", str(path), "--frames", "3", "--log-level", "WARNING"]) == 0
