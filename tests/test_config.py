"""
Unit tests for configuration and CLI argument handling.
"""

import dataclasses

import pytest

from gridsnake.config import CFG, Config, HUD_HEIGHT
from gridsnake.core import Direction, InitArgs
from gridsnake.main import config_from_args, parse_args


class TestConfig:

    def test_defaults_valid(self):
        assert Config().validate() == []

    def test_default_init_args(self):
        assert Config().init_args() == InitArgs(
            grid_size=(20, 20),
            direction=Direction.RIGHT,
            position=(1, 1),
            snake_length=4,
        )

    def test_window_size(self):
        cfg = Config(grid_width=10, grid_height=5, cell_size=20)
        assert cfg.window_size == (200, 100 + HUD_HEIGHT)

    def test_bad_direction(self):
        errors = Config(direction="sideways").validate()
        assert len(errors) == 1
        assert "direction" in errors[0]

    def test_start_outside_grid(self):
        errors = Config(grid_width=5, start_x=5).validate()
        assert any("outside" in e for e in errors)

    def test_collects_all_errors(self):
        cfg = Config(cell_size=1, ms_per_tick=0, snake_length=0)
        assert len(cfg.validate()) == 3

    def test_init_args_raises(self):
        with pytest.raises(ValueError, match="snake_length"):
            Config(snake_length=0).init_args()


class TestArgs:

    def test_defaults_match_config(self):
        cfg = config_from_args(parse_args([]))
        assert cfg == dataclasses.replace(CFG)

    def test_overrides(self):
        cfg = config_from_args(parse_args([
            "--width", "12", "--height", "9", "--tick-ms", "80",
            "--length", "3", "--seed", "5", "--highscore-file", "/tmp/hs.json",
        ]))
        assert (cfg.grid_width, cfg.grid_height) == (12, 9)
        assert cfg.ms_per_tick == 80
        assert cfg.snake_length == 3
        assert cfg.seed == 5
        assert str(cfg.highscore_path) == "/tmp/hs.json"

    def test_no_save(self):
        cfg = config_from_args(parse_args(["--no-save"]))
        assert cfg.highscore_path is None
