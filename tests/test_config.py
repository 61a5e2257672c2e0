"""Tests for the game configuration dataclass."""

import json

import pytest

from arcade_snake.config import Difficulty, GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.grid_size == 20
        assert cfg.food_points == 10
        assert cfg.power_up_chance == 0.2
        assert cfg.power_up_lifetime_s == 5.0
        assert cfg.effect_duration_ticks == 50
        assert cfg.seed is None

    def test_base_intervals(self):
        cfg = GameConfig()
        assert cfg.base_interval_ms(Difficulty.EASY) == 200
        assert cfg.base_interval_ms(Difficulty.NORMAL) == 120
        assert cfg.base_interval_ms(Difficulty.INSANE) == 60

    def test_base_interval_accepts_string(self):
        assert GameConfig().base_interval_ms("INSANE") == 60

    def test_grid_too_small(self):
        with pytest.raises(ValueError, match="grid_size"):
            GameConfig(grid_size=5)

    def test_invalid_chance(self):
        with pytest.raises(ValueError, match="power_up_chance"):
            GameConfig(power_up_chance=1.5)

    def test_invalid_effect_duration(self):
        with pytest.raises(ValueError, match="effect_duration_ticks"):
            GameConfig(effect_duration_ticks=0)

    def test_to_dict_serializable(self):
        d = GameConfig().to_dict()
        assert d["normal_interval_ms"] == 120
        assert isinstance(json.dumps(d), str)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(grid_size=15, power_up_chance=0.5, seed=9)
        path = tmp_path / "config.json"
        cfg.save(path)
        assert path.exists()
        assert GameConfig.load(path) == cfg


class TestDifficulty:
    def test_values_match_names(self):
        assert [d.value for d in Difficulty] == ["EASY", "NORMAL", "INSANE"]
