"""Tests for power-up spawning, pickup and effect countdowns."""

import numpy as np
import pytest

from arcade_snake.grid import Grid, Point
from arcade_snake.powerups import (
    ActiveEffects,
    PowerUp,
    PowerUpKind,
    PowerUpManager,
)


def _manager(**kwargs) -> PowerUpManager:
    grid = Grid(size=10, rng=np.random.default_rng(0))
    return PowerUpManager(grid, **kwargs)


class TestActiveEffects:
    def test_defaults_inactive(self):
        effects = ActiveEffects()
        assert not effects.speed_active
        assert not effects.multiplier_active

    def test_tick_floors_at_zero(self):
        effects = ActiveEffects(speed=1, multiplier=0)
        effects.tick()
        assert effects.speed == 0
        assert effects.multiplier == 0
        effects.tick()
        assert effects.speed == 0
        assert effects.multiplier == 0

    def test_counts_down_to_exactly_zero(self):
        effects = ActiveEffects(speed=50, multiplier=20)
        history = []
        for _ in range(60):
            effects.tick()
            history.append(effects.speed)
        assert history == sorted(history, reverse=True)
        assert history[49] == 0
        assert history[48] == 1
        assert effects.multiplier == 0


class TestSpawning:
    def test_spawn_when_chance_certain(self):
        manager = _manager(spawn_chance=1.0, lifetime_s=5.0)
        occupied = {(0, 0), (1, 0)}
        power_up = manager.maybe_spawn(occupied, now=10.0)
        assert power_up is not None
        assert power_up.position not in occupied
        assert power_up.expires_at == 15.0
        assert power_up.kind in (PowerUpKind.SPEED, PowerUpKind.MULTIPLIER)
        assert manager.active is power_up

    def test_no_spawn_when_chance_zero(self):
        manager = _manager(spawn_chance=0.0)
        assert manager.maybe_spawn(set(), now=0.0) is None
        assert manager.active is None

    def test_only_one_at_a_time(self):
        manager = _manager(spawn_chance=1.0)
        first = manager.maybe_spawn(set(), now=0.0)
        assert manager.maybe_spawn(set(), now=0.0) is None
        assert manager.active is first

    def test_both_kinds_appear(self):
        kinds = set()
        for seed in range(30):
            grid = Grid(size=10, rng=np.random.default_rng(seed))
            manager = PowerUpManager(grid, spawn_chance=1.0)
            kinds.add(manager.maybe_spawn(set(), now=0.0).kind)
        assert kinds == {PowerUpKind.SPEED, PowerUpKind.MULTIPLIER}


class TestConsumeAndExpire:
    def test_consume_speed(self):
        manager = _manager(effect_ticks=50)
        manager.active = PowerUp(Point(1, 1), PowerUpKind.SPEED, 10.0)
        assert manager.is_at((1, 1))
        assert manager.consume() is PowerUpKind.SPEED
        assert manager.effects.speed == 50
        assert manager.effects.multiplier == 0
        assert manager.active is None

    def test_effects_are_independent(self):
        manager = _manager(effect_ticks=50)
        manager.active = PowerUp(Point(1, 1), PowerUpKind.SPEED, 10.0)
        manager.consume()
        manager.tick_effects()
        manager.active = PowerUp(Point(2, 2), PowerUpKind.MULTIPLIER, 10.0)
        manager.consume()
        assert manager.effects.speed == 49
        assert manager.effects.multiplier == 50

    def test_consume_without_power_up(self):
        with pytest.raises(ValueError, match="No active power-up"):
            _manager().consume()

    def test_expire_after_deadline(self):
        manager = _manager()
        manager.active = PowerUp(Point(1, 1), PowerUpKind.SPEED, 5.0)
        assert not manager.expire(5.0)
        assert manager.active is not None
        assert manager.expire(5.01)
        assert manager.active is None

    def test_expire_leaves_effects_alone(self):
        manager = _manager()
        manager.effects.multiplier = 3
        manager.active = PowerUp(Point(1, 1), PowerUpKind.SPEED, 0.0)
        manager.expire(1.0)
        assert manager.effects.multiplier == 3
        assert manager.effects.speed == 0

    def test_reset(self):
        manager = _manager()
        manager.active = PowerUp(Point(1, 1), PowerUpKind.SPEED, 5.0)
        manager.effects.speed = 10
        manager.reset()
        assert manager.active is None
        assert manager.effects == ActiveEffects()


class TestSerialization:
    def test_power_up_to_dict(self):
        power_up = PowerUp(Point(3, 4), PowerUpKind.MULTIPLIER, 2.5)
        assert power_up.to_dict() == {
            "position": [3, 4],
            "kind": "MULTIPLIER",
            "expires_at": 2.5,
        }
