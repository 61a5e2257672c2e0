"""Tests for the snapshot schema."""

import pytest
from pydantic import ValidationError

from arcade_snake.config import Difficulty
from arcade_snake.models import EffectsView, SessionSnapshot, SessionState


def _snapshot(**overrides) -> dict:
    data = {
        "snake": [(10, 10), (10, 11), (10, 12)],
        "food": (5, 5),
        "score": 0,
        "high_score": 0,
        "difficulty": "NORMAL",
        "active_effects": {"speed": 0, "multiplier": 0},
        "state": "running",
        "interval_ms": 120,
        "tick": 0,
    }
    data.update(overrides)
    return data


class TestSessionSnapshot:
    def test_parses_plain_values(self):
        snap = SessionSnapshot(**_snapshot())
        assert snap.difficulty is Difficulty.NORMAL
        assert snap.state is SessionState.RUNNING
        assert snap.power_up is None
        assert snap.won is False

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            SessionSnapshot(**_snapshot(score=-1))

    def test_negative_effects_rejected(self):
        with pytest.raises(ValidationError):
            EffectsView(speed=-1)

    def test_food_may_be_absent(self):
        assert SessionSnapshot(**_snapshot(food=None)).food is None
