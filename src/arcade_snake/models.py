"""Pydantic models for the read-only session snapshot."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

from arcade_snake.config import Difficulty
from arcade_snake.powerups import PowerUpKind


class SessionState(str, enum.Enum):
    """Lifecycle states for a game session."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


class PowerUpView(BaseModel):
    """A power-up currently on the board."""

    position: tuple[int, int]
    kind: PowerUpKind
    expires_at: float


class EffectsView(BaseModel):
    """Remaining ticks of each active effect."""

    speed: int = Field(default=0, ge=0)
    multiplier: int = Field(default=0, ge=0)


class SessionSnapshot(BaseModel):
    """Everything a renderer needs, safe to read between ticks."""

    snake: list[tuple[int, int]]
    food: tuple[int, int] | None
    power_up: PowerUpView | None = None
    score: int = Field(ge=0)
    high_score: int = Field(ge=0)
    difficulty: Difficulty
    active_effects: EffectsView
    state: SessionState
    won: bool = False
    interval_ms: int = Field(ge=1)
    tick: int = Field(ge=0)
