"""Timed power-up spawning, pickup, and effect countdowns."""

from __future__ import annotations

import enum
import logging
from collections.abc import Collection
from dataclasses import dataclass

from arcade_snake.grid import Grid, Point
from arcade_snake.placement import find_free_cell

logger = logging.getLogger(__name__)


class PowerUpKind(str, enum.Enum):
    """Bonus types a power-up can grant."""

    SPEED = "SPEED"
    MULTIPLIER = "MULTIPLIER"


@dataclass(frozen=True)
class PowerUp:
    """A bonus sitting on the board until picked up or expired."""

    position: Point
    kind: PowerUpKind
    expires_at: float

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "kind": self.kind.value,
            "expires_at": self.expires_at,
        }


@dataclass
class ActiveEffects:
    """Remaining ticks for each effect. Zero means inactive."""

    speed: int = 0
    multiplier: int = 0

    @property
    def speed_active(self) -> bool:
        return self.speed > 0

    @property
    def multiplier_active(self) -> bool:
        return self.multiplier > 0

    def tick(self) -> None:
        """Count both effects down by one tick, stopping at zero."""
        self.speed = max(0, self.speed - 1)
        self.multiplier = max(0, self.multiplier - 1)

    def to_dict(self) -> dict:
        return {"speed": self.speed, "multiplier": self.multiplier}


class PowerUpManager:
    """Owns the single optional power-up and the active effect counters."""

    def __init__(
        self,
        grid: Grid,
        spawn_chance: float = 0.2,
        lifetime_s: float = 5.0,
        effect_ticks: int = 50,
    ) -> None:
        self.grid = grid
        self.spawn_chance = spawn_chance
        self.lifetime_s = lifetime_s
        self.effect_ticks = effect_ticks
        self.active: PowerUp | None = None
        self.effects = ActiveEffects()

    def maybe_spawn(
        self,
        occupied: Collection[tuple[int, int]],
        now: float,
    ) -> PowerUp | None:
        """Roll for a new power-up; only one may be on the board at a time."""
        if self.active is not None:
            return None
        rng = self.grid.rng
        if rng.random() >= self.spawn_chance:
            return None
        kind = PowerUpKind.SPEED if rng.random() < 0.5 else PowerUpKind.MULTIPLIER
        cell = find_free_cell(self.grid, occupied)
        if cell is None:
            return None
        self.active = PowerUp(cell, kind, now + self.lifetime_s)
        logger.debug("Spawned %s power-up at %s.", kind.value, cell)
        return self.active

    def is_at(self, cell: tuple[int, int]) -> bool:
        return self.active is not None and self.active.position == cell

    def consume(self) -> PowerUpKind:
        """Pick up the active power-up and start its effect."""
        if self.active is None:
            raise ValueError("No active power-up to consume.")
        kind = self.active.kind
        if kind is PowerUpKind.SPEED:
            self.effects.speed = self.effect_ticks
        else:
            self.effects.multiplier = self.effect_ticks
        self.active = None
        logger.debug("Picked up %s power-up.", kind.value)
        return kind

    def expire(self, now: float) -> bool:
        """Drop the power-up unconsumed once its lifetime has passed."""
        if self.active is not None and now > self.active.expires_at:
            logger.debug("%s power-up expired.", self.active.kind.value)
            self.active = None
            return True
        return False

    def tick_effects(self) -> None:
        self.effects.tick()

    def reset(self) -> None:
        self.active = None
        self.effects = ActiveEffects()
