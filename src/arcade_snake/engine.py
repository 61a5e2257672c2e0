"""Step-based game engine composing grid, snake, food and power-up logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.grid import Grid, Point
from arcade_snake.placement import find_free_cell
from arcade_snake.powerups import PowerUpKind, PowerUpManager
from arcade_snake.snake import Direction, Snake, initial_body

logger = logging.getLogger(__name__)


class StepEvent(str, enum.Enum):
    """Outcome of a single tick."""

    MOVED = "moved"
    ATE_FOOD = "ate_food"
    ATE_POWER_UP = "ate_power_up"
    DIED = "died"
    BOARD_FULL = "board_full"

    @property
    def terminal(self) -> bool:
        return self in (StepEvent.DIED, StepEvent.BOARD_FULL)


@dataclass(frozen=True)
class StepResult:
    """What happened during a tick, as reported to the session and sinks."""

    event: StepEvent
    score_delta: int = 0
    power_up: PowerUpKind | None = None


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the grid, snake, food cell and power-up manager. Each
    call to :meth:`step` advances the game by one tick and returns a
    :class:`StepResult`. Once a step is terminal (death or a full board) the
    engine stops changing and keeps returning that result until
    :meth:`reset`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.grid = Grid(size=self.config.grid_size, rng=self.rng)
        self.power_ups = PowerUpManager(
            self.grid,
            spawn_chance=self.config.power_up_chance,
            lifetime_s=self.config.power_up_lifetime_s,
            effect_ticks=self.config.effect_duration_ticks,
        )
        self.reset()

    def reset(self) -> None:
        """Restore the initial snake, food, effects and tick counter."""
        size = self.config.grid_size
        self.snake = Snake(initial_body(size), Direction.UP)
        self.food: Point | None = Point(size // 4, size // 4)
        self.power_ups.reset()
        self.tick = 0
        self._terminal: StepResult | None = None

    @property
    def over(self) -> bool:
        return self._terminal is not None

    def set_direction(self, direction: Direction) -> bool:
        """Request a heading for the next step. Reversals are ignored."""
        return self.snake.set_direction(direction)

    def step(self, now: float) -> StepResult:
        """Advance the game by one tick.

        *now* is the current clock reading in seconds; it is only used for
        power-up expiry.
        """
        if self._terminal is not None:
            return self._terminal

        snake = self.snake
        if snake.direction is snake.last_direction.opposite:
            snake.direction = snake.last_direction

        new_head = snake.next_head()

        # --- boundary check, then self-collision against the full body ---
        if not self.grid.in_bounds(new_head) or snake.occupies(new_head):
            self.tick += 1
            self._terminal = StepResult(StepEvent.DIED)
            logger.info("Snake died at tick %d heading into %s.", self.tick, new_head)
            return self._terminal

        effects = self.power_ups.effects
        if new_head == self.food:
            snake.advance(grow=True)
            delta = self.config.food_points
            if effects.multiplier_active:
                delta *= self.config.multiplier_factor
            result = self._place_food(delta, now)
        elif self.power_ups.is_at(new_head):
            snake.advance()
            kind = self.power_ups.consume()
            result = StepResult(StepEvent.ATE_POWER_UP, power_up=kind)
        else:
            snake.advance()
            result = StepResult(StepEvent.MOVED)

        self.power_ups.tick_effects()
        self.power_ups.expire(now)
        self.tick += 1
        if result.event.terminal:
            self._terminal = result
        return result

    def _place_food(self, delta: int, now: float) -> StepResult:
        """Respawn food after a meal and roll for a power-up."""
        blocked = set(self.snake.body)
        if self.power_ups.active is not None:
            blocked.add(self.power_ups.active.position)

        self.food = find_free_cell(self.grid, blocked)
        if self.food is None:
            logger.info("Board full at tick %d; the run is won.", self.tick + 1)
            return StepResult(StepEvent.BOARD_FULL, score_delta=delta)

        blocked.add(self.food)
        self.power_ups.maybe_spawn(blocked, now)
        return StepResult(StepEvent.ATE_FOOD, score_delta=delta)

    def get_state(self) -> dict:
        """Return the engine state as a serializable dict."""
        active = self.power_ups.active
        return {
            "tick": self.tick,
            "over": self.over,
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food is not None else None,
            "power_up": active.to_dict() if active is not None else None,
            "effects": self.power_ups.effects.to_dict(),
        }
