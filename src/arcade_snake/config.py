"""Game configuration: grid size, scoring, power-up and timing constants."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class Difficulty(str, enum.Enum):
    """Difficulty levels, each with its own base tick interval."""

    EASY = "EASY"
    NORMAL = "NORMAL"
    INSANE = "INSANE"


@dataclass(frozen=True)
class GameConfig:
    """Full engine configuration.

    Supports JSON serialization so a tuned setup can be reused.
    """

    # Board
    grid_size: int = 20

    # Scoring
    food_points: int = 10
    multiplier_factor: int = 2

    # Power-ups
    power_up_chance: float = 0.2
    power_up_lifetime_s: float = 5.0
    effect_duration_ticks: int = 50

    # Timing (milliseconds)
    speed_boost_ms: int = 40
    min_interval_ms: int = 30
    easy_interval_ms: int = 200
    normal_interval_ms: int = 120
    insane_interval_ms: int = 60

    # RNG
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 6:
            raise ValueError("grid_size must be at least 6.")
        if self.food_points < 1:
            raise ValueError("food_points must be at least 1.")
        if self.multiplier_factor < 1:
            raise ValueError("multiplier_factor must be at least 1.")
        if not 0.0 <= self.power_up_chance <= 1.0:
            raise ValueError("power_up_chance must be between 0 and 1.")
        if self.power_up_lifetime_s <= 0:
            raise ValueError("power_up_lifetime_s must be positive.")
        if self.effect_duration_ticks < 1:
            raise ValueError("effect_duration_ticks must be at least 1.")
        if self.min_interval_ms < 1:
            raise ValueError("min_interval_ms must be at least 1.")

    def base_interval_ms(self, difficulty: Difficulty) -> int:
        """Return the unboosted tick interval for *difficulty*."""
        return {
            Difficulty.EASY: self.easy_interval_ms,
            Difficulty.NORMAL: self.normal_interval_ms,
            Difficulty.INSANE: self.insane_interval_ms,
        }[Difficulty(difficulty)]

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
