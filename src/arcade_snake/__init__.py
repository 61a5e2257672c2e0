"""Arcade Snake: tick-driven snake game engine."""

from arcade_snake.config import Difficulty, GameConfig
from arcade_snake.engine import GameEngine, StepEvent, StepResult
from arcade_snake.events import EventSink, RecordingSink
from arcade_snake.grid import Grid, Point
from arcade_snake.highscore import (
    HighScoreStore,
    JsonHighScoreStore,
    MemoryHighScoreStore,
)
from arcade_snake.models import SessionSnapshot, SessionState
from arcade_snake.powerups import ActiveEffects, PowerUp, PowerUpKind
from arcade_snake.session import GameSession
from arcade_snake.snake import Direction, Snake

__all__ = [
    "ActiveEffects",
    "Difficulty",
    "Direction",
    "EventSink",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "Grid",
    "HighScoreStore",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    "Point",
    "PowerUp",
    "PowerUpKind",
    "RecordingSink",
    "SessionSnapshot",
    "SessionState",
    "Snake",
    "StepEvent",
    "StepResult",
]
