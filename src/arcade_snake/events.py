"""Outbound notification sinks for renderers and audio."""

from __future__ import annotations

from arcade_snake.config import Difficulty
from arcade_snake.engine import StepResult


class EventSink:
    """Receives one :class:`StepResult` per processed tick.

    ``open`` is called with the session's difficulty when its timer starts
    and ``close`` when it stops, so sinks holding an output device can
    acquire and release it. The default implementation ignores everything.
    """

    def open(self, difficulty: Difficulty = Difficulty.NORMAL) -> None:
        pass

    def notify(self, result: StepResult) -> None:
        pass

    def close(self) -> None:
        pass


class RecordingSink(EventSink):
    """Keeps every notification in memory."""

    def __init__(self) -> None:
        self.results: list[StepResult] = []
        self.is_open = False
        self.open_count = 0
        self.difficulty: Difficulty | None = None

    def open(self, difficulty: Difficulty = Difficulty.NORMAL) -> None:
        self.is_open = True
        self.open_count += 1
        self.difficulty = Difficulty(difficulty)

    def notify(self, result: StepResult) -> None:
        self.results.append(result)

    def close(self) -> None:
        self.is_open = False

    @property
    def events(self) -> list:
        return [r.event for r in self.results]
