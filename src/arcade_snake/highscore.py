"""Best-score persistence keyed by difficulty."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from arcade_snake.config import Difficulty

logger = logging.getLogger(__name__)


def score_key(difficulty: Difficulty) -> str:
    """Return the storage key for *difficulty*, e.g. ``snake-high-NORMAL``."""
    return f"snake-high-{Difficulty(difficulty).value}"


class HighScoreStore:
    """Key-value store of best scores. Implementations must not raise."""

    def load(self, difficulty: Difficulty) -> int:
        raise NotImplementedError

    def save(self, difficulty: Difficulty, score: int) -> None:
        raise NotImplementedError


class MemoryHighScoreStore(HighScoreStore):
    """Dict-backed store, useful for tests and embedding."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self.values: dict[str, int] = dict(initial or {})

    def load(self, difficulty: Difficulty) -> int:
        return self.values.get(score_key(difficulty), 0)

    def save(self, difficulty: Difficulty, score: int) -> None:
        self.values[score_key(difficulty)] = score


class JsonHighScoreStore(HighScoreStore):
    """Stores all difficulties as one JSON object on disk.

    Any read problem yields a zero score and any write problem is logged
    and skipped, so a broken or read-only file never ends a session.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read high scores from %s: %s", self._path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed high-score file %s.", self._path)
            return {}
        return raw

    def load(self, difficulty: Difficulty) -> int:
        value = self._read_all().get(score_key(difficulty), 0)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning(
                "Ignoring invalid high score %r for %s.", value, score_key(difficulty),
            )
            return 0
        return value

    def save(self, difficulty: Difficulty, score: int) -> None:
        data = self._read_all()
        data[score_key(difficulty)] = int(score)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self._path, exc)
            return
        logger.info("High score %d saved for %s.", score, Difficulty(difficulty).value)
