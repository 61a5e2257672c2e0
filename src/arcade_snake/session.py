"""Session lifecycle, scoring, high scores and the async tick timer."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

import numpy as np

from arcade_snake.config import Difficulty, GameConfig
from arcade_snake.controls import direction_for_key
from arcade_snake.engine import GameEngine, StepEvent, StepResult
from arcade_snake.events import EventSink
from arcade_snake.highscore import HighScoreStore, MemoryHighScoreStore
from arcade_snake.models import EffectsView, PowerUpView, SessionSnapshot, SessionState
from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)


class GameSession:
    """Owns one player's run: engine, score, high scores and timer.

    All mutable game state lives here. Collaborators read
    :meth:`snapshot` or receive step results through the event sink; none
    of them write back.

    Inside a running asyncio loop, :meth:`begin` and :meth:`restart` start
    a timer task that ticks every :attr:`interval_ms`. Without a loop the
    host calls :meth:`tick` itself.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        difficulty: Difficulty = Difficulty.NORMAL,
        store: HighScoreStore | None = None,
        sink: EventSink | None = None,
        clock: Callable[[], float] = time.monotonic,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.engine = GameEngine(self.config, rng=rng)
        self.store = store if store is not None else MemoryHighScoreStore()
        self.sink = sink if sink is not None else EventSink()
        self.difficulty = Difficulty(difficulty)
        self.high_scores: dict[Difficulty, int] = {
            d: self._load_high_score(d) for d in Difficulty
        }
        self.score = 0
        self.state = SessionState.NOT_STARTED
        self.won = False
        self._clock = clock
        self._task: asyncio.Task | None = None

    # --- properties ---------------------------------------------------------

    @property
    def high_score(self) -> int:
        return self.high_scores[self.difficulty]

    @property
    def interval_ms(self) -> int:
        """Tick interval for the current difficulty and speed effect."""
        interval = self.config.base_interval_ms(self.difficulty)
        if self.engine.power_ups.effects.speed_active:
            interval -= self.config.speed_boost_ms
        return max(self.config.min_interval_ms, interval)

    # --- input ----------------------------------------------------------------

    def set_difficulty(self, difficulty: Difficulty) -> bool:
        """Switch difficulty. Only allowed before the first start."""
        if self.state is not SessionState.NOT_STARTED:
            logger.warning(
                "Ignoring difficulty change to %s while %s.",
                Difficulty(difficulty).value, self.state.value,
            )
            return False
        self.difficulty = Difficulty(difficulty)
        return True

    def handle_key(self, key: str) -> bool:
        """Process a key press. Any key starts a session that hasn't begun."""
        direction = direction_for_key(key)
        if self.state is SessionState.NOT_STARTED:
            self.begin(direction)
            return True
        if direction is None:
            return False
        return self.set_direction(direction)

    def set_direction(self, direction: Direction) -> bool:
        """Request a heading change for the next tick while running."""
        if self.state is not SessionState.RUNNING:
            return False
        return self.engine.set_direction(direction)

    # --- lifecycle ------------------------------------------------------------

    def begin(self, direction: Direction | None = None) -> None:
        """Leave NOT_STARTED, optionally applying a first heading."""
        if self.state is not SessionState.NOT_STARTED:
            return
        self.state = SessionState.RUNNING
        if direction is not None:
            self.engine.set_direction(direction)
        logger.info("Session started on %s.", self.difficulty.value)
        self._ensure_timer()

    def restart(self) -> None:
        """Reset the run and go straight back to RUNNING."""
        self._cancel_timer()
        self.engine.reset()
        self.score = 0
        self.won = False
        self.state = SessionState.RUNNING
        logger.info("Session restarted on %s.", self.difficulty.value)
        self._ensure_timer()

    def tick(self) -> StepResult | None:
        """Run one engine step. Returns ``None`` unless the session is running."""
        if self.state is not SessionState.RUNNING:
            return None
        result = self.engine.step(self._clock())
        self.score += result.score_delta
        self._notify(result)
        if result.event.terminal:
            self._finish(won=result.event is StepEvent.BOARD_FULL)
        return result

    def _finish(self, won: bool = False) -> None:
        self.state = SessionState.OVER
        self.won = won
        logger.info(
            "Game over on %s after %d ticks: score=%d won=%s.",
            self.difficulty.value, self.engine.tick, self.score, self.won,
        )
        if self.score > self.high_score:
            self.high_scores[self.difficulty] = self.score
            self._save_high_score(self.difficulty, self.score)

    # --- collaborators -------------------------------------------------------

    def _notify(self, result: StepResult) -> None:
        try:
            self.sink.notify(result)
        except Exception:
            logger.exception("Event sink failed on %s.", result.event.value)

    def _open_sink(self) -> None:
        try:
            self.sink.open(self.difficulty)
        except Exception:
            logger.exception("Event sink failed to open.")

    def _close_sink(self) -> None:
        try:
            self.sink.close()
        except Exception:
            logger.exception("Event sink failed to close.")

    def _load_high_score(self, difficulty: Difficulty) -> int:
        try:
            return max(0, int(self.store.load(difficulty)))
        except Exception:
            logger.exception("High-score load failed for %s.", difficulty.value)
            return 0

    def _save_high_score(self, difficulty: Difficulty, score: int) -> None:
        try:
            self.store.save(difficulty, score)
        except Exception:
            logger.exception("High-score save failed for %s.", difficulty.value)

    # --- timer ----------------------------------------------------------------

    def start_timer(self) -> asyncio.Task:
        """Start the tick loop on the running event loop.

        Any previous timer is cancelled first so two loops never overlap.
        """
        self._cancel_timer()
        self._task = asyncio.get_running_loop().create_task(self._tick_loop())
        return self._task

    def _ensure_timer(self) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self.start_timer()

    def _cancel_timer(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _tick_loop(self) -> None:
        """Tick while running, re-reading the interval before every sleep."""
        try:
            self._open_sink()
            while self.state is SessionState.RUNNING:
                await asyncio.sleep(self.interval_ms / 1000.0)
                self.tick()
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
        except Exception:
            logger.exception("Tick loop error; ending session.")
            if self.state is SessionState.RUNNING:
                self._finish()
        finally:
            self._close_sink()

    async def wait_until_over(self) -> None:
        """Wait for the current timer loop to finish."""
        if self._task is not None:
            await asyncio.gather(self._task, return_exceptions=True)

    def stop(self) -> None:
        """Cancel the pending timer, if any."""
        self._cancel_timer()

    async def aclose(self) -> None:
        """Cancel the timer and wait until its sink has been released."""
        task = self._task
        self._cancel_timer()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    def __enter__(self) -> GameSession:
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    async def __aenter__(self) -> GameSession:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # --- snapshot -------------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        """Return a read-only view of the current state."""
        engine = self.engine
        active = engine.power_ups.active
        effects = engine.power_ups.effects
        return SessionSnapshot(
            snake=[tuple(seg) for seg in engine.snake.body],
            food=tuple(engine.food) if engine.food is not None else None,
            power_up=(
                PowerUpView(
                    position=tuple(active.position),
                    kind=active.kind,
                    expires_at=active.expires_at,
                )
                if active is not None else None
            ),
            score=self.score,
            high_score=self.high_score,
            difficulty=self.difficulty,
            active_effects=EffectsView(speed=effects.speed, multiplier=effects.multiplier),
            state=self.state,
            won=self.won,
            interval_ms=self.interval_ms,
            tick=engine.tick,
        )
