"""Procedural tone cues for game events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from arcade_snake.config import Difficulty
from arcade_snake.engine import StepEvent, StepResult
from arcade_snake.events import EventSink

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_RATE = 22050


@dataclass(frozen=True)
class ToneCue:
    """A single oscillator sweep with a gain envelope.

    After the sweep the tone holds ``end_hz`` and ``end_gain`` for
    ``hold_s`` seconds.
    """

    waveform: str  # "sine", "square", "triangle", "sawtooth"
    start_hz: float
    end_hz: float
    duration_s: float
    gain: float
    end_gain: float = 0.01
    linear_fade: bool = False
    hold_s: float = 0.0


EVENT_CUES: dict[StepEvent, ToneCue] = {
    StepEvent.ATE_FOOD: ToneCue("sine", 600.0, 800.0, 0.1, 0.1),
    StepEvent.ATE_POWER_UP: ToneCue("triangle", 400.0, 1200.0, 0.2, 0.15),
    StepEvent.DIED: ToneCue("sawtooth", 200.0, 50.0, 0.5, 0.2, end_gain=0.0, linear_fade=True),
    StepEvent.BOARD_FULL: ToneCue("triangle", 400.0, 1200.0, 0.5, 0.15),
}

# (base frequency, sweep period in seconds) of the background hum.
_AMBIENT: dict[Difficulty, tuple[float, float]] = {
    Difficulty.EASY: (35.0, 2.0),
    Difficulty.NORMAL: (45.0, 1.5),
    Difficulty.INSANE: (60.0, 1.0),
}


def ambient_cue(difficulty: Difficulty) -> ToneCue:
    """Return one full period of the background hum for *difficulty*.

    The pitch rises 10 Hz over the first half of the period and holds for
    the second half; looping the buffer snaps it back to the base pitch.
    """
    freq, period = _AMBIENT[Difficulty(difficulty)]
    return ToneCue(
        "sine", freq, freq + 10.0, period / 2, 0.015,
        end_gain=0.015, hold_s=period / 2,
    )


def _oscillate(waveform: str, phase: np.ndarray) -> np.ndarray:
    if waveform == "sine":
        return np.sin(phase)
    if waveform == "square":
        return np.sign(np.sin(phase))
    if waveform == "triangle":
        return (2.0 / np.pi) * np.arcsin(np.sin(phase))
    if waveform == "sawtooth":
        return 2.0 * np.mod(phase / (2.0 * np.pi), 1.0) - 1.0
    raise ValueError(f"Unknown waveform {waveform!r}.")


def render_cue(cue: ToneCue, sample_rate: int = DEFAULT_SAMPLE_RATE) -> np.ndarray:
    """Synthesise *cue* as a mono float32 buffer in ``[-1, 1]``.

    Frequency sweeps exponentially from ``start_hz`` to ``end_hz``; gain
    fades exponentially to ``end_gain`` or, with ``linear_fade``, linearly.
    Both then stay put for the hold.
    """
    if sample_rate <= 0:
        raise ValueError("sample_rate must be positive.")
    ramp_n = max(1, int(round(cue.duration_s * sample_rate)))
    hold_n = max(0, int(round(cue.hold_s * sample_rate)))
    frac = np.minimum(np.arange(ramp_n + hold_n, dtype=np.float64) / ramp_n, 1.0)

    freq = cue.start_hz * (cue.end_hz / cue.start_hz) ** frac
    phase = 2.0 * np.pi * np.cumsum(freq) / sample_rate
    wave = _oscillate(cue.waveform, phase)

    if cue.linear_fade or cue.end_gain <= 0:
        envelope = cue.gain + (cue.end_gain - cue.gain) * frac
    else:
        envelope = cue.gain * (cue.end_gain / cue.gain) ** frac
    return (wave * envelope).astype(np.float32)


class ToneSink(EventSink):
    """Turns step results into audio buffers for playback callbacks.

    *play* receives one-shot cues. *loop* receives the background hum when
    the sink opens and must repeat it until *stop* is called from
    ``close``. Without *loop* the hum is skipped.
    """

    def __init__(
        self,
        play: Callable[[np.ndarray], None],
        stop: Callable[[], None] | None = None,
        *,
        loop: Callable[[np.ndarray], None] | None = None,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
    ) -> None:
        self._play = play
        self._stop = stop
        self._loop = loop
        self.sample_rate = sample_rate
        self.difficulty: Difficulty | None = None
        self.is_open = False
        self._cache: dict[ToneCue, np.ndarray] = {}

    def _buffer(self, cue: ToneCue) -> np.ndarray:
        buf = self._cache.get(cue)
        if buf is None:
            buf = render_cue(cue, self.sample_rate)
            self._cache[cue] = buf
        return buf

    def open(self, difficulty: Difficulty = Difficulty.NORMAL) -> None:
        self.difficulty = Difficulty(difficulty)
        self.is_open = True
        if self._loop is not None:
            self._loop(self._buffer(ambient_cue(self.difficulty)))
        logger.debug(
            "Audio output opened (%d Hz, %s hum).",
            self.sample_rate, self.difficulty.value,
        )

    def notify(self, result: StepResult) -> None:
        cue = EVENT_CUES.get(result.event)
        if cue is not None:
            self._play(self._buffer(cue))

    def close(self) -> None:
        if not self.is_open:
            return
        self.is_open = False
        if self._stop is not None:
            self._stop()
        logger.debug("Audio output released.")
