"""
Playback Controller
===================
Drives the simulation forward in time.

Why is this file needed?
------------------------
1. State ownership: it holds the only mutable SimulationState in the app.
2. Timing: a QTimer ticks the pure `advance()` function with the real elapsed
   time, so playback speed does not depend on the frame rate.
3. Signals: every change is broadcast as (SimulationState, QueryResult), and
   the views simply redraw from that.
"""
import logging

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Signal

from yieldpoint.config import TICK_INTERVAL_MS
from yieldpoint.model import playback
from yieldpoint.model.curve import Curve
from yieldpoint.model.playback import QueryResult, SimulationState
from yieldpoint.model.thresholds import THRESHOLDS, PhaseThresholds

logger = logging.getLogger(__name__)


class PlaybackController(QObject):
    # (SimulationState, QueryResult)
    state_changed = Signal(object, object)

    def __init__(self, curve: Curve, thresholds: PhaseThresholds = THRESHOLDS) -> None:
        super().__init__()
        self.curve = curve
        self.thresholds = thresholds
        self.max_strain = thresholds.fracture
        self.state = SimulationState()

        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self._on_tick)

    def current(self) -> QueryResult:
        return playback.query_state(self.curve, self.state.current_strain, self.thresholds)

    def _set_state(self, state: SimulationState) -> None:
        self.state = state
        if state.is_playing and not self._timer.isActive():
            self._clock.start()
            self._timer.start()
        elif not state.is_playing and self._timer.isActive():
            self._timer.stop()
        self.state_changed.emit(self.state, self.current())

    def _on_tick(self) -> None:
        dt = self._clock.restart() / 1000.0
        self._set_state(playback.advance(self.state, dt, self.max_strain, self.thresholds))

    # --- Transport actions ---
    def play_pause(self) -> None:
        state = self.state
        if not state.is_playing and state.current_strain >= self.max_strain:
            # Restart a finished test
            state = playback.reset(state)
        self._set_state(playback.toggle_play(state))
        logger.debug(f"Playback {'started' if self.state.is_playing else 'paused'}.")

    def reset(self) -> None:
        self._set_state(playback.reset(self.state))

    def seek(self, percentage: float) -> None:
        self._set_state(playback.seek(self.state, percentage, self.max_strain))

    def set_speed(self, speed: float) -> None:
        self._set_state(playback.set_speed(self.state, speed))

    def progress(self) -> float:
        return playback.progress(self.state, self.max_strain)
