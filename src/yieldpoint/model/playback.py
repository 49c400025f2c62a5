"""
Playback Query & Transport State
================================
Resolves the "current" stress and phase for an arbitrary strain, and advances
the playback state between animation ticks.

Why is this file needed?
------------------------
1. Query: the live cursor reads its stress from the precomputed curve but
   its phase straight from the classifier, so phase changes are exact while
   the plotted stress follows the sampled curve.
2. Transport: play/pause/seek/reset are pure functions from one
   SimulationState to the next. The Qt controller only owns the instance.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math

import numpy as np

from yieldpoint.config import LUDERS_SLOWDOWN, PLAYBACK_DURATION_S
from yieldpoint.model.curve import Curve
from yieldpoint.model.errors import InvalidArgumentError
from yieldpoint.model.phases import DeformationPhase
from yieldpoint.model.physics import classify_phase
from yieldpoint.model.thresholds import THRESHOLDS, PhaseThresholds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    strain: float  # clamped into [0, fracture]
    stress: float  # MPa, from the curve sample at or above `strain`
    phase: DeformationPhase


@dataclass(frozen=True)
class SimulationState:
    current_strain: float = 0.0
    is_playing: bool = False
    playback_speed: float = 1.0


@dataclass(frozen=True)
class TimelineMarker:
    position: float  # percent of the playback range
    title: str
    phase: DeformationPhase


def query_state(curve: Curve, strain: float, thresholds: PhaseThresholds = THRESHOLDS) -> QueryResult:
    """
    Resolve stress and phase at a playback strain.

    Args:
        curve: Precomputed curve.
        strain: Target strain, clamped into [0, fracture].
        thresholds: Phase boundaries used for clamping and classification.

    Returns:
        Clamped strain, the stress of the first curve sample whose strain is
        at or above it (last sample if none), and the exactly classified phase.
    """
    if len(curve) == 0:
        raise InvalidArgumentError("Cannot query an empty curve.")
    value = float(strain)
    if math.isnan(value):
        raise InvalidArgumentError("Strain must be a number, got NaN.")

    clamped = min(max(value, 0.0), thresholds.fracture)

    index = int(np.searchsorted(curve.strains, clamped, side="left"))
    if index >= len(curve):
        index = len(curve) - 1

    return QueryResult(
        strain=clamped,
        stress=float(curve.stresses[index]),
        phase=classify_phase(clamped, thresholds),
    )


def advance(
    state: SimulationState,
    dt_seconds: float,
    max_strain: float = THRESHOLDS.fracture,
    thresholds: PhaseThresholds = THRESHOLDS,
) -> SimulationState:
    """
    Move a playing state forward by one tick.

    At 1x the whole range takes PLAYBACK_DURATION_S; the Lüders plateau plays
    at LUDERS_SLOWDOWN of that rate. Playback stops at max_strain.
    """
    if dt_seconds < 0.0:
        raise InvalidArgumentError(f"Tick duration must be non-negative, got {dt_seconds}.")
    if not state.is_playing:
        return state

    rate = max_strain / PLAYBACK_DURATION_S
    if classify_phase(state.current_strain, thresholds) == DeformationPhase.LUDERS_PLATEAU:
        rate *= LUDERS_SLOWDOWN

    next_strain = state.current_strain + rate * state.playback_speed * dt_seconds
    if next_strain >= max_strain:
        logger.info("Playback reached the end of the test.")
        return replace(state, current_strain=max_strain, is_playing=False)
    return replace(state, current_strain=next_strain)


def toggle_play(state: SimulationState) -> SimulationState:
    return replace(state, is_playing=not state.is_playing)


def reset(state: SimulationState) -> SimulationState:
    """Back to zero strain and paused; the chosen speed is kept."""
    return replace(state, current_strain=0.0, is_playing=False)


def seek(state: SimulationState, percentage: float, max_strain: float = THRESHOLDS.fracture) -> SimulationState:
    """Jump to a percentage (0-100) of the playback range."""
    percentage = min(max(float(percentage), 0.0), 100.0)
    return replace(state, current_strain=percentage / 100.0 * max_strain)


def set_speed(state: SimulationState, speed: float) -> SimulationState:
    if not speed > 0.0:
        raise InvalidArgumentError(f"Playback speed must be positive, got {speed}.")
    return replace(state, playback_speed=float(speed))


def progress(state: SimulationState, max_strain: float = THRESHOLDS.fracture) -> float:
    """Playback position in percent."""
    return state.current_strain / max_strain * 100.0


def timeline_markers(thresholds: PhaseThresholds = THRESHOLDS) -> tuple[TimelineMarker, ...]:
    """Key events shown on the timeline slider, as percent of fracture strain."""
    return (
        TimelineMarker(thresholds.upper_yield / thresholds.fracture * 100.0,
                       "Upper Yield Point", DeformationPhase.UPPER_YIELD),
        TimelineMarker(thresholds.plateau_end / thresholds.fracture * 100.0,
                       "End of Plateau", DeformationPhase.LUDERS_PLATEAU),
        TimelineMarker(thresholds.necking_start / thresholds.fracture * 100.0,
                       "Start of Necking (UTS)", DeformationPhase.NECKING),
    )
