"""
Specimen Geometry
=================
Computes what the animated dog-bone specimen looks like at a given strain:
its stretched width, the neck pinch, whether it has separated, and which
Lüders bands have swept across the gauge length.

Coordinates are scene units centred on the specimen, x to the right and y up.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

import numpy as np

from yieldpoint.config import (
    LUDERS_BAND_COUNT, LUDERS_BAND_SEED, SPECIMEN_BASE_WIDTH, SPECIMEN_FRACTURE_GAP,
    SPECIMEN_HALF_HEIGHT, SPECIMEN_MAX_PINCH, SPECIMEN_NECK_WIDTH, SPECIMEN_STRETCH_FACTOR,
)
from yieldpoint.model.phases import DeformationPhase
from yieldpoint.model.thresholds import THRESHOLDS, PhaseThresholds

if TYPE_CHECKING:
    import numpy.typing as npt

# Bands stay drawn after the plateau
PLATEAU_DONE = 2.0
FRESH_BAND_WINDOW = 0.05
# Points per quadratic segment of the neck outline
NECK_SEGMENTS = 12


@dataclass(frozen=True)
class SpecimenShape:
    width: float
    half_height: float
    necking_amount: float
    is_fractured: bool
    plateau_progress: float


@dataclass(frozen=True)
class LudersBand:
    index: int
    threshold: float  # plateau progress at which the band appears
    width_factor: float


@dataclass(frozen=True)
class ActiveBand:
    band: LudersBand
    x_start: float
    width: float
    is_fresh: bool


def specimen_shape(
    strain: float,
    phase: DeformationPhase,
    thresholds: PhaseThresholds = THRESHOLDS,
) -> SpecimenShape:
    """
    Geometry of the specimen for a playback state.

    Args:
        strain: Clamped playback strain.
        phase: Phase reported for that strain.
        thresholds: Phase boundaries.
    """
    width = SPECIMEN_BASE_WIDTH + strain * SPECIMEN_STRETCH_FACTOR
    is_fractured = phase == DeformationPhase.FRACTURE

    necking_amount = 0.0
    if phase == DeformationPhase.NECKING:
        neck_progress = (strain - thresholds.necking_start) / (thresholds.fracture - thresholds.necking_start)
        necking_amount = min(1.0, neck_progress) * SPECIMEN_MAX_PINCH
    elif is_fractured:
        necking_amount = SPECIMEN_MAX_PINCH

    plateau_progress = 0.0
    if phase == DeformationPhase.LUDERS_PLATEAU:
        duration = thresholds.plateau_end - thresholds.lower_yield_start
        plateau_progress = (strain - thresholds.lower_yield_start) / duration
        plateau_progress = max(0.0, min(1.0, plateau_progress))
    elif phase in (DeformationPhase.STRAIN_HARDENING, DeformationPhase.NECKING, DeformationPhase.FRACTURE):
        plateau_progress = PLATEAU_DONE

    return SpecimenShape(
        width=width,
        half_height=SPECIMEN_HALF_HEIGHT,
        necking_amount=necking_amount,
        is_fractured=is_fractured,
        plateau_progress=plateau_progress,
    )


def luders_bands(count: int = LUDERS_BAND_COUNT, seed: int = LUDERS_BAND_SEED) -> tuple[LudersBand, ...]:
    """Band layout along the gauge length; same seed, same bands."""
    rng = np.random.default_rng(seed)
    thresholds = rng.random(count)
    width_factors = 0.8 + rng.random(count) * 0.4
    return tuple(
        LudersBand(index=i, threshold=float(t), width_factor=float(w))
        for i, (t, w) in enumerate(zip(thresholds, width_factors))
    )


def active_bands(shape: SpecimenShape, bands: tuple[LudersBand, ...]) -> List[ActiveBand]:
    """
    Bands that have nucleated by the current plateau progress.

    A band is "fresh" while the plateau is still running and it appeared
    within the last FRESH_BAND_WINDOW of progress.
    """
    if not bands:
        return []
    slice_width = shape.width / len(bands)
    in_plateau = 0.0 < shape.plateau_progress <= 1.0
    result = []
    for band in bands:
        if not shape.plateau_progress > band.threshold:
            continue
        result.append(ActiveBand(
            band=band,
            x_start=-shape.width / 2 + band.index * slice_width,
            width=slice_width * band.width_factor,
            is_fresh=in_plateau and (shape.plateau_progress - band.threshold) < FRESH_BAND_WINDOW,
        ))
    return result


def _quad(p0: tuple[float, float], c: tuple[float, float], p1: tuple[float, float]) -> npt.NDArray[np.float64]:
    """Sample a quadratic Bezier segment, excluding its start point."""
    t = np.linspace(0.0, 1.0, NECK_SEGMENTS + 1)[1:, None]
    a, b, d = np.asarray(p0), np.asarray(c), np.asarray(p1)
    return (1 - t) ** 2 * a + 2 * (1 - t) * t * b + t ** 2 * d


def outline_path(shape: SpecimenShape) -> List[npt.NDArray[np.float64]]:
    """
    Closed polygon(s) of the specimen body, one (n, 2) array each.

    One polygon while intact, the left and right halves after fracture.
    """
    half_w = shape.width / 2
    h = shape.half_height
    neck_w = SPECIMEN_NECK_WIDTH
    pinch = shape.necking_amount

    if not shape.is_fractured:
        top = np.vstack([
            [[-half_w, -h], [-neck_w, -h]],
            _quad((-neck_w, -h), (0.0, -h + pinch), (neck_w, -h)),
            [[half_w, -h], [half_w, h], [neck_w, h]],
            _quad((neck_w, h), (0.0, h - pinch), (-neck_w, h)),
            [[-half_w, h]],
        ])
        return [top]

    gap = SPECIMEN_FRACTURE_GAP
    left = np.vstack([
        [[-half_w, -h], [-neck_w, -h]],
        _quad((-neck_w, -h), (-5.0, -h + pinch), (0.0, -h + pinch + 5.0)),
        [[-5.0, 0.0], [0.0, h - pinch - 5.0]],
        _quad((0.0, h - pinch - 5.0), (-5.0, h - pinch), (-neck_w, h)),
        [[-half_w, h]],
    ])
    right = np.vstack([
        [[half_w, -h], [neck_w, -h]],
        _quad((neck_w, -h), (gap, -h + pinch), (gap, -h + pinch + 5.0)),
        [[gap + 5.0, 0.0], [gap, h - pinch - 5.0]],
        _quad((gap, h - pinch - 5.0), (gap, h - pinch), (neck_w, h)),
        [[half_w, h]],
    ])
    return [left, right]
