"""
Curve Generator
===============
Samples the stress function and the phase classifier over the whole strain
domain to produce the plottable stress-strain dataset.

The resulting Curve is immutable: its arrays are flagged read-only, so it can
be shared by the chart, the playback query and any other reader.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from numbers import Integral
import logging
from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from yieldpoint.config import (
    CHART_MAX_STRAIN, CHART_MAX_STRESS, CURVE_OVERSHOOT, CURVE_RESOLUTION,
    MILD_STEEL, MaterialConstants,
)
from yieldpoint.model.errors import InvalidArgumentError
from yieldpoint.model.kernels import phase_index_batch, stress_batch
from yieldpoint.model.phases import PHASE_METADATA, DeformationPhase
from yieldpoint.model.thresholds import THRESHOLDS, PhaseThresholds

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure
    from yieldpoint.model.playback import QueryResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataPoint:
    strain: float
    stress: float  # MPa
    phase: DeformationPhase


@dataclass(frozen=True, eq=False)
class Curve:
    """
    Ordered stress-strain samples, strictly increasing in strain.

    Behaves as a read-only sequence of DataPoint; the raw arrays are exposed
    for vectorised consumers (plotting, searching).
    """
    strains: npt.NDArray[np.float64]
    stresses: npt.NDArray[np.float64]
    phase_indices: npt.NDArray[np.int64]
    thresholds: PhaseThresholds = field(default=THRESHOLDS)

    def __post_init__(self) -> None:
        if not (self.strains.shape == self.stresses.shape == self.phase_indices.shape):
            raise InvalidArgumentError("Curve arrays must have the same length.")
        for arr in (self.strains, self.stresses, self.phase_indices):
            arr.flags.writeable = False

    def __len__(self) -> int:
        return int(self.strains.size)

    def __getitem__(self, index: int) -> DataPoint:
        return DataPoint(
            strain=float(self.strains[index]),
            stress=float(self.stresses[index]),
            phase=DeformationPhase.from_ordinal(int(self.phase_indices[index])),
        )

    def __iter__(self) -> Iterator[DataPoint]:
        for i in range(len(self)):
            yield self[i]

    @property
    def points(self) -> tuple[DataPoint, ...]:
        return tuple(self)

    @property
    def resolution(self) -> int:
        return len(self) - 1

    @property
    def max_strain(self) -> float:
        return float(self.strains[-1])

    def plot(self, current: Optional[QueryResult] = None, show: bool = True) -> Figure:
        """
        Plot the stress-strain curve.

        Args:
            current: Optional playback state to mark on the curve.
            show: Call plt.show() after drawing.

        Returns:
            The matplotlib figure.
        """
        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))
        ax = fig.add_subplot()

        th = self.thresholds
        ax.axvspan(th.lower_yield_start, th.plateau_end, color=PHASE_METADATA[DeformationPhase.LUDERS_PLATEAU].color, alpha=0.08)
        ax.axvspan(th.necking_start, th.fracture, color=PHASE_METADATA[DeformationPhase.NECKING].color, alpha=0.08)

        ax.plot(self.strains, self.stresses, color="#1f77b4", lw=2)

        if current is not None and current.phase != DeformationPhase.FRACTURE:
            ax.plot(
                [current.strain], [current.stress], "o",
                markersize=8, markerfacecolor="white",
                markeredgecolor=PHASE_METADATA[current.phase].color,
            )

        ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        ax.minorticks_on()
        ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        ax.set_title("Stress-Strain Curve (Mild Steel)")
        ax.set_xlabel("Strain (ε)")
        ax.set_ylabel("Stress (σ) [MPa]")

        ax.set_xlim(0.0, CHART_MAX_STRAIN)
        ax.set_ylim(0.0, CHART_MAX_STRESS)

        if show:
            plt.show()
        return fig


def generate_curve(
    resolution: int = CURVE_RESOLUTION,
    overshoot: float = CURVE_OVERSHOOT,
    constants: MaterialConstants = MILD_STEEL,
    thresholds: PhaseThresholds = THRESHOLDS,
) -> Curve:
    """
    Sample the stress-strain law over [0, fracture + overshoot].

    Args:
        resolution: Number of steps; the curve gets resolution + 1 points.
        overshoot: Extra strain past fracture so the drop to zero is visible.
        constants: Material constants.
        thresholds: Phase boundaries.

    Returns:
        The sampled Curve.

    Raises:
        InvalidArgumentError: If resolution is not a positive integer or the
            overshoot is negative.
    """
    if isinstance(resolution, bool) or not isinstance(resolution, Integral):
        raise InvalidArgumentError(f"Resolution must be an integer, got {resolution!r}.")
    if resolution <= 0:
        raise InvalidArgumentError(f"Resolution must be positive, got {resolution}.")
    if not overshoot >= 0.0:
        raise InvalidArgumentError(f"Overshoot must be non-negative, got {overshoot}.")

    max_strain = thresholds.fracture + overshoot
    strains = np.linspace(0.0, max_strain, int(resolution) + 1)

    th = thresholds.as_tuple()
    stresses = stress_batch(
        strains,
        constants.e_modulus,
        constants.upper_yield_stress,
        constants.lower_yield_stress,
        constants.ultimate_tensile_strength,
        constants.fracture_stress,
        th,
    )
    phases = phase_index_batch(strains, th)

    logger.debug(f"Generated curve: {strains.size} points up to strain {max_strain:.4f}")
    return Curve(strains=strains, stresses=stresses, phase_indices=phases, thresholds=thresholds)


@lru_cache(maxsize=None)
def cached_curve(resolution: int = CURVE_RESOLUTION) -> Curve:
    """Default-material curve, computed once per resolution for the session."""
    logger.info(f"Computing stress-strain curve at resolution {resolution}.")
    return generate_curve(resolution)
