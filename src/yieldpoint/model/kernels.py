# kernels.py
"""
JIT-compiled scalar and batched kernels for the piecewise stress-strain law.

The thresholds are passed as a plain 6-tuple
(elastic_limit, upper_yield, lower_yield_start, plateau_end, necking_start,
fracture) and the phase is returned as its ordinal, so everything here stays
in numba's nopython mode.
"""
from __future__ import annotations

import numpy as np
import numpy.typing as npt
import numba as nb

# Phase ordinals, must match the order of DeformationPhase
ELASTIC = 0
UPPER_YIELD = 1
YIELD_DROP = 2
LUDERS_PLATEAU = 3
STRAIN_HARDENING = 4
NECKING = 5
FRACTURE = 6

# Serration term of the Lüders plateau
SERRATION_SIN_FREQ = 2500.0
SERRATION_COS_FREQ = 9000.0
SERRATION_AMPLITUDE = 1.5


@nb.njit(cache=True)
def phase_index_kernel(strain: float, thresholds: tuple) -> int:
    """Phase ordinal for a single strain value (negative strain counts as 0)."""
    if strain < 0.0:
        strain = 0.0
    elastic_limit, upper_yield, lower_yield_start, plateau_end, necking_start, fracture = thresholds
    if strain <= elastic_limit:
        return ELASTIC
    if strain <= upper_yield:
        return UPPER_YIELD
    if strain <= lower_yield_start:
        return YIELD_DROP
    if strain <= plateau_end:
        return LUDERS_PLATEAU
    if strain <= necking_start:
        return STRAIN_HARDENING
    if strain < fracture:
        return NECKING
    return FRACTURE


@nb.njit(cache=True)
def stress_kernel(
    strain: float,
    e_modulus: float,
    upper_yield_stress: float,
    lower_yield_stress: float,
    uts: float,
    fracture_stress: float,
    thresholds: tuple,
) -> float:
    """
    Engineering stress (MPa) at a single strain value.

    Args:
        strain:             Engineering strain (-), negative values count as 0.
        e_modulus:          Young's modulus (MPa).
        upper_yield_stress: Peak stress of the upper yield point (MPa).
        lower_yield_stress: Stress level of the Lüders plateau (MPa).
        uts:                Ultimate tensile strength (MPa).
        fracture_stress:    Engineering stress just before separation (MPa).
        thresholds:         The six phase boundaries, in order.
    """
    if strain < 0.0:
        strain = 0.0
    elastic_limit, upper_yield, lower_yield_start, plateau_end, necking_start, fracture = thresholds

    if strain <= elastic_limit:
        # Hooke's law
        return strain * e_modulus
    if strain <= upper_yield:
        return upper_yield_stress
    if strain <= lower_yield_start:
        t = (strain - upper_yield) / (lower_yield_start - upper_yield)
        return upper_yield_stress - (upper_yield_stress - lower_yield_stress) * t
    if strain <= plateau_end:
        # Deterministic serrated flow, not random noise
        oscillation = (np.sin(strain * SERRATION_SIN_FREQ) * SERRATION_AMPLITUDE
                       + np.cos(strain * SERRATION_COS_FREQ) * SERRATION_AMPLITUDE)
        return lower_yield_stress + oscillation
    if strain <= necking_start:
        # Square-root power-law hardening up to UTS
        t = (strain - plateau_end) / (necking_start - plateau_end)
        return lower_yield_stress + (uts - lower_yield_stress) * t ** 0.5
    if strain < fracture:
        # Inverted parabola from UTS down to the fracture stress
        t = (strain - necking_start) / (fracture - necking_start)
        return uts - (uts - fracture_stress) * (t * t)
    return 0.0


@nb.njit(cache=True)
def phase_index_batch(strains: npt.NDArray[np.float64], thresholds: tuple) -> npt.NDArray[np.int64]:
    """Batched phase ordinals, shape (n,)."""
    n = strains.size
    out = np.empty(n, np.int64)
    for i in range(n):
        out[i] = phase_index_kernel(strains[i], thresholds)
    return out


@nb.njit(cache=True)
def stress_batch(
    strains: npt.NDArray[np.float64],
    e_modulus: float,
    upper_yield_stress: float,
    lower_yield_stress: float,
    uts: float,
    fracture_stress: float,
    thresholds: tuple,
) -> npt.NDArray[np.float64]:
    """
    Batched stress evaluation.

    Returns:
        stress: Engineering stress per strain (MPa), shape (n,).
    """
    n = strains.size
    out = np.empty(n, np.float64)
    for i in range(n):
        out[i] = stress_kernel(
            strains[i], e_modulus, upper_yield_stress, lower_yield_stress,
            uts, fracture_stress, thresholds,
        )
    return out
