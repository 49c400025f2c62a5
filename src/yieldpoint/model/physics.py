"""
Stress-Strain Physics
=====================
Pure functions mapping a strain value to its deformation phase and its
engineering stress.

Note: This module should be pure Python/NumPy and should NOT import PySide6.
"""
from __future__ import annotations

import math

from yieldpoint.config import MILD_STEEL, MaterialConstants
from yieldpoint.model.errors import InvalidArgumentError
from yieldpoint.model.kernels import phase_index_kernel, stress_kernel
from yieldpoint.model.phases import DeformationPhase
from yieldpoint.model.thresholds import THRESHOLDS, PhaseThresholds


def _checked_strain(strain: float) -> float:
    """Reject NaN, clamp negative strain to zero."""
    value = float(strain)
    if math.isnan(value):
        raise InvalidArgumentError("Strain must be a number, got NaN.")
    return max(value, 0.0)


def classify_phase(strain: float, thresholds: PhaseThresholds = THRESHOLDS) -> DeformationPhase:
    """
    Get the deformation phase at a given strain.

    Every boundary is inclusive on its upper side except necking, so a strain
    exactly at the fracture threshold is already FRACTURE.

    Args:
        strain: Engineering strain (-). Negative values are treated as 0.
        thresholds: Phase boundaries.

    Returns:
        The phase the specimen is in.
    """
    index = phase_index_kernel(_checked_strain(strain), thresholds.as_tuple())
    return DeformationPhase.from_ordinal(index)


def stress_at(
    strain: float,
    constants: MaterialConstants = MILD_STEEL,
    thresholds: PhaseThresholds = THRESHOLDS,
) -> float:
    """
    Get the engineering stress at a given strain.

    Args:
        strain: Engineering strain (-). Negative values are treated as 0.
        constants: Material constants.
        thresholds: Phase boundaries derived from the same constants.

    Returns:
        Stress in MPa; 0.0 at and beyond fracture.
    """
    return float(
        stress_kernel(
            _checked_strain(strain),
            constants.e_modulus,
            constants.upper_yield_stress,
            constants.lower_yield_stress,
            constants.ultimate_tensile_strength,
            constants.fracture_stress,
            thresholds.as_tuple(),
        )
    )
