"""
Configuration & Constants
=========================
This module serves as the central registry for material constants and the
tuning values used by the curve, the playback loop and the drawings.

Why is this file needed?
------------------------
1. Single source: the threshold model, the stress function and the GUI all read
   the same numbers, so nothing is hardcoded twice.
2. Tuning: presentation values (curve overshoot, playback speed) live next to
   the physics so they can be changed without touching the algorithms.

Exports:
    MaterialConstants: Frozen record of the stress/modulus constants and the
        tuned strain boundaries.
    MILD_STEEL (MaterialConstants): The default specimen material.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MaterialConstants:
    """
    Constants describing the simulated mild steel specimen.

    Stresses are in MPa, strains are dimensionless.
    """
    e_modulus: float = 200000.0  # MPa (Young's modulus)
    upper_yield_stress: float = 320.0  # MPa
    lower_yield_stress: float = 280.0  # MPa
    ultimate_tensile_strength: float = 420.0  # MPa
    fracture_stress: float = 300.0  # MPa

    # Tuned strain boundaries
    upper_yield: float = 0.0018  # small buffer for the peak
    lower_yield_start: float = 0.0022  # where the drop finishes
    plateau_end: float = 0.07
    necking_start: float = 0.12  # UTS
    fracture: float = 0.15


MILD_STEEL = MaterialConstants()

# Curve sampling
CURVE_RESOLUTION: int = 400
CURVE_OVERSHOOT: float = 0.01  # strain past fracture, shows the drop to zero

# Playback
PLAYBACK_DURATION_S: float = 10.0  # full test at 1x speed
LUDERS_SLOWDOWN: float = 0.25
TICK_INTERVAL_MS: int = 16

# Chart limits
CHART_MAX_STRAIN: float = 0.16
CHART_MAX_STRESS: float = 500.0

# Specimen drawing (scene units)
SPECIMEN_BASE_WIDTH: float = 220.0
SPECIMEN_STRETCH_FACTOR: float = 300.0
SPECIMEN_HALF_HEIGHT: float = 30.0
SPECIMEN_NECK_WIDTH: float = 30.0
SPECIMEN_MAX_PINCH: float = 20.0
SPECIMEN_FRACTURE_GAP: float = 10.0
LUDERS_BAND_COUNT: int = 50
LUDERS_BAND_SEED: int = 2025
