"""Yield point phenomenon simulator: a tensile test of mild steel."""
from yieldpoint.model.curve import Curve, DataPoint, cached_curve, generate_curve
from yieldpoint.model.errors import ConfigurationError, InvalidArgumentError, YieldPointError
from yieldpoint.model.phases import PHASE_METADATA, DeformationPhase, PhaseMetadata
from yieldpoint.model.physics import classify_phase, stress_at
from yieldpoint.model.playback import QueryResult, SimulationState, query_state
from yieldpoint.model.thresholds import THRESHOLDS, PhaseThresholds, derive_thresholds

__all__ = [
    "ConfigurationError",
    "Curve",
    "DataPoint",
    "DeformationPhase",
    "InvalidArgumentError",
    "PHASE_METADATA",
    "PhaseMetadata",
    "PhaseThresholds",
    "QueryResult",
    "SimulationState",
    "THRESHOLDS",
    "YieldPointError",
    "cached_curve",
    "classify_phase",
    "derive_thresholds",
    "generate_curve",
    "query_state",
    "stress_at",
]
