"""
Deformation Phases
==================
Defines the closed set of phases a tensile specimen passes through and the
descriptive content the GUI shows for each of them.

The enum values double as display labels. Consumers that need per-phase data
(colours, texts) should go through PHASE_METADATA rather than their own
if/elif chains.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, assert_never


class DeformationPhase(StrEnum):
    """Phases in physical order; strain never moves a specimen backwards."""
    ELASTIC = "Elastic Region"
    UPPER_YIELD = "Upper Yield Point"
    YIELD_DROP = "Yield Drop"
    LUDERS_PLATEAU = "Lüders Plateau"
    STRAIN_HARDENING = "Strain Hardening"
    NECKING = "Necking"
    FRACTURE = "Fracture"

    @property
    def ordinal(self) -> int:
        """0-based position in the physical sequence."""
        return PHASE_ORDER.index(self)

    @classmethod
    def from_ordinal(cls, index: int) -> DeformationPhase:
        return PHASE_ORDER[index]


PHASE_ORDER: tuple[DeformationPhase, ...] = tuple(DeformationPhase)


@dataclass(frozen=True)
class PhaseMetadata:
    title: str
    description: str
    color: str  # hex RGB


def describe_phase(phase: DeformationPhase) -> PhaseMetadata:
    """Return the title, explanatory text and highlight colour of a phase."""
    match phase:
        case DeformationPhase.ELASTIC:
            return PhaseMetadata(
                title="Elastic Deformation",
                description=(
                    "The material deforms reversibly. Stress is proportional to strain "
                    "(Hooke's Law). Dislocations are pinned by interstitial carbon and "
                    "nitrogen atoms (Cottrell atmospheres)."
                ),
                color="#00f3ff",
            )
        case DeformationPhase.UPPER_YIELD:
            return PhaseMetadata(
                title="Upper Yield Point",
                description=(
                    "The stress required to break dislocations free from their Cottrell "
                    "atmospheres. This represents a high energy barrier for the onset of "
                    "plastic flow."
                ),
                color="#facc15",
            )
        case DeformationPhase.YIELD_DROP:
            return PhaseMetadata(
                title="Yield Drop",
                description=(
                    "Once unpinned, dislocations can move at a lower stress level. The rapid "
                    "multiplication of mobile dislocations causes a sudden drop in the stress "
                    "required to continue deformation."
                ),
                color="#f97316",
            )
        case DeformationPhase.LUDERS_PLATEAU:
            return PhaseMetadata(
                title="Lüders Band Propagation",
                description=(
                    "Deformation is heterogeneous. Localized bands of plastic deformation "
                    "(Lüders bands) nucleate at stress concentrations and propagate along the "
                    "gauge length. Stress remains roughly constant."
                ),
                color="#ff00ff",
            )
        case DeformationPhase.STRAIN_HARDENING:
            return PhaseMetadata(
                title="Strain Hardening",
                description=(
                    "The entire gauge length has yielded. Deformation becomes uniform again. "
                    "Dislocation density increases, causing them to tangle and impede each "
                    "other's motion (work hardening). Stress rises to UTS."
                ),
                color="#00ff9d",
            )
        case DeformationPhase.NECKING:
            return PhaseMetadata(
                title="Necking",
                description=(
                    "Instability sets in at the Ultimate Tensile Strength (UTS). Deformation "
                    "localizes in a small region, reducing the cross-sectional area "
                    "significantly. Engineering stress drops despite true stress increasing."
                ),
                color="#ef4444",
            )
        case DeformationPhase.FRACTURE:
            return PhaseMetadata(
                title="Fracture",
                description=(
                    "The material separates into two pieces. In ductile materials like mild "
                    "steel, this often involves void nucleation, coalescence, and a "
                    "cup-and-cone fracture surface."
                ),
                color="#646464",
            )
        case _:
            assert_never(phase)


# Built eagerly so a phase without content fails at import time
PHASE_METADATA: Dict[DeformationPhase, PhaseMetadata] = {
    phase: describe_phase(phase) for phase in DeformationPhase
}
