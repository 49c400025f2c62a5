"""
Threshold Model
===============
Strain boundaries between the deformation phases, folded once from the
material constants.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import logging

from yieldpoint.config import MILD_STEEL, MaterialConstants
from yieldpoint.model.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhaseThresholds:
    """
    Six strictly increasing strain boundaries.

    Each field is the (inclusive) upper strain bound of the phase it is named
    after, except `fracture`, which is the first strain that counts as broken.
    """
    elastic_limit: float
    upper_yield: float
    lower_yield_start: float
    plateau_end: float
    necking_start: float
    fracture: float

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (
            self.elastic_limit,
            self.upper_yield,
            self.lower_yield_start,
            self.plateau_end,
            self.necking_start,
            self.fracture,
        )

    def validate(self) -> None:
        """
        Check the strict ordering the stress segments rely on.

        Raises:
            ConfigurationError: If any boundary is not strictly above its
                predecessor (this also covers zero-width segments).
        """
        names = [f.name for f in fields(self)]
        values = self.as_tuple()

        if values[0] <= 0.0:
            msg = f"Threshold 'elastic_limit' must be positive, got {values[0]}."
            logger.error(msg)
            raise ConfigurationError(msg)

        for (lo_name, lo), (hi_name, hi) in zip(zip(names, values), zip(names[1:], values[1:])):
            if not lo < hi:
                msg = f"Threshold ordering violated: {lo_name}={lo} must be < {hi_name}={hi}."
                logger.error(msg)
                raise ConfigurationError(msg)


def derive_thresholds(constants: MaterialConstants = MILD_STEEL) -> PhaseThresholds:
    """
    Build the threshold record from the material constants.

    The elastic limit is where Hooke's law reaches the upper yield stress; all
    other boundaries are tuned literals.

    Args:
        constants: Material constants (defaults to mild steel).

    Returns:
        A validated PhaseThresholds instance.

    Raises:
        ConfigurationError: If the modulus is not positive or the boundaries
            are not strictly increasing.
    """
    if constants.e_modulus <= 0.0:
        msg = f"Elastic modulus must be positive, got {constants.e_modulus}."
        logger.error(msg)
        raise ConfigurationError(msg)

    thresholds = PhaseThresholds(
        elastic_limit=constants.upper_yield_stress / constants.e_modulus,
        upper_yield=constants.upper_yield,
        lower_yield_start=constants.lower_yield_start,
        plateau_end=constants.plateau_end,
        necking_start=constants.necking_start,
        fracture=constants.fracture,
    )
    thresholds.validate()

    logger.debug(f"Derived thresholds: {thresholds}")
    return thresholds


THRESHOLDS: PhaseThresholds = derive_thresholds()
