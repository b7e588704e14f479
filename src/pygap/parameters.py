"""
Simulation constants for the gap model.

Defaults reproduce the JABOWA-style configuration of Botkin et al. (1972).
They can be overridden through cfg/simulation_parameters.yaml or by building
a SimulationParameters directly.
"""
from dataclasses import dataclass, fields, asdict
from typing import Dict, Any

from .exceptions import (
    ConfigurationError,
    InvalidParameterError,
    validate_positive,
    validate_proportion,
)

__all__ = ['SimulationParameters', 'DEFAULT_PARAMETERS']


@dataclass(frozen=True)
class SimulationParameters:
    """Immutable constants shared by every plot of a run.

    Attributes:
        min_diameter: Establishment diameter of a sapling (cm)
        initial_diameter_change: Diameter increment assigned to a newborn tree,
            must exceed growth_stress_threshold
        cherry_cutoff: Plot weight below which early-successional species establish
        birch_cutoff: Plot weight below which mid-successional species establish
        light_extinction: Extinction coefficient applied to shading weight
        growth_stress_threshold: Increment below which a tree is growth-stressed
        growth_stress_mortality: Death probability of a growth-stressed tree
        age_mortality_factor: Numerator of the yearly background death rate
            (age_mortality_factor / age_max)
        seed: Master seed for the per-plot random streams
    """
    min_diameter: float = 0.5
    initial_diameter_change: float = 1.0
    cherry_cutoff: float = 55.0
    birch_cutoff: float = 1000.0
    light_extinction: float = 1.0 / 6000.0
    growth_stress_threshold: float = 0.01
    growth_stress_mortality: float = 0.368
    age_mortality_factor: float = 4.0
    seed: int = 74837891

    def __post_init__(self):
        validate_positive(self.min_diameter, 'min_diameter')
        validate_positive(self.light_extinction, 'light_extinction')
        validate_positive(self.age_mortality_factor, 'age_mortality_factor')
        validate_proportion(self.growth_stress_mortality, 'growth_stress_mortality')
        if self.cherry_cutoff >= self.birch_cutoff:
            raise InvalidParameterError(
                'cherry_cutoff', self.cherry_cutoff,
                f"must be below birch_cutoff ({self.birch_cutoff})"
            )
        if self.initial_diameter_change <= self.growth_stress_threshold:
            raise InvalidParameterError(
                'initial_diameter_change', self.initial_diameter_change,
                f"must exceed growth_stress_threshold ({self.growth_stress_threshold})"
            )
        if self.seed < 0:
            raise InvalidParameterError('seed', self.seed, "must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationParameters':
        """Build parameters from a configuration mapping.

        Keys missing from the mapping keep their defaults.

        Raises:
            ConfigurationError: If the mapping contains unknown keys
            InvalidParameterError: If a value fails validation
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown simulation parameters: {unknown}. "
                f"Known parameters: {sorted(known)}"
            )
        values = dict(data)
        for name, value in values.items():
            try:
                values[name] = int(value) if name == 'seed' else float(value)
            except (TypeError, ValueError) as e:
                raise InvalidParameterError(name, value, "must be a number") from e
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to a plain dictionary."""
        return asdict(self)


DEFAULT_PARAMETERS = SimulationParameters()
