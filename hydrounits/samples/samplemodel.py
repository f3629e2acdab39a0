"""Groundwater sample records.

Samples hold canonical (mg/L) concentrations. The value and unit a reading
was entered in are kept alongside for display and audit.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from hydrounits.metals.metalregistry import Metal
from hydrounits.units.unitregistry import Unit


class SampleValidationError(ValueError):
    """Raised when sample input cannot be turned into a Sample."""


@dataclass(frozen=True)
class ConcentrationValue:
    value: float  # as entered
    unit: Unit  # as entered
    mg_l_value: float


@dataclass(frozen=True)
class Sample:
    sample_id: str
    concentrations: Mapping[Metal, Optional[float]]
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    original: Mapping[Metal, ConcentrationValue] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mappings so a Sample can be shared safely
        object.__setattr__(self, "concentrations", MappingProxyType(dict(self.concentrations)))
        object.__setattr__(self, "original", MappingProxyType(dict(self.original)))

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def concentration(self, metal: Metal) -> Optional[float]:
        """Canonical mg/L reading for ``metal``, or None when not measured."""
        return self.concentrations.get(metal)


__all__ = [
    "SampleValidationError",
    "ConcentrationValue",
    "Sample",
]
