"""Concentration unit registry.

The four supported concentration units and the factor converting each one
to the canonical unit (mg/L).

Conventions:
  - ppm is treated as equal to mg/L (dilute aqueous solutions, density ~1)
  - ppb is treated as equal to μg/L for the same reason

Examples:
  >>> UNIT_INFO[Unit.PPB].to_canonical
  0.001

  >>> Unit("μg/L") is Unit.UG_L
  True
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Unit(str, Enum):
    """Supported concentration units. Values are the display symbols."""

    MG_L = "mg/L"
    PPM = "ppm"
    PPB = "ppb"
    UG_L = "μg/L"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnitInfo:
    symbol: str
    name: str
    to_canonical: float  # multiply by this to get mg/L


CANONICAL_UNIT = Unit.MG_L

# Enumeration order matters: the dataset detector breaks ties toward the
# earliest unit in this tuple.
AVAILABLE_UNITS = tuple(Unit)

UNIT_INFO: Mapping[Unit, UnitInfo] = MappingProxyType({
    Unit.MG_L: UnitInfo(symbol="mg/L", name="Milligrams per Liter", to_canonical=1.0),
    Unit.PPM: UnitInfo(symbol="ppm", name="Parts per Million", to_canonical=1.0),
    Unit.PPB: UnitInfo(symbol="ppb", name="Parts per Billion", to_canonical=0.001),
    Unit.UG_L: UnitInfo(symbol="μg/L", name="Micrograms per Liter", to_canonical=0.001),
})


def _validate_registry() -> None:
    missing = [u.value for u in Unit if u not in UNIT_INFO]
    if missing:
        raise RuntimeError(f"Unit registry missing entries for: {', '.join(missing)}")
    for unit, info in UNIT_INFO.items():
        if info.to_canonical <= 0:
            raise RuntimeError(f"Non-positive conversion factor for {unit.value}")
    if UNIT_INFO[CANONICAL_UNIT].to_canonical != 1.0:
        raise RuntimeError("Canonical unit must have a conversion factor of exactly 1")


_validate_registry()


__all__ = [
    "Unit",
    "UnitInfo",
    "CANONICAL_UNIT",
    "AVAILABLE_UNITS",
    "UNIT_INFO",
]
