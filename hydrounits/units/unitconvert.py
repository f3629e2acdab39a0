"""Concentration unit conversion.

All conversions go through the canonical unit (mg/L):

    canonical = value * to_canonical(from_unit)
    result    = canonical / to_canonical(to_unit)

Examples:
  >>> convert(50, Unit.UG_L, Unit.MG_L)
  0.05

  >>> to_canonical_unit(ConcentrationWithUnit(value=12, unit=Unit.PPB))
  0.012
"""

from dataclasses import dataclass

from hydrounits.units.unitregistry import CANONICAL_UNIT, UNIT_INFO, Unit


@dataclass(frozen=True)
class ConcentrationWithUnit:
    value: float
    unit: Unit


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert a concentration between two units.

    Same-unit conversions return ``value`` untouched so a no-op conversion
    never introduces floating point drift.

    Args:
        value: Concentration in ``from_unit``
        from_unit: Unit the value is expressed in
        to_unit: Target unit

    Returns:
        Concentration expressed in ``to_unit``
    """
    if from_unit == to_unit:
        return value

    canonical_value = value * UNIT_INFO[from_unit].to_canonical
    return canonical_value / UNIT_INFO[to_unit].to_canonical


def to_canonical_unit(concentration: ConcentrationWithUnit) -> float:
    """Normalize a concentration to mg/L before it is stored."""
    return convert(concentration.value, concentration.unit, CANONICAL_UNIT)


__all__ = [
    "ConcentrationWithUnit",
    "convert",
    "to_canonical_unit",
]
