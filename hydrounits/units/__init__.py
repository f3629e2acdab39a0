"""Concentration units: registry, conversion, parsing and display.

Public API:
    convert(value, from_unit, to_unit) -> float
        Convert a concentration between units via mg/L

    to_canonical_unit(concentration) -> float
        Normalize a ConcentrationWithUnit to mg/L

    parse_unit(text) -> Unit | None
        Strict parsing of unit labels ("mg/L", "parts per billion", ...)

    best_display_unit(value, current_unit, metal) -> Unit
        Unit that keeps a reading readable

Examples:
    >>> from hydrounits.units import Unit, convert, parse_unit
    >>> convert(250, parse_unit("ug/l"), Unit.MG_L)
    0.25
"""

from .unitregistry import (
    Unit,
    UnitInfo,
    CANONICAL_UNIT,
    AVAILABLE_UNITS,
    UNIT_INFO,
)
from .unitconvert import (
    ConcentrationWithUnit,
    convert,
    to_canonical_unit,
)
from .unitparse import (
    UNIT_VARIANTS,
    parse_unit,
    match_unit,
    unit_identifier,
)
from .unitdisplay import (
    best_display_unit,
    format_concentration,
)

__all__ = [
    "Unit",
    "UnitInfo",
    "CANONICAL_UNIT",
    "AVAILABLE_UNITS",
    "UNIT_INFO",
    "ConcentrationWithUnit",
    "convert",
    "to_canonical_unit",
    "UNIT_VARIANTS",
    "parse_unit",
    "match_unit",
    "unit_identifier",
    "best_display_unit",
    "format_concentration",
]
