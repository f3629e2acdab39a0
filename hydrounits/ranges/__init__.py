"""Typical concentration ranges used as unit detection evidence."""

from hydrounits.ranges.rangetable import (
    RANGES_ENV_VAR,
    RangeTableError,
    TypicalRange,
    RangeTable,
    load_typical_ranges,
    clear_ranges_cache,
)

__all__ = [
    "RANGES_ENV_VAR",
    "RangeTableError",
    "TypicalRange",
    "RangeTable",
    "load_typical_ranges",
    "clear_ranges_cache",
]
