"""hydrounits - Groundwater heavy-metal concentration units

Public API for normalizing concentration readings to mg/L and inferring the
unit an unlabelled dataset was recorded in.

Usage:
    from hydrounits import Unit, Metal, convert, parse_unit
    from hydrounits import detect_unit, best_display_unit

    # Convert between units (mg/L, ppm, ppb, μg/L)
    convert(80, Unit.PPB, Unit.MG_L)  # Returns: 0.08

    # Parse a unit label
    parse_unit("Parts per Billion")  # Returns: Unit.PPB

    # Detect the unit of a whole upload from magnitudes alone
    detect_unit([{"concentrations": {Metal.Pb: 80, Metal.Zn: 300}}])  # Returns: Unit.PPB

    # Pick a readable display unit
    best_display_unit(0.0005, Unit.MG_L, Metal.Pb)  # Returns: Unit.PPB
"""

__version__ = "0.1.0"

# ============================================================================
# Units
# ============================================================================

from .units import (
    Unit,                  # mg/L, ppm, ppb, μg/L
    UnitInfo,
    CANONICAL_UNIT,        # mg/L
    AVAILABLE_UNITS,
    UNIT_INFO,             # Symbol, name and mg/L factor per unit
    ConcentrationWithUnit,
    convert,               # Convert between any two units
    to_canonical_unit,     # Normalize to mg/L
    parse_unit,            # Strict label parsing
    match_unit,            # Fuzzy top-K unit candidates
    unit_identifier,       # Strict parse with fuzzy fallback
    best_display_unit,     # Readable display unit for a value
    format_concentration,  # "0.5 ppb" style labels
)

# ============================================================================
# Metals
# ============================================================================

from .metals import (
    Metal,             # Pb, As, Hg, Cd, Cr, Ni, Zn, Fe
    AVAILABLE_METALS,
    METAL_INFO,
    metal_identifier,  # Resolve metal label -> Metal
    match_metal,       # Top-K metal candidates
    list_metals,       # Metals table
)

# ============================================================================
# Typical Ranges & Detection
# ============================================================================

from .ranges import (
    RangeTableError,
    TypicalRange,
    RangeTable,
    load_typical_ranges,  # Validated Metal x Unit plausibility table
    clear_ranges_cache,
)

from .detection import (
    detect_unit,        # Most likely unit for a batch of samples
    detect_unit_frame,  # Same, for a DataFrame of readings
    score_units,        # Per-unit plausibility scores
)

# ============================================================================
# Samples
# ============================================================================

from .samples import (
    Sample,
    ConcentrationValue,
    SampleValidationError,
    build_sample,        # Raw form input -> Sample in mg/L
    samples_from_frame,  # DataFrame rows -> Samples in mg/L
)

__all__ = [
    # Version
    "__version__",

    # Units
    "Unit",
    "UnitInfo",
    "CANONICAL_UNIT",
    "AVAILABLE_UNITS",
    "UNIT_INFO",
    "ConcentrationWithUnit",
    "convert",
    "to_canonical_unit",
    "parse_unit",
    "match_unit",
    "unit_identifier",
    "best_display_unit",
    "format_concentration",

    # Metals
    "Metal",
    "AVAILABLE_METALS",
    "METAL_INFO",
    "metal_identifier",
    "match_metal",
    "list_metals",

    # Ranges & detection
    "RangeTableError",
    "TypicalRange",
    "RangeTable",
    "load_typical_ranges",
    "clear_ranges_cache",
    "detect_unit",
    "detect_unit_frame",
    "score_units",

    # Samples
    "Sample",
    "ConcentrationValue",
    "SampleValidationError",
    "build_sample",
    "samples_from_frame",
]
