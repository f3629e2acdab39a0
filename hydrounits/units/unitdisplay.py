"""Display unit selection for concentration values.

Picks a unit that keeps displayed numbers away from long runs of leading
zeros: sub-0.001 mg/L readings are shown in ppb.
"""

from hydrounits.metals.metalregistry import Metal
from hydrounits.units.unitconvert import convert
from hydrounits.units.unitregistry import UNIT_INFO, Unit

# Below this canonical (mg/L) magnitude values are shown in ppb/μg/L
SMALL_VALUE_MG_L = 0.001


def best_display_unit(value: float, current_unit: Unit, metal: Metal) -> Unit:
    """Choose the unit to present ``value`` in.

    Args:
        value: Concentration in ``current_unit``
        current_unit: Unit ``value`` is expressed in
        metal: Metal the reading belongs to (not yet used; reserved for
               per-metal thresholds)

    Returns:
        PPB for canonical values below 0.001 mg/L, otherwise MG_L

    Examples:
        >>> best_display_unit(0.0005, Unit.MG_L, Metal.Pb)
        <Unit.PPB: 'ppb'>

        >>> best_display_unit(250, Unit.UG_L, Metal.Zn)
        <Unit.MG_L: 'mg/L'>
    """
    mg_l_value = convert(value, current_unit, Unit.MG_L)

    if mg_l_value < SMALL_VALUE_MG_L:
        ppb_value = convert(mg_l_value, Unit.MG_L, Unit.PPB)
        # ppb and μg/L are numerically identical, so UG_L is only picked for
        # readings below 0.0001 mg/L.
        return Unit.PPB if ppb_value >= 0.1 else Unit.UG_L

    # TODO: PPM branch is unreachable after the guard above; decide whether
    # ppm should ever be suggested before adding per-metal thresholds.
    return Unit.MG_L if mg_l_value >= SMALL_VALUE_MG_L else Unit.PPM


def format_concentration(value_mg_l: float, metal: Metal, precision: int = 4) -> str:
    """Render a canonical mg/L value in its display unit, e.g. ``"0.5 ppb"``.

    Trailing zeros are dropped; ``precision`` is the number of significant
    digits kept.
    """
    unit = best_display_unit(value_mg_l, Unit.MG_L, metal)
    shown = convert(value_mg_l, Unit.MG_L, unit)
    return f"{shown:.{precision}g} {UNIT_INFO[unit].symbol}"


__all__ = [
    "best_display_unit",
    "format_concentration",
]
