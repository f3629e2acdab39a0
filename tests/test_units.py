"""Tests for unit registry, conversion and display units."""

import itertools

import pytest

from hydrounits import (
    Unit,
    Metal,
    UNIT_INFO,
    CANONICAL_UNIT,
    AVAILABLE_UNITS,
    ConcentrationWithUnit,
    convert,
    to_canonical_unit,
    best_display_unit,
    format_concentration,
)


class TestUnitRegistry:
    """Test the static unit table."""

    def test_enumeration_order(self):
        """Units are ordered mg/L, ppm, ppb, μg/L."""
        assert AVAILABLE_UNITS == (Unit.MG_L, Unit.PPM, Unit.PPB, Unit.UG_L)

    def test_canonical_is_mg_l(self):
        """mg/L is canonical with factor exactly 1."""
        assert CANONICAL_UNIT is Unit.MG_L
        assert UNIT_INFO[Unit.MG_L].to_canonical == 1

    def test_factors(self):
        """ppm equals mg/L; ppb and μg/L share 0.001."""
        assert UNIT_INFO[Unit.PPM].to_canonical == 1
        assert UNIT_INFO[Unit.PPB].to_canonical == 0.001
        assert UNIT_INFO[Unit.UG_L].to_canonical == 0.001

    def test_symbols_serialize_as_values(self):
        """Enum values are the display symbols."""
        for unit in Unit:
            assert unit.value == UNIT_INFO[unit].symbol
        assert str(Unit.UG_L) == "μg/L"
        assert Unit("ppb") is Unit.PPB

    def test_names(self):
        assert UNIT_INFO[Unit.MG_L].name == "Milligrams per Liter"
        assert UNIT_INFO[Unit.UG_L].name == "Micrograms per Liter"

    def test_registry_is_read_only(self):
        """The registry mapping cannot be modified."""
        with pytest.raises(TypeError):
            UNIT_INFO[Unit.PPM] = UNIT_INFO[Unit.MG_L]


class TestConvert:
    """Test the conversion engine."""

    def test_identity_is_exact(self):
        """Same-unit conversion returns the value untouched."""
        for unit in Unit:
            assert convert(0.1 + 0.2, unit, unit) == 0.1 + 0.2

    def test_ug_l_to_mg_l(self):
        assert convert(50, Unit.UG_L, Unit.MG_L) == pytest.approx(0.05)

    def test_mg_l_to_ppb(self):
        assert convert(0.25, Unit.MG_L, Unit.PPB) == pytest.approx(250)

    def test_equivalent_pairs(self):
        """mg/L <-> ppm and ppb <-> μg/L are numerically identical."""
        for v in (0.0, 0.003, 1.7, 4200.0):
            assert convert(v, Unit.MG_L, Unit.PPM) == v
            assert convert(v, Unit.PPM, Unit.MG_L) == v
            assert convert(v, Unit.PPB, Unit.UG_L) == v
            assert convert(v, Unit.UG_L, Unit.PPB) == v

    @pytest.mark.parametrize("value", [0.0, 1e-7, 0.0437, 1.0, 250.0, 1e9])
    def test_round_trip(self, value):
        """Converting there and back returns the original value."""
        for u1, u2 in itertools.permutations(Unit, 2):
            assert convert(convert(value, u1, u2), u2, u1) == pytest.approx(value, rel=1e-12)

    def test_zero(self):
        assert convert(0, Unit.PPB, Unit.MG_L) == 0

    def test_to_canonical_unit(self):
        """ConcentrationWithUnit normalizes to mg/L."""
        assert to_canonical_unit(ConcentrationWithUnit(value=12, unit=Unit.PPB)) == pytest.approx(0.012)
        assert to_canonical_unit(ConcentrationWithUnit(value=0.4, unit=Unit.MG_L)) == 0.4


class TestBestDisplayUnit:
    """Test display unit selection."""

    def test_small_value_prefers_ppb(self):
        """0.0005 mg/L is shown in ppb."""
        assert best_display_unit(0.0005, Unit.MG_L, Metal.Pb) is Unit.PPB

    def test_threshold_value_stays_mg_l(self):
        """0.001 mg/L is not below the threshold."""
        assert best_display_unit(0.001, Unit.MG_L, Metal.Pb) is Unit.MG_L

    def test_large_value_mg_l(self):
        assert best_display_unit(2.5, Unit.MG_L, Metal.Fe) is Unit.MG_L

    def test_input_unit_is_converted_first(self):
        """250 μg/L is 0.25 mg/L and shown in mg/L; 0.4 ppb is shown in ppb."""
        assert best_display_unit(250, Unit.UG_L, Metal.Zn) is Unit.MG_L
        assert best_display_unit(0.4, Unit.PPB, Metal.Hg) is Unit.PPB

    def test_tiny_value_ug_l(self):
        """Below 0.1 ppb the μg/L branch is taken."""
        assert best_display_unit(0.00005, Unit.MG_L, Metal.Hg) is Unit.UG_L

    def test_never_suggests_ppm(self):
        for value in (0.0, 0.00001, 0.0009, 0.001, 0.5, 80.0):
            assert best_display_unit(value, Unit.MG_L, Metal.Cr) is not Unit.PPM

    def test_metal_does_not_change_result(self):
        choices = {best_display_unit(0.0007, Unit.MG_L, m) for m in Metal}
        assert choices == {Unit.PPB}


class TestFormatConcentration:
    """Test display labels."""

    def test_small_value_in_ppb(self):
        assert format_concentration(0.0005, Metal.Pb) == "0.5 ppb"

    def test_mg_l_value(self):
        assert format_concentration(0.25, Metal.Zn) == "0.25 mg/L"

    def test_precision(self):
        assert format_concentration(1.23456, Metal.Fe, precision=3) == "1.23 mg/L"
