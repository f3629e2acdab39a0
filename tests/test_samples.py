"""Tests for sample construction."""

import logging

import pandas as pd
import pytest

from hydrounits import (
    Metal,
    Unit,
    Sample,
    ConcentrationValue,
    SampleValidationError,
    build_sample,
    samples_from_frame,
)


class TestBuildSample:
    """Test building a sample from form-style input."""

    def test_mg_l_values_stored_as_is(self):
        sample = build_sample({Metal.Pb: 0.01, Metal.Fe: 0.3})
        assert sample.concentrations == {Metal.Pb: 0.01, Metal.Fe: 0.3}

    def test_values_converted_to_mg_l(self):
        sample = build_sample({"Pb": "12", "Zn": 450}, unit=Unit.PPB)
        assert sample.concentration(Metal.Pb) == pytest.approx(0.012)
        assert sample.concentration(Metal.Zn) == pytest.approx(0.45)

    def test_unit_label(self):
        sample = build_sample({"As": 5}, unit="ug/l")
        assert sample.concentration(Metal.As) == pytest.approx(0.005)

    def test_unknown_unit_label(self):
        with pytest.raises(SampleValidationError, match="unit"):
            build_sample({"As": 5}, unit="grains per gallon")

    def test_original_kept(self):
        sample = build_sample({"Cr": "150"}, unit=Unit.UG_L)
        original = sample.original[Metal.Cr]
        assert isinstance(original, ConcentrationValue)
        assert original.value == 150.0
        assert original.unit is Unit.UG_L
        assert original.mg_l_value == pytest.approx(0.15)
        assert original.mg_l_value == sample.concentration(Metal.Cr)

    def test_skips_blank_invalid_and_non_positive(self):
        sample = build_sample({"Pb": "", "As": "abc", "Hg": 0, "Cd": -2, "Ni": "0.04", "Zn": None})
        assert set(sample.concentrations) == {Metal.Ni}
        assert set(sample.original) == {Metal.Ni}

    def test_requires_one_concentration(self):
        with pytest.raises(SampleValidationError, match="at least one"):
            build_sample({"Pb": "", "As": "0"})

    def test_unknown_metal(self):
        with pytest.raises(SampleValidationError, match="Unknown metal"):
            build_sample({"pH": 7.2, "Pb": 0.01})

    def test_nitrate_is_not_nickel(self):
        with pytest.raises(SampleValidationError, match="Unknown metal: 'Nitrate'"):
            build_sample({"Nitrate": 45, "Pb": 0.01})

    def test_two_labels_for_one_metal(self):
        """A symbol and a name for the same metal are rejected, not merged."""
        with pytest.raises(SampleValidationError, match="both name Pb"):
            build_sample({"Pb": 1, "Lead": 2})

    def test_no_coordinates(self):
        sample = build_sample({"Pb": 0.01})
        assert sample.latitude is None
        assert sample.longitude is None
        assert not sample.has_coordinates

    def test_coordinates(self):
        sample = build_sample({"Pb": 0.01}, latitude="51.5", longitude=-0.12)
        assert sample.latitude == 51.5
        assert sample.longitude == -0.12
        assert sample.has_coordinates

    @pytest.mark.parametrize("lat,lon", [("51.5", ""), (None, "-0.1"), (10.0, None)])
    def test_half_coordinates_rejected(self, lat, lon):
        with pytest.raises(SampleValidationError, match="both"):
            build_sample({"Pb": 0.01}, latitude=lat, longitude=lon)

    def test_invalid_coordinates(self):
        with pytest.raises(SampleValidationError, match="coordinates"):
            build_sample({"Pb": 0.01}, latitude="north", longitude="5")

    def test_generated_ids_unique(self):
        a = build_sample({"Pb": 0.01})
        b = build_sample({"Pb": 0.01})
        assert a.sample_id.startswith("manual-")
        assert a.sample_id != b.sample_id

    def test_explicit_id(self):
        assert build_sample({"Pb": 0.01}, sample_id="well-7").sample_id == "well-7"


class TestSampleRecord:
    """Test the Sample record itself."""

    def test_immutable(self):
        sample = build_sample({"Pb": 0.01})
        with pytest.raises(AttributeError):
            sample.latitude = 3.0
        with pytest.raises(TypeError):
            sample.concentrations[Metal.As] = 0.1

    def test_input_mapping_not_shared(self):
        raw = {Metal.Pb: 0.01}
        sample = Sample(sample_id="s1", concentrations=raw)
        raw[Metal.As] = 0.2
        assert Metal.As not in sample.concentrations

    def test_missing_metal_is_none(self):
        assert build_sample({"Pb": 0.01}).concentration(Metal.Hg) is None


class TestSamplesFromFrame:
    """Test converting tables of readings."""

    @pytest.fixture
    def ppb_frame(self):
        return pd.DataFrame({
            "Sample ID": ["W1", "W2", "W3"],
            "Lead (Pb)": [80, 12, None],
            "Zinc": [300, None, 45],
            "lat": [51.5, 51.6, None],
            "lon": [-0.1, -0.2, None],
        })

    def test_detects_and_converts(self, ppb_frame):
        samples = samples_from_frame(ppb_frame)
        assert [s.sample_id for s in samples] == ["W1", "W2", "W3"]
        assert samples[0].concentration(Metal.Pb) == pytest.approx(0.08)
        assert samples[0].concentration(Metal.Zn) == pytest.approx(0.3)
        assert samples[0].original[Metal.Pb].unit is Unit.PPB
        assert samples[2].concentrations == {Metal.Zn: pytest.approx(0.045)}
        assert not samples[2].has_coordinates

    def test_explicit_unit(self, ppb_frame):
        samples = samples_from_frame(ppb_frame, unit=Unit.MG_L)
        assert samples[0].concentration(Metal.Pb) == 80

    def test_unit_label(self, ppb_frame):
        samples = samples_from_frame(ppb_frame, unit="μg/L")
        assert samples[0].original[Metal.Pb].unit is Unit.UG_L

    def test_unrecognized_unit_label(self, ppb_frame):
        with pytest.raises(ValueError):
            samples_from_frame(ppb_frame, unit="furlongs")

    def test_row_ids_when_no_id_column(self):
        df = pd.DataFrame({"Fe": [0.3, 0.5]})
        assert [s.sample_id for s in samples_from_frame(df)] == ["row-1", "row-2"]

    def test_rows_without_readings_skipped(self, caplog):
        df = pd.DataFrame({"Fe": [0.3, None, 0.0], "Ni": [None, None, None]})
        with caplog.at_level(logging.WARNING):
            samples = samples_from_frame(df)
        assert len(samples) == 1
        assert "Skipping row" in caplog.text
