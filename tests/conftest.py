"""Shared test fixtures for hydrounits tests."""

import pytest
import yaml

from hydrounits.metals import Metal
from hydrounits.ranges import clear_ranges_cache, RANGES_ENV_VAR


@pytest.fixture(autouse=True)
def fresh_ranges(monkeypatch):
    """Every test starts from the packaged range table with no override."""
    monkeypatch.delenv(RANGES_ENV_VAR, raising=False)
    clear_ranges_cache()
    yield
    clear_ranges_cache()


@pytest.fixture
def ranges_data():
    """Complete range table data (same shape as the packaged YAML)."""
    def band(lo, hi):
        return {"min": lo, "max": hi}

    low = {
        "Pb": (0.0001, 0.1), "As": (0.0001, 0.1), "Hg": (0.00001, 0.01), "Cd": (0.0001, 0.01),
        "Cr": (0.001, 0.5), "Ni": (0.001, 0.2), "Zn": (0.01, 10), "Fe": (0.01, 5),
    }
    high = {
        "Pb": (0.1, 100), "As": (0.1, 100), "Hg": (0.01, 10), "Cd": (0.1, 10),
        "Cr": (1, 500), "Ni": (1, 200), "Zn": (10, 10000), "Fe": (10, 5000),
    }
    return {
        "ranges": {
            metal: {
                "mg/L": band(*low[metal]),
                "ppm": band(*low[metal]),
                "ppb": band(*high[metal]),
                "μg/L": band(*high[metal]),
            }
            for metal in low
        }
    }


@pytest.fixture
def write_ranges(tmp_path):
    """Write range data to a YAML file and return its path."""
    def _write(data, name="ranges.yaml"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True)
        return path
    return _write


@pytest.fixture
def ppb_batch():
    """Readings that only make sense in ppb/μg/L."""
    return [
        {"concentrations": {Metal.Pb: 80, Metal.Cr: None, Metal.Zn: None}},
        {"concentrations": {Metal.Pb: None, Metal.Cr: 150, Metal.Zn: None}},
        {"concentrations": {Metal.Pb: None, Metal.Cr: None, Metal.Zn: 300}},
    ]


@pytest.fixture
def mg_l_batch():
    """Typical mg/L readings."""
    return [
        {"concentrations": {Metal.Pb: 0.008, Metal.As: 0.004, Metal.Fe: 0.3}},
        {"concentrations": {Metal.Zn: 1.2, Metal.Cd: 0.002, Metal.Hg: 0.0004}},
    ]
