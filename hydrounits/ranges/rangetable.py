"""Typical concentration ranges per metal and unit.

The table is loaded from YAML and validated to be total over Metal x Unit
before anything can use it, so a missing entry fails at load time rather
than as a KeyError halfway through a detection run.

Lookup order for the YAML file:
  1. Explicit ``path`` argument
  2. HYDROUNITS_RANGES_PATH environment variable
  3. Package data: hydrounits/ranges/data/typical_ranges.yaml
"""

import collections.abc
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from hydrounits.metals.metalregistry import Metal
from hydrounits.units.unitregistry import Unit
from hydrounits.utils.build_utils import load_yaml_file
from hydrounits.utils.dataloader import find_data_file, format_not_found_error

logger = logging.getLogger(__name__)

RANGES_ENV_VAR = "HYDROUNITS_RANGES_PATH"
RANGES_FILENAME = "typical_ranges.yaml"

_METAL_KEYS = frozenset(m.value for m in Metal)
_UNIT_KEYS = frozenset(u.value for u in Unit)


class RangeTableError(ValueError):
    """Raised when a typical-range table is incomplete or malformed."""


@dataclass(frozen=True)
class TypicalRange:
    min: float
    max: float

    def __post_init__(self):
        if self.min < 0 or self.max < 0:
            raise RangeTableError(f"Negative bound in range {self.min}..{self.max}")
        if self.min > self.max:
            raise RangeTableError(f"Range min {self.min} > max {self.max}")

    def contains(self, value: float) -> bool:
        """Inclusive on both ends."""
        return self.min <= value <= self.max


@dataclass(frozen=True)
class RangeTable:
    """Immutable Metal -> Unit -> TypicalRange table.

    Must cover every Metal x Unit pair; the mappings are copied and frozen.

    Raises:
        RangeTableError: If a pair is missing or is not a TypicalRange
    """

    ranges: Mapping[Metal, Mapping[Unit, TypicalRange]]
    source: Optional[str] = None

    def __post_init__(self):
        problems: List[str] = []
        frozen: Dict[Metal, Mapping[Unit, TypicalRange]] = {}

        if not isinstance(self.ranges, collections.abc.Mapping):
            raise RangeTableError(f"Range table must be a mapping, got {type(self.ranges).__name__}")

        for metal in Metal:
            per_unit = self.ranges.get(metal)
            if not isinstance(per_unit, collections.abc.Mapping):
                problems.append(f"{metal.value}: missing all units")
                continue
            for unit in Unit:
                if not isinstance(per_unit.get(unit), TypicalRange):
                    problems.append(f"{metal.value}/{unit.value}: missing range")
            frozen[metal] = MappingProxyType({unit: per_unit.get(unit) for unit in Unit})

        if problems:
            where = f" in {self.source}" if self.source else ""
            raise RangeTableError(f"Invalid range table{where}: " + "; ".join(problems))

        object.__setattr__(self, "ranges", MappingProxyType(frozen))

    def get(self, metal: Metal, unit: Unit) -> TypicalRange:
        return self.ranges[metal][unit]

    def for_unit(self, unit: Unit) -> Tuple[TypicalRange, ...]:
        """Every metal's range for ``unit``, in Metal order."""
        return tuple(self.ranges[metal][unit] for metal in Metal)

    def is_plausible(self, value: float, unit: Unit) -> bool:
        """True if ``value`` falls inside at least one metal's range for ``unit``."""
        return any(r.contains(value) for r in self.for_unit(unit))

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "RangeTable":
        """Build and validate a table from parsed YAML.

        Expected shape: ``{"ranges": {"Pb": {"mg/L": {"min": .., "max": ..}, ...}, ...}}``.
        Unknown metals or units are rejected, as are missing pairs, negative
        bounds and min > max. All problems are reported together.

        Raises:
            RangeTableError: If the table is not total or has invalid bounds
        """
        where = f" in {source}" if source else ""
        raw = data.get("ranges") if isinstance(data, dict) else None
        if not isinstance(raw, dict):
            raise RangeTableError(f"Invalid range table{where}: no 'ranges' mapping")

        problems: List[str] = []
        table: Dict[Metal, Mapping[Unit, TypicalRange]] = {}

        for key in raw:
            if key not in _METAL_KEYS:
                problems.append(f"unknown metal '{key}'")

        for metal in Metal:
            metal_raw = raw.get(metal.value)
            if not isinstance(metal_raw, dict):
                problems.append(f"{metal.value}: missing all units")
                continue

            for key in metal_raw:
                if key not in _UNIT_KEYS:
                    problems.append(f"{metal.value}: unknown unit '{key}'")

            per_unit: Dict[Unit, TypicalRange] = {}
            for unit in Unit:
                entry = metal_raw.get(unit.value)
                if not isinstance(entry, dict) or "min" not in entry or "max" not in entry:
                    problems.append(f"{metal.value}/{unit.value}: missing min/max")
                    continue
                try:
                    lo, hi = float(entry["min"]), float(entry["max"])
                except (TypeError, ValueError):
                    problems.append(f"{metal.value}/{unit.value}: non-numeric bounds")
                    continue
                if lo < 0 or hi < 0:
                    problems.append(f"{metal.value}/{unit.value}: negative bound")
                elif lo > hi:
                    problems.append(f"{metal.value}/{unit.value}: min {lo} > max {hi}")
                else:
                    per_unit[unit] = TypicalRange(min=lo, max=hi)

            table[metal] = per_unit

        if problems:
            raise RangeTableError(f"Invalid range table{where}: " + "; ".join(problems))

        return cls(ranges=table, source=source)


def _locate_ranges_file(path: Optional[Union[str, Path]]) -> Path:
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Required file not found: {path}")
        return path

    found = find_data_file(__file__, [RANGES_FILENAME], env_var=RANGES_ENV_VAR)
    if found is None:
        raise FileNotFoundError(format_not_found_error(
            subject="typical range",
            searched_locations=[
                (f"${RANGES_ENV_VAR}", Path(os.environ.get(RANGES_ENV_VAR, "(unset)"))),
                ("Package data", Path(__file__).parent / "data" / RANGES_FILENAME),
            ],
            fix_instructions=[
                f"Reinstall hydrounits so {RANGES_FILENAME} is included as package data.",
                f"Or point {RANGES_ENV_VAR} at a valid ranges YAML file.",
            ],
        ))
    return found


@lru_cache(maxsize=8)
def _load_cached(path: Path) -> RangeTable:
    table = RangeTable.from_dict(load_yaml_file(path), source=str(path))
    logger.info(f"Loaded typical range table from {path}")
    return table


def load_typical_ranges(path: Optional[Union[str, Path]] = None) -> RangeTable:
    """Load, validate and cache the typical-range table.

    Args:
        path: Optional explicit YAML path. If None, HYDROUNITS_RANGES_PATH
              is consulted, then the packaged table.

    Returns:
        Validated RangeTable

    Raises:
        FileNotFoundError: If no table can be found
        RangeTableError: If the table is not total over Metal x Unit
    """
    return _load_cached(_locate_ranges_file(path).resolve())


def clear_ranges_cache() -> None:
    """Forget previously loaded tables (e.g. after changing the env override)."""
    _load_cached.cache_clear()
    logger.debug("Cleared typical range cache")


__all__ = [
    "RANGES_ENV_VAR",
    "RangeTableError",
    "TypicalRange",
    "RangeTable",
    "load_typical_ranges",
    "clear_ranges_cache",
]
