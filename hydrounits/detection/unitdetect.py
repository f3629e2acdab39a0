"""
Dataset Unit Detection
----------------------

Infers which concentration unit an unlabelled batch of readings was
recorded in, from magnitudes alone:

  1) Flatten every present, strictly positive value across all samples/metals
  2) For each value and each candidate unit, credit the unit when the value
     lies inside *any* metal's typical range for that unit
  3) Highest score wins; ties go to the earliest unit in
     (mg/L, ppm, ppb, μg/L)

The detector does not know which metal a bare value belongs to, hence the
any-metal test. Because mg/L == ppm and ppb == μg/L numerically, it only
separates the mg/L family from the ppb family: mg/L always beats ppm and
ppb always beats μg/L on a tie.

Examples:
  >>> detect_unit([{"concentrations": {Metal.Pb: 80, Metal.Cr: 150, Metal.Zn: 300}}])
  <Unit.PPB: 'ppb'>

  >>> detect_unit([])
  <Unit.MG_L: 'mg/L'>
"""

from __future__ import annotations

import collections.abc
import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from hydrounits.metals.metalapi import metal_identifier
from hydrounits.ranges.rangetable import RangeTable, load_typical_ranges
from hydrounits.units.unitregistry import AVAILABLE_UNITS, CANONICAL_UNIT, Unit

logger = logging.getLogger(__name__)

# Fuzzy floor for column labels; bare substring hits ("envIRONment") score 90
COLUMN_MATCH_THRESHOLD = 92


def _concentrations_of(sample: Any) -> Mapping:
    if isinstance(sample, collections.abc.Mapping):
        return sample.get("concentrations") or {}
    return getattr(sample, "concentrations", None) or {}


def _is_evidence(value: Any) -> bool:
    """Present, numeric, finite and strictly positive."""
    if value is None or isinstance(value, bool):
        return False
    try:
        value = float(value)
    except (TypeError, ValueError):
        return False
    return not math.isnan(value) and not math.isinf(value) and value > 0


def collect_values(samples: Iterable[Any]) -> List[float]:
    """Flatten all positive concentration readings from ``samples``.

    Each sample is a Sample or any mapping with a ``"concentrations"`` entry
    (Metal -> optional value). Absent, NaN and non-positive readings carry no
    magnitude evidence and are dropped.
    """
    values = []
    for sample in samples:
        for value in _concentrations_of(sample).values():
            if _is_evidence(value):
                values.append(float(value))
    return values


def score_values(values: Iterable[float], ranges: Optional[RangeTable] = None) -> Dict[Unit, int]:
    """Count, per unit, how many values are plausible for some metal."""
    ranges = ranges or load_typical_ranges()
    scores = {unit: 0 for unit in AVAILABLE_UNITS}

    for value in values:
        for unit in AVAILABLE_UNITS:
            if ranges.is_plausible(value, unit):
                scores[unit] += 1

    return scores


def score_units(samples: Iterable[Any], ranges: Optional[RangeTable] = None) -> Dict[Unit, int]:
    """Per-unit plausibility scores for a batch of samples."""
    return score_values(collect_values(samples), ranges)


def _pick_unit(scores: Mapping[Unit, int]) -> Unit:
    # Seeded with mg/L; only a strictly higher score replaces it.
    best_unit = CANONICAL_UNIT
    best_score = scores[CANONICAL_UNIT]

    for unit in AVAILABLE_UNITS:
        if scores[unit] > best_score:
            best_score = scores[unit]
            best_unit = unit

    return best_unit


def _detect_from_values(values: List[float], ranges: Optional[RangeTable]) -> Unit:
    if not values:
        logger.debug(f"No positive readings; defaulting to {CANONICAL_UNIT.value}")
        return CANONICAL_UNIT

    scores = score_values(values, ranges)
    unit = _pick_unit(scores)
    summary = ", ".join(f"{u.value}={s}" for u, s in scores.items())
    logger.debug(f"Unit scores over {len(values)} readings: {summary} -> {unit.value}")
    return unit


def detect_unit(samples: List[Any], ranges: Optional[RangeTable] = None) -> Unit:
    """Detect the most likely unit for an entire dataset.

    Args:
        samples: Samples (or mappings with a "concentrations" entry)
        ranges: Optional alternative RangeTable; defaults to the packaged one

    Returns:
        The best-scoring Unit; MG_L for empty input or when no positive
        readings are present
    """
    if not samples:
        return CANONICAL_UNIT
    return _detect_from_values(collect_values(samples), ranges)


def metal_columns(df: pd.DataFrame) -> Dict[Any, Any]:
    """Map DataFrame column labels to Metals; unresolvable columns are left out."""
    mapping = {}
    for col in df.columns:
        metal = metal_identifier(str(col), threshold=COLUMN_MATCH_THRESHOLD)
        if metal is None:
            continue
        if metal in mapping.values():
            logger.warning(f"Column '{col}' also resolves to {metal.value}; ignoring it")
            continue
        mapping[col] = metal
    return mapping


def frame_values(df: pd.DataFrame) -> List[float]:
    """Positive readings from every metal column of ``df``."""
    columns = list(metal_columns(df))
    if not columns:
        return []

    block = df[columns].apply(pd.to_numeric, errors="coerce")
    values = []
    for col in columns:
        values.extend(float(v) for v in block[col] if _is_evidence(v))
    return values


def detect_unit_frame(df: pd.DataFrame, ranges: Optional[RangeTable] = None) -> Unit:
    """``detect_unit`` for a DataFrame with one row per sample.

    Columns are matched to metals by label ("Pb", "Lead", "Lead (Pb)");
    other columns (coordinates, ids, notes) are ignored. Non-numeric cells
    count as absent.
    """
    if df is None or df.empty:
        return CANONICAL_UNIT
    return _detect_from_values(frame_values(df), ranges)


__all__ = [
    "collect_values",
    "score_values",
    "score_units",
    "detect_unit",
    "metal_columns",
    "frame_values",
    "detect_unit_frame",
]
