"""Sample construction API.

Turns raw input (form fields, spreadsheet rows) into Sample records with
every concentration normalized to mg/L.

Rules:
  1. Latitude and longitude are both given or both omitted
  2. A concentration is kept only if it parses as a number greater than 0
  3. At least one concentration must be kept
  4. Kept values are stored in mg/L; the entered value/unit go in ``original``
"""

import logging
import math
import uuid
from typing import Any, List, Mapping, Optional, Union

import pandas as pd

from hydrounits.detection.unitdetect import detect_unit_frame, metal_columns
from hydrounits.metals.metalapi import metal_identifier
from hydrounits.samples.samplemodel import ConcentrationValue, Sample, SampleValidationError
from hydrounits.units.unitconvert import ConcentrationWithUnit, to_canonical_unit
from hydrounits.units.unitparse import parse_unit
from hydrounits.units.unitregistry import Unit
from hydrounits.utils.normalize import normalize_name

logger = logging.getLogger(__name__)

LATITUDE_COLUMNS = ("latitude", "lat")
LONGITUDE_COLUMNS = ("longitude", "lon", "lng", "long")
ID_COLUMNS = ("sample id", "sample", "id")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return math.isnan(value)
    except TypeError:
        return False


def _to_float(value: Any) -> Optional[float]:
    """Parse a number the way a form field would, None when it isn't one."""
    if _is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _resolve_unit(unit: Union[Unit, str]) -> Unit:
    if isinstance(unit, Unit):
        return unit
    parsed = parse_unit(unit)
    if parsed is None:
        raise SampleValidationError(f"Unrecognized concentration unit: {unit!r}")
    return parsed


def _parse_coordinates(latitude: Any, longitude: Any):
    lat_blank, lon_blank = _is_blank(latitude), _is_blank(longitude)
    if lat_blank and lon_blank:
        return None, None
    if lat_blank != lon_blank:
        raise SampleValidationError("Enter both latitude and longitude, or leave both empty.")

    lat, lon = _to_float(latitude), _to_float(longitude)
    if lat is None or lon is None:
        raise SampleValidationError(f"Invalid coordinates: latitude={latitude!r}, longitude={longitude!r}")
    return lat, lon


def build_sample(
    concentrations: Mapping[Any, Any],
    unit: Union[Unit, str] = Unit.MG_L,
    *,
    latitude: Any = None,
    longitude: Any = None,
    sample_id: Optional[str] = None,
) -> Sample:
    """Build a Sample from raw per-metal readings entered in one unit.

    Args:
        concentrations: Metal (or metal label such as "Pb", "lead") -> raw
                        reading; numbers or numeric strings. Blank,
                        non-numeric and non-positive readings are skipped.
        unit: Unit every reading was entered in (Unit or label like "ppb")
        latitude, longitude: Optional coordinates, both or neither
        sample_id: Optional id; defaults to "manual-<random hex>"

    Returns:
        Sample with mg/L concentrations for the kept metals

    Raises:
        SampleValidationError: On unknown unit or metal labels, two labels
            for one metal, half-given or invalid coordinates, or when no
            positive reading remains

    Examples:
        >>> s = build_sample({"Pb": "12", "As": ""}, unit="ppb")
        >>> s.concentrations[Metal.Pb]
        0.012
    """
    entered_unit = _resolve_unit(unit)
    lat, lon = _parse_coordinates(latitude, longitude)

    canonical = {}
    original = {}
    labels = {}
    for label, raw in concentrations.items():
        metal = metal_identifier(label)
        if metal is None:
            raise SampleValidationError(f"Unknown metal: {label!r}")
        if metal in labels:
            raise SampleValidationError(
                f"{label!r} and {labels[metal]!r} both name {metal.value}; enter it once."
            )
        labels[metal] = label

        value = _to_float(raw)
        if value is None or value <= 0:
            continue

        mg_l_value = to_canonical_unit(ConcentrationWithUnit(value=value, unit=entered_unit))
        canonical[metal] = mg_l_value
        original[metal] = ConcentrationValue(value=value, unit=entered_unit, mg_l_value=mg_l_value)

    if not canonical:
        raise SampleValidationError("Enter at least one metal concentration.")

    return Sample(
        sample_id=sample_id or f"manual-{uuid.uuid4().hex}",
        concentrations=canonical,
        latitude=lat,
        longitude=lon,
        original=original,
    )


def _find_column(df: pd.DataFrame, candidates) -> Optional[Any]:
    for col in df.columns:
        if normalize_name(str(col)) in candidates:
            return col
    return None


def samples_from_frame(
    df: pd.DataFrame,
    unit: Optional[Union[Unit, str]] = None,
) -> List[Sample]:
    """Convert a table of readings (one row per sample) into Samples.

    Metal columns are recognised by label; latitude/longitude and id columns
    by common header names. When ``unit`` is None the batch unit is detected
    with ``detect_unit_frame`` and applied to every row.

    Rows that fail validation (no positive reading, half coordinates) are
    skipped with a warning.

    Raises:
        ValueError: If ``unit`` is a label ``parse_unit`` does not recognize
    """
    if unit is None:
        batch_unit = detect_unit_frame(df)
        logger.info(f"Detected batch unit {batch_unit.value}")
    elif isinstance(unit, Unit):
        batch_unit = unit
    else:
        batch_unit = parse_unit(unit)
        if batch_unit is None:
            raise ValueError(f"Unrecognized concentration unit: {unit!r}")

    metals = metal_columns(df)
    lat_col = _find_column(df, LATITUDE_COLUMNS)
    lon_col = _find_column(df, LONGITUDE_COLUMNS)
    id_col = _find_column(df, ID_COLUMNS)

    samples = []
    for position, (idx, row) in enumerate(df.iterrows()):
        sample_id = None
        if id_col is not None and not _is_blank(row[id_col]):
            sample_id = str(row[id_col])
        try:
            samples.append(build_sample(
                {metal: row[col] for col, metal in metals.items()},
                batch_unit,
                latitude=row[lat_col] if lat_col is not None else None,
                longitude=row[lon_col] if lon_col is not None else None,
                sample_id=sample_id or f"row-{position + 1}",
            ))
        except SampleValidationError as e:
            logger.warning(f"Skipping row {idx}: {e}")

    logger.info(f"Built {len(samples)} of {len(df)} samples in {batch_unit.value}")
    return samples


__all__ = [
    "build_sample",
    "samples_from_frame",
]
