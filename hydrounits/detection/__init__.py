"""Dataset-wide unit auto-detection."""

from hydrounits.detection.unitdetect import (
    collect_values,
    score_values,
    score_units,
    detect_unit,
    metal_columns,
    frame_values,
    detect_unit_frame,
)

__all__ = [
    "collect_values",
    "score_values",
    "score_units",
    "detect_unit",
    "metal_columns",
    "frame_values",
    "detect_unit_frame",
]
