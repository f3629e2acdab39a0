"""Sample records and construction from raw input."""

from hydrounits.samples.samplemodel import (
    SampleValidationError,
    ConcentrationValue,
    Sample,
)
from hydrounits.samples.sampleapi import (
    build_sample,
    samples_from_frame,
)

__all__ = [
    "SampleValidationError",
    "ConcentrationValue",
    "Sample",
    "build_sample",
    "samples_from_frame",
]
