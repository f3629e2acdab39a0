"""Shared utilities for the hydrounits package."""

from hydrounits.utils.dataloader import (
    find_data_file,
    format_not_found_error,
)
from hydrounits.utils.normalize import (
    normalize_name,
    normalize_unit_label,
)
from hydrounits.utils.resolver import (
    build_corpus,
    find_best_match,
    topk_matches,
)
from hydrounits.utils.build_utils import (
    load_yaml_file,
    expand_aliases,
)

__all__ = [
    # Data loading
    "find_data_file",
    "format_not_found_error",
    # Normalization
    "normalize_name",
    "normalize_unit_label",
    # Resolution
    "build_corpus",
    "find_best_match",
    "topk_matches",
    # Build utilities
    "load_yaml_file",
    "expand_aliases",
]
