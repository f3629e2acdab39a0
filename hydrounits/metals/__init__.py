"""Tracked metals and metal label resolution."""

from hydrounits.metals.metalregistry import (
    Metal,
    MetalInfo,
    AVAILABLE_METALS,
    METAL_INFO,
)
from hydrounits.metals.metalapi import (
    load_metals,
    metal_identifier,
    match_metal,
    list_metals,
)

__all__ = [
    "Metal",
    "MetalInfo",
    "AVAILABLE_METALS",
    "METAL_INFO",
    "load_metals",
    "metal_identifier",
    "match_metal",
    "list_metals",
]
