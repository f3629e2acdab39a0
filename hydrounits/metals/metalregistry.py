"""Heavy metals tracked in groundwater samples.

The set is closed: every reference table in the package (typical ranges,
display names) must have an entry for each member.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Metal(str, Enum):
    """Tracked metals, valued by element symbol."""

    Pb = "Pb"
    As = "As"
    Hg = "Hg"
    Cd = "Cd"
    Cr = "Cr"
    Ni = "Ni"
    Zn = "Zn"
    Fe = "Fe"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MetalInfo:
    symbol: str
    name: str
    aliases: Tuple[str, ...] = ()


AVAILABLE_METALS = tuple(Metal)

METAL_INFO: Mapping[Metal, MetalInfo] = MappingProxyType({
    Metal.Pb: MetalInfo("Pb", "Lead", ("plumbum",)),
    Metal.As: MetalInfo("As", "Arsenic", ("total arsenic",)),
    Metal.Hg: MetalInfo("Hg", "Mercury", ("quicksilver", "total mercury")),
    Metal.Cd: MetalInfo("Cd", "Cadmium"),
    Metal.Cr: MetalInfo("Cr", "Chromium", ("chrome", "total chromium")),
    Metal.Ni: MetalInfo("Ni", "Nickel"),
    Metal.Zn: MetalInfo("Zn", "Zinc"),
    Metal.Fe: MetalInfo("Fe", "Iron", ("ferrum", "total iron")),
})

_missing = [m.value for m in Metal if m not in METAL_INFO]
if _missing:
    raise RuntimeError(f"Metal registry missing entries for: {', '.join(_missing)}")


__all__ = [
    "Metal",
    "MetalInfo",
    "AVAILABLE_METALS",
    "METAL_INFO",
]
