"""Free-text unit label parsing.

``parse_unit`` is strict: the label is lower-cased and trimmed, then looked
up exactly in UNIT_VARIANTS. Case and surrounding whitespace are the only
tolerated variation.

``match_unit`` and ``unit_identifier`` add RapidFuzz scoring on top for
callers that want suggestions for labels ``parse_unit`` rejects.

Examples:
  >>> parse_unit("  MG/L ")
  <Unit.MG_L: 'mg/L'>

  >>> parse_unit("milligrams") is None
  True

  >>> unit_identifier("micrograms per litre")
  <Unit.UG_L: 'μg/L'>
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from hydrounits.units.unitregistry import UNIT_INFO, Unit
from hydrounits.utils.normalize import normalize_unit_label
from hydrounits.utils.resolver import build_corpus, find_best_match, topk_matches

# Accepted spellings per unit, already lower-cased. "μ" is Greek mu (U+03BC),
# "µ" is the micro sign (U+00B5); lab exports use either.
_VARIANTS_BY_UNIT: Mapping[Unit, Tuple[str, ...]] = MappingProxyType({
    Unit.MG_L: (
        "mg/l",
        "mgl",
        "mg per l",
        "mg per liter",
        "milligrams per liter",
    ),
    Unit.PPM: (
        "ppm",
        "parts per million",
    ),
    Unit.PPB: (
        "ppb",
        "parts per billion",
    ),
    Unit.UG_L: (
        "μg/l",
        "µg/l",
        "ug/l",
        "ugl",
        "micrograms per liter",
        "μg per l",
        "µg per l",
        "ug per l",
    ),
})


def _build_variant_table() -> Mapping[str, Unit]:
    missing = [u.value for u in Unit if not _VARIANTS_BY_UNIT.get(u)]
    if missing:
        raise RuntimeError(f"No parser variants for: {', '.join(missing)}")

    table = {}
    for unit, variants in _VARIANTS_BY_UNIT.items():
        for variant in variants:
            if variant in table:
                raise RuntimeError(f"Variant '{variant}' maps to both {table[variant].value} and {unit.value}")
            table[variant] = unit
    return MappingProxyType(table)


UNIT_VARIANTS: Mapping[str, Unit] = _build_variant_table()


def parse_unit(text: str) -> Optional[Unit]:
    """Parse a unit label, or return None when it is not recognized."""
    if text is None:
        return None
    return UNIT_VARIANTS.get(str(text).lower().strip())


def _search_corpus():
    return build_corpus(
        (unit, [normalize_unit_label(v) for v in variants]
         + [normalize_unit_label(UNIT_INFO[unit].symbol), normalize_unit_label(UNIT_INFO[unit].name)])
        for unit, variants in _VARIANTS_BY_UNIT.items()
    )


_CORPUS, _KEYS = _search_corpus()


def match_unit(text: str, *, k: int = 3) -> list:
    """Top-K unit candidates with fuzzy scores (0-100), best first.

    Examples:
        >>> match_unit("parts per bilion", k=2)[0][0]
        <Unit.PPB: 'ppb'>
    """
    if text is None:
        return []
    return topk_matches(normalize_unit_label(str(text)), _CORPUS, _KEYS, k=k)


def unit_identifier(text: str, *, threshold: int = 90) -> Optional[Unit]:
    """Resolve a unit label: exact ``parse_unit`` first, then fuzzy match.

    Args:
        text: Unit label
        threshold: Minimum fuzzy score (0-100) for the fallback

    Returns:
        Unit, or None when neither strategy matches
    """
    unit = parse_unit(text)
    if unit is not None:
        return unit

    if text is None:
        return None

    match = find_best_match(normalize_unit_label(str(text)), _CORPUS, _KEYS, threshold=threshold)
    return match[0] if match else None


__all__ = [
    "UNIT_VARIANTS",
    "parse_unit",
    "match_unit",
    "unit_identifier",
]
