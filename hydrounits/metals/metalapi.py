"""Metals resolution API.

Public API for mapping metal labels (symbols, names, column headers) onto
the closed Metal set used by every concentration table.
"""

from functools import lru_cache
from typing import Optional

import pandas as pd

from hydrounits.metals.metalidentity import (
    resolve_metal as _resolve_metal,
    topk_matches as _topk_matches,
)
from hydrounits.metals.metalregistry import METAL_INFO, Metal
from hydrounits.utils.build_utils import expand_aliases
from hydrounits.utils.normalize import normalize_name


@lru_cache(maxsize=1)
def load_metals() -> pd.DataFrame:
    """Build the metals table from the registry.

    Cached so resolution calls share one DataFrame.

    Returns:
        DataFrame with one row per Metal, in enumeration order:
          - symbol: element symbol (also the Metal value)
          - name, name_norm: display and normalized names
          - alias1...alias6: additional spellings
    """
    rows = []
    for metal, info in METAL_INFO.items():
        row = {
            "symbol": metal.value,
            "name": info.name,
            "name_norm": normalize_name(info.name),
        }
        row.update(expand_aliases(list(info.aliases)))
        rows.append(row)

    return pd.DataFrame(rows)


def metal_identifier(label: str, *, threshold: int = 90) -> Optional[Metal]:
    """Resolve a metal label to a Metal, or None.

    Args:
        label: Symbol, name or header, e.g. "Pb", "lead", "Lead (Pb)"
        threshold: Minimum fuzzy match score (0-100). Default 90.

    Examples:
        >>> metal_identifier("pb")
        <Metal.Pb: 'Pb'>

        >>> metal_identifier("Arsenic, total")
        <Metal.As: 'As'>

        >>> metal_identifier("pH") is None
        True
    """
    if isinstance(label, Metal):
        return label

    row = _resolve_metal(label, load_metals(), threshold=threshold)
    if row is None:
        return None

    return Metal(row["symbol"])


def match_metal(label: str, *, k: int = 3) -> list:
    """Top-K candidates + scores (for review UIs).

    Returns:
        List of dicts with metal, symbol, name and score, by descending score.
    """
    results = _topk_matches(label, load_metals(), k=k)

    return [
        {
            "metal": Metal(row["symbol"]),
            "symbol": row["symbol"],
            "name": row["name"],
            "score": score,
        }
        for row, score in results
    ]


def list_metals() -> pd.DataFrame:
    """List all tracked metals (a copy of the cached table)."""
    return load_metals().copy()


__all__ = [
    "load_metals",
    "metal_identifier",
    "match_metal",
    "list_metals",
]
