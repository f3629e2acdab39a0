"""
Metal Label Resolution
----------------------

Resolves free-text metal labels (form fields, spreadsheet column headers)
to the closed Metal set:
  1) Exact symbol match, case-insensitive ("pb", "PB" -> Pb)
  2) Exact normalized name/alias match ("Lead" -> Pb)
  3) Single metal named by a word of the label ("Lead (Pb)", "Pb_mg_L")
  4) RapidFuzz WRatio scoring over names and aliases

API:
  resolve_metal(label, df, threshold=90) -> pd.Series | None
  topk_matches(label, df, k=3) -> list[tuple[pd.Series, float]]

Examples:
  >>> df = load_metals()
  >>> resolve_metal("Lead (Pb)", df)["symbol"]
  'Pb'
"""

from __future__ import annotations
import re
from typing import Optional
import pandas as pd

from hydrounits.utils.normalize import normalize_name
from hydrounits.utils.resolver import build_corpus, find_best_match
from hydrounits.utils.resolver import topk_matches as _topk


def _build_search_strings(row: pd.Series, *, symbols: bool = True) -> list[str]:
    """Normalized searchable strings for a metal row: name, symbol, aliases."""
    strings = [str(row["name_norm"])]
    if symbols:
        strings.append(normalize_name(str(row["symbol"])))

    i = 1
    while f"alias{i}" in row.index:
        alias = row[f"alias{i}"]
        if pd.notna(alias) and str(alias).strip():
            strings.append(normalize_name(str(alias)))
        i += 1

    return strings


def _corpus(df: pd.DataFrame, *, symbols: bool = True) -> tuple[list[str], list]:
    return build_corpus(
        (idx, _build_search_strings(row, symbols=symbols)) for idx, row in df.iterrows()
    )


def _token_match(query: str, query_norm: str, df: pd.DataFrame) -> Optional[pd.Series]:
    """
    Match a single metal named by one token of the query.

    Names must appear as whole normalized words ("total iron"); symbols
    must appear as a word with their exact casing ("Pb_mg_L"), so "as" in
    running text is not read as arsenic. Returns None when no metal or more
    than one metal is named.
    """
    words = set(query_norm.split())
    raw_words = set(re.findall(r"[A-Za-z]+", query))

    hits = set()
    for idx, row in df.iterrows():
        if row["name_norm"] in words or row["symbol"] in raw_words:
            hits.add(idx)

    if len(hits) != 1:
        return None
    return df.loc[hits.pop()]


def resolve_metal(
    label: str,
    df: pd.DataFrame,
    *,
    threshold: int = 90,
) -> Optional[pd.Series]:
    """
    Resolve a metal label to its registry row.

    Args:
        label: Metal symbol, name or column header
        df: Metals DataFrame from load_metals()
        threshold: Minimum fuzzy match score (0-100)

    Returns:
        Matching row as Series, or None if no match above threshold
    """
    if label is None or not str(label).strip():
        return None

    query = str(label).strip()

    # Fast path: exact symbol
    symbol_hits = df[df["symbol"].str.lower() == query.lower()]
    if not symbol_hits.empty:
        return symbol_hits.iloc[0]

    query_norm = normalize_name(query)
    if not query_norm:
        return None

    # Symbols are matched exactly above and as tokens below; as fuzzy
    # targets two letters partial-match too much ("nitrate" vs "ni").
    corpus, keys = _corpus(df, symbols=False)

    # Exact name or alias
    for s, idx in zip(corpus, keys):
        if s == query_norm:
            return df.loc[idx]

    # Headers like "Lead (Pb)" or "Pb_mg_L"
    token_hit = _token_match(query, query_norm, df)
    if token_hit is not None:
        return token_hit

    match = find_best_match(query_norm, corpus, keys, threshold=threshold)
    if match is None:
        return None

    return df.loc[match[0]]


def topk_matches(
    label: str,
    df: pd.DataFrame,
    *,
    k: int = 3,
) -> list[tuple[pd.Series, float]]:
    """
    Return top-K metal candidates with scores, for review UIs.

    Returns:
        List of (row, score) tuples, ordered by descending score
    """
    if label is None or not str(label).strip():
        return []

    query_norm = normalize_name(str(label))
    corpus, keys = _corpus(df)

    return [(df.loc[idx], score) for idx, score in _topk(query_norm, corpus, keys, k=k)]


__all__ = [
    "resolve_metal",
    "topk_matches",
]
