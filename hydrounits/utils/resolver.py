"""Shared fuzzy resolution utilities.

The unit and metal resolvers both flatten their registries into a search
corpus of (key, searchable string) pairs and score a normalized query
against it with RapidFuzz WRatio.
"""

from __future__ import annotations
from typing import Hashable, Iterable, Optional

try:
    from rapidfuzz import process, fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e


def build_corpus(
    entries: Iterable[tuple[Hashable, Iterable[str]]],
) -> tuple[list[str], list[Hashable]]:
    """Flatten keyed search strings into parallel corpus/key lists.

    Empty strings and duplicates within the same key are dropped.

    Examples:
        >>> build_corpus([("Pb", ["lead", "pb"]), ("As", ["arsenic"])])
        (['lead', 'pb', 'arsenic'], ['Pb', 'Pb', 'As'])
    """
    corpus: list[str] = []
    keys: list[Hashable] = []
    for key, strings in entries:
        seen = set()
        for s in strings:
            if s and s not in seen:
                seen.add(s)
                corpus.append(s)
                keys.append(key)
    return corpus, keys


def find_best_match(
    query_norm: str,
    corpus: list[str],
    keys: list[Hashable],
    threshold: int = 90,
) -> Optional[tuple[Hashable, float]]:
    """Return (key, score) of the best corpus hit at or above threshold.

    Args:
        query_norm: Normalized query string
        corpus: Searchable strings
        keys: Key owning each corpus entry (same length as corpus)
        threshold: Minimum fuzzy match score (0-100)

    Returns:
        (key, score), or None if nothing scores at least ``threshold``
    """
    if not query_norm or not corpus:
        return None

    match = process.extractOne(query_norm, corpus, scorer=fuzz.WRatio)
    if match is None:
        return None

    _, score, corpus_idx = match
    if score < threshold:
        return None

    return keys[corpus_idx], float(score)


def topk_matches(
    query_norm: str,
    corpus: list[str],
    keys: list[Hashable],
    k: int = 5,
) -> list[tuple[Hashable, float]]:
    """Return the top-K distinct keys with their best scores.

    Useful for review UIs and understanding resolution decisions.

    Returns:
        List of (key, score) tuples, ordered by descending score
    """
    if not query_norm or not corpus:
        return []

    matches = process.extract(
        query_norm,
        corpus,
        scorer=fuzz.WRatio,
        limit=k * 3,  # extra to deduplicate keys
    )

    best: dict = {}
    for _, score, corpus_idx in matches:
        key = keys[corpus_idx]
        best[key] = max(best.get(key, 0.0), float(score))

    ranked = sorted(best.items(), key=lambda x: x[1], reverse=True)
    return ranked[:k]


__all__ = [
    "build_corpus",
    "find_best_match",
    "topk_matches",
]
